"""Reusable FastAPI dependencies: DB session and the access-control guard."""
from __future__ import annotations

from collections.abc import AsyncGenerator

import jwt
import pydantic
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from .database import get_session
from .enums import UserRole
from .exceptions import AuthenticationError, AuthorizationError
from .models import User
from .schemas import Principal
from .security import decode_access_token

# Use simple Bearer auth instead of OAuth2 password flow
bearer_scheme = HTTPBearer(auto_error=False)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Dependency that yields an AsyncSession."""
    async for session in get_session():
        yield session


async def get_principal(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    session: AsyncSession = Depends(get_db_session),
) -> Principal:
    """
    Resolve the Authorization: Bearer <token> header into a Principal.

    Every request is verified on its own; nothing is remembered between calls.
    """

    if credentials is None or credentials.scheme.lower() != "bearer":
        raise AuthenticationError("Not authenticated")

    try:
        token_data = decode_access_token(credentials.credentials)
        user_id = int(token_data.sub)
    except (jwt.PyJWTError, pydantic.ValidationError, ValueError) as exc:
        raise AuthenticationError("Invalid or expired token") from exc

    user = await session.get(User, user_id)
    if user is None or user.role != token_data.role.value:
        raise AuthenticationError("Inactive or missing user")

    return Principal(
        user_id=user.id,
        role=token_data.role,
        name=user.name,
        dealer_id=token_data.dealer_id,
    )


def require_admin(principal: Principal = Depends(get_principal)) -> Principal:
    """Ensure the current principal has the admin role."""

    if principal.role != UserRole.ADMIN:
        raise AuthorizationError("Administrator role required")
    return principal


def require_dealer(principal: Principal = Depends(get_principal)) -> Principal:
    """Ensure the current principal is a dealer bound to a tenant."""

    if principal.role != UserRole.DEALER or principal.dealer_id is None:
        raise AuthorizationError("Dealer role required")
    return principal
