"""Login, logout, password recovery and self-service profile changes."""
from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from ..config import get_settings
from ..enums import AuditAction, UserRole
from ..exceptions import AuthenticationError, ConflictError, NotFoundError
from ..models import Dealer, User
from ..repositories import DealerRepository, UserRepository, commit
from ..schemas import LoginResponse, Principal, ProfileUpdate, UserRead
from ..security import create_access_token, hash_password, verify_password
from . import audit

logger = logging.getLogger(__name__)

INVALID_ADMIN_CREDENTIALS = "Invalid admin credentials."
INVALID_DEALER_CREDENTIALS = "Invalid dealer credentials."


def user_read(user: User, dealer: Dealer | None = None) -> UserRead:
    """Public view of a user, carrying the dealer id for dealer accounts."""

    return UserRead.model_validate(user).model_copy(
        update={"dealer_id": dealer.id if dealer else None}
    )


def _login_response(user: User, dealer: Dealer | None) -> LoginResponse:
    token, expires_at = create_access_token(
        user_id=user.id, role=user.role, dealer_id=dealer.id if dealer else None
    )
    return LoginResponse(token=token, expires_at=expires_at, user=user_read(user, dealer))


async def admin_login(session: AsyncSession, password: str) -> LoginResponse:
    """Authenticate the single shared admin credential."""

    settings = get_settings()
    admin = await UserRepository(session).find_by(
        email=settings.admin_email, role=UserRole.ADMIN.value
    )
    if admin is None or not verify_password(password, admin.password_hash):
        logger.warning("Failed admin login")
        raise AuthenticationError(INVALID_ADMIN_CREDENTIALS)

    await audit.record(
        session,
        actor_id=admin.id,
        actor_name=admin.name,
        action=AuditAction.LOGIN,
        details="Admin logged in",
    )
    await commit(session)
    return _login_response(admin, None)


async def dealer_login(session: AsyncSession, email: str, password: str) -> LoginResponse:
    """Authenticate a dealer user; every failure looks the same to the caller."""

    user = await UserRepository(session).find_by(email=email)
    if user is None or user.role != UserRole.DEALER.value:
        raise AuthenticationError(INVALID_DEALER_CREDENTIALS)
    if not verify_password(password, user.password_hash):
        logger.warning("Failed dealer login for user %s", user.id)
        raise AuthenticationError(INVALID_DEALER_CREDENTIALS)
    dealer = await DealerRepository(session).find_by(user_id=user.id)
    if dealer is None:
        raise AuthenticationError(INVALID_DEALER_CREDENTIALS)

    await audit.record(
        session,
        actor_id=user.id,
        actor_name=user.name,
        action=AuditAction.LOGIN,
        details=f"Dealer logged in: {dealer.company_name}",
        dealer_id=dealer.id,
    )
    await commit(session)
    return _login_response(user, dealer)


async def logout(session: AsyncSession, principal: Principal) -> None:
    """Tokens are stateless; logging out only leaves a trace in the audit log."""

    await audit.record_for(session, principal, AuditAction.LOGOUT, "User logged out")
    await commit(session)


async def forgot_password(session: AsyncSession, email: str) -> None:
    """Record a reset request if the email is known; silent otherwise."""

    user = await UserRepository(session).find_by(email=email)
    if user is None:
        return

    dealer = None
    if user.role == UserRole.DEALER.value:
        dealer = await DealerRepository(session).find_by(user_id=user.id)
    await audit.record(
        session,
        actor_id=user.id,
        actor_name=user.name,
        action=AuditAction.FORGOT_PASSWORD,
        details=f"Password reset requested for email: {email}",
        dealer_id=dealer.id if dealer else None,
    )
    await commit(session)


async def _load_self(session: AsyncSession, principal: Principal) -> User:
    user = await UserRepository(session).get(principal.user_id)
    if user is None:
        raise NotFoundError("User", principal.user_id)
    return user


async def get_profile(session: AsyncSession, principal: Principal) -> UserRead:
    user = await _load_self(session, principal)
    dealer = None
    if principal.dealer_id is not None:
        dealer = await DealerRepository(session).get(principal.dealer_id)
    return user_read(user, dealer)


async def change_password(
    session: AsyncSession, principal: Principal, new_password: str
) -> UserRead:
    users = UserRepository(session)
    user = await _load_self(session, principal)
    await users.update(user, {"password_hash": hash_password(new_password), "temp_pass": False})
    await audit.record_for(
        session, principal, AuditAction.CHANGE_PASSWORD, "User changed their password"
    )
    await commit(session)
    return await get_profile(session, principal)


async def update_profile(
    session: AsyncSession, principal: Principal, payload: ProfileUpdate
) -> UserRead:
    users = UserRepository(session)
    user = await _load_self(session, principal)

    existing = await users.find_by(username=payload.username)
    if existing is not None and existing.id != user.id:
        raise ConflictError("A user with this username already exists.", field="username")

    await users.update(user, {"name": payload.name, "username": payload.username})
    # The audit snapshot carries the new display name.
    await audit.record(
        session,
        actor_id=user.id,
        actor_name=user.name,
        action=AuditAction.UPDATE_PROFILE,
        details=f"User updated their profile: name={user.name}, username={user.username}",
        dealer_id=principal.dealer_id,
    )
    await commit(session, "A user with this username already exists.")
    return await get_profile(session, principal)
