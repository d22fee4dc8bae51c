"""Self-service endpoints for the authenticated user."""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..dependencies import get_db_session, get_principal
from ..schemas import ChangePassword, Principal, ProfileUpdate, UserRead
from ..services import users

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=UserRead)
async def read_me(
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(get_db_session),
) -> UserRead:
    return await users.get_profile(session, principal)


@router.put("/me/password", response_model=UserRead)
async def change_password(
    payload: ChangePassword,
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(get_db_session),
) -> UserRead:
    """Replace the caller's password and clear the temporary-password flag."""

    return await users.change_password(session, principal, payload.new_password)


@router.put("/me/profile", response_model=UserRead)
async def update_profile(
    payload: ProfileUpdate,
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(get_db_session),
) -> UserRead:
    return await users.update_profile(session, principal, payload)
