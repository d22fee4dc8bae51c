"""Login, logout and password-recovery endpoints."""
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..dependencies import get_db_session, get_principal
from ..schemas import AdminLogin, DealerLogin, ForgotPassword, LoginResponse, Principal
from ..services import users

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/admin-login", response_model=LoginResponse)
async def admin_login(
    payload: AdminLogin, session: AsyncSession = Depends(get_db_session)
) -> LoginResponse:
    """Authenticate the administrator and return a bearer token."""

    return await users.admin_login(session, payload.password)


@router.post("/dealer-login", response_model=LoginResponse)
async def dealer_login(
    payload: DealerLogin, session: AsyncSession = Depends(get_db_session)
) -> LoginResponse:
    """Authenticate a dealer user and return a bearer token."""

    return await users.dealer_login(session, payload.email, payload.password)


@router.post("/forgot-password", status_code=status.HTTP_204_NO_CONTENT)
async def forgot_password(
    payload: ForgotPassword, session: AsyncSession = Depends(get_db_session)
) -> Response:
    """Always 204, whether or not the email belongs to an account."""

    await users.forgot_password(session, payload.email)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(get_db_session),
) -> Response:
    await users.logout(session, principal)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
