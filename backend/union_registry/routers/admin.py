"""Admin console endpoints: dealers, password resets and the full audit log."""
from typing import Sequence

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..dependencies import get_db_session, require_admin
from ..models import AuditLog, Dealer
from ..schemas import (
    AuditLogRead,
    DealerCreate,
    DealerCreated,
    DealerRead,
    DealerUpdate,
    Principal,
    TemporaryPassword,
)
from ..services import audit, dealers

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/dealers", response_model=list[DealerRead])
async def list_dealers(
    _: Principal = Depends(require_admin),
    session: AsyncSession = Depends(get_db_session),
) -> Sequence[Dealer]:
    """Return every dealer ordered by company name."""

    return await dealers.list_dealers(session)


@router.post("/dealers", response_model=DealerCreated, status_code=status.HTTP_201_CREATED)
async def create_dealer(
    payload: DealerCreate,
    principal: Principal = Depends(require_admin),
    session: AsyncSession = Depends(get_db_session),
) -> DealerCreated:
    """Create a dealer with its login account; the temporary password is shown once."""

    dealer, temp_pass = await dealers.create_dealer(session, principal, payload)
    return DealerCreated(dealer=DealerRead.model_validate(dealer), temp_pass=temp_pass)


@router.get("/dealers/{dealer_id}", response_model=DealerRead)
async def get_dealer(
    dealer_id: int,
    _: Principal = Depends(require_admin),
    session: AsyncSession = Depends(get_db_session),
) -> Dealer:
    return await dealers.get_dealer(session, dealer_id)


@router.put("/dealers/{dealer_id}", response_model=DealerRead)
async def update_dealer(
    dealer_id: int,
    payload: DealerUpdate,
    principal: Principal = Depends(require_admin),
    session: AsyncSession = Depends(get_db_session),
) -> Dealer:
    return await dealers.update_dealer(session, principal, dealer_id, payload)


@router.delete("/dealers/{dealer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_dealer(
    dealer_id: int,
    principal: Principal = Depends(require_admin),
    session: AsyncSession = Depends(get_db_session),
) -> Response:
    """Delete a dealer and everything its tenant owns."""

    await dealers.delete_dealer(session, principal, dealer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/users/{user_id}/reset-password", response_model=TemporaryPassword)
async def reset_password(
    user_id: int,
    principal: Principal = Depends(require_admin),
    session: AsyncSession = Depends(get_db_session),
) -> TemporaryPassword:
    temp_pass = await dealers.reset_user_password(session, principal, user_id)
    return TemporaryPassword(temp_pass=temp_pass)


@router.get("/audit-logs", response_model=list[AuditLogRead])
async def list_audit_logs(
    _: Principal = Depends(require_admin),
    session: AsyncSession = Depends(get_db_session),
) -> Sequence[AuditLog]:
    """Return the whole audit trail, newest first."""

    return await audit.list_all(session)
