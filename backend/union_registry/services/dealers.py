"""Admin-side dealer management and password resets."""
from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from ..enums import AuditAction, DealerStatus, UserRole
from ..exceptions import ConflictError, NotFoundError
from ..models import Dealer, User
from ..repositories import DealerRepository, UserRepository, commit
from ..schemas import DealerCreate, DealerUpdate, Principal
from ..security import generate_temp_password, hash_password
from . import audit

logger = logging.getLogger(__name__)

DUPLICATE_COMPANY_MESSAGE = "A dealer with this company name already exists."
DUPLICATE_EMAIL_MESSAGE = "A user with this email already exists."
DUPLICATE_USERNAME_MESSAGE = "A user with this username already exists."


async def list_dealers(session: AsyncSession) -> list[Dealer]:
    return await DealerRepository(session).list_by(Dealer.company_name)


async def get_dealer(session: AsyncSession, dealer_id: int) -> Dealer:
    dealer = await DealerRepository(session).get(dealer_id)
    if dealer is None:
        raise NotFoundError("Dealer", dealer_id)
    return dealer


async def create_dealer(
    session: AsyncSession, principal: Principal, payload: DealerCreate
) -> tuple[Dealer, str]:
    """Create the dealer and its login account; returns the one-time password."""

    dealers = DealerRepository(session)
    users = UserRepository(session)

    if await dealers.find_by(company_name=payload.company_name) is not None:
        raise ConflictError(DUPLICATE_COMPANY_MESSAGE, field="company_name")
    if await users.find_by(email=payload.primary_contact_email) is not None:
        raise ConflictError(DUPLICATE_EMAIL_MESSAGE, field="primary_contact_email")
    if await users.find_by(username=payload.username) is not None:
        raise ConflictError(DUPLICATE_USERNAME_MESSAGE, field="username")

    temp_pass = generate_temp_password()
    user = await users.add(
        User(
            role=UserRole.DEALER.value,
            name=payload.name or payload.primary_contact_name,
            username=payload.username,
            email=payload.primary_contact_email,
            password_hash=hash_password(temp_pass),
            temp_pass=True,
        )
    )
    dealer = await dealers.add(
        Dealer(
            user_id=user.id,
            company_name=payload.company_name,
            primary_contact_name=payload.primary_contact_name,
            primary_contact_phone=payload.primary_contact_phone,
            primary_contact_email=payload.primary_contact_email,
            address=payload.address,
            status=DealerStatus.ACTIVE.value,
        )
    )
    await audit.record_for(
        session, principal, AuditAction.CREATE_DEALER, f"Created dealer: {dealer.company_name}"
    )
    await commit(session, DUPLICATE_COMPANY_MESSAGE)
    return dealer, temp_pass


async def update_dealer(
    session: AsyncSession, principal: Principal, dealer_id: int, payload: DealerUpdate
) -> Dealer:
    dealers = DealerRepository(session)
    dealer = await get_dealer(session, dealer_id)
    changes = payload.changes()

    new_name = changes.get("company_name")
    if new_name and new_name != dealer.company_name:
        if await dealers.find_by(company_name=new_name) is not None:
            raise ConflictError(DUPLICATE_COMPANY_MESSAGE, field="company_name")

    await dealers.update(dealer, changes)
    await audit.record_for(
        session, principal, AuditAction.UPDATE_DEALER, f"Updated dealer: {dealer.company_name}"
    )
    await commit(session, DUPLICATE_COMPANY_MESSAGE)
    return dealer


async def delete_dealer(session: AsyncSession, principal: Principal, dealer_id: int) -> None:
    """Delete a dealer together with its user, employees and customers."""

    dealer = await get_dealer(session, dealer_id)
    company = dealer.company_name
    await audit.record_for(
        session, principal, AuditAction.DELETE_DEALER, f"Deleted dealer: {company}"
    )
    await DealerRepository(session).delete_with_tenant_data(dealer)
    await commit(session)
    logger.info("Dealer %s (%s) deleted with its tenant data", dealer_id, company)


async def reset_user_password(session: AsyncSession, principal: Principal, user_id: int) -> str:
    """Replace a user's password with a fresh temporary one and return it."""

    users = UserRepository(session)
    user = await users.get(user_id)
    if user is None:
        raise NotFoundError("User", user_id)

    temp_pass = generate_temp_password()
    await users.update(user, {"password_hash": hash_password(temp_pass), "temp_pass": True})
    await audit.record_for(
        session, principal, AuditAction.RESET_PASSWORD, f"Reset password for user: {user.name}"
    )
    await commit(session)
    return temp_pass
