"""Customer management for the calling dealer's tenant."""
from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from ..enums import AuditAction, CustomerStatus, CustomerType
from ..exceptions import AuthorizationError, NotFoundError, ValidationError
from ..models import Customer
from ..repositories import CustomerRepository, DealerRepository, commit
from ..schemas import CustomerCreate, CustomerUpdate, Principal
from . import audit

logger = logging.getLogger(__name__)


def _require_contact_for_government(customer_type: str, contact_person: str | None) -> None:
    if customer_type == CustomerType.GOVERNMENT.value and not (contact_person or "").strip():
        raise ValidationError(
            "Contact person is required for government customers.",
            field="contact_person",
        )


async def list_customers(session: AsyncSession, principal: Principal) -> list[Customer]:
    return await CustomerRepository(session).list_by(
        Customer.name_or_entity, dealer_id=principal.dealer_id
    )


async def get_customer(session: AsyncSession, principal: Principal, customer_id: int) -> Customer:
    customer = await CustomerRepository(session).get(customer_id)
    if customer is None:
        raise NotFoundError("Customer", customer_id)
    if customer.dealer_id != principal.dealer_id:
        logger.warning(
            "Dealer %s tried to access customer %s owned by dealer %s",
            principal.dealer_id,
            customer_id,
            customer.dealer_id,
        )
        raise AuthorizationError()
    return customer


async def create_customer(
    session: AsyncSession, principal: Principal, payload: CustomerCreate
) -> Customer:
    data = payload.model_dump()
    data["type"] = payload.type.value
    _require_contact_for_government(data["type"], data.get("contact_person"))

    customer = await CustomerRepository(session).add(
        Customer(dealer_id=principal.dealer_id, status=CustomerStatus.ACTIVE.value, **data)
    )
    dealer = await DealerRepository(session).get(principal.dealer_id)
    company = dealer.company_name if dealer else "Unknown Dealer"
    await audit.record_for(
        session,
        principal,
        AuditAction.CREATE_CUSTOMER,
        f"Created customer: {customer.name_or_entity} at {company}",
    )
    await commit(session)
    return customer


async def update_customer(
    session: AsyncSession, principal: Principal, customer_id: int, payload: CustomerUpdate
) -> Customer:
    customer = await get_customer(session, principal, customer_id)
    changes = payload.changes()

    # Validate the record as it will look after the update.
    _require_contact_for_government(
        changes.get("type", customer.type),
        changes.get("contact_person", customer.contact_person),
    )

    await CustomerRepository(session).update(customer, changes)
    await audit.record_for(
        session,
        principal,
        AuditAction.UPDATE_CUSTOMER,
        f"Updated customer: {customer.name_or_entity}",
    )
    await commit(session)
    return customer
