"""Cross-tenant identity search.

This is the one read path that ignores tenant boundaries: any authenticated
principal can see which dealer currently employs a person. Free-text
searches are audited because of that; exact identity checks are not.
"""
from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from ..config import get_settings
from ..enums import AuditAction, EmployeeStatus
from ..exceptions import ValidationError
from ..models import Customer, Employee
from ..repositories import CustomerRepository, DealerRepository, EmployeeRepository, commit
from ..schemas import GlobalSearchResult, Principal
from . import audit

logger = logging.getLogger(__name__)

UNKNOWN_DEALER = "Unknown Dealer"


def employee_result(employee: Employee, dealer_name: str | None) -> GlobalSearchResult:
    """Annotate an employee with its owner; termination details only when terminated."""

    terminated = employee.status == EmployeeStatus.TERMINATED.value
    return GlobalSearchResult(
        entity_type="employee",
        entity_id=employee.id,
        canonical_name=employee.full_name,
        phone=employee.phone,
        identity=employee.aadhar,
        owner_dealer_id=employee.dealer_id,
        owner_dealer_name=dealer_name or UNKNOWN_DEALER,
        status=employee.status,
        hire_date=employee.hire_date,
        termination_date=employee.termination_date if terminated else None,
        termination_reason=employee.termination_reason if terminated else None,
    )


def customer_result(customer: Customer, dealer_name: str | None) -> GlobalSearchResult:
    return GlobalSearchResult(
        entity_type="customer",
        entity_id=customer.id,
        canonical_name=customer.name_or_entity,
        phone=customer.phone,
        identity=customer.official_id,
        owner_dealer_id=customer.dealer_id,
        owner_dealer_name=dealer_name or UNKNOWN_DEALER,
        status=customer.status,
        customer_type=customer.type,
    )


def _effective_limit(limit: int | None) -> int:
    settings = get_settings()
    if limit is None:
        return settings.search_result_limit
    return max(1, min(limit, settings.search_result_ceiling))


async def search(
    session: AsyncSession,
    principal: Principal,
    query: str,
    *,
    include_customers: bool = False,
    limit: int | None = None,
) -> list[GlobalSearchResult]:
    """Case-insensitive substring search over every dealer's records."""

    needle = (query or "").strip()
    if not needle:
        raise ValidationError("Search query is required", field="q")

    cap = _effective_limit(limit)
    employees = await EmployeeRepository(session).search(needle, cap)
    customers: list[Customer] = []
    if include_customers:
        customers = list(await CustomerRepository(session).search(needle, cap))

    owners = {e.dealer_id for e in employees} | {c.dealer_id for c in customers}
    names = await DealerRepository(session).company_names(owners)

    results = [employee_result(e, names.get(e.dealer_id)) for e in employees]
    results.extend(customer_result(c, names.get(c.dealer_id)) for c in customers)
    results = results[:cap]

    await audit.record_for(
        session,
        principal,
        AuditAction.SEARCH,
        f'Searched for: "{needle}" ({len(results)} results)',
    )
    await commit(session)
    return results


async def check_identity(
    session: AsyncSession, principal: Principal, aadhar: str
) -> GlobalSearchResult | None:
    """Return the active employee holding ``aadhar`` anywhere, or None."""

    value = (aadhar or "").strip()
    if not value:
        raise ValidationError("Aadhar number is required", field="aadhar")

    employee = await EmployeeRepository(session).find_by(
        aadhar=value, status=EmployeeStatus.ACTIVE.value
    )
    if employee is None:
        logger.debug("Identity check by user %s: no active holder", principal.user_id)
        return None
    dealer = await DealerRepository(session).get(employee.dealer_id)
    return employee_result(employee, dealer.company_name if dealer else None)
