"""Employee management for the calling dealer's tenant."""
from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from ..enums import AuditAction, EmployeeStatus
from ..exceptions import AuthorizationError, ConflictError, NotFoundError, ValidationError
from ..models import Employee
from ..repositories import DealerRepository, EmployeeRepository, commit
from ..schemas import EmployeeCreate, EmployeeTerminate, EmployeeUpdate, Principal
from . import audit

logger = logging.getLogger(__name__)

DUPLICATE_AADHAR_MESSAGE = "An employee with this Aadhar number already exists."


async def list_employees(session: AsyncSession, principal: Principal) -> list[Employee]:
    return await EmployeeRepository(session).list_by(
        Employee.last_name, Employee.first_name, dealer_id=principal.dealer_id
    )


async def get_employee(session: AsyncSession, principal: Principal, employee_id: int) -> Employee:
    """Load an employee, distinguishing "doesn't exist" (404) from "not yours" (403)."""

    employee = await EmployeeRepository(session).get(employee_id)
    if employee is None:
        raise NotFoundError("Employee", employee_id)
    if employee.dealer_id != principal.dealer_id:
        logger.warning(
            "Dealer %s tried to access employee %s owned by dealer %s",
            principal.dealer_id,
            employee_id,
            employee.dealer_id,
        )
        raise AuthorizationError()
    return employee


async def create_employee(
    session: AsyncSession, principal: Principal, payload: EmployeeCreate
) -> Employee:
    """Create an employee after a system-wide Aadhar uniqueness check."""

    employees = EmployeeRepository(session)
    holder = await employees.find_by(aadhar=payload.aadhar)
    if holder is not None:
        employer = await DealerRepository(session).get(holder.dealer_id)
        employer_name = employer.company_name if employer else "Unknown Dealer"
        logger.warning(
            "Dealer %s attempted to register an Aadhar already held at dealer %s",
            principal.dealer_id,
            holder.dealer_id,
        )
        raise ConflictError(
            f"{DUPLICATE_AADHAR_MESSAGE} Current Employer: {employer_name} "
            f"(Status: {holder.status}).",
            field="aadhar",
        )

    employee = await employees.add(
        Employee(
            dealer_id=principal.dealer_id,
            status=EmployeeStatus.ACTIVE.value,
            **payload.model_dump(),
        )
    )
    dealer = await DealerRepository(session).get(principal.dealer_id)
    company = dealer.company_name if dealer else "Unknown Dealer"
    await audit.record_for(
        session,
        principal,
        AuditAction.CREATE_EMPLOYEE,
        f"Created employee: {employee.full_name} at {company}",
    )
    await commit(session, DUPLICATE_AADHAR_MESSAGE)
    return employee


async def update_employee(
    session: AsyncSession, principal: Principal, employee_id: int, payload: EmployeeUpdate
) -> Employee:
    employee = await get_employee(session, principal, employee_id)
    changes = payload.changes()
    changes.pop("aadhar", None)

    hire_date = changes.get("hire_date")
    if (
        hire_date is not None
        and employee.termination_date is not None
        and employee.termination_date < hire_date
    ):
        raise ValidationError(
            "Hire date cannot be later than the termination date.", field="hire_date"
        )

    await EmployeeRepository(session).update(employee, changes)
    await audit.record_for(
        session,
        principal,
        AuditAction.UPDATE_EMPLOYEE,
        f"Updated employee: {employee.full_name}",
    )
    await commit(session)
    return employee


async def terminate_employee(
    session: AsyncSession, principal: Principal, employee_id: int, payload: EmployeeTerminate
) -> Employee:
    """One-way transition to terminated; the date may not precede the hire date."""

    employee = await get_employee(session, principal, employee_id)
    if employee.status == EmployeeStatus.TERMINATED.value:
        raise ValidationError("Employee is already terminated.", field="status")
    if payload.termination_date < employee.hire_date:
        raise ValidationError(
            "Termination date cannot be earlier than the hire date.", field="date"
        )

    await EmployeeRepository(session).update(
        employee,
        {
            "status": EmployeeStatus.TERMINATED.value,
            "termination_date": payload.termination_date,
            "termination_reason": payload.reason,
        },
    )
    await audit.record_for(
        session,
        principal,
        AuditAction.TERMINATE_EMPLOYEE,
        f"Terminated employee: {employee.full_name}. Reason: {payload.reason}",
    )
    await commit(session)
    return employee
