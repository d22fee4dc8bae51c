"""Dealer console endpoints, always scoped to the caller's own tenant."""
from typing import Sequence

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..dependencies import get_db_session, require_dealer
from ..models import AuditLog, Customer, Employee
from ..schemas import (
    AuditLogRead,
    CustomerCreate,
    CustomerRead,
    CustomerUpdate,
    EmployeeCreate,
    EmployeeRead,
    EmployeeTerminate,
    EmployeeUpdate,
    Principal,
)
from ..services import audit, customers, employees

router = APIRouter(prefix="/dealer", tags=["dealer"])


@router.get("/employees", response_model=list[EmployeeRead])
async def list_employees(
    principal: Principal = Depends(require_dealer),
    session: AsyncSession = Depends(get_db_session),
) -> Sequence[Employee]:
    """Return all employees for the authenticated dealer."""

    return await employees.list_employees(session, principal)


@router.post("/employees", response_model=EmployeeRead, status_code=status.HTTP_201_CREATED)
async def create_employee(
    payload: EmployeeCreate,
    principal: Principal = Depends(require_dealer),
    session: AsyncSession = Depends(get_db_session),
) -> Employee:
    """Create an employee; rejected with 409 if the Aadhar is held anywhere."""

    return await employees.create_employee(session, principal, payload)


@router.get("/employees/{employee_id}", response_model=EmployeeRead)
async def get_employee(
    employee_id: int,
    principal: Principal = Depends(require_dealer),
    session: AsyncSession = Depends(get_db_session),
) -> Employee:
    return await employees.get_employee(session, principal, employee_id)


@router.put("/employees/{employee_id}", response_model=EmployeeRead)
async def update_employee(
    employee_id: int,
    payload: EmployeeUpdate,
    principal: Principal = Depends(require_dealer),
    session: AsyncSession = Depends(get_db_session),
) -> Employee:
    return await employees.update_employee(session, principal, employee_id, payload)


@router.post("/employees/{employee_id}/terminate", response_model=EmployeeRead)
async def terminate_employee(
    employee_id: int,
    payload: EmployeeTerminate,
    principal: Principal = Depends(require_dealer),
    session: AsyncSession = Depends(get_db_session),
) -> Employee:
    return await employees.terminate_employee(session, principal, employee_id, payload)


@router.get("/customers", response_model=list[CustomerRead])
async def list_customers(
    principal: Principal = Depends(require_dealer),
    session: AsyncSession = Depends(get_db_session),
) -> Sequence[Customer]:
    return await customers.list_customers(session, principal)


@router.post("/customers", response_model=CustomerRead, status_code=status.HTTP_201_CREATED)
async def create_customer(
    payload: CustomerCreate,
    principal: Principal = Depends(require_dealer),
    session: AsyncSession = Depends(get_db_session),
) -> Customer:
    return await customers.create_customer(session, principal, payload)


@router.get("/customers/{customer_id}", response_model=CustomerRead)
async def get_customer(
    customer_id: int,
    principal: Principal = Depends(require_dealer),
    session: AsyncSession = Depends(get_db_session),
) -> Customer:
    return await customers.get_customer(session, principal, customer_id)


@router.put("/customers/{customer_id}", response_model=CustomerRead)
async def update_customer(
    customer_id: int,
    payload: CustomerUpdate,
    principal: Principal = Depends(require_dealer),
    session: AsyncSession = Depends(get_db_session),
) -> Customer:
    return await customers.update_customer(session, principal, customer_id, payload)


@router.get("/audit-logs", response_model=list[AuditLogRead])
async def list_audit_logs(
    principal: Principal = Depends(require_dealer),
    session: AsyncSession = Depends(get_db_session),
) -> Sequence[AuditLog]:
    """Return audit entries scoped to the caller's dealer, newest first."""

    return await audit.list_for_dealer(session, principal.dealer_id)
