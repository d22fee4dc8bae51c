"""Employee record owned by a dealer."""
from datetime import date

from sqlalchemy import Date, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from ..enums import EmployeeStatus
from .base import Base, TenantMixin, TimestampMixin


class Employee(TenantMixin, TimestampMixin, Base):
    """Tenant-scoped employee; `aadhar` is unique across every tenant."""

    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    first_name: Mapped[str] = mapped_column(String)
    last_name: Mapped[str] = mapped_column(String)
    phone: Mapped[str] = mapped_column(String)
    email: Mapped[str] = mapped_column(String)
    aadhar: Mapped[str] = mapped_column(String, unique=True, index=True)
    position: Mapped[str] = mapped_column(String)
    hire_date: Mapped[date] = mapped_column(Date)
    status: Mapped[str] = mapped_column(String, default=EmployeeStatus.ACTIVE.value, index=True)
    termination_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    termination_reason: Mapped[str | None] = mapped_column(String, nullable=True)

    __table_args__ = (
        Index("ix_emp_dealer_name", "dealer_id", "last_name", "first_name"),
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
