"""Customer (private person or government entity) owned by a dealer."""
from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from ..enums import CustomerStatus
from .base import Base, TenantMixin, TimestampMixin


class Customer(TenantMixin, TimestampMixin, Base):
    __tablename__ = "customers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    type: Mapped[str] = mapped_column(String)
    name_or_entity: Mapped[str] = mapped_column(String, index=True)
    contact_person: Mapped[str | None] = mapped_column(String, nullable=True)
    phone: Mapped[str] = mapped_column(String)
    email: Mapped[str] = mapped_column(String)
    official_id: Mapped[str] = mapped_column(String)
    address: Mapped[str] = mapped_column(String)
    status: Mapped[str] = mapped_column(String, default=CustomerStatus.ACTIVE.value)
