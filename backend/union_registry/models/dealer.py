"""Dealer organisation (the tenant)."""
from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from ..enums import DealerStatus
from .base import Base, TimestampMixin


class Dealer(TimestampMixin, Base):
    __tablename__ = "dealers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True
    )
    company_name: Mapped[str] = mapped_column(String, unique=True, index=True)
    primary_contact_name: Mapped[str] = mapped_column(String)
    primary_contact_phone: Mapped[str] = mapped_column(String)
    primary_contact_email: Mapped[str] = mapped_column(String)
    address: Mapped[str] = mapped_column(String)
    status: Mapped[str] = mapped_column(String, default=DealerStatus.ACTIVE.value)
