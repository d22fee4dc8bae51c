"""Append-only audit trail."""
from datetime import datetime

from sqlalchemy import DateTime, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class AuditLog(Base):
    """One sensitive action.

    ``who_user_name`` is a snapshot taken at write time and ``dealer_id`` is a
    plain value rather than a foreign key, so entries outlive the users and
    dealers they mention.
    """

    __tablename__ = "audit_logs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    who_user_id: Mapped[int] = mapped_column(Integer, index=True)
    who_user_name: Mapped[str] = mapped_column(String)
    dealer_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    action_type: Mapped[str] = mapped_column(String)
    details: Mapped[str] = mapped_column(Text, default="")
    timestamp: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    __table_args__ = (
        Index("ix_audit_dealer_timestamp", "dealer_id", "timestamp"),
    )
