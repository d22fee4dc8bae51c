"""Login account for admins and dealers."""
from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from ..enums import UserRole
from .base import Base, TimestampMixin


class User(TimestampMixin, Base):
    """Credential record; a dealer user is referenced by exactly one dealer."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    role: Mapped[str] = mapped_column(String, default=UserRole.DEALER.value)
    name: Mapped[str] = mapped_column(String)
    username: Mapped[str] = mapped_column(String, unique=True, index=True)
    email: Mapped[str] = mapped_column(String, unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String)
    temp_pass: Mapped[bool] = mapped_column(Boolean, default=False)
