"""SQLAlchemy models exposed by the backend."""
from .audit_log import AuditLog
from .base import Base
from .customer import Customer
from .dealer import Dealer
from .employee import Employee
from .user import User

__all__ = ["AuditLog", "Base", "Customer", "Dealer", "Employee", "User"]
