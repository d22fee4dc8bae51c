"""Closed value sets stored as plain strings in the database."""
from enum import Enum


class UserRole(str, Enum):
    ADMIN = "admin"
    DEALER = "dealer"


class DealerStatus(str, Enum):
    ACTIVE = "active"
    SUSPENDED = "suspended"


class EmployeeStatus(str, Enum):
    ACTIVE = "active"
    TERMINATED = "terminated"


class CustomerType(str, Enum):
    PRIVATE = "private"
    GOVERNMENT = "government"


class CustomerStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class AuditAction(str, Enum):
    """Every action type that can appear in the audit log."""

    LOGIN = "login"
    LOGOUT = "logout"
    FORGOT_PASSWORD = "forgot_password"
    RESET_PASSWORD = "reset_password"
    CHANGE_PASSWORD = "change_password"
    UPDATE_PROFILE = "update_profile"
    CREATE_DEALER = "create_dealer"
    UPDATE_DEALER = "update_dealer"
    DELETE_DEALER = "delete_dealer"
    SEARCH = "search"
    CREATE_EMPLOYEE = "create_employee"
    UPDATE_EMPLOYEE = "update_employee"
    TERMINATE_EMPLOYEE = "terminate_employee"
    CREATE_CUSTOMER = "create_customer"
    UPDATE_CUSTOMER = "update_customer"
