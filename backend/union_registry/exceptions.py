"""Typed errors raised by services and the access-control guard.

Routers never build HTTP error responses themselves; the handlers in
``exception_handlers`` map each class to its status code.
"""
from __future__ import annotations

from typing import Any


class RegistryError(Exception):
    """Base class for all expected application errors."""

    status_code = 400
    error_code = "REGISTRY_ERROR"

    def __init__(self, message: str, errors: dict[str, str] | None = None) -> None:
        self.message = message
        self.errors = errors or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"code": self.error_code, "message": self.message}
        if self.errors:
            body["errors"] = self.errors
        return body


class ValidationError(RegistryError):
    """Input is malformed or violates a business rule (400)."""

    status_code = 400
    error_code = "VALIDATION_ERROR"

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, {field: message} if field else None)


class AuthenticationError(RegistryError):
    """Missing, malformed, expired or wrongly signed credential (401)."""

    status_code = 401
    error_code = "AUTHENTICATION_ERROR"

    def __init__(self, message: str = "Not authenticated") -> None:
        super().__init__(message)


class AuthorizationError(RegistryError):
    """Valid credential, but wrong role or wrong tenant (403)."""

    status_code = 403
    error_code = "AUTHORIZATION_ERROR"

    def __init__(self, message: str = "Forbidden.") -> None:
        super().__init__(message)


class NotFoundError(RegistryError):
    """Entity id does not resolve (404)."""

    status_code = 404
    error_code = "NOT_FOUND"

    def __init__(self, resource: str, resource_id: Any) -> None:
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"{resource} not found")


class ConflictError(RegistryError):
    """Uniqueness violation (409)."""

    status_code = 409
    error_code = "CONFLICT"

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, {field: message} if field else None)
