"""Pydantic schemas used across the backend API."""
from datetime import date, datetime, timedelta, timezone
from enum import Enum
from typing import Annotated, ClassVar, Literal

from pydantic import AfterValidator, AliasChoices, BaseModel, BeforeValidator, EmailStr, Field, model_validator

from .enums import AuditAction, CustomerStatus, CustomerType, DealerStatus, EmployeeStatus, UserRole

PHONE_PATTERN = r"^\d{10}$"
AADHAR_PATTERN = r"^\d{12}$"
USERNAME_PATTERN = r"^[A-Za-z0-9]+$"


def _not_in_future(value: date) -> date:
    if value > date.today():
        raise ValueError("Date cannot be in the future.")
    return value


PastOrToday = Annotated[date, AfterValidator(_not_in_future)]


def _strip(value):
    return value.strip() if isinstance(value, str) else value


StrippedStr = Annotated[str, BeforeValidator(_strip)]


class PartialUpdate(BaseModel):
    """Base for PATCH-like payloads: unknown keys are dropped, at least one field required."""

    model_config = {"extra": "ignore"}

    # Fields that may be explicitly cleared by sending null.
    nullable_fields: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="after")
    def _require_one_field(self):
        # Nulls for non-nullable fields are dropped, so they do not count.
        if not self.changes():
            raise ValueError("At least one updatable field must be supplied.")
        return self

    def changes(self) -> dict:
        """Fields the caller actually sent, with enums reduced to their values."""
        changes = {}
        for key, value in self.model_dump(exclude_unset=True).items():
            if value is None and key not in self.nullable_fields:
                continue
            changes[key] = value.value if isinstance(value, Enum) else value
        return changes


# ---------------------------------------------------------------------------
# Auth
# ---------------------------------------------------------------------------
class TokenData(BaseModel):
    """Information encoded into JWTs."""

    sub: str
    role: UserRole
    dealer_id: int | None = None


class Principal(BaseModel):
    """Authenticated caller, passed explicitly into every service call."""

    user_id: int
    role: UserRole
    name: str
    dealer_id: int | None = None

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


class AdminLogin(BaseModel):
    password: str = Field(min_length=1)


class DealerLogin(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)


class ForgotPassword(BaseModel):
    email: EmailStr


class UserRead(BaseModel):
    """Public representation of a user; never carries the password hash."""

    id: int
    role: UserRole
    name: str
    username: str
    email: str
    temp_pass: bool
    dealer_id: int | None = None

    model_config = {"from_attributes": True}


class LoginResponse(BaseModel):
    token: str
    token_type: str = "bearer"
    expires_at: datetime
    user: UserRead


class ChangePassword(BaseModel):
    new_password: str = Field(
        min_length=8, validation_alias=AliasChoices("new_password", "newPassword")
    )


class ProfileUpdate(BaseModel):
    name: str = Field(min_length=2)
    username: str = Field(min_length=3, max_length=30, pattern=USERNAME_PATTERN)


class TemporaryPassword(BaseModel):
    temp_pass: str


# ---------------------------------------------------------------------------
# Dealers
# ---------------------------------------------------------------------------
class DealerCreate(BaseModel):
    company_name: StrippedStr = Field(min_length=3)
    primary_contact_name: StrippedStr = Field(min_length=2)
    primary_contact_phone: str = Field(pattern=PHONE_PATTERN)
    primary_contact_email: EmailStr
    address: StrippedStr = Field(min_length=10)
    username: str = Field(min_length=3, max_length=30, pattern=USERNAME_PATTERN)
    name: str | None = Field(default=None, min_length=2)


class DealerUpdate(PartialUpdate):
    """Login email and username are not declared, so they are dropped if sent."""

    company_name: Annotated[StrippedStr, Field(min_length=3)] | None = None
    primary_contact_name: Annotated[StrippedStr, Field(min_length=2)] | None = None
    primary_contact_phone: str | None = Field(default=None, pattern=PHONE_PATTERN)
    address: Annotated[StrippedStr, Field(min_length=10)] | None = None
    status: DealerStatus | None = None


class DealerRead(BaseModel):
    id: int
    user_id: int
    company_name: str
    primary_contact_name: str
    primary_contact_phone: str
    primary_contact_email: str
    address: str
    status: DealerStatus
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class DealerCreated(BaseModel):
    dealer: DealerRead
    temp_pass: str


# ---------------------------------------------------------------------------
# Employees
# ---------------------------------------------------------------------------
class EmployeeCreate(BaseModel):
    first_name: str = Field(min_length=2)
    last_name: str = Field(min_length=2)
    phone: str = Field(pattern=PHONE_PATTERN)
    email: EmailStr
    aadhar: str = Field(pattern=AADHAR_PATTERN)
    position: str = Field(min_length=1)
    hire_date: PastOrToday


class EmployeeUpdate(PartialUpdate):
    """`aadhar` is immutable and therefore not part of this schema."""

    first_name: str | None = Field(default=None, min_length=2)
    last_name: str | None = Field(default=None, min_length=2)
    phone: str | None = Field(default=None, pattern=PHONE_PATTERN)
    email: EmailStr | None = None
    position: str | None = Field(default=None, min_length=1)
    hire_date: PastOrToday | None = None


class EmployeeTerminate(BaseModel):
    reason: str = Field(min_length=10)
    termination_date: PastOrToday = Field(
        validation_alias=AliasChoices("date", "termination_date")
    )


class EmployeeRead(BaseModel):
    id: int
    dealer_id: int
    first_name: str
    last_name: str
    phone: str
    email: str
    aadhar: str
    position: str
    hire_date: date
    status: EmployeeStatus
    termination_date: date | None = None
    termination_reason: str | None = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


# ---------------------------------------------------------------------------
# Customers
# ---------------------------------------------------------------------------
class CustomerCreate(BaseModel):
    type: CustomerType
    name_or_entity: str = Field(min_length=1)
    contact_person: str | None = None
    phone: str = Field(pattern=PHONE_PATTERN)
    email: EmailStr
    official_id: str = Field(min_length=1)
    address: str = Field(min_length=1)


class CustomerUpdate(PartialUpdate):
    nullable_fields: ClassVar[frozenset[str]] = frozenset({"contact_person"})

    type: CustomerType | None = None
    name_or_entity: str | None = Field(default=None, min_length=1)
    contact_person: str | None = None
    phone: str | None = Field(default=None, pattern=PHONE_PATTERN)
    email: EmailStr | None = None
    official_id: str | None = Field(default=None, min_length=1)
    address: str | None = Field(default=None, min_length=1)
    status: CustomerStatus | None = None


class CustomerRead(BaseModel):
    id: int
    dealer_id: int
    type: CustomerType
    name_or_entity: str
    contact_person: str | None = None
    phone: str
    email: str
    official_id: str
    address: str
    status: CustomerStatus
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


# ---------------------------------------------------------------------------
# Audit log and search
# ---------------------------------------------------------------------------
class AuditLogRead(BaseModel):
    id: int
    who_user_id: int
    who_user_name: str
    dealer_id: int | None = None
    action_type: AuditAction
    details: str
    timestamp: datetime

    model_config = {"from_attributes": True}


class GlobalSearchResult(BaseModel):
    """A match from the cross-tenant search, annotated with its owning dealer."""

    entity_type: Literal["employee", "customer"]
    entity_id: int
    canonical_name: str
    phone: str
    identity: str | None = None
    owner_dealer_id: int
    owner_dealer_name: str
    status: str
    hire_date: date | None = None
    termination_date: date | None = None
    termination_reason: str | None = None
    customer_type: CustomerType | None = None


def compute_expiry(minutes: int) -> datetime:
    """Return an absolute expiration timestamp for tokens."""

    return datetime.now(timezone.utc) + timedelta(minutes=minutes)
