"""Per-entity persistence helpers over an AsyncSession.

Repositories only flush; the calling service owns the transaction and
commits once the primary write and its audit entry are both staged.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import delete, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from .exceptions import ConflictError
from .models import AuditLog, Base, Customer, Dealer, Employee, User

ModelT = TypeVar("ModelT", bound=Base)


class Repository(Generic[ModelT]):
    """Find-by-id, find-by-field, create, update and delete for one model."""

    model: type[ModelT]

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get(self, entity_id: int) -> ModelT | None:
        return await self.session.get(self.model, entity_id)

    async def find_by(self, **filters: Any) -> ModelT | None:
        stmt = select(self.model).filter_by(**filters).limit(1)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_by(self, *order_by: Any, **filters: Any) -> list[ModelT]:
        stmt = select(self.model).filter_by(**filters)
        if order_by:
            stmt = stmt.order_by(*order_by)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def add(self, obj: ModelT) -> ModelT:
        self.session.add(obj)
        await self._flush()
        await self.session.refresh(obj)
        return obj

    async def update(self, obj: ModelT, changes: dict[str, Any]) -> ModelT:
        for key, value in changes.items():
            setattr(obj, key, value)
        if hasattr(obj, "updated_at"):
            obj.updated_at = datetime.utcnow()
        await self._flush()
        return obj

    async def delete(self, obj: ModelT) -> None:
        await self.session.delete(obj)
        await self.session.flush()

    async def _flush(self) -> None:
        try:
            await self.session.flush()
        except IntegrityError as exc:
            await self.session.rollback()
            raise ConflictError(f"{self.model.__name__} conflicts with an existing record.") from exc


class UserRepository(Repository[User]):
    model = User


class DealerRepository(Repository[Dealer]):
    model = Dealer

    async def company_names(self, dealer_ids: set[int]) -> dict[int, str]:
        """Map dealer id to company name for the given ids."""
        if not dealer_ids:
            return {}
        result = await self.session.execute(
            select(Dealer.id, Dealer.company_name).where(Dealer.id.in_(dealer_ids))
        )
        return {row.id: row.company_name for row in result}

    async def delete_with_tenant_data(self, dealer: Dealer) -> None:
        """Remove a dealer with its employees, customers and login account."""
        await self.session.execute(delete(Employee).where(Employee.dealer_id == dealer.id))
        await self.session.execute(delete(Customer).where(Customer.dealer_id == dealer.id))
        user_id = dealer.user_id
        await self.session.delete(dealer)
        await self.session.flush()
        await self.session.execute(delete(User).where(User.id == user_id))


def _contains(column: Any, query: str) -> Any:
    """Case-insensitive substring test with LIKE wildcards escaped.

    Both sides are folded by the database's ``lower()``.
    """
    return column.icontains(query, autoescape=True)


class EmployeeRepository(Repository[Employee]):
    model = Employee

    async def search(self, query: str, limit: int) -> Sequence[Employee]:
        """Employees of every dealer whose name, phone or aadhar contains ``query``."""
        stmt = (
            select(Employee)
            .where(
                or_(
                    _contains(Employee.first_name, query),
                    _contains(Employee.last_name, query),
                    _contains(Employee.phone, query),
                    _contains(Employee.aadhar, query),
                )
            )
            .order_by(Employee.last_name, Employee.first_name, Employee.id)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return result.scalars().all()


class CustomerRepository(Repository[Customer]):
    model = Customer

    async def search(self, query: str, limit: int) -> Sequence[Customer]:
        stmt = (
            select(Customer)
            .where(
                or_(
                    _contains(Customer.name_or_entity, query),
                    _contains(Customer.contact_person, query),
                    _contains(Customer.phone, query),
                    _contains(Customer.official_id, query),
                )
            )
            .order_by(Customer.name_or_entity, Customer.id)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return result.scalars().all()


class AuditLogRepository:
    """Append-only; there is no update or delete."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def append(self, entry: AuditLog) -> AuditLog:
        self.session.add(entry)
        await self.session.flush()
        return entry

    async def list_recent(self, *, limit: int, dealer_id: int | None = None) -> list[AuditLog]:
        """Newest first; restricted to one dealer when ``dealer_id`` is given."""
        stmt = select(AuditLog)
        if dealer_id is not None:
            stmt = stmt.where(AuditLog.dealer_id == dealer_id)
        stmt = stmt.order_by(AuditLog.timestamp.desc(), AuditLog.id.desc()).limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())


async def commit(session: AsyncSession, conflict_message: str = "Record already exists.") -> None:
    """Commit the unit of work, turning a unique-constraint race into a 409."""

    try:
        await session.commit()
    except IntegrityError as exc:
        await session.rollback()
        raise ConflictError(conflict_message) from exc
