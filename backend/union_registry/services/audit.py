"""Audit trail writes and role-filtered reads."""
from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from ..config import get_settings
from ..enums import AuditAction
from ..models import AuditLog
from ..repositories import AuditLogRepository
from ..schemas import Principal

logger = logging.getLogger(__name__)


async def record(
    session: AsyncSession,
    *,
    actor_id: int,
    actor_name: str,
    action: AuditAction,
    details: str,
    dealer_id: int | None = None,
) -> AuditLog:
    """Stage one audit entry in the caller's transaction; the caller commits."""

    entry = await AuditLogRepository(session).append(
        AuditLog(
            who_user_id=actor_id,
            who_user_name=actor_name,
            dealer_id=dealer_id,
            action_type=action.value,
            details=details,
        )
    )
    logger.info(
        "audit action=%s user_id=%s dealer_id=%s details=%r",
        action.value,
        actor_id,
        dealer_id,
        details,
    )
    return entry


async def record_for(
    session: AsyncSession, principal: Principal, action: AuditAction, details: str
) -> AuditLog:
    """Shortcut for the common case: the principal is the actor and scope."""

    return await record(
        session,
        actor_id=principal.user_id,
        actor_name=principal.name,
        action=action,
        details=details,
        dealer_id=principal.dealer_id,
    )


async def list_all(session: AsyncSession) -> list[AuditLog]:
    """Every entry, newest first (admin view)."""

    limit = get_settings().admin_audit_log_limit
    return await AuditLogRepository(session).list_recent(limit=limit)


async def list_for_dealer(session: AsyncSession, dealer_id: int) -> list[AuditLog]:
    """Entries scoped to one dealer, newest first, capped for display."""

    limit = get_settings().dealer_audit_log_limit
    return await AuditLogRepository(session).list_recent(limit=limit, dealer_id=dealer_id)
