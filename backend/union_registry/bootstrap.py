"""Baseline data required before the first request."""
from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from .config import Settings, get_settings
from .enums import UserRole
from .models import User
from .repositories import UserRepository
from .security import hash_password, verify_password

logger = logging.getLogger(__name__)


async def ensure_admin_user(
    session: AsyncSession,
    settings: Settings | None = None,
    *,
    reset_password: bool = False,
) -> User:
    """Create the administrator account if it is missing.

    With ``reset_password`` the stored hash is replaced by the configured
    ADMIN_PASSWORD when they differ.
    """

    settings = settings or get_settings()
    users = UserRepository(session)
    admin = await users.find_by(email=settings.admin_email)
    if admin is None:
        admin = await users.add(
            User(
                role=UserRole.ADMIN.value,
                name=settings.admin_name,
                username=settings.admin_username,
                email=settings.admin_email,
                password_hash=hash_password(settings.admin_password),
                temp_pass=False,
            )
        )
        await session.commit()
        logger.info("Seeded admin user %s", settings.admin_email)
    elif reset_password and not verify_password(settings.admin_password, admin.password_hash):
        await users.update(admin, {"password_hash": hash_password(settings.admin_password)})
        await session.commit()
        logger.info("Reset password for admin user %s", settings.admin_email)
    return admin
