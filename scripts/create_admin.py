"""
Create (or repair) the administrator account outside the API process.

Reads ADMIN_EMAIL / ADMIN_PASSWORD and DATABASE_URL from the environment
or backend/.env. With --reset-password the stored hash is replaced when it
no longer matches ADMIN_PASSWORD.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

# --- make sure backend/ is on sys.path ---
BACKEND_DIR = Path(__file__).resolve().parents[1] / "backend"
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

from union_registry import models  # noqa: E402
from union_registry.bootstrap import ensure_admin_user  # noqa: E402
from union_registry.config import get_settings  # noqa: E402
from union_registry.database import AsyncSessionLocal, engine  # noqa: E402
from union_registry.logging_config import setup_logging  # noqa: E402

logger = logging.getLogger("create_admin")


async def main(reset_password: bool) -> None:
    settings = get_settings()
    async with engine.begin() as conn:
        await conn.run_sync(models.Base.metadata.create_all)

    async with AsyncSessionLocal() as session:
        admin = await ensure_admin_user(session, settings, reset_password=reset_password)
    logger.info("Admin account ready: id=%s email=%s", admin.id, admin.email)
    await engine.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--reset-password",
        action="store_true",
        help="overwrite the stored admin password with ADMIN_PASSWORD",
    )
    args = parser.parse_args()
    setup_logging(environment=get_settings().environment)
    asyncio.run(main(args.reset_password))
