"""Process-wide logging setup."""
from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

BACKEND_DIR = Path(__file__).resolve().parents[1]


def setup_logging(*, environment: str) -> None:
    """Configure application logging.

    - Development: console only, DEBUG level.
    - Production: console plus a rotating file under ``backend/logs``, INFO level.

    Calling it again once handlers exist is a no-op.
    """

    root = logging.getLogger()
    if root.handlers:
        return

    env = (environment or "development").strip().lower()
    level = logging.INFO if env == "production" else logging.DEBUG

    formatter = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )

    handlers: list[logging.Handler] = []

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(formatter)
    handlers.append(console)

    if env == "production":
        logs_dir = BACKEND_DIR / "logs"
        logs_dir.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            logs_dir / "union_registry.log",
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    logging.basicConfig(level=level, handlers=handlers)

    # SQL echo and passlib internals are noisy at DEBUG.
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("passlib").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
