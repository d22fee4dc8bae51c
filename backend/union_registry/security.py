"""Password hashing, temporary passwords and JWT helpers."""
from __future__ import annotations

import secrets
from datetime import datetime, timezone
from typing import Any

import jwt
from passlib.context import CryptContext

from .config import get_settings
from .schemas import TokenData, compute_expiry

# Use PBKDF2-SHA256 instead of bcrypt to avoid bcrypt backend issues
password_context = CryptContext(
    schemes=["pbkdf2_sha256"],
    deprecated="auto",
)

# Ambiguous glyphs (0/O, 1/l/I) are left out so the password can be read aloud.
TEMP_PASSWORD_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZabcdefghjkmnpqrstuvwxyz23456789@#$%"
TEMP_PASSWORD_LENGTH = 12


def hash_password(password: str) -> str:
    """Hash a password for storage."""
    return password_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plain password against the stored hash."""
    return password_context.verify(password, password_hash)


def generate_temp_password(length: int = TEMP_PASSWORD_LENGTH) -> str:
    """Return a random one-time password handed to a dealer by the admin."""
    return "".join(secrets.choice(TEMP_PASSWORD_ALPHABET) for _ in range(length))


def create_access_token(
    *, user_id: int, role: str, dealer_id: int | None
) -> tuple[str, datetime]:
    """Sign a token for the given principal; returns the token and its expiry."""

    settings = get_settings()
    expires_at = compute_expiry(settings.access_token_expires_minutes)
    payload: dict[str, Any] = {
        "sub": str(user_id),
        "role": role,
        "dealer_id": dealer_id,
        "iat": int(datetime.now(timezone.utc).timestamp()),
        "exp": int(expires_at.timestamp()),
    }
    token = jwt.encode(payload, settings.secret_key, algorithm=settings.jwt_algorithm)
    return token, expires_at


def decode_access_token(token: str) -> TokenData:
    """Decode a JWT access token and return its payload.

    Raises ``jwt.PyJWTError`` on a bad signature, malformed token or expiry.
    """

    settings = get_settings()
    payload: dict[str, Any] = jwt.decode(
        token,
        settings.secret_key,
        algorithms=[settings.jwt_algorithm],
        options={"require": ["exp", "sub"]},
    )
    return TokenData(**payload)
