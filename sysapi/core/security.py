"""Password hashing and signed session tokens for the session cookie."""

from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from sysapi.core.config import Settings

# Bcrypt cost (rounds); 12 is a good default for security vs speed.
BCRYPT_ROUNDS = 12


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors.
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, hashed: str | None) -> bool:
    """Verify a plain password against a stored hash (constant-time in bcrypt)."""
    if not hashed:
        return False
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def create_session_token(username: str, roles: frozenset[str] | set[str], settings: Settings) -> str:
    """Create the signed session value: sub (username), roles, iat and exp."""
    now = datetime.now(UTC)
    expire = now + timedelta(minutes=settings.SESSION_MAX_AGE_MINUTES)
    payload: dict[str, Any] = {
        "sub": username,
        "roles": sorted(roles),
        "exp": expire,
        "iat": now,
    }
    return jwt.encode(
        payload,
        settings.SESSION_SECRET.get_secret_value(),
        algorithm=settings.SESSION_ALGORITHM,
    )


def decode_session_token(token: str, settings: Settings) -> dict[str, Any]:
    """
    Decode and validate a session token; return payload (sub, roles, exp, iat).
    Raises jwt.PyJWTError on invalid or expired token.
    """
    return jwt.decode(
        token,
        settings.SESSION_SECRET.get_secret_value(),
        algorithms=[settings.SESSION_ALGORITHM],
    )
