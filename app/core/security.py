# app/core/security.py
from datetime import datetime, timedelta, timezone
from typing import Any

from jose import jwt
from passlib.context import CryptContext

from app.core.config import get_settings

settings = get_settings()

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    """Hash a password for storage."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(
    claims: dict[str, Any],
    expires_delta: timedelta | None = None,
) -> str:
    """
    Sign a session token.

    Claims carried: id, username, role (+ exp, iat).
    Defaults to JWT_EXPIRE_DAYS validity.
    """
    now = datetime.now(timezone.utc)
    to_encode = claims.copy()
    to_encode.update(
        {
            "exp": now + (expires_delta or timedelta(days=settings.JWT_EXPIRE_DAYS)),
            "iat": now,
        }
    )
    return jwt.encode(to_encode, settings.JWT_SECRET, algorithm=settings.JWT_ALG)


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Decode and verify a session token (signature + exp).

    Raises:
        JWTError: if token is invalid/expired.
    """
    return jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALG])
