# nextup/core/security.py
from typing import Optional
from datetime import datetime, timedelta, timezone
from jose import jwt, JWTError
from werkzeug.security import generate_password_hash, check_password_hash

from nextup.core.config import settings


def hash_password(password: str) -> str:
    """Hash a plaintext password for storage."""
    return generate_password_hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    return check_password_hash(password_hash, password)


def get_expiry_date(days: Optional[int] = None) -> datetime:
    """
    Calculate a token expiry date from now.
    Defaults to the configured access token lifetime.
    """
    if days is None:
        days = settings.ACCESS_TOKEN_EXPIRE_DAYS
    return datetime.now(timezone.utc) + timedelta(days=days)


def create_access_token(user_id: int, expires_delta: Optional[timedelta] = None) -> str:
    """
    Issue a signed bearer token for a user.
    The subject claim carries the user id as a string.
    """
    if expires_delta is not None:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = get_expiry_date()
    claims = {"sub": str(user_id), "exp": expire}
    return jwt.encode(claims, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> int:
    """
    Verify signature and expiry and return the user id.
    Raises JWTError on any invalid token.
    """
    payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    subject = payload.get("sub")
    if subject is None or not str(subject).isdigit():
        raise JWTError("Token subject is missing or malformed")
    return int(subject)
