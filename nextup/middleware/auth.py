# nextup/middleware/auth.py
from typing import Optional
from fastapi import HTTPException, Depends, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError
from sqlalchemy.orm import Session

from nextup.db.session import get_db
from nextup.models.user import User
from nextup.core.security import decode_access_token
from nextup.core.logging import logger

BEARER_SCHEME = HTTPBearer(auto_error=False)


async def get_token_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(BEARER_SCHEME),
) -> int:
    """
    Validate the bearer token and return the user id it was issued for
    """
    if credentials is None or not credentials.credentials:
        logger.warning("Bearer token missing from request")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication token is missing",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        return decode_access_token(credentials.credentials)
    except JWTError as e:
        logger.warning(f"Invalid token attempt: {e}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )


async def get_current_user(
    user_id: int = Depends(get_token_user_id), db: Session = Depends(get_db)
) -> User:
    """
    Get the current user based on the bearer token
    """
    user = db.query(User).filter(User.id == user_id).first()

    if not user:
        logger.error(f"User not found for token subject: {user_id}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )

    return user
