# nextup/api/endpoints/auth.py
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from nextup.db.session import get_db
from nextup.models.user import User
from nextup.core.security import hash_password, verify_password, create_access_token
from nextup.schemas.user import UserCreate, UserLogin, AuthResponse
from nextup.core.logging import logger

router = APIRouter()


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_in: UserCreate,
    db: Session = Depends(get_db),
):
    """
    Create an account and return a bearer token for it
    """
    existing_user = db.query(User).filter(User.email == user_in.email).first()
    if existing_user:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Email already registered"
        )

    user = User(email=user_in.email, password_hash=hash_password(user_in.password))
    db.add(user)
    db.commit()
    db.refresh(user)

    logger.bind(user_id=user.id).info("Registered user")
    return {"token": create_access_token(user.id), "user": user}


@router.post("/login", response_model=AuthResponse)
def login(
    credentials: UserLogin,
    db: Session = Depends(get_db),
):
    """
    Exchange email and password for a bearer token
    """
    user = db.query(User).filter(User.email == credentials.email).first()
    if not user or not verify_password(credentials.password, user.password_hash):
        logger.bind(email=credentials.email).warning("Failed login attempt")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password"
        )

    return {"token": create_access_token(user.id), "user": user}
