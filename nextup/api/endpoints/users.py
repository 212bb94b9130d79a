# nextup/api/endpoints/users.py
from fastapi import APIRouter, Depends

from nextup.middleware.auth import get_current_user
from nextup.models.user import User
from nextup.schemas.user import User as UserSchema

router = APIRouter()


@router.get("/me", response_model=UserSchema)
def get_current_user_details(
    current_user: User = Depends(get_current_user),
):
    """
    Get current user details
    """
    return current_user
