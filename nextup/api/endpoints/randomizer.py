# nextup/api/endpoints/randomizer.py
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from nextup.db.session import get_db
from nextup.middleware.auth import get_current_user
from nextup.models.user import User
from nextup.services.randomizer import randomizer_service, RoundExhaustedError
from nextup.schemas.randomizer import StatusResponse, RandomizeResponse, ResetResponse

router = APIRouter()


@router.get("/status", response_model=StatusResponse)
def get_status(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Teams left in the round and the most recent draw
    """
    remaining_count, last_selected = randomizer_service.status(db, current_user.id)
    return {"remaining_count": remaining_count, "last_selected": last_selected}


@router.post("/randomize", response_model=RandomizeResponse)
def randomize(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Draw the next team; 409 once every team has been drawn
    """
    try:
        team, remaining_count = randomizer_service.draw_next(db, current_user.id)
    except RoundExhaustedError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e)
        )
    return {"team": team, "remaining_count": remaining_count}


@router.post("/reset", response_model=ResetResponse)
def reset_round(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    remaining_count = randomizer_service.reset_round(db, current_user.id)
    return {"message": "Randomizer reset.", "remaining_count": remaining_count}
