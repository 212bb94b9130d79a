# nextup/api/endpoints/presentations.py
import logging
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from nextup.db.session import get_db
from nextup.middleware.auth import get_current_user
from nextup.models.user import User
from nextup.models.presentation import Presentation
from nextup.api.endpoints.teams import get_owned_team
from nextup.schemas.presentation import (
    PresentationCreate, PresentationResponse, PresentationListResponse
)

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post(
    "/{team_id}/presentation",
    response_model=PresentationResponse,
    status_code=status.HTTP_201_CREATED,
)
def record_presentation(
    team_id: int,
    presentation_in: PresentationCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Append a presentation/Q&A duration pair to a team
    """
    team = get_owned_team(db, team_id, current_user)

    presentation = Presentation(
        team_id=team.id,
        presentation_seconds=int(round(presentation_in.presentation_seconds)),
        qa_seconds=int(round(presentation_in.qa_seconds)),
    )
    db.add(presentation)
    db.commit()
    db.refresh(presentation)

    logger.info(
        f"Recorded presentation {presentation.id} for team {team.id}: "
        f"{presentation.presentation_seconds}s + {presentation.qa_seconds}s"
    )
    return {"presentation": presentation}


@router.get("/{team_id}/presentations", response_model=PresentationListResponse)
def get_presentations(
    team_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    List a team's presentation records, oldest first
    """
    team = get_owned_team(db, team_id, current_user)
    presentations = (
        db.query(Presentation)
        .filter(Presentation.team_id == team.id)
        .order_by(Presentation.created_at, Presentation.id)
        .all()
    )
    return {"presentations": presentations}
