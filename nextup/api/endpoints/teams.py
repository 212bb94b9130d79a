# nextup/api/endpoints/teams.py
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from nextup.db.session import get_db
from nextup.middleware.auth import get_current_user
from nextup.models.user import User
from nextup.models.team import Team
from nextup.core.config import settings
from nextup.services.randomizer import randomizer_service
from nextup.schemas.team import TeamCreate, TeamNotesUpdate, TeamResponse, TeamListResponse

router = APIRouter()
logger = logging.getLogger(__name__)


def get_owned_team(db: Session, team_id: int, user: User) -> Team:
    """
    Fetch a team owned by the user, or raise 404
    """
    team = db.query(Team).filter(Team.id == team_id, Team.user_id == user.id).first()
    if not team:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Team not found"
        )
    return team


@router.get("", response_model=TeamListResponse)
def get_teams(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    List the current user's teams with their presentation records
    """
    teams = (
        db.query(Team)
        .filter(Team.user_id == current_user.id)
        .order_by(Team.created_at, Team.id)
        .all()
    )
    return {"teams": teams}


@router.post("", response_model=TeamResponse, status_code=status.HTTP_201_CREATED)
def create_team(
    team_in: TeamCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Create a team and add it to the current randomizer round
    """
    team = Team(
        name=team_in.name,
        members=team_in.members,
        topic=team_in.topic or settings.DEFAULT_TOPIC,
        user_id=current_user.id,
    )
    db.add(team)
    db.commit()
    db.refresh(team)

    randomizer_service.add_team(db, current_user.id, team.id)
    db.refresh(team)
    return {"team": team}


@router.post("/reset", response_model=TeamListResponse)
def reset_teams(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Delete every team, presentation record and the randomizer state
    """
    teams = db.query(Team).filter(Team.user_id == current_user.id).all()
    for team in teams:
        db.delete(team)
    randomizer_service.clear(db, current_user.id)
    db.commit()

    logger.info(f"User {current_user.id} reset {len(teams)} teams")
    return {"teams": []}


@router.delete("/{team_id}", response_model=TeamResponse)
def delete_team(
    team_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Delete a team, its presentation records, and its place in the round
    """
    team = get_owned_team(db, team_id, current_user)
    removed = TeamResponse.model_validate({"team": team}, from_attributes=True)

    randomizer_service.purge_team(db, current_user.id, team.id)
    db.delete(team)
    db.commit()
    return removed


@router.post("/{team_id}/notes", response_model=TeamResponse)
def update_notes(
    team_id: int,
    notes_in: TeamNotesUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Replace the free-text notes on a team
    """
    team = get_owned_team(db, team_id, current_user)
    team.notes = notes_in.notes
    db.commit()
    db.refresh(team)
    return {"team": team}
