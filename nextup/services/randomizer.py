# nextup/services/randomizer.py
import random
from typing import List, Optional, Tuple
from sqlalchemy.orm import Session

from nextup.models.team import Team
from nextup.models.session_state import SessionState
from nextup.core.logging import logger


class RoundExhaustedError(Exception):
    """Raised when a draw is attempted with no teams left in the round."""


class RandomizerService:
    """
    Draws teams without replacement, one round at a time.

    The round lives in the account's SessionState row: the ids not yet
    drawn and the id of the most recent draw. Each operation is a
    read-modify-write of that row committed in one transaction; concurrent
    draws for the same account are not serialized.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.SystemRandom()

    def get_or_create_state(self, db: Session, user_id: int) -> SessionState:
        state = db.query(SessionState).filter(SessionState.user_id == user_id).first()
        if state is None:
            state = SessionState(user_id=user_id, remaining_team_ids=[], last_selected_id=None)
            db.add(state)
            db.commit()
            db.refresh(state)
            logger.bind(user_id=user_id).info("Created session state")
        return state

    def _owned_team_ids(self, db: Session, user_id: int) -> List[int]:
        rows = db.query(Team.id).filter(Team.user_id == user_id).order_by(Team.id).all()
        return [row[0] for row in rows]

    def status(self, db: Session, user_id: int) -> Tuple[int, Optional[Team]]:
        """Return the remaining count and the last drawn team, if any."""
        state = self.get_or_create_state(db, user_id)
        last_selected = None
        if state.last_selected_id is not None:
            last_selected = (
                db.query(Team)
                .filter(Team.id == state.last_selected_id, Team.user_id == user_id)
                .first()
            )
        return len(state.remaining_team_ids or []), last_selected

    def draw_next(self, db: Session, user_id: int) -> Tuple[Team, int]:
        """
        Pick one remaining team uniformly at random and remove it from the round.
        Returns the drawn team and the number of teams still remaining.
        """
        state = self.get_or_create_state(db, user_id)
        owned = set(self._owned_team_ids(db, user_id))
        remaining = [team_id for team_id in (state.remaining_team_ids or []) if team_id in owned]

        if not remaining:
            if state.remaining_team_ids:
                state.remaining_team_ids = []
                db.commit()
            raise RoundExhaustedError("No teams remaining. Reset to start again.")

        index = self.rng.randrange(len(remaining))
        selected_id = remaining.pop(index)

        state.remaining_team_ids = remaining
        state.last_selected_id = selected_id
        db.commit()

        team = db.query(Team).filter(Team.id == selected_id).first()
        logger.bind(user_id=user_id).info(
            f"Drew team {selected_id}, {len(remaining)} remaining"
        )
        return team, len(remaining)

    def reset_round(self, db: Session, user_id: int) -> int:
        """Put every owned team back into the round and clear the last draw."""
        state = self.get_or_create_state(db, user_id)
        state.remaining_team_ids = self._owned_team_ids(db, user_id)
        state.last_selected_id = None
        db.commit()
        logger.bind(user_id=user_id).info("Randomizer round reset")
        return len(state.remaining_team_ids)

    def add_team(self, db: Session, user_id: int, team_id: int) -> None:
        state = self.get_or_create_state(db, user_id)
        remaining = list(state.remaining_team_ids or [])
        if team_id not in remaining:
            remaining.append(team_id)
            state.remaining_team_ids = remaining
        db.commit()

    def purge_team(self, db: Session, user_id: int, team_id: int) -> None:
        """Remove a team from the round; does not commit."""
        state = db.query(SessionState).filter(SessionState.user_id == user_id).first()
        if state is None:
            return
        state.remaining_team_ids = [
            remaining_id for remaining_id in (state.remaining_team_ids or []) if remaining_id != team_id
        ]
        if state.last_selected_id == team_id:
            state.last_selected_id = None

    def clear(self, db: Session, user_id: int) -> None:
        """Delete the account's session state; does not commit."""
        state = db.query(SessionState).filter(SessionState.user_id == user_id).first()
        if state is not None:
            db.delete(state)


randomizer_service = RandomizerService()
