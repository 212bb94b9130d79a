# nextup/models/session_state.py
from sqlalchemy import Column, Integer, ForeignKey, DateTime, JSON, func
from sqlalchemy.orm import relationship

from nextup.db.session import Base


class SessionState(Base):
    """Randomizer state for one account: teams not yet drawn this round."""
    __tablename__ = "session_states"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, unique=True, index=True)
    # JSON columns are not change-tracked in place; always assign a new list
    remaining_team_ids = Column(JSON, nullable=False, default=list)
    last_selected_id = Column(Integer, nullable=True)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    # Relationships
    user = relationship("User", back_populates="session_state")
