# nextup/models/presentation.py
from sqlalchemy import Column, Integer, ForeignKey, DateTime, func
from sqlalchemy.orm import relationship

from nextup.db.session import Base


class Presentation(Base):
    __tablename__ = "presentations"

    id = Column(Integer, primary_key=True, index=True)
    team_id = Column(Integer, ForeignKey("teams.id"), nullable=False, index=True)
    presentation_seconds = Column(Integer, nullable=False, default=0)
    qa_seconds = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, server_default=func.now())

    # Relationships
    team = relationship("Team", back_populates="presentations")
