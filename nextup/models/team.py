# nextup/models/team.py
from sqlalchemy import Column, Integer, String, Text, ForeignKey, DateTime, JSON, func
from sqlalchemy.orm import relationship

from nextup.db.session import Base


class Team(Base):
    __tablename__ = "teams"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    topic = Column(String, nullable=False, default="TBD")
    # Ordered list of member names
    members = Column(JSON, nullable=False, default=list)
    notes = Column(Text, nullable=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    # Relationships
    user = relationship("User", back_populates="teams")
    presentations = relationship(
        "Presentation",
        back_populates="team",
        cascade="all, delete-orphan",
        order_by="Presentation.id",
    )
