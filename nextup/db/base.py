# nextup/db/base.py
from nextup.db.session import Base

# Import all models so they are registered on Base.metadata
from nextup.models.user import User
from nextup.models.team import Team
from nextup.models.session_state import SessionState
from nextup.models.presentation import Presentation
