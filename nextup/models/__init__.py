# Import models here so they can be imported from nextup.models
from nextup.models.user import User
from nextup.models.team import Team
from nextup.models.session_state import SessionState
from nextup.models.presentation import Presentation
