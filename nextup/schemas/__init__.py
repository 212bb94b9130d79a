# Import schemas in dependency order to avoid circular imports
from nextup.schemas.base import BaseSchema, TimestampMixin
from nextup.schemas.user import UserCreate, UserLogin, User, AuthResponse
from nextup.schemas.presentation import (
    PresentationCreate, Presentation, PresentationResponse, PresentationListResponse
)
from nextup.schemas.team import (
    TeamCreate, TeamNotesUpdate, Team, TeamWithPresentations, TeamResponse, TeamListResponse
)
from nextup.schemas.randomizer import StatusResponse, RandomizeResponse, ResetResponse
