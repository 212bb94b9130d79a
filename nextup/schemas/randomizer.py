# nextup/schemas/randomizer.py
from typing import Optional
from nextup.schemas.base import BaseSchema
from nextup.schemas.team import Team


class StatusResponse(BaseSchema):
    remaining_count: int
    last_selected: Optional[Team] = None


class RandomizeResponse(BaseSchema):
    team: Team
    remaining_count: int


class ResetResponse(BaseSchema):
    message: str
    remaining_count: int
