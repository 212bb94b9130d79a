# nextup/schemas/presentation.py
from typing import List
from pydantic import Field
from nextup.schemas.base import BaseSchema, TimestampMixin

# One day; longer durations are input errors
MAX_DURATION_SECONDS = 24 * 60 * 60


class PresentationCreate(BaseSchema):
    # Accept fractional seconds from clients; stored rounded.
    # Strict mode rejects booleans and numeric strings.
    presentation_seconds: float = Field(ge=0, le=MAX_DURATION_SECONDS, allow_inf_nan=False, strict=True)
    qa_seconds: float = Field(ge=0, le=MAX_DURATION_SECONDS, allow_inf_nan=False, strict=True)


class Presentation(TimestampMixin, BaseSchema):
    id: int
    team_id: int
    presentation_seconds: int
    qa_seconds: int


class PresentationResponse(BaseSchema):
    presentation: Presentation


class PresentationListResponse(BaseSchema):
    presentations: List[Presentation] = []
