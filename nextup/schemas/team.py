# nextup/schemas/team.py
from typing import Optional, List, Union
from pydantic import Field, field_validator
from nextup.schemas.base import BaseSchema, TimestampMixin
from nextup.schemas.presentation import Presentation


class TeamCreate(BaseSchema):
    name: str = Field(min_length=1)
    # A list of names, or one comma-separated string
    members: Union[List[str], str] = []
    topic: Optional[str] = None

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("members")
    @classmethod
    def split_members(cls, value) -> List[str]:
        if isinstance(value, str):
            value = value.split(",")
        return [member.strip() for member in value if member.strip()]

    @field_validator("topic")
    @classmethod
    def blank_topic_is_none(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            return None
        return value.strip() if value else value


class TeamNotesUpdate(BaseSchema):
    notes: Optional[str] = None


class Team(TimestampMixin, BaseSchema):
    id: int
    name: str
    topic: str
    members: List[str] = []
    notes: Optional[str] = None


class TeamWithPresentations(Team):
    presentations: List[Presentation] = []


class TeamResponse(BaseSchema):
    team: Team


class TeamListResponse(BaseSchema):
    teams: List[TeamWithPresentations] = []
