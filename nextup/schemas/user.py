# nextup/schemas/user.py
from pydantic import EmailStr, Field, field_validator
from nextup.schemas.base import BaseSchema, TimestampMixin


class UserCreate(BaseSchema):
    email: EmailStr
    password: str = Field(min_length=1)

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, value: str) -> str:
        return value.lower()


class UserLogin(BaseSchema):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value):
        return value.strip().lower() if isinstance(value, str) else value


class User(TimestampMixin, BaseSchema):
    id: int
    email: str


class AuthResponse(BaseSchema):
    token: str
    user: User
