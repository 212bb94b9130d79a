# nextup/schemas/base.py
from datetime import datetime
from typing import Optional
from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """Base schema with common configuration; JSON keys are camelCase"""
    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class TimestampMixin(BaseSchema):
    """Creation timestamp for database models"""
    created_at: Optional[datetime] = None
