"""
Event API schemas.

Timestamps are aware UTC; input without an offset is taken to be UTC.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from app.db.types import ID_MAX, as_utc

END_BEFORE_START_MESSAGE = "The end time must be a date after or equal to start time."


def _to_utc(value: Optional[datetime.datetime]) -> Optional[datetime.datetime]:
    return as_utc(value) if value is not None else None


# Request schemas
class EventCreate(BaseModel):
    """Schema for creating an event."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    location: Optional[str] = Field(None, max_length=255)
    start_time: datetime.datetime
    end_time: datetime.datetime
    user_id: Optional[int] = Field(None, ge=1, le=ID_MAX, description="Creator of the event")

    @field_validator("start_time")
    @classmethod
    def normalize_start_time(cls, value):
        return _to_utc(value)

    @field_validator("end_time")
    @classmethod
    def check_end_time(cls, value, info: ValidationInfo):
        value = _to_utc(value)
        start_time = info.data.get("start_time")
        if start_time is not None and value < start_time:
            raise ValueError(END_BEFORE_START_MESSAGE)
        return value


class EventUpdate(BaseModel):
    """Schema for updating an event (all fields optional).

    When only one of ``start_time``/``end_time`` is sent, the ordering
    against the stored value is checked by :class:`app.validators.event.EventValidator`.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    location: Optional[str] = Field(None, max_length=255)
    start_time: Optional[datetime.datetime] = None
    end_time: Optional[datetime.datetime] = None
    user_id: Optional[int] = Field(None, ge=1, le=ID_MAX)

    @field_validator("title", "start_time", "end_time")
    @classmethod
    def reject_null(cls, value, info: ValidationInfo):
        if value is None:
            raise ValueError(f"The {info.field_name.replace('_', ' ')} field must not be null.")
        return value

    @field_validator("start_time")
    @classmethod
    def normalize_start_time(cls, value):
        return _to_utc(value)

    @field_validator("end_time")
    @classmethod
    def check_end_time(cls, value, info: ValidationInfo):
        value = _to_utc(value)
        start_time = info.data.get("start_time")
        if value is not None and start_time is not None and value < start_time:
            raise ValueError(END_BEFORE_START_MESSAGE)
        return value


# Response schemas
class EventResponse(BaseModel):
    """Schema for event data in API responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: Optional[str] = None
    location: Optional[str] = None
    start_time: datetime.datetime
    end_time: datetime.datetime
    user_id: Optional[int] = None
    created_at: datetime.datetime
    updated_at: datetime.datetime
