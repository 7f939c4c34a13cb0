"""Pydantic schemas for request/response validation."""

from app.schemas.user import UserCreate, UserResponse, UserUpdate
from app.schemas.event import EventCreate, EventResponse, EventUpdate

__all__ = [
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    "EventCreate",
    "EventUpdate",
    "EventResponse",
]
