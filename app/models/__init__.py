"""SQLModel database models."""

from app.models.user import Gender, User
from app.models.event import Event

__all__ = [
    "Gender",
    "User",
    "Event",
]
