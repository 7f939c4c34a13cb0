"""Business logic services."""

from app.services.user_service import UserService
from app.services.event_service import EventService

__all__ = [
    "UserService",
    "EventService",
]
