"""Request validators backed by the datastore."""

from app.validators.user import UserValidator
from app.validators.event import EventValidator

__all__ = [
    "UserValidator",
    "EventValidator",
]
