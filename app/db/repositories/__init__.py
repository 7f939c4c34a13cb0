"""Database repositories."""

from app.db.repositories.base import Repository, SQLModelRepository
from app.db.repositories.user import UserRepository
from app.db.repositories.event import EventRepository

__all__ = [
    "Repository",
    "SQLModelRepository",
    "UserRepository",
    "EventRepository",
]
