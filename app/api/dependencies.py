"""
Shared API dependencies.

Binds the repository interfaces to their SQLModel implementations and
builds the services for each request.
"""

from typing import Annotated

from fastapi import Depends, Path
from sqlmodel import Session

from app.db.repositories.event import EventRepository
from app.db.repositories.user import UserRepository
from app.db.session import get_db
from app.db.types import ID_MAX
from app.services.event_service import EventService
from app.services.user_service import UserService

# Path ids outside the storable key range are rejected before any lookup
UserId = Annotated[int, Path(ge=1, le=ID_MAX, description="User id")]
EventId = Annotated[int, Path(ge=1, le=ID_MAX, description="Event id")]


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    return UserRepository(db)


def get_event_repository(db: Session = Depends(get_db)) -> EventRepository:
    return EventRepository(db)


def get_user_service(repository: UserRepository = Depends(get_user_repository)) -> UserService:
    return UserService(repository)


def get_event_service(repository: EventRepository = Depends(get_event_repository),
                      users: UserRepository = Depends(get_user_repository), ) -> EventService:
    return EventService(repository, users)
