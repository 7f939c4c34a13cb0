"""
Event service.

Orchestrates validation and persistence for event CRUD.
"""

import logging

from app.core.exceptions import NotFoundError, PersistenceConflict, ValidationFailure
from app.db.repositories.event import EventRepository
from app.db.repositories.user import UserRepository
from app.models.event import Event
from app.schemas.event import EventCreate, EventUpdate
from app.validators.event import UNKNOWN_USER_MESSAGE, EventValidator

logger = logging.getLogger(__name__)


class EventService:
    """Service for event-related business logic."""

    NOT_FOUND = "Event not found"

    def __init__(self, repository: EventRepository, users: UserRepository):
        self.repository = repository
        self.validator = EventValidator(users)

    def get_all(self) -> list[Event]:
        return self.repository.get_all()

    def get(self, event_id: int) -> Event:
        event = self.repository.get_by_id(event_id)
        if event is None:
            logger.info("Event %s not found", event_id)
            raise NotFoundError(self.NOT_FOUND)
        return event

    def create(self, data: EventCreate) -> Event:
        attributes = self.validator.validate_create(data)
        try:
            event = self.repository.create(attributes)
        except PersistenceConflict as exc:
            raise self._conflict_failure(exc) from exc

        logger.info("Created event %s", event.id)
        return event

    def update(self, event_id: int, data: EventUpdate) -> Event:
        event = self.get(event_id)
        attributes = self.validator.validate_update(event, data)
        try:
            updated = self.repository.update(event, attributes)
        except PersistenceConflict as exc:
            raise self._conflict_failure(exc) from exc

        if not updated:
            raise NotFoundError(self.NOT_FOUND)

        logger.info("Updated event %s (%s)", event.id, ", ".join(sorted(attributes)) or "no fields")
        return event

    def delete(self, event_id: int) -> None:
        event = self.get(event_id)
        if not self.repository.delete(event):
            raise NotFoundError(self.NOT_FOUND)
        logger.info("Deleted event %s", event_id)

    @staticmethod
    def _conflict_failure(exc: PersistenceConflict) -> ValidationFailure:
        # The only constraint an event write can break is the creator reference
        logger.warning("Event write rejected by the database: %s", exc.detail)
        return ValidationFailure.single(exc.field or "user_id", UNKNOWN_USER_MESSAGE)
