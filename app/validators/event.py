"""
Event request validation.

Checks that the referenced creator exists and that ``end_time`` does not
precede ``start_time`` once the update is merged with the stored values.
"""

from typing import Any

from app.core.exceptions import ValidationFailure
from app.db.repositories.base import Repository
from app.models.event import Event
from app.models.user import User
from app.schemas.event import END_BEFORE_START_MESSAGE, EventCreate, EventUpdate

UNKNOWN_USER_MESSAGE = "The selected user id is invalid."


class EventValidator:
    """Validates event payloads for create and update."""

    def __init__(self, users: Repository[User]):
        self.users = users

    def validate_create(self, data: EventCreate) -> dict[str, Any]:
        attributes = data.model_dump()

        errors: dict[str, list[str]] = {}
        self._check_user(attributes.get("user_id"), errors)
        if errors:
            raise ValidationFailure(errors)
        return attributes

    def validate_update(self, event: Event, data: EventUpdate) -> dict[str, Any]:
        attributes = data.model_dump(exclude_unset=True)

        errors: dict[str, list[str]] = {}
        self._check_user(attributes.get("user_id"), errors)

        start_time = attributes.get("start_time", event.start_time)
        end_time = attributes.get("end_time", event.end_time)
        if end_time < start_time:
            errors.setdefault("end_time", []).append(END_BEFORE_START_MESSAGE)

        if errors:
            raise ValidationFailure(errors)
        return attributes

    def _check_user(self, user_id, errors: dict[str, list[str]]) -> None:
        if user_id is not None and self.users.get_by_id(user_id) is None:
            errors.setdefault("user_id", []).append(UNKNOWN_USER_MESSAGE)
