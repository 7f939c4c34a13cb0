"""
User request validation.

Structural rules live in :mod:`app.schemas.user`; this module adds the
rules that need the datastore (email uniqueness) and turns a parsed
payload into the attribute dict the repository persists.
"""

from typing import Any

from app.core.exceptions import ValidationFailure
from app.core.security import get_password_hash
from app.db.repositories.user import UserRepository
from app.models.user import User
from app.schemas.user import UserCreate, UserUpdate

EMAIL_TAKEN_MESSAGE = "The email has already been taken."


class UserValidator:
    """Validates user payloads for create and update."""

    def __init__(self, repository: UserRepository):
        self.repository = repository

    def validate_create(self, data: UserCreate) -> dict[str, Any]:
        """
        Validate a create payload.

        Returns:
            Attributes for :meth:`UserRepository.create`, password hashed

        Raises:
            ValidationFailure: If the email is already taken
        """
        errors: dict[str, list[str]] = {}
        if self.repository.exists_by_email(data.email):
            errors.setdefault("email", []).append(EMAIL_TAKEN_MESSAGE)
        if errors:
            raise ValidationFailure(errors)

        attributes = data.model_dump(exclude={"password"})
        attributes["hashed_password"] = get_password_hash(data.password)
        return attributes

    def validate_update(self, user: User, data: UserUpdate) -> dict[str, Any]:
        """
        Validate a partial update of ``user``.

        Only fields present in the payload are returned.  Keeping the
        current email is not a conflict.

        Raises:
            ValidationFailure: If the email belongs to another user
        """
        attributes = data.model_dump(exclude_unset=True)

        errors: dict[str, list[str]] = {}
        email = attributes.get("email")
        if email is not None and self.repository.exists_by_email(email, exclude_id=user.id):
            errors.setdefault("email", []).append(EMAIL_TAKEN_MESSAGE)
        if errors:
            raise ValidationFailure(errors)

        if "password" in attributes:
            attributes["hashed_password"] = get_password_hash(attributes.pop("password"))
        return attributes
