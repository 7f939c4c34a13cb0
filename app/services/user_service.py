"""
User service.

Orchestrates validation and persistence for user CRUD.
"""

import logging

from app.core.exceptions import NotFoundError, PersistenceConflict, ValidationFailure
from app.db.repositories.user import UserRepository
from app.models.user import User
from app.schemas.user import UserCreate, UserUpdate
from app.validators.user import EMAIL_TAKEN_MESSAGE, UserValidator

logger = logging.getLogger(__name__)


class UserService:
    """Service for user-related business logic."""

    NOT_FOUND = "User not found"

    def __init__(self, repository: UserRepository):
        """
        Initialize service with the user repository.

        Args:
            repository: Repository the service reads and writes through
        """
        self.repository = repository
        self.validator = UserValidator(repository)

    def get_all(self) -> list[User]:
        return self.repository.get_all()

    def get(self, user_id: int) -> User:
        """
        Get user by ID.

        Raises:
            NotFoundError: If no user has this id
        """
        user = self.repository.get_by_id(user_id)
        if user is None:
            logger.info("User %s not found", user_id)
            raise NotFoundError(self.NOT_FOUND)
        return user

    def create(self, data: UserCreate) -> User:
        """
        Create a new user.

        Raises:
            ValidationFailure: If the email is taken, including when a
                concurrent request wins the race for it
        """
        attributes = self.validator.validate_create(data)
        try:
            user = self.repository.create(attributes)
        except PersistenceConflict as exc:
            raise self._conflict_failure(exc) from exc

        logger.info("Created user %s", user.id)
        return user

    def update(self, user_id: int, data: UserUpdate) -> User:
        """
        Apply a partial update to a user.

        Raises:
            NotFoundError: If no user has this id
            ValidationFailure: If the payload breaks a rule
        """
        user = self.get(user_id)
        attributes = self.validator.validate_update(user, data)
        try:
            updated = self.repository.update(user, attributes)
        except PersistenceConflict as exc:
            raise self._conflict_failure(exc) from exc

        if not updated:
            raise NotFoundError(self.NOT_FOUND)

        logger.info("Updated user %s (%s)", user.id, ", ".join(sorted(attributes)) or "no fields")
        return user

    def delete(self, user_id: int) -> None:
        user = self.get(user_id)
        if not self.repository.delete(user):
            raise NotFoundError(self.NOT_FOUND)
        logger.info("Deleted user %s", user_id)

    @staticmethod
    def _conflict_failure(exc: PersistenceConflict) -> ValidationFailure:
        logger.warning("User write rejected by the database: %s", exc.detail)
        if exc.field in (None, "email"):
            return ValidationFailure.single("email", EMAIL_TAKEN_MESSAGE)
        return ValidationFailure.single(exc.field, f"The {exc.field.replace('_', ' ')} is invalid.")
