"""
User repository.

Handles database operations for User model.
"""

from typing import Optional

from sqlmodel import select

from app.db.repositories.base import SQLModelRepository
from app.models.event import Event
from app.models.user import User


class UserRepository(SQLModelRepository[User]):
    """Repository for User database operations."""

    model = User
    conflict_fields = ("email",)

    def get_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email address.

        Args:
            email: User email (already normalized to lower case)

        Returns:
            User instance if found, None otherwise
        """
        statement = select(User).where(User.email == email)
        return self.session.exec(statement).first()

    def exists_by_email(self, email: str, exclude_id: Optional[int] = None) -> bool:
        """
        Check if a user with the given email exists.

        Args:
            email: Email to check
            exclude_id: Id of a user whose own email does not count

        Returns:
            True if another user holds the email, False otherwise
        """
        statement = select(User.id).where(User.email == email)
        if exclude_id is not None:
            statement = statement.where(User.id != exclude_id)
        return self.session.exec(statement).first() is not None

    def _detach_dependents(self, user: User) -> None:
        # Events outlive their creator
        events = self.session.exec(select(Event).where(Event.user_id == user.id)).all()
        for event in events:
            event.user_id = None
            self.session.add(event)
        # Write the detach before the user row is deleted
        self.session.flush()
