"""Event repository."""

from sqlmodel import select

from app.db.repositories.base import SQLModelRepository
from app.models.event import Event


class EventRepository(SQLModelRepository[Event]):
    """Repository for Event database operations."""

    model = Event
    conflict_fields = ("user_id",)

    def get_by_user(self, user_id: int) -> list[Event]:
        """Get the events created by a user, oldest first."""
        statement = select(Event).where(Event.user_id == user_id).order_by(Event.id)
        return list(self.session.exec(statement).all())
