"""
Event database model.

Defines the events table.  An event may reference the user that created
it; deleting that user detaches the event instead of deleting it.
"""

import datetime
from typing import Optional

from sqlalchemy import Text, func
from sqlmodel import Field, SQLModel

from app.db.types import UTCDateTime, utcnow


class Event(SQLModel, table=True):
    """A scheduled event with a start and an end time."""

    __tablename__ = "events"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=255, nullable=False)
    description: Optional[str] = Field(default=None, sa_type=Text)
    location: Optional[str] = Field(default=None, max_length=255)

    start_time: datetime.datetime = Field(sa_type=UTCDateTime, nullable=False, index=True)
    end_time: datetime.datetime = Field(sa_type=UTCDateTime, nullable=False)

    user_id: Optional[int] = Field(default=None, foreign_key="users.id", ondelete="SET NULL", index=True)

    # Timestamps (aware UTC)
    created_at: datetime.datetime = Field(default_factory=utcnow, sa_type=UTCDateTime, nullable=False,
                                          sa_column_kwargs={"server_default": func.now()})
    updated_at: datetime.datetime = Field(default_factory=utcnow, sa_type=UTCDateTime, nullable=False,
                                          sa_column_kwargs={"server_default": func.now()})
