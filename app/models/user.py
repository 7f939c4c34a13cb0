"""
User database model.

Defines the users table.  The model is a plain data holder: all reads
and writes go through :class:`app.db.repositories.user.UserRepository`.
"""

import datetime
import enum
from typing import Optional

from sqlalchemy import func
from sqlmodel import Field, SQLModel

from app.db.types import UTCDateTime, utcnow


class Gender(str, enum.Enum):
    """Accepted values for :attr:`User.gender`."""

    male = "male"
    female = "female"
    other = "other"


class User(SQLModel, table=True):
    """A registered user.

    ``hashed_password`` is the only form in which the password is stored;
    it is never part of an API response.
    """
    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255, nullable=False)
    email: str = Field(unique=True, index=True, max_length=255, nullable=False)
    hashed_password: str = Field(nullable=False)

    # Profile
    phone: Optional[str] = Field(default=None, max_length=32)
    gender: Optional[Gender] = Field(default=None)
    date_of_birth: Optional[datetime.date] = Field(default=None)

    email_verified_at: Optional[datetime.datetime] = Field(default=None, sa_type=UTCDateTime)

    # Timestamps (aware UTC)
    created_at: datetime.datetime = Field(default_factory=utcnow, sa_type=UTCDateTime, nullable=False,
                                          sa_column_kwargs={"server_default": func.now()})
    updated_at: datetime.datetime = Field(default_factory=utcnow, sa_type=UTCDateTime, nullable=False,
                                          sa_column_kwargs={"server_default": func.now()})
