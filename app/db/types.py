"""
Column types shared by the models.

Timestamps are handled as timezone-aware UTC throughout.  SQLite has no
offset-aware storage, so values are written there as UTC without an
offset and get the UTC offset back when read.
"""

import datetime

from sqlalchemy import DateTime
from sqlalchemy.types import TypeDecorator

# Largest value an INTEGER/BIGINT primary key can hold
ID_MAX = 2 ** 63 - 1


def utcnow() -> datetime.datetime:
    """Current time as an aware UTC datetime."""
    return datetime.datetime.now(datetime.timezone.utc)


def as_utc(value: datetime.datetime) -> datetime.datetime:
    """Convert ``value`` to aware UTC; naive values are taken to be UTC already."""
    if value.tzinfo is None:
        return value.replace(tzinfo=datetime.timezone.utc)
    return value.astimezone(datetime.timezone.utc)


class UTCDateTime(TypeDecorator):
    """``DateTime(timezone=True)`` that always returns aware UTC values."""

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return value
        value = as_utc(value)
        if dialect.name == "sqlite":
            return value.replace(tzinfo=None)
        return value

    def process_result_value(self, value, dialect):
        if value is None:
            return value
        return as_utc(value)
