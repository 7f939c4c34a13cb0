"""
Domain exceptions.

Raised by repositories and services, turned into HTTP responses by the
handlers registered in :mod:`app.api.errors`.
"""

from typing import Optional

INVALID_DATA_MESSAGE = "The given data was invalid"


class NotFoundError(Exception):
    """The requested id has no matching record."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationFailure(Exception):
    """Input failed one or more field-level rules.

    ``errors`` maps a field name to the list of messages for that field.
    """

    def __init__(self, errors: dict[str, list[str]]):
        super().__init__(INVALID_DATA_MESSAGE)
        self.message = INVALID_DATA_MESSAGE
        self.errors = errors

    @classmethod
    def single(cls, field: str, message: str) -> "ValidationFailure":
        return cls({field: [message]})


class PersistenceConflict(Exception):
    """A storage-level constraint rejected the write.

    ``field`` is the column the violated constraint is about, when it
    could be determined from the driver error.
    """

    def __init__(self, detail: str, field: Optional[str] = None):
        super().__init__(detail)
        self.detail = detail
        self.field = field
