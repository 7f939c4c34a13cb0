"""
Exception handlers.

Maps domain exceptions and request validation errors to JSON responses:

- ``NotFoundError``       -> 404 ``{"message": ...}``
- ``ValidationFailure``   -> 422 ``{"message": ..., "errors": {field: [...]}}``
- ``PersistenceConflict`` -> 422, for conflicts no service translated
- ``RequestValidationError`` -> 422 with the same shape as ``ValidationFailure``
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.exceptions import INVALID_DATA_MESSAGE, NotFoundError, PersistenceConflict, ValidationFailure

logger = logging.getLogger(__name__)


def _field_name(error: dict) -> str:
    # ("body", "email") -> "email"; ("path", "user_id") -> "user_id"
    loc = error["loc"]
    if error["type"] == "json_invalid" or len(loc) < 2:
        return str(loc[0])
    return ".".join(str(part) for part in loc[1:])


def _message(error: dict, field: str) -> str:
    label = field.rsplit(".", 1)[-1].replace("_", " ")
    if error["type"] == "missing":
        return f"The {label} field is required."
    if error["type"] == "value_error" and "error" in error.get("ctx", {}):
        return str(error["ctx"]["error"])
    return error["msg"]


def format_validation_errors(errors) -> dict[str, list[str]]:
    """Group pydantic errors by field name."""
    grouped: dict[str, list[str]] = {}
    for error in errors:
        field = _field_name(error)
        grouped.setdefault(field, []).append(_message(error, field))
    return grouped


def _invalid_response(errors: dict[str, list[str]]) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                        content={"message": INVALID_DATA_MESSAGE, "errors": errors})


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"message": exc.message})


async def validation_failure_handler(request: Request, exc: ValidationFailure) -> JSONResponse:
    logger.info("%s %s rejected: %s", request.method, request.url.path, exc.errors)
    return _invalid_response(exc.errors)


async def persistence_conflict_handler(request: Request, exc: PersistenceConflict) -> JSONResponse:
    logger.warning("%s %s hit an untranslated conflict: %s", request.method, request.url.path, exc.detail)
    field = exc.field or "id"
    return _invalid_response({field: [f"The {field.replace('_', ' ')} is invalid."]})


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = format_validation_errors(exc.errors())
    logger.info("%s %s rejected: %s", request.method, request.url.path, errors)
    return _invalid_response(errors)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("%s %s failed", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"message": "Server Error"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(ValidationFailure, validation_failure_handler)
    app.add_exception_handler(PersistenceConflict, persistence_conflict_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
