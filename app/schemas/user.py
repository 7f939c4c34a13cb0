"""
User API schemas.

Pydantic models for user-related request/response validation.  The
create schema requires every mandatory field; the update schema accepts
any subset, but a field that is sent may not be ``null`` unless the
column itself is nullable.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from app.models.user import Gender

EMAIL_MAX_LENGTH = 255
PASSWORD_MIN_LENGTH = 6


def _normalize_email(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    value = value.lower()
    if len(value) > EMAIL_MAX_LENGTH:
        raise ValueError(f"The email may not be greater than {EMAIL_MAX_LENGTH} characters.")
    return value


def _check_date_of_birth(value: Optional[datetime.date]) -> Optional[datetime.date]:
    if value is not None and value > datetime.date.today():
        raise ValueError("The date of birth must be a date before or equal to today.")
    return value


# Request schemas
class UserCreate(BaseModel):
    """Schema for creating a user."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=PASSWORD_MIN_LENGTH,
                          description=f"Password (min {PASSWORD_MIN_LENGTH} characters)")
    phone: Optional[str] = Field(None, max_length=32)
    gender: Optional[Gender] = None
    date_of_birth: Optional[datetime.date] = None

    normalize_email = field_validator("email")(_normalize_email)
    check_date_of_birth = field_validator("date_of_birth")(_check_date_of_birth)


class UserUpdate(BaseModel):
    """Schema for updating a user (all fields optional)."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(None, min_length=PASSWORD_MIN_LENGTH)
    phone: Optional[str] = Field(None, max_length=32)
    gender: Optional[Gender] = None
    date_of_birth: Optional[datetime.date] = None

    normalize_email = field_validator("email")(_normalize_email)
    check_date_of_birth = field_validator("date_of_birth")(_check_date_of_birth)

    @field_validator("name", "email", "password")
    @classmethod
    def reject_null(cls, value, info):
        # Only runs for fields present in the payload
        if value is None:
            raise ValueError(f"The {info.field_name} field must not be null.")
        return value


# Response schemas
class UserResponse(BaseModel):
    """Schema for user data in API responses (no sensitive data)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    phone: Optional[str] = None
    gender: Optional[Gender] = None
    date_of_birth: Optional[datetime.date] = None
    email_verified_at: Optional[datetime.datetime] = None
    created_at: datetime.datetime
    updated_at: datetime.datetime
