"""
Request / response schemas for the auth API.
"""

from __future__ import annotations

from pydantic import BaseModel, EmailStr, Field, TypeAdapter, ValidationError, field_validator

# bcrypt only looks at the first 72 bytes of a password.
MAX_PASSWORD_BYTES = 72

_email_adapter = TypeAdapter(EmailStr)


def _checked_email(value: str) -> str:
    """Validate as an email address but return the input unchanged."""
    try:
        _email_adapter.validate_python(value)
    except ValidationError as exc:
        raise ValueError("value is not a valid email address") from exc
    return value


class SignupRequest(BaseModel):
    email: str = Field(..., max_length=255)
    name: str = Field(..., min_length=3, max_length=128)
    password: str = Field(..., min_length=8, max_length=128)

    @field_validator("email")
    @classmethod
    def _email_is_valid(cls, value: str) -> str:
        return _checked_email(value)

    @field_validator("password")
    @classmethod
    def _password_fits_bcrypt(cls, value: str) -> str:
        if len(value.encode()) > MAX_PASSWORD_BYTES:
            raise ValueError(f"password must be at most {MAX_PASSWORD_BYTES} bytes")
        return value


class SigninRequest(BaseModel):
    email: str = Field(..., max_length=255)
    password: str = Field(..., min_length=1, max_length=128)

    @field_validator("email")
    @classmethod
    def _email_is_valid(cls, value: str) -> str:
        return _checked_email(value)


class UserProfile(BaseModel):
    """Public view of a user — never carries the password hash."""

    id: str
    email: str
    name: str


class AuthResponse(BaseModel):
    access_token: str
    user: UserProfile
