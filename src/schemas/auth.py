"""Authentication schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_serializer

CREATED_AT_FORMAT = "%Y-%m-%d %H:%M:%S"


class SignupRequest(BaseModel):
    """User registration request.

    Fields are optional here; presence, email format and password length are
    checked in order by the auth service so each failure gets its own message.
    """

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    email: str | None = None
    password: str | None = None


class LoginRequest(BaseModel):
    """User login request."""

    model_config = ConfigDict(frozen=True)

    email: str | None = None
    password: str | None = None


class UserResponse(BaseModel):
    """User information response."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    name: str
    email: str
    created_at: datetime

    @field_serializer("created_at", when_used="json")
    def serialize_created_at(self, value: datetime) -> str:
        return value.strftime(CREATED_AT_FORMAT)


class AuthResponse(BaseModel):
    """Successful signup or login."""

    success: bool = True
    message: str
    user: UserResponse


class MessageResponse(BaseModel):
    """Envelope for error responses."""

    success: bool = False
    message: str
