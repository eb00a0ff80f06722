"""Response bodies shared by the profile and cart routes, for the OpenAPI docs."""

from typing import Any

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Envelope used for auth, validation and rate limit errors."""

    error_code: str
    message: str
    details: Any | None = None


class MessageResponse(BaseModel):
    """``{"message": ...}`` body of the profile and cart failures."""

    message: str


class ProfileNotFoundResponse(BaseModel):
    """Body of a lookup that found no profile."""

    error: str = "ProfileNotFound"


class MessageErrorResponse(BaseModel):
    """Failure naming the profile, with the underlying storage error."""

    message: str
    error: str
