"""Pydantic schemas for Profile API."""

from pydantic import BaseModel, ConfigDict, Field


class ProfileWrite(BaseModel):
    """Request body for creating or replacing a Profile.

    ``id`` is the identity provider's subject ID.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str | None = Field(None, max_length=255)
    email: str = Field(..., max_length=255)
    name: str = Field(..., max_length=255)
    avatar_url: str | None = Field(None, alias="avatarUrl", max_length=500)


class ProfileResponse(BaseModel):
    """Schema for Profile response."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "00uhjfrwdWAQvD8JV4x6",
                "email": "frank@example.com",
                "name": "Frank Martinez",
                "avatarUrl": "https://s3.amazonaws.com/uifaces/faces/twitter/hermanobrother/128.jpg",
            }
        },
    )

    id: str
    email: str
    name: str
    avatar_url: str | None = Field(None, alias="avatarUrl")


class ProfileMutationResponse(BaseModel):
    """Result of a create, update or delete."""

    message: str
    profile: ProfileResponse
