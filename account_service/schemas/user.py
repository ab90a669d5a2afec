"""User profile schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ProfileUpdate(BaseModel):
    """Update the current user's profile.

    Only fields that are present and not null are applied.
    """

    name: str | None = Field(None, min_length=1, max_length=255)
    phone: str | None = Field(None, min_length=1, max_length=50)

    def changes(self) -> dict[str, str]:
        """Return the fields to write, keyed by column name."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class UserResponse(BaseModel):
    """User information response, without the password."""

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    id: int
    email: str
    name: str | None
    phone: str | None
    created_at: datetime
    updated_at: datetime


class ProfileResponse(BaseModel):
    """Profile read response."""

    user: UserResponse


class ProfileUpdateResponse(BaseModel):
    """Profile update response."""

    message: str
    user: UserResponse
