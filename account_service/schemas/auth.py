"""Authentication schemas."""

from pydantic import BaseModel, EmailStr, Field, StrictInt


class SignupInput(BaseModel):
    """User signup request."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=6, max_length=255)
    name: str | None = Field(None, min_length=1, max_length=255)


class SigninInput(BaseModel):
    """User signin request."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=1, max_length=255)


class TokenClaims(BaseModel):
    """Claims carried inside a session token."""

    id: StrictInt


class MessageResponse(BaseModel):
    """Plain message response."""

    message: str
