"""Pydantic schemas for API requests and responses."""

from account_service.schemas.auth import MessageResponse, SigninInput, SignupInput, TokenClaims
from account_service.schemas.user import (
    ProfileResponse,
    ProfileUpdate,
    ProfileUpdateResponse,
    UserResponse,
)

__all__ = [
    "SignupInput",
    "SigninInput",
    "TokenClaims",
    "MessageResponse",
    "ProfileUpdate",
    "UserResponse",
    "ProfileResponse",
    "ProfileUpdateResponse",
]
