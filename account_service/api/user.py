"""User profile API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from account_service.api.dependencies import get_current_user, read_profile_update
from account_service.database import get_db
from account_service.models.user import User
from account_service.schemas.auth import MessageResponse
from account_service.schemas.user import (
    ProfileResponse,
    ProfileUpdate,
    ProfileUpdateResponse,
    UserResponse,
)
from account_service.services.users import delete_user, update_profile

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/user", tags=["user"])

PROFILE_UPDATE_BODY = {
    "requestBody": {
        "required": False,
        "content": {"application/json": {"schema": ProfileUpdate.model_json_schema()}},
    }
}


@router.get("/profile", response_model=ProfileResponse)
async def get_profile(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get the current user's profile."""
    return ProfileResponse(user=UserResponse.model_validate(current_user))


@router.put(
    "/profile", response_model=ProfileUpdateResponse, openapi_extra=PROFILE_UPDATE_BODY
)
async def put_profile(
    current_user: Annotated[User, Depends(get_current_user)],
    updates: Annotated[ProfileUpdate, Depends(read_profile_update)],
    db: Annotated[Session, Depends(get_db)],
):
    """Update the current user's name and phone."""
    try:
        user = update_profile(db, current_user, updates)
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Failed to update profile for user {current_user.id}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        ) from None

    return ProfileUpdateResponse(
        message="Profile updated successfully",
        user=UserResponse.model_validate(user),
    )


@router.delete("/profile", response_model=MessageResponse)
async def delete_profile(
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Delete the current user's account."""
    try:
        delete_user(db, current_user)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to delete user")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        ) from None

    return MessageResponse(message="Profile deleted successfully")
