"""Authentication API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse
from jose import JOSEError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from account_service.api.dependencies import get_token_claims
from account_service.config import Settings, get_settings
from account_service.database import get_db
from account_service.models.user import User
from account_service.schemas.auth import MessageResponse, SigninInput, SignupInput, TokenClaims
from account_service.services.tokens import issue_token
from account_service.services.users import create_user, find_by_credentials

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


def token_response(user: User, settings: Settings) -> PlainTextResponse:
    """Issue a token for the user and return it as the plain text body."""
    try:
        token = issue_token(user.id, settings.jwt_secret, settings.jwt_algorithm)
    except JOSEError:
        logger.exception(f"Failed to sign token for user {user.id}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        ) from None
    return PlainTextResponse(token)


@router.post("/signup", response_class=PlainTextResponse)
async def signup(
    user_data: SignupInput,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
):
    """Create an account and return a session token."""
    try:
        user = create_user(db, user_data)
    except IntegrityError:
        db.rollback()
        logger.info("Signup rejected: email already registered")
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="User with this email already exists",
        ) from None
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to create user")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        ) from None

    logger.info(f"Created user {user.id}")
    return token_response(user, settings)


@router.post("/signin", response_class=PlainTextResponse)
async def signin(
    credentials: SigninInput,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
):
    """Sign in with email and password and return a session token."""
    try:
        user = find_by_credentials(db, credentials.email, credentials.password)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to look up credentials")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        ) from None

    if not user:
        logger.info("Signin rejected: incorrect credentials")
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Incorrect credentials")

    return token_response(user, settings)


@router.post("/logout", response_model=MessageResponse)
async def logout(
    claims: Annotated[TokenClaims, Depends(get_token_claims)],
):
    """Logout (client should discard token)."""
    return MessageResponse(message="Logged out successfully")
