"""FastAPI dependencies for authentication and database."""

import logging
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from account_service.config import Settings, get_settings
from account_service.database import get_db
from account_service.models.user import User
from account_service.schemas.auth import TokenClaims
from account_service.schemas.user import ProfileUpdate
from account_service.services.tokens import verify_token
from account_service.services.users import get_user

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def get_token_claims(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> TokenClaims:
    """Verify the bearer token and return its claims.

    A missing or malformed Authorization header is a 401; a token that fails
    verification is a 403.
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": "Bearer"},
        )

    claims = verify_token(credentials.credentials, settings.jwt_secret, settings.jwt_algorithm)
    if claims is None:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Invalid token")

    return claims


def get_current_user(
    claims: Annotated[TokenClaims, Depends(get_token_claims)],
    db: Annotated[Session, Depends(get_db)],
) -> User:
    """Get the user identified by the bearer token."""
    try:
        user = get_user(db, claims.id)
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Failed to load user {claims.id}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        ) from None

    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    return user


async def read_profile_update(request: Request) -> ProfileUpdate:
    """Parse the profile update body.

    Declared after the auth dependencies so the body is only read once the
    token has been checked. An empty body is an empty update.
    """
    try:
        body = await request.json() if await request.body() else {}
    except ValueError:
        raise RequestValidationError(
            [{"type": "json_invalid", "loc": ("body",), "msg": "JSON decode error"}]
        ) from None

    try:
        return ProfileUpdate.model_validate(body)
    except ValidationError as e:
        raise RequestValidationError(e.errors(), body=body) from None
