"""User persistence operations."""

import logging

from sqlalchemy.orm import Session

from account_service.models.user import User
from account_service.schemas.auth import SignupInput
from account_service.schemas.user import ProfileUpdate

logger = logging.getLogger(__name__)


def create_user(db: Session, data: SignupInput) -> User:
    """Create a new user.

    Raises IntegrityError when the email is already taken.
    """
    user = User(email=data.email, password=data.password, name=data.name)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def find_by_credentials(db: Session, email: str, password: str) -> User | None:
    """Find the user whose email and password both match exactly."""
    return db.query(User).filter(User.email == email, User.password == password).first()


def get_user(db: Session, user_id: int) -> User | None:
    """Get a user by id."""
    return db.query(User).filter(User.id == user_id).first()


def update_profile(db: Session, user: User, updates: ProfileUpdate) -> User:
    """Apply the fields present in the update to the user.

    Nothing is written when the update carries no fields.
    """
    changes = updates.changes()
    if not changes:
        return user

    for field, value in changes.items():
        setattr(user, field, value)
    db.commit()
    db.refresh(user)
    logger.info(f"Updated profile fields {sorted(changes)} for user {user.id}")
    return user


def delete_user(db: Session, user: User) -> None:
    """Delete a user."""
    user_id = user.id
    db.delete(user)
    db.commit()
    logger.info(f"Deleted user {user_id}")
