"""User model."""

from sqlalchemy import Column, Integer, String

from account_service.database import Base
from account_service.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """User account.

    The password is stored exactly as submitted at signup. Credentials are
    checked by comparing it for equality with the submitted value.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)
    name = Column(String(255), nullable=True)
    phone = Column(String(50), nullable=True)
