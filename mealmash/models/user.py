"""User model."""

from sqlalchemy import Boolean, Column, Integer, String

from mealmash.database import Base
from mealmash.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """Owner of pantry, shopping list and meal plan rows.

    Accounts live in the hosted auth service; this row only mirrors the identity.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    name = Column(String(255), nullable=True)
    is_admin = Column(Boolean, default=False, nullable=False)
