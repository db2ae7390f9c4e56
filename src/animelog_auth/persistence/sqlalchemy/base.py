"""SQLAlchemy declarative base for animelog_auth models."""

from sqlalchemy.orm import DeclarativeBase


class AuthBase(DeclarativeBase):
    """Declarative base for animelog_auth models.

    Kept separate from the application Base so the auth tables stay
    decoupled from the anime domain schema.
    """
