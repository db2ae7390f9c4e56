"""SQLAlchemy implementation for animelog_auth persistence.

Provides:
- AuthBase: Declarative base for auth models
- UserCredentialModel: SQLAlchemy model for credentials
- UserCredentialRepositorySQLAlchemy: Repository implementation

The consuming application must create AuthBase.metadata alongside its
own tables (see animelog.presentation.api.app).
"""

from animelog_auth.persistence.sqlalchemy.base import AuthBase
from animelog_auth.persistence.sqlalchemy.models import UserCredentialModel
from animelog_auth.persistence.sqlalchemy.repositories import (
    UserCredentialRepositorySQLAlchemy,
)

__all__ = [
    "AuthBase",
    "UserCredentialModel",
    "UserCredentialRepositorySQLAlchemy",
]
