"""Authentication services.

Provides password hashing and JWT token management.
"""

from animelog_auth.services.jwt_service import JWTService
from animelog_auth.services.password_service import PasswordHashingService

__all__ = [
    "PasswordHashingService",
    "JWTService",
]
