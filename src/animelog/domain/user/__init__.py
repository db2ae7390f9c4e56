"""User domain - manages user identity.

Design notes:
- User ID is a random UUID4 generated at creation (opaque, unpredictable)
- Email is normalized and unique, used as the login identifier
- Repository interface defined here, implementation in infrastructure
"""

from animelog.domain.user.aggregates import User
from animelog.domain.user.exceptions import (
    EmailAlreadyExistsError,
    InvalidEmailError,
    InvalidUserNameError,
)
from animelog.domain.user.repositories import UserRepository
from animelog.domain.user.value_objects import Email, UserName

__all__ = [
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "InvalidUserNameError",
    "User",
    "UserName",
    "UserRepository",
]
