"""Authentication service for user registration and login."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from animelog.domain.user import EmailAlreadyExistsError, User
from animelog_auth import (
    InvalidCredentialsError,
    JWTService,
    PasswordHashingService,
    TokenPayload,
)
from animelog_auth.repositories import UserCredentialRepository

if TYPE_CHECKING:
    from animelog.domain.user import UserRepository

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Application service for user authentication.

    Bridges the animelog_auth infrastructure (password hashing, JWT tokens)
    and the User aggregate:
    - User registration
    - Login with password
    - Token verification for protected routes
    """

    def __init__(
        self,
        user_repository: UserRepository,
        credential_repository: UserCredentialRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._user_repo = user_repository
        self._credential_repo = credential_repository
        self._password_service = password_service
        self._jwt_service = jwt_service

    def _create_access_token(self, user: User) -> str:
        return self._jwt_service.create_access_token(
            user_id=user.id,
            email=user.email,
        )

    async def register(
        self,
        name: str,
        email: str,
        password: str,
    ) -> tuple[User, str]:
        # Validate before touching the database
        user = User.create(email, name)
        password_hash = self._password_service.hash(password)

        existing_user = await self._user_repo.find_by_email(user.email)
        if existing_user is not None:
            raise EmailAlreadyExistsError(user.email)

        await self._user_repo.save(user)
        await self._credential_repo.save(
            user_id=user.id,
            password_hash=password_hash,
        )

        logger.info("User registered: %s", user.email)
        return user, self._create_access_token(user)

    async def login(
        self,
        email: str,
        password: str,
    ) -> tuple[User, str]:
        user = await self._user_repo.find_by_email(email)
        if user is None:
            raise InvalidCredentialsError

        credential = await self._credential_repo.find_by_user_id(user.id)
        if credential is None:
            raise InvalidCredentialsError

        if not self._password_service.verify(password, credential.password_hash):
            raise InvalidCredentialsError

        await self._credential_repo.update_last_login(user.id)

        logger.info("User logged in: %s", user.email)
        return user, self._create_access_token(user)

    def verify_token(self, token: str) -> TokenPayload:
        return self._jwt_service.verify_token(token)
