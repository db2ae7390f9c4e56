"""Authentication router for user registration and login."""

import logging

from fastapi import APIRouter, HTTPException, status

from animelog.domain.user import (
    EmailAlreadyExistsError,
    InvalidEmailError,
    InvalidUserNameError,
    User,
)
from animelog.presentation.api.dependencies import AuthService, DBSession
from animelog.presentation.api.schemas.auth import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    UserResponse,
)
from animelog_auth import InvalidCredentialsError, WeakPasswordError

logger = logging.getLogger(__name__)

router = APIRouter()


def _create_auth_response(user: User, token: str) -> AuthResponse:
    return AuthResponse(
        user=UserResponse(id=user.id, email=user.email, name=user.name),
        token=token,
    )


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {"description": "User registered successfully"},
        400: {"description": "Email already registered or weak password"},
    },
)
async def register(
    request: RegisterRequest,
    auth_service: AuthService,
    session: DBSession,
) -> AuthResponse:
    """Create an account and return it together with an access token."""
    try:
        user, token = await auth_service.register(
            name=request.name,
            email=request.email,
            password=request.password,
        )
        await session.commit()
    except EmailAlreadyExistsError as e:
        await session.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="User with this email already exists",
        ) from e
    except WeakPasswordError as e:
        await session.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        ) from e
    except (InvalidEmailError, InvalidUserNameError) as e:
        await session.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e

    return _create_auth_response(user, token)


@router.post(
    "/login",
    summary="Authenticate user",
    responses={
        200: {"description": "Login successful"},
        401: {"description": "Invalid credentials"},
    },
)
async def login(
    request: LoginRequest,
    auth_service: AuthService,
    session: DBSession,
) -> AuthResponse:
    """Authenticate with email and password."""
    try:
        user, token = await auth_service.login(
            email=request.email,
            password=request.password,
        )
        await session.commit()
    except InvalidCredentialsError as e:
        await session.rollback()
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        ) from e

    return _create_auth_response(user, token)
