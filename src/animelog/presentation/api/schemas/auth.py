"""Authentication schemas for request/response models."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class RegisterRequest(BaseModel):
    """Request schema for user registration.

    Password strength is checked by the password service so that a weak
    password is reported with the rule it broke.
    """

    name: str = Field(..., min_length=2, max_length=50)
    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(..., description="8-100 characters, mixed classes")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Shinji",
                "email": "user@example.com",
                "password": "Secure$Pass1",
            },
        },
    )


class LoginRequest(BaseModel):
    """Request schema for user login."""

    email: EmailStr
    password: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "password": "Secure$Pass1",
            },
        },
    )


class UserResponse(BaseModel):
    id: UUID
    email: str
    name: str

    model_config = ConfigDict(from_attributes=True)


class AuthResponse(BaseModel):
    """Response for successful registration or login."""

    user: UserResponse
    token: str
