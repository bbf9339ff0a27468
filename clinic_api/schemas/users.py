"""User schemas for request/response validation."""

from datetime import datetime

from pydantic import EmailStr, Field

from clinic_api.core.access import Role
from clinic_api.schemas.common import CamelModel


class UserBase(CamelModel):
    """Base user schema with common fields."""

    name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    role: Role


class UserCreate(UserBase):
    """Schema for registering a new user."""

    password: str = Field(
        ..., min_length=6, description="Password must be at least 6 characters long"
    )


class UserUpdate(CamelModel):
    """Schema for updating a user; omitted fields keep their value."""

    name: str | None = Field(None, min_length=1, max_length=200)
    email: EmailStr | None = None
    password: str | None = Field(
        None, min_length=6, description="Password must be at least 6 characters long"
    )


class UserLogin(CamelModel):
    """Schema for logging in."""

    email: EmailStr
    password: str


class UserResponse(UserBase):
    """User schema for API responses; never carries the password."""

    id: int
    created_at: datetime | None = None


class UserCreatedResponse(CamelModel):
    """Response returned after registration."""

    user_id: int
    message: str = "User created successfully"


class TokenResponse(CamelModel):
    """Access token returned by login."""

    token: str


class UserFilters(CamelModel):
    """Schema for user search filtering."""

    role: Role | None = None
    name: str | None = None
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)
