"""User service for business logic."""

from typing import Any

import structlog
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from clinic_api.config import Settings
from clinic_api.core.exceptions import BadRequestException
from clinic_api.core.security import create_user_token, get_password_hash, verify_password
from clinic_api.repositories.users import UserRepository
from clinic_api.schemas.users import UserCreate, UserFilters, UserResponse, UserUpdate

logger = structlog.get_logger(__name__)


def _public(user: dict[str, Any]) -> UserResponse:
    """Drop the password hash from a user row."""
    return UserResponse.model_validate({k: v for k, v in user.items() if k != "password"})


class UserService:
    """Service for user operations."""

    def __init__(self, repository: UserRepository, settings: Settings | None = None):
        """Initialize service with its repository and token settings."""
        self.repository = repository
        self.settings = settings

    @classmethod
    def from_session(cls, db: AsyncSession, settings: Settings | None = None) -> "UserService":
        """Build the service on top of a database session."""
        return cls(UserRepository(db), settings)

    async def create_user(self, user_data: UserCreate) -> int:
        """
        Register a new user with a hashed password.

        Raises:
            BadRequestException: If the email is already registered
        """
        if await self.repository.get_user_by_email(user_data.email):
            raise BadRequestException("Email is already registered")

        try:
            user_id = await self.repository.create_user(
                name=user_data.name,
                email=user_data.email,
                password_hash=get_password_hash(user_data.password),
                role=user_data.role.value,
            )
        except IntegrityError:
            await self.repository.db.rollback()
            raise BadRequestException("Email is already registered")

        logger.info("user_created", user_id=user_id, role=user_data.role.value)
        return user_id

    async def authenticate_user(self, email: str, password: str) -> str | None:
        """Return an access token for valid credentials, otherwise None."""
        user = await self.repository.get_user_by_email(email)
        if not user or not verify_password(password, user["password"]):
            logger.info("login_failed", email=email)
            return None

        return create_user_token(user["id"], user["role"], settings=self.settings)

    async def get_user_by_id(self, user_id: int) -> UserResponse | None:
        """Get user by ID."""
        user = await self.repository.get_user_by_id(user_id)
        return _public(user) if user else None

    async def search_users(self, filters: UserFilters) -> list[UserResponse]:
        """Search users with filters and pagination."""
        return [_public(user) for user in await self.repository.search_users(filters)]

    async def delete_user(self, user_id: int) -> None:
        """
        Delete a user.

        Raises:
            BadRequestException: If user not found
        """
        if not await self.repository.delete_user(user_id):
            raise BadRequestException("User not found")
        logger.info("user_deleted", user_id=user_id)

    async def update_user(self, user_id: int, user_data: UserUpdate) -> None:
        """
        Update a user's name, email or password.

        Only supplied fields change; a new password is hashed before storage.

        Raises:
            BadRequestException: If the user is missing or the email is taken
        """
        values = user_data.model_dump(exclude_none=True)
        if "password" in values:
            values["password"] = get_password_hash(values["password"])

        try:
            updated = await self.repository.update_user(user_id, values)
        except IntegrityError:
            await self.repository.db.rollback()
            logger.info("user_update_failed", user_id=user_id)
            raise BadRequestException("Error updating user")

        if not updated:
            raise BadRequestException("Error updating user")
        logger.info("user_updated", user_id=user_id, fields=sorted(values))
