"""User repository."""

from typing import Any

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from clinic_api.models.users import users
from clinic_api.schemas.users import UserFilters


class UserRepository:
    """Repository for user rows.

    Rows are returned as plain dicts and include the password hash; callers
    strip it before anything leaves the service layer.
    """

    def __init__(self, db: AsyncSession):
        """Initialize repository with database session."""
        self.db = db

    async def create_user(self, name: str, email: str, password_hash: str, role: str) -> int:
        """Insert a user and return its id."""
        result = await self.db.execute(
            insert(users)
            .values(name=name, email=email, password=password_hash, role=role)
        )
        user_id = result.inserted_primary_key[0]
        await self.db.commit()
        return user_id

    async def get_user_by_id(self, user_id: int) -> dict[str, Any] | None:
        """Get user by ID."""
        result = await self.db.execute(select(users).where(users.c.id == user_id))
        user = result.mappings().first()
        return dict(user) if user else None

    async def get_user_by_email(self, email: str) -> dict[str, Any] | None:
        """Get user by email."""
        result = await self.db.execute(select(users).where(users.c.email == email))
        user = result.mappings().first()
        return dict(user) if user else None

    async def search_users(self, filters: UserFilters) -> list[dict[str, Any]]:
        """Search users by role and name with pagination."""
        query = select(users)

        if filters.role:
            query = query.where(users.c.role == filters.role.value)

        if filters.name:
            query = query.where(users.c.name.ilike(f"%{filters.name}%"))

        offset = (filters.page - 1) * filters.limit
        query = query.order_by(users.c.id).offset(offset).limit(filters.limit)

        result = await self.db.execute(query)
        return [dict(row) for row in result.mappings().all()]

    async def delete_user(self, user_id: int) -> bool:
        """Delete a user (hard delete)."""
        result = await self.db.execute(delete(users).where(users.c.id == user_id))
        await self.db.commit()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def update_user(self, user_id: int, values: dict[str, Any]) -> bool:
        """Update columns of a user; returns False if the user does not exist."""
        if not values:
            return await self.get_user_by_id(user_id) is not None

        result = await self.db.execute(update(users).where(users.c.id == user_id).values(**values))
        await self.db.commit()
        return result.rowcount > 0  # type: ignore[attr-defined]
