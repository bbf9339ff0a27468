"""Notification repository."""

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from clinic_api.models.notifications import notifications
from clinic_api.schemas.notifications import Notification


class NotificationRepository:
    """Repository for notification rows."""

    def __init__(self, db: AsyncSession):
        """Initialize repository with database session."""
        self.db = db

    async def create_notification(self, recipient_id: int, message: str) -> int:
        """Insert one unread notification and return its id."""
        result = await self.db.execute(
            insert(notifications)
            .values(recipient_id=recipient_id, message=message)
        )
        notification_id = result.inserted_primary_key[0]
        await self.db.commit()
        return notification_id

    async def get_by_recipient(self, recipient_id: int) -> list[Notification]:
        """List a recipient's notifications in insertion order."""
        result = await self.db.execute(
            select(notifications)
            .where(notifications.c.recipient_id == recipient_id)
            .order_by(notifications.c.id)
        )
        return [Notification.model_validate(dict(row)) for row in result.mappings().all()]
