"""Notification service for per-recipient in-app messages."""

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from clinic_api.repositories.notifications import NotificationRepository
from clinic_api.schemas.notifications import Notification, NotificationCreate

logger = structlog.get_logger(__name__)


class NotificationService:
    """Service for creating and listing notifications.

    Notifications are persisted only; there is no push or email delivery.
    """

    def __init__(self, repository: NotificationRepository):
        """Initialize service with its repository."""
        self.repository = repository

    @classmethod
    def from_session(cls, db: AsyncSession) -> "NotificationService":
        """Build the service on top of a database session."""
        return cls(NotificationRepository(db))

    async def create_notification(self, data: NotificationCreate) -> int:
        """
        Create one unread notification.

        Args:
            data: Recipient and message

        Returns:
            ID of the new notification
        """
        notification_id = await self.repository.create_notification(
            data.recipient_id, data.message
        )
        logger.debug(
            "notification_created",
            notification_id=notification_id,
            recipient_id=data.recipient_id,
        )
        return notification_id

    async def notify(self, recipient_id: int, message: str) -> int | None:
        """
        Create a notification without letting a failure reach the caller.

        Used after a primary mutation has already been committed.

        Args:
            recipient_id: User receiving the message
            message: Message text

        Returns:
            ID of the new notification, or None if it could not be stored
        """
        try:
            return await self.create_notification(
                NotificationCreate(recipient_id=recipient_id, message=message)
            )
        except Exception as e:
            logger.warning(
                "notification_dispatch_failed",
                recipient_id=recipient_id,
                error=str(e),
            )
            await self.repository.db.rollback()
            return None

    async def get_notifications_by_user_id(self, user_id: int) -> list[Notification]:
        """List notifications addressed to a user, oldest first."""
        return await self.repository.get_by_recipient(user_id)
