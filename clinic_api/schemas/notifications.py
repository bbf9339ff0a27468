"""Notification schemas."""

from datetime import datetime

from pydantic import Field

from clinic_api.schemas.common import CamelModel


class NotificationCreate(CamelModel):
    """Schema for creating a notification for one recipient."""

    recipient_id: int
    message: str = Field(..., min_length=1)


class Notification(CamelModel):
    """Schema for a stored notification."""

    id: int
    recipient_id: int
    message: str
    read: bool = False
    created_at: datetime | None = None
