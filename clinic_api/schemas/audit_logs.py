"""Audit log schemas."""

from datetime import datetime

from clinic_api.schemas.common import CamelModel


class AuditLogEntry(CamelModel):
    """Schema for a recorded action."""

    id: int
    user_id: int
    action: str
    details: str | None = None
    timestamp: datetime | None = None
