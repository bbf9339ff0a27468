"""Audit log service."""

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from clinic_api.repositories.audit_logs import AuditLogRepository
from clinic_api.schemas.audit_logs import AuditLogEntry

logger = structlog.get_logger(__name__)


class AuditLogService:
    """Records who did what.

    Recording is best-effort: it runs after the audited operation has been
    committed and never raises into the request.
    """

    def __init__(self, repository: AuditLogRepository):
        """Initialize service with its repository."""
        self.repository = repository

    @classmethod
    def from_session(cls, db: AsyncSession) -> "AuditLogService":
        """Build the service on top of a database session."""
        return cls(AuditLogRepository(db))

    async def log(self, user_id: int, action: str, details: str | None = None) -> None:
        """
        Append one audit entry.

        Args:
            user_id: Acting user
            action: Action tag, e.g. CREATE_APPOINTMENT
            details: Human-readable description
        """
        try:
            await self.repository.log_action(user_id, action, details)
        except Exception as e:
            logger.warning("audit_log_failed", user_id=user_id, action=action, error=str(e))
            await self.repository.db.rollback()

    async def get_logs(self) -> list[AuditLogEntry]:
        """List all audit entries, newest first."""
        return await self.repository.get_logs()
