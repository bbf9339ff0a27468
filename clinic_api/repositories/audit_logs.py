"""Audit log repository."""

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from clinic_api.models.audit_logs import audit_log
from clinic_api.schemas.audit_logs import AuditLogEntry


class AuditLogRepository:
    """Append-only access to the audit log."""

    def __init__(self, db: AsyncSession):
        """Initialize repository with database session."""
        self.db = db

    async def log_action(self, user_id: int, action: str, details: str | None = None) -> None:
        """Append one audit entry."""
        await self.db.execute(
            insert(audit_log).values(user_id=user_id, action=action, details=details)
        )
        await self.db.commit()

    async def get_logs(self) -> list[AuditLogEntry]:
        """List all entries, newest first."""
        result = await self.db.execute(
            select(audit_log).order_by(audit_log.c.timestamp.desc(), audit_log.c.id.desc())
        )
        return [AuditLogEntry.model_validate(dict(row)) for row in result.mappings().all()]
