"""Audit log endpoints."""

from fastapi import APIRouter

from clinic_api.dependencies import AdminCaller, AuditLogServiceDep
from clinic_api.schemas.audit_logs import AuditLogEntry

router = APIRouter(prefix="/audit-logs", tags=["Audit"])


@router.get("", response_model=list[AuditLogEntry], summary="List audit logs (admin only)")
async def list_audit_logs(admin: AdminCaller, audit: AuditLogServiceDep) -> list[AuditLogEntry]:
    """
    List every recorded action, newest first.

    Returns:
        Audit entries
    """
    return await audit.get_logs()
