"""FastAPI dependencies."""

from collections.abc import Awaitable, Callable, Collection
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from clinic_api.config import Settings
from clinic_api.core.access import (
    CallerContext,
    Role,
    authenticate,
    authorize_ownership,
    authorize_role,
)
from clinic_api.core.exceptions import ForbiddenException
from clinic_api.database import get_db
from clinic_api.services.appointment_service import AppointmentService
from clinic_api.services.audit_log_service import AuditLogService
from clinic_api.services.availability_service import AvailabilityService
from clinic_api.services.directory_service import DirectoryService
from clinic_api.services.medical_record_service import MedicalRecordService
from clinic_api.services.notification_service import NotificationService
from clinic_api.services.user_service import UserService

# Security; missing credentials are reported by the access gate, not FastAPI
security = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    """Return the settings the running application was built with."""
    return request.app.state.settings


AppSettings = Annotated[Settings, Depends(get_app_settings)]


async def get_current_caller(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    settings: AppSettings,
) -> CallerContext:
    """
    Authenticate the bearer token of the current request.

    Args:
        credentials: Bearer token credentials, if present
        settings: Application settings holding the verification key

    Returns:
        Caller identity

    Raises:
        UnauthenticatedException: If no token is present
        InvalidTokenException: If the token is invalid or expired
    """
    return authenticate(credentials.credentials if credentials else None, settings)


def require_roles(*roles: Role) -> Callable[..., Awaitable[CallerContext]]:
    """Build a dependency that only admits callers holding one of ``roles``."""

    async def dependency(
        caller: Annotated[CallerContext, Depends(get_current_caller)],
    ) -> CallerContext:
        if not authorize_role(caller.role, roles):
            raise ForbiddenException()
        return caller

    return dependency


def ensure_owner(
    caller: CallerContext,
    resource_owner_id: int,
    message: str,
    exempt_roles: Collection[Role] = (),
) -> None:
    """Raise ForbiddenException unless the caller may act on the resource."""
    if not authorize_ownership(caller.user_id, caller.role, resource_owner_id, exempt_roles):
        raise ForbiddenException(message)


# Type aliases for dependency injection
DatabaseSession = Annotated[AsyncSession, Depends(get_db)]
CurrentCaller = Annotated[CallerContext, Depends(get_current_caller)]
PatientCaller = Annotated[CallerContext, Depends(require_roles(Role.PATIENT))]
DoctorCaller = Annotated[CallerContext, Depends(require_roles(Role.DOCTOR))]
AdminCaller = Annotated[CallerContext, Depends(require_roles(Role.ADMIN))]


def get_appointment_service(db: DatabaseSession) -> AppointmentService:
    """Appointment workflow bound to the request's session."""
    return AppointmentService.from_session(db)


def get_audit_log_service(db: DatabaseSession) -> AuditLogService:
    """Audit recorder bound to the request's session."""
    return AuditLogService.from_session(db)


def get_notification_service(db: DatabaseSession) -> NotificationService:
    """Notification dispatcher bound to the request's session."""
    return NotificationService.from_session(db)


def get_availability_service(db: DatabaseSession) -> AvailabilityService:
    """Availability store bound to the request's session."""
    return AvailabilityService.from_session(db)


def get_medical_record_service(db: DatabaseSession) -> MedicalRecordService:
    """Medical record service bound to the request's session."""
    return MedicalRecordService.from_session(db)


def get_directory_service(db: DatabaseSession) -> DirectoryService:
    """Specialty and department lookups bound to the request's session."""
    return DirectoryService.from_session(db)


def get_user_service(db: DatabaseSession, settings: AppSettings) -> UserService:
    """User service bound to the request's session and token settings."""
    return UserService.from_session(db, settings)


AppointmentServiceDep = Annotated[AppointmentService, Depends(get_appointment_service)]
AuditLogServiceDep = Annotated[AuditLogService, Depends(get_audit_log_service)]
NotificationServiceDep = Annotated[NotificationService, Depends(get_notification_service)]
AvailabilityServiceDep = Annotated[AvailabilityService, Depends(get_availability_service)]
MedicalRecordServiceDep = Annotated[MedicalRecordService, Depends(get_medical_record_service)]
DirectoryServiceDep = Annotated[DirectoryService, Depends(get_directory_service)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
