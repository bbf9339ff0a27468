"""Medical record service."""

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from clinic_api.core.access import CallerContext, Role, authorize_ownership
from clinic_api.core.exceptions import BadRequestException, ForbiddenException
from clinic_api.repositories.medical_records import MedicalRecordRepository
from clinic_api.schemas.medical_records import (
    MedicalRecord,
    MedicalRecordCreate,
    MedicalRecordUpdate,
)
from clinic_api.services.notification_service import NotificationService

logger = structlog.get_logger(__name__)


class MedicalRecordService:
    """Service for creating, updating and reading medical records."""

    def __init__(
        self,
        repository: MedicalRecordRepository,
        notification_service: NotificationService,
    ):
        """Initialize service with its store and notification dispatcher."""
        self.repository = repository
        self.notifications = notification_service

    @classmethod
    def from_session(cls, db: AsyncSession) -> "MedicalRecordService":
        """Build the service on top of a database session."""
        return cls(MedicalRecordRepository(db), NotificationService.from_session(db))

    async def create_medical_record(self, data: MedicalRecordCreate) -> int:
        """Create a record and tell the patient about it."""
        record_id = await self.repository.create_medical_record(data)
        logger.info("medical_record_created", record_id=record_id, patient_id=data.patient_id)

        await self.notifications.notify(
            data.patient_id, "A new medical record has been added to your file."
        )
        return record_id

    async def update_medical_record(self, record_id: int, data: MedicalRecordUpdate) -> None:
        """
        Update a record and tell the patient about it.

        Raises:
            BadRequestException: If the record does not exist
        """
        record = await self.repository.get_medical_record_by_id(record_id)
        if record is None:
            raise BadRequestException("Medical record not found")

        await self.repository.update_medical_record(record_id, data)
        logger.info("medical_record_updated", record_id=record_id)

        await self.notifications.notify(
            record.patient_id, "Your medical record has been updated."
        )

    async def get_medical_record_by_id(
        self,
        record_id: int,
        caller: CallerContext,
    ) -> MedicalRecord | None:
        """
        Get a record if the caller may see it.

        Patients only see their own records; doctors and admins see all.

        Raises:
            ForbiddenException: If a patient asks for another patient's record
        """
        record = await self.repository.get_medical_record_by_id(record_id)
        if record is None:
            return None

        if not authorize_ownership(
            caller.user_id,
            caller.role,
            record.patient_id,
            exempt_roles=(Role.DOCTOR, Role.ADMIN),
        ):
            raise ForbiddenException("Forbidden: Unauthorized access to this record")

        return record
