"""Medical record endpoints."""

from fastapi import APIRouter, status

from clinic_api.core.exceptions import NotFoundException
from clinic_api.dependencies import (
    AuditLogServiceDep,
    CurrentCaller,
    DoctorCaller,
    MedicalRecordServiceDep,
)
from clinic_api.schemas.medical_records import (
    MedicalRecord,
    MedicalRecordCreate,
    MedicalRecordResponse,
    MedicalRecordUpdate,
)

router = APIRouter(prefix="/medical-records", tags=["Medical Records"])


@router.post(
    "",
    response_model=MedicalRecordResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create medical record",
)
async def create_medical_record(
    data: MedicalRecordCreate,
    caller: DoctorCaller,
    service: MedicalRecordServiceDep,
    audit: AuditLogServiceDep,
) -> MedicalRecordResponse:
    """
    Create a medical record and notify the patient.

    Args:
        data: Record contents
        caller: Authenticated doctor
        service: Medical record service
        audit: Audit recorder

    Returns:
        ID of the new record
    """
    record_id = await service.create_medical_record(data)

    await audit.log(
        caller.user_id,
        "CREATE_MEDICAL_RECORD",
        f"Created medical record with ID {record_id} for patient ID {data.patient_id}",
    )
    return MedicalRecordResponse(
        record_id=record_id, message="Medical record created successfully"
    )


@router.put(
    "/{record_id}",
    response_model=MedicalRecordResponse,
    summary="Update medical record",
)
async def update_medical_record(
    record_id: int,
    data: MedicalRecordUpdate,
    caller: DoctorCaller,
    service: MedicalRecordServiceDep,
    audit: AuditLogServiceDep,
) -> MedicalRecordResponse:
    """
    Update a medical record and notify the patient.

    Raises:
        BadRequestException: If the record does not exist
    """
    await service.update_medical_record(record_id, data)

    await audit.log(
        caller.user_id,
        "UPDATE_MEDICAL_RECORD",
        f"Updated medical record with ID {record_id}",
    )
    return MedicalRecordResponse(
        record_id=record_id, message="Medical record updated successfully"
    )


@router.get("/{record_id}", response_model=MedicalRecord, summary="Get medical record")
async def get_medical_record(
    record_id: int,
    caller: CurrentCaller,
    service: MedicalRecordServiceDep,
) -> MedicalRecord:
    """
    Get a medical record with its test results.

    Raises:
        ForbiddenException: If a patient asks for another patient's record
        NotFoundException: If the record does not exist
    """
    record = await service.get_medical_record_by_id(record_id, caller)
    if record is None:
        raise NotFoundException("Medical record not found")
    return record
