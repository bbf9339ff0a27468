"""Doctor availability endpoints."""

from fastapi import APIRouter, Query, status

from clinic_api.core.exceptions import BadRequestException, NotFoundException
from clinic_api.dependencies import (
    AuditLogServiceDep,
    AvailabilityServiceDep,
    CurrentCaller,
    DoctorCaller,
    ensure_owner,
)
from clinic_api.schemas.availability import Availability, AvailabilitySet
from clinic_api.schemas.common import MessageResponse, validate_iso_date

router = APIRouter(prefix="/doctors", tags=["Availability"])


@router.post(
    "/{doctor_id}/availability",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Set availability",
)
async def set_availability(
    doctor_id: int,
    data: AvailabilitySet,
    caller: DoctorCaller,
    service: AvailabilityServiceDep,
    audit: AuditLogServiceDep,
) -> MessageResponse:
    """
    Publish the doctor's time slots for one date, replacing earlier ones.

    Args:
        doctor_id: Doctor publishing the slots
        data: Date and slot labels
        caller: Authenticated doctor
        service: Availability store
        audit: Audit recorder

    Raises:
        ForbiddenException: If a doctor sets another doctor's availability
    """
    ensure_owner(caller, doctor_id, "Forbidden: Doctors can only set their own availability")

    await service.set_availability(doctor_id, data.date, data.time_slots)

    await audit.log(
        caller.user_id,
        "SET_AVAILABILITY",
        f"Set availability for doctor ID {doctor_id} on {data.date} "
        f"with time slots {', '.join(data.time_slots)}",
    )
    return MessageResponse(message="Availability set successfully")


@router.get(
    "/{doctor_id}/availability",
    response_model=Availability,
    summary="Get availability",
)
async def get_availability(
    doctor_id: int,
    caller: CurrentCaller,
    service: AvailabilityServiceDep,
    date: str = Query(..., description="Date in YYYY-MM-DD format"),
) -> Availability:
    """
    Get the doctor's published slots for one date.

    Raises:
        BadRequestException: If the date is malformed
        NotFoundException: If nothing was published for that date
    """
    availability = await service.get_availability(doctor_id, _parse_date(date))
    if availability is None:
        raise NotFoundException("Availability not found")
    return availability


def _parse_date(value: str) -> str:
    try:
        return validate_iso_date(value)
    except ValueError as e:
        raise BadRequestException(str(e))
