"""Appointment endpoints.

Each handler authorizes the caller, runs the workflow, then records one audit
entry before responding.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from clinic_api.core.access import CallerContext, Role
from clinic_api.core.exceptions import AppointmentNotFoundException
from clinic_api.dependencies import (
    AppointmentServiceDep,
    AuditLogServiceDep,
    PatientCaller,
    ensure_owner,
    require_roles,
)
from clinic_api.schemas.appointments import (
    Appointment,
    AppointmentCreate,
    AppointmentCreatedResponse,
    AppointmentReschedule,
)
from clinic_api.schemas.common import MessageResponse

router = APIRouter()

ScheduleViewer = Annotated[CallerContext, Depends(require_roles(Role.DOCTOR, Role.ADMIN))]


@router.post(
    "",
    response_model=AppointmentCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create new appointment",
)
async def create_appointment(
    data: AppointmentCreate,
    caller: PatientCaller,
    service: AppointmentServiceDep,
    audit: AuditLogServiceDep,
) -> AppointmentCreatedResponse:
    """
    Book an appointment for the authenticated patient.

    Args:
        data: Appointment creation data
        caller: Authenticated patient
        service: Appointment workflow
        audit: Audit recorder

    Returns:
        ID of the created appointment

    Raises:
        ForbiddenException: If ``patientId`` is not the caller
    """
    ensure_owner(
        caller,
        data.patient_id,
        "Forbidden: Patients can only create their own appointments",
    )

    appointment_id = await service.create_appointment(data)

    await audit.log(
        caller.user_id,
        "CREATE_APPOINTMENT",
        f"Created appointment with ID {appointment_id}",
    )
    return AppointmentCreatedResponse(appointment_id=appointment_id)


@router.delete(
    "/{appointment_id}",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Cancel appointment",
)
async def cancel_appointment(
    appointment_id: int,
    caller: PatientCaller,
    service: AppointmentServiceDep,
    audit: AuditLogServiceDep,
) -> MessageResponse:
    """
    Cancel one of the caller's appointments.

    Raises:
        AppointmentNotFoundException: If appointment not found
        ForbiddenException: If the appointment belongs to another patient
    """
    appointment = await service.get_appointment_by_id(appointment_id)
    if appointment is None:
        raise AppointmentNotFoundException()
    ensure_owner(
        caller,
        appointment.patient_id,
        "Forbidden: Patients can only cancel their own appointments",
    )

    await service.cancel_appointment(appointment_id)

    await audit.log(
        caller.user_id,
        "CANCEL_APPOINTMENT",
        f"Cancelled appointment with ID {appointment_id}",
    )
    return MessageResponse(message="Appointment cancelled successfully")


@router.put(
    "/{appointment_id}",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Reschedule appointment",
)
async def reschedule_appointment(
    appointment_id: int,
    data: AppointmentReschedule,
    caller: PatientCaller,
    service: AppointmentServiceDep,
    audit: AuditLogServiceDep,
) -> MessageResponse:
    """
    Move one of the caller's appointments to a new date and time.

    Raises:
        AppointmentNotFoundException: If appointment not found
        ForbiddenException: If the appointment belongs to another patient
    """
    appointment = await service.get_appointment_by_id(appointment_id)
    if appointment is None:
        raise AppointmentNotFoundException()
    ensure_owner(
        caller,
        appointment.patient_id,
        "Forbidden: Patients can only reschedule their own appointments",
    )

    await service.reschedule_appointment(appointment_id, data.new_date, data.new_time)

    await audit.log(
        caller.user_id,
        "RESCHEDULE_APPOINTMENT",
        f"Rescheduled appointment with ID {appointment_id} to {data.new_date} at {data.new_time}",
    )
    return MessageResponse(message="Appointment rescheduled successfully")


@router.get(
    "/doctors/{doctor_id}/schedule",
    response_model=list[Appointment],
    status_code=status.HTTP_200_OK,
    summary="Get doctor schedule",
)
async def get_doctor_schedule(
    doctor_id: int,
    caller: ScheduleViewer,
    service: AppointmentServiceDep,
    audit: AuditLogServiceDep,
) -> list[Appointment]:
    """
    List a doctor's upcoming (Scheduled) appointments.

    Doctors may only read their own schedule; admins may read any.

    Raises:
        ForbiddenException: If a doctor asks for another doctor's schedule
    """
    ensure_owner(
        caller,
        doctor_id,
        "Forbidden: Doctors can only access their own schedule",
        exempt_roles=(Role.ADMIN,),
    )

    schedule = await service.get_doctor_schedule(doctor_id)

    await audit.log(
        caller.user_id,
        "GET_DOCTOR_SCHEDULE",
        f"Fetched schedule for doctor with ID {doctor_id}",
    )
    return schedule
