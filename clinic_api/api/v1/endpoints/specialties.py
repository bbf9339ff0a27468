"""Specialty endpoints."""

from fastapi import APIRouter

from clinic_api.dependencies import CurrentCaller, DirectoryServiceDep, DoctorCaller, ensure_owner
from clinic_api.schemas.common import MessageResponse
from clinic_api.schemas.directory import DoctorSpecialtiesAssign, Specialty, SpecialtyDoctor

router = APIRouter(prefix="/specialties", tags=["Specialties"])


@router.get("", response_model=list[Specialty], summary="List specialties")
async def list_specialties(caller: CurrentCaller, service: DirectoryServiceDep) -> list[Specialty]:
    """List all medical specialties."""
    return await service.get_all_specialties()


@router.post(
    "/doctors/{doctor_id}/specialties",
    response_model=MessageResponse,
    summary="Associate doctor with specialties",
)
async def associate_doctor_specialties(
    doctor_id: int,
    data: DoctorSpecialtiesAssign,
    caller: DoctorCaller,
    service: DirectoryServiceDep,
) -> MessageResponse:
    """
    Link the calling doctor to a set of specialties.

    Raises:
        ForbiddenException: If a doctor edits another doctor's specialties
    """
    ensure_owner(caller, doctor_id, "Forbidden: Doctors can only manage their own specialties")

    await service.associate_doctor_specialties(doctor_id, data.specialty_ids)
    return MessageResponse(message="Specialties associated successfully")


@router.get(
    "/{specialty_id}/doctors",
    response_model=list[SpecialtyDoctor],
    summary="List doctors by specialty",
)
async def get_doctors_by_specialty(
    specialty_id: int,
    caller: CurrentCaller,
    service: DirectoryServiceDep,
) -> list[SpecialtyDoctor]:
    """List doctors practising a specialty."""
    return await service.get_doctors_by_specialty(specialty_id)
