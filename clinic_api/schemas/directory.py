"""Specialty and department schemas."""

from clinic_api.schemas.common import CamelModel


class Specialty(CamelModel):
    """Medical specialty."""

    id: int
    name: str


class DoctorSpecialtiesAssign(CamelModel):
    """Specialties to associate with a doctor."""

    specialty_ids: list[int]


class SpecialtyDoctor(CamelModel):
    """Doctor practising a specialty."""

    doctor_id: int
    doctor_name: str


class Department(CamelModel):
    """Clinic department."""

    id: int
    name: str
