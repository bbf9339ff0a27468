"""Specialty and department lookups."""

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from clinic_api.core.access import Role
from clinic_api.models.departments import departments
from clinic_api.models.specialties import doctor_specialties, specialties
from clinic_api.models.users import users
from clinic_api.schemas.directory import Department, Specialty, SpecialtyDoctor


class DirectoryRepository:
    """Read-mostly access to specialties and departments."""

    def __init__(self, db: AsyncSession):
        """Initialize repository with database session."""
        self.db = db

    async def get_all_specialties(self) -> list[Specialty]:
        """List all specialties."""
        result = await self.db.execute(select(specialties).order_by(specialties.c.id))
        return [Specialty.model_validate(dict(row)) for row in result.mappings().all()]

    async def associate_doctor_specialties(self, doctor_id: int, specialty_ids: list[int]) -> None:
        """Link a doctor to each of the given specialties."""
        if not specialty_ids:
            return

        await self.db.execute(
            insert(doctor_specialties),
            [{"doctor_id": doctor_id, "specialty_id": sid} for sid in specialty_ids],
        )
        await self.db.commit()

    async def get_doctors_by_specialty(self, specialty_id: int) -> list[SpecialtyDoctor]:
        """List doctors associated with a specialty."""
        joined = doctor_specialties.join(users, doctor_specialties.c.doctor_id == users.c.id)
        stmt = (
            select(
                users.c.id.label("doctor_id"),
                users.c.name.label("doctor_name"),
            )
            .select_from(joined)
            .where(
                doctor_specialties.c.specialty_id == specialty_id,
                users.c.role == Role.DOCTOR.value,
            )
            .order_by(users.c.id)
        )
        result = await self.db.execute(stmt)
        return [SpecialtyDoctor.model_validate(dict(row)) for row in result.mappings().all()]

    async def get_all_departments(self) -> list[Department]:
        """List all departments."""
        result = await self.db.execute(select(departments).order_by(departments.c.id))
        return [Department.model_validate(dict(row)) for row in result.mappings().all()]
