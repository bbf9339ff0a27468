"""Specialty and department service."""

from sqlalchemy.ext.asyncio import AsyncSession

from clinic_api.repositories.directory import DirectoryRepository
from clinic_api.schemas.directory import Department, Specialty, SpecialtyDoctor


class DirectoryService:
    """Lookups for specialties and departments."""

    def __init__(self, repository: DirectoryRepository):
        """Initialize service with its repository."""
        self.repository = repository

    @classmethod
    def from_session(cls, db: AsyncSession) -> "DirectoryService":
        """Build the service on top of a database session."""
        return cls(DirectoryRepository(db))

    async def get_all_specialties(self) -> list[Specialty]:
        """List all specialties."""
        return await self.repository.get_all_specialties()

    async def associate_doctor_specialties(self, doctor_id: int, specialty_ids: list[int]) -> None:
        """Link a doctor to specialties."""
        await self.repository.associate_doctor_specialties(doctor_id, specialty_ids)

    async def get_doctors_by_specialty(self, specialty_id: int) -> list[SpecialtyDoctor]:
        """List doctors practising a specialty."""
        return await self.repository.get_doctors_by_specialty(specialty_id)

    async def get_all_departments(self) -> list[Department]:
        """List all departments."""
        return await self.repository.get_all_departments()
