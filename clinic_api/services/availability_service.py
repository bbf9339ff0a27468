"""Availability service.

Slots are stored as published; they are not checked against appointments.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from clinic_api.repositories.availability import AvailabilityRepository
from clinic_api.schemas.availability import Availability


class AvailabilityService:
    """Service for doctors' published time slots."""

    def __init__(self, repository: AvailabilityRepository):
        """Initialize service with its repository."""
        self.repository = repository

    @classmethod
    def from_session(cls, db: AsyncSession) -> "AvailabilityService":
        """Build the service on top of a database session."""
        return cls(AvailabilityRepository(db))

    async def set_availability(self, doctor_id: int, date: str, time_slots: list[str]) -> None:
        """Replace a doctor's slots for one date."""
        await self.repository.set_availability(doctor_id, date, time_slots)

    async def get_availability(self, doctor_id: int, date: str) -> Availability | None:
        """Get a doctor's slots for one date."""
        return await self.repository.get_availability(doctor_id, date)
