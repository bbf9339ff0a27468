"""Availability repository."""

import json

from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from clinic_api.models.availability import availability
from clinic_api.schemas.availability import Availability


class AvailabilityRepository:
    """Key-value store of (doctor, date) -> slot labels."""

    def __init__(self, db: AsyncSession):
        """Initialize repository with database session."""
        self.db = db

    async def set_availability(self, doctor_id: int, date: str, time_slots: list[str]) -> None:
        """Insert or replace the slots for a doctor on a date."""
        key = (availability.c.doctor_id == doctor_id) & (availability.c.date == date)
        await self.db.execute(delete(availability).where(key))
        await self.db.execute(
            insert(availability).values(
                doctor_id=doctor_id,
                date=date,
                time_slots=json.dumps(time_slots),
            )
        )
        await self.db.commit()

    async def get_availability(self, doctor_id: int, date: str) -> Availability | None:
        """Get the slots for a doctor on a date."""
        result = await self.db.execute(
            select(availability).where(
                availability.c.doctor_id == doctor_id,
                availability.c.date == date,
            )
        )
        row = result.mappings().first()
        if not row:
            return None

        return Availability(
            doctor_id=row["doctor_id"],
            date=row["date"],
            time_slots=json.loads(row["time_slots"]),
        )
