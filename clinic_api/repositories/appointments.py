"""Appointment repository - database operations for appointments."""

from sqlalchemy import and_, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from clinic_api.models.appointments import appointments
from clinic_api.schemas.appointments import Appointment, AppointmentBase, AppointmentStatus


class AppointmentRepository:
    """Repository for appointment rows."""

    def __init__(self, db: AsyncSession):
        """Initialize repository with database session."""
        self.db = db

    async def create_appointment(self, data: AppointmentBase) -> int:
        """Insert a Scheduled appointment and return its id.

        Any status carried by ``data`` is ignored.
        """
        stmt = (
            insert(appointments)
            .values(
                patient_id=data.patient_id,
                doctor_id=data.doctor_id,
                date=data.date,
                time=data.time,
                reason=data.reason,
                status=AppointmentStatus.SCHEDULED.value,
            )
        )
        result = await self.db.execute(stmt)
        appointment_id = result.inserted_primary_key[0]
        await self.db.commit()
        return appointment_id

    async def get_appointment_by_id(self, appointment_id: int) -> Appointment | None:
        """Get appointment by ID."""
        result = await self.db.execute(
            select(appointments).where(appointments.c.id == appointment_id)
        )
        row = result.mappings().first()
        return Appointment.model_validate(dict(row)) if row else None

    async def update_appointment_status(
        self,
        appointment_id: int,
        status: AppointmentStatus,
    ) -> None:
        """Set the status of an appointment."""
        await self.db.execute(
            update(appointments)
            .where(appointments.c.id == appointment_id)
            .values(status=status.value, updated_at=func.now())
        )
        await self.db.commit()

    async def get_doctor_schedule(self, doctor_id: int) -> list[Appointment]:
        """List a doctor's Scheduled appointments by date then time."""
        stmt = (
            select(appointments)
            .where(
                and_(
                    appointments.c.doctor_id == doctor_id,
                    appointments.c.status == AppointmentStatus.SCHEDULED.value,
                )
            )
            .order_by(appointments.c.date, appointments.c.time, appointments.c.id)
        )
        result = await self.db.execute(stmt)
        return [Appointment.model_validate(dict(row)) for row in result.mappings().all()]
