"""Appointment workflow: booking, cancelling and rescheduling."""

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from clinic_api.core.exceptions import AppointmentNotFoundException
from clinic_api.repositories.appointments import AppointmentRepository
from clinic_api.schemas.appointments import (
    Appointment,
    AppointmentBase,
    AppointmentStatus,
)
from clinic_api.services.notification_service import NotificationService

logger = structlog.get_logger(__name__)


class AppointmentService:
    """Service owning the appointment state machine.

    Scheduled is the only initial state. Cancelled and Rescheduled are
    terminal; rescheduling always creates a new Scheduled appointment rather
    than moving the original. Cancel does not check the current status, so
    an already cancelled appointment can be cancelled again.

    Authorization is not applied here; callers check ownership on the
    appointment returned by ``get_appointment_by_id`` first.
    """

    def __init__(
        self,
        repository: AppointmentRepository,
        notification_service: NotificationService,
    ):
        """Initialize service with its store and notification dispatcher."""
        self.repository = repository
        self.notifications = notification_service

    @classmethod
    def from_session(cls, db: AsyncSession) -> "AppointmentService":
        """Build the service on top of a database session."""
        return cls(AppointmentRepository(db), NotificationService.from_session(db))

    async def create_appointment(self, data: AppointmentBase) -> int:
        """
        Book a new appointment.

        Args:
            data: Patient, doctor, date, time and optional reason

        Returns:
            ID of the new appointment, always stored as Scheduled
        """
        appointment_id = await self.repository.create_appointment(data)
        logger.info(
            "appointment_created",
            appointment_id=appointment_id,
            patient_id=data.patient_id,
            doctor_id=data.doctor_id,
        )

        await self._notify_parties(
            data,
            patient_message=(
                f"Your appointment with doctor {data.doctor_id} on {data.date} "
                f"at {data.time} has been scheduled."
            ),
            doctor_message=(
                f"New appointment with patient {data.patient_id} on {data.date} "
                f"at {data.time}."
            ),
        )
        return appointment_id

    async def cancel_appointment(self, appointment_id: int) -> None:
        """
        Cancel an appointment.

        Args:
            appointment_id: Appointment ID

        Raises:
            AppointmentNotFoundException: If appointment not found
        """
        appointment = await self._get_or_raise(appointment_id)

        await self.repository.update_appointment_status(
            appointment_id, AppointmentStatus.CANCELLED
        )
        logger.info("appointment_cancelled", appointment_id=appointment_id)

        await self._notify_parties(
            appointment,
            patient_message=(
                f"Your appointment on {appointment.date} at {appointment.time} "
                "has been cancelled."
            ),
            doctor_message=(
                f"The appointment with patient {appointment.patient_id} on "
                f"{appointment.date} at {appointment.time} has been cancelled."
            ),
        )

    async def reschedule_appointment(
        self,
        appointment_id: int,
        new_date: str,
        new_time: str,
    ) -> int:
        """
        Move an appointment to a new date and time.

        The original is marked Rescheduled and a new Scheduled appointment
        is booked for the same patient, doctor and reason.

        Args:
            appointment_id: Appointment ID
            new_date: New date, YYYY-MM-DD
            new_time: New time, HH:mm

        Returns:
            ID of the replacement appointment

        Raises:
            AppointmentNotFoundException: If appointment not found
        """
        appointment = await self._get_or_raise(appointment_id)

        await self.repository.update_appointment_status(
            appointment_id, AppointmentStatus.RESCHEDULED
        )
        replacement = appointment.model_copy(update={"date": new_date, "time": new_time})
        new_id = await self.repository.create_appointment(replacement)
        logger.info(
            "appointment_rescheduled",
            appointment_id=appointment_id,
            new_appointment_id=new_id,
        )

        await self._notify_parties(
            appointment,
            patient_message=(
                f"Your appointment has been rescheduled to {new_date} at {new_time}."
            ),
            doctor_message=(
                f"The appointment with patient {appointment.patient_id} has been "
                f"rescheduled to {new_date} at {new_time}."
            ),
        )
        return new_id

    async def get_appointment_by_id(self, appointment_id: int) -> Appointment | None:
        """Get appointment by ID without any access check."""
        return await self.repository.get_appointment_by_id(appointment_id)

    async def get_doctor_schedule(self, doctor_id: int) -> list[Appointment]:
        """List a doctor's Scheduled appointments ordered by date and time."""
        return await self.repository.get_doctor_schedule(doctor_id)

    async def _get_or_raise(self, appointment_id: int) -> Appointment:
        appointment = await self.repository.get_appointment_by_id(appointment_id)
        if appointment is None:
            raise AppointmentNotFoundException()
        return appointment

    async def _notify_parties(
        self,
        appointment: AppointmentBase,
        patient_message: str,
        doctor_message: str,
    ) -> None:
        # Sequential: both inserts share the request's session.
        await self.notifications.notify(appointment.patient_id, patient_message)
        await self.notifications.notify(appointment.doctor_id, doctor_message)
