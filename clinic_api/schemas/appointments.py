"""Appointment schemas for request/response validation."""

from enum import Enum

from pydantic import Field, field_validator

from clinic_api.schemas.common import CamelModel, validate_iso_date, validate_time_of_day


class AppointmentStatus(str, Enum):
    """Appointment status enumeration."""

    SCHEDULED = "Scheduled"
    CANCELLED = "Cancelled"
    RESCHEDULED = "Rescheduled"


class AppointmentBase(CamelModel):
    """Base appointment schema with common fields."""

    patient_id: int
    doctor_id: int
    date: str = Field(..., description="Calendar date, YYYY-MM-DD")
    time: str = Field(..., description="Local time of day, HH:mm")
    reason: str | None = Field(None, max_length=500)

    @field_validator("date")
    @classmethod
    def validate_date(cls, v: str) -> str:
        """Validate date format."""
        return validate_iso_date(v)

    @field_validator("time")
    @classmethod
    def validate_time(cls, v: str) -> str:
        """Validate time format."""
        return validate_time_of_day(v)


class AppointmentCreate(AppointmentBase):
    """Schema for creating a new appointment.

    Unknown keys such as ``status`` are dropped; new appointments always
    start as Scheduled.
    """


class AppointmentReschedule(CamelModel):
    """Schema for moving an appointment to a new date and time."""

    new_date: str
    new_time: str

    @field_validator("new_date")
    @classmethod
    def validate_date(cls, v: str) -> str:
        """Validate date format."""
        return validate_iso_date(v)

    @field_validator("new_time")
    @classmethod
    def validate_time(cls, v: str) -> str:
        """Validate time format."""
        return validate_time_of_day(v)


class Appointment(AppointmentBase):
    """Schema for a stored appointment."""

    id: int
    status: AppointmentStatus


class AppointmentCreatedResponse(CamelModel):
    """Response returned after booking an appointment."""

    appointment_id: int
    message: str = "Appointment created successfully"
