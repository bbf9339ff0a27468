"""Availability schemas."""

from pydantic import Field, field_validator

from clinic_api.schemas.common import CamelModel, validate_iso_date


class AvailabilitySet(CamelModel):
    """Schema for publishing a doctor's slots for one date."""

    date: str
    time_slots: list[str] = Field(..., description="Opaque slot labels, kept in order")

    @field_validator("date")
    @classmethod
    def validate_date(cls, v: str) -> str:
        """Validate date format."""
        return validate_iso_date(v)


class Availability(CamelModel):
    """Schema for a doctor's slots on one date."""

    doctor_id: int
    date: str
    time_slots: list[str]
