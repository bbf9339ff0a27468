"""Specialty lookup table and doctor associations."""

from sqlalchemy import Column, ForeignKey, Integer, Table, Text

from clinic_api.models.base import metadata

DEFAULT_SPECIALTIES = ("Cardiology", "Dermatology", "Neurology", "Pediatrics")

specialties = Table(
    "specialties",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", Text, nullable=False, unique=True),
)

doctor_specialties = Table(
    "doctor_specialties",
    metadata,
    Column("doctor_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column(
        "specialty_id",
        Integer,
        ForeignKey("specialties.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)
