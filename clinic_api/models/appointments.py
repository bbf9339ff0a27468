"""Appointments table model using SQLAlchemy Core."""

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Table,
    Text,
    func,
)

from clinic_api.models.base import metadata

appointments = Table(
    "appointments",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    # Ownership / references
    Column(
        "patient_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "doctor_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    # YYYY-MM-DD and HH:mm, compared as text
    Column("date", Text, nullable=False),
    Column("time", Text, nullable=False),
    Column("reason", Text, nullable=True),
    # Status management
    Column("status", Text, nullable=False, server_default="Scheduled"),
    # Audit fields
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Column("updated_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    # Constraints
    CheckConstraint(
        "status IN ('Scheduled', 'Cancelled', 'Rescheduled')",
        name="appointments_status_check",
    ),
    Index("ix_appointments_patient_id", "patient_id"),
    Index("ix_appointments_doctor_schedule", "doctor_id", "status", "date", "time"),
)
