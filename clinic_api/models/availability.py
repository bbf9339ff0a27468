"""Doctor availability keyed by (doctor, date)."""

from sqlalchemy import Column, ForeignKey, Integer, Table, Text

from clinic_api.models.base import metadata

availability = Table(
    "availability",
    metadata,
    Column(
        "doctor_id",
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("date", Text, primary_key=True),
    # JSON-encoded list of slot labels
    Column("time_slots", Text, nullable=False),
)
