"""Department lookup table."""

from sqlalchemy import Column, Integer, Table, Text

from clinic_api.models.base import metadata

DEFAULT_DEPARTMENTS = ("Emergency", "Surgery", "Radiology", "Pediatrics")

departments = Table(
    "departments",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", Text, nullable=False, unique=True),
)
