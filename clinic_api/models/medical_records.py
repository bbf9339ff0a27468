"""Medical records and their test results."""

from sqlalchemy import Column, ForeignKey, Index, Integer, Table, Text

from clinic_api.models.base import metadata

medical_records = Table(
    "medical_records",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("patient_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("doctor_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("diagnosis", Text, nullable=True),
    # JSON-encoded lists of strings
    Column("prescriptions", Text, nullable=False, server_default="[]"),
    Column("notes", Text, nullable=True),
    Column("ongoing_treatments", Text, nullable=False, server_default="[]"),
    Index("idx_medical_records_patient_id", "patient_id"),
)

record_test_results = Table(
    "record_test_results",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "record_id",
        Integer,
        ForeignKey("medical_records.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("type", Text, nullable=False),
    Column("result", Text, nullable=False),
    Index("idx_record_test_results_record_id", "record_id"),
)
