"""Audit log table; rows are append-only."""

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, Table, Text, func

from clinic_api.models.base import metadata

audit_log = Table(
    "audit_log",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("action", Text, nullable=False),
    Column("details", Text, nullable=True),
    Column("timestamp", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Index("idx_audit_log_timestamp", "timestamp"),
)
