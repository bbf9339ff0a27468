"""Shared schema base classes and field validators."""

import re
from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


class CamelModel(BaseModel):
    """Base model exposing camelCase field names on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(CamelModel):
    """Plain confirmation message."""

    message: str


def validate_iso_date(value: str) -> str:
    """Validate a ``YYYY-MM-DD`` calendar date, keeping it as text."""
    if not _DATE_PATTERN.match(value):
        raise ValueError("Date must use the YYYY-MM-DD format")
    try:
        datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        raise ValueError("Date is not a valid calendar date")
    return value


def validate_time_of_day(value: str) -> str:
    """Validate a 24-hour ``HH:mm`` time, keeping it as text."""
    if not _TIME_PATTERN.match(value):
        raise ValueError("Time must use the 24-hour HH:mm format")
    return value
