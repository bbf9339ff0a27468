"""Database models."""

from clinic_api.models.appointments import appointments
from clinic_api.models.audit_logs import audit_log
from clinic_api.models.availability import availability
from clinic_api.models.base import metadata
from clinic_api.models.departments import departments
from clinic_api.models.medical_records import medical_records, record_test_results
from clinic_api.models.notifications import notifications
from clinic_api.models.specialties import doctor_specialties, specialties
from clinic_api.models.users import users

__all__ = [
    "appointments",
    "audit_log",
    "availability",
    "departments",
    "doctor_specialties",
    "medical_records",
    "metadata",
    "notifications",
    "record_test_results",
    "specialties",
    "users",
]
