"""Medical record schemas."""

from pydantic import Field

from clinic_api.schemas.common import CamelModel


class TestResult(CamelModel):
    """One test result attached to a record."""

    type: str = Field(..., min_length=1)
    result: str


class MedicalRecordCreate(CamelModel):
    """Schema for creating a medical record."""

    patient_id: int
    doctor_id: int
    diagnosis: str
    prescriptions: list[str] = Field(default_factory=list)
    notes: str | None = None
    ongoing_treatments: list[str] = Field(default_factory=list)
    test_results: list[TestResult] | None = None


class MedicalRecordUpdate(CamelModel):
    """Schema for updating a medical record.

    Test results are replaced as a whole when supplied.
    """

    diagnosis: str | None = None
    prescriptions: list[str] = Field(default_factory=list)
    notes: str | None = None
    ongoing_treatments: list[str] = Field(default_factory=list)
    test_results: list[TestResult] | None = None


class MedicalRecord(CamelModel):
    """Schema for a stored medical record."""

    id: int
    patient_id: int
    doctor_id: int
    diagnosis: str | None = None
    prescriptions: list[str] = Field(default_factory=list)
    notes: str | None = None
    ongoing_treatments: list[str] = Field(default_factory=list)
    test_results: list[TestResult] = Field(default_factory=list)


class MedicalRecordResponse(CamelModel):
    """Response returned after creating or updating a record."""

    record_id: int
    message: str
