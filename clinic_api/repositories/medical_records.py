"""Medical record repository."""

import json

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from clinic_api.models.medical_records import medical_records, record_test_results
from clinic_api.schemas.medical_records import (
    MedicalRecord,
    MedicalRecordCreate,
    MedicalRecordUpdate,
    TestResult,
)


class MedicalRecordRepository:
    """Repository for medical records and their test results."""

    def __init__(self, db: AsyncSession):
        """Initialize repository with database session."""
        self.db = db

    async def create_medical_record(self, data: MedicalRecordCreate) -> int:
        """Insert a record with its test results and return its id."""
        result = await self.db.execute(
            insert(medical_records).values(
                patient_id=data.patient_id,
                doctor_id=data.doctor_id,
                diagnosis=data.diagnosis,
                prescriptions=json.dumps(data.prescriptions),
                notes=data.notes,
                ongoing_treatments=json.dumps(data.ongoing_treatments),
            )
        )
        record_id = result.inserted_primary_key[0]

        if data.test_results:
            await self._insert_test_results(record_id, data.test_results)

        await self.db.commit()
        return record_id

    async def update_medical_record(self, record_id: int, data: MedicalRecordUpdate) -> None:
        """Overwrite a record; test results are replaced only when supplied."""
        await self.db.execute(
            update(medical_records)
            .where(medical_records.c.id == record_id)
            .values(
                diagnosis=data.diagnosis,
                prescriptions=json.dumps(data.prescriptions),
                notes=data.notes,
                ongoing_treatments=json.dumps(data.ongoing_treatments),
            )
        )

        if data.test_results is not None:
            await self.db.execute(
                delete(record_test_results).where(record_test_results.c.record_id == record_id)
            )
            await self._insert_test_results(record_id, data.test_results)

        await self.db.commit()

    async def get_medical_record_by_id(self, record_id: int) -> MedicalRecord | None:
        """Get a record with its test results."""
        result = await self.db.execute(
            select(medical_records).where(medical_records.c.id == record_id)
        )
        row = result.mappings().first()
        if not row:
            return None

        tests_result = await self.db.execute(
            select(record_test_results.c.type, record_test_results.c.result)
            .where(record_test_results.c.record_id == record_id)
            .order_by(record_test_results.c.id)
        )

        return MedicalRecord(
            id=row["id"],
            patient_id=row["patient_id"],
            doctor_id=row["doctor_id"],
            diagnosis=row["diagnosis"],
            prescriptions=json.loads(row["prescriptions"] or "[]"),
            notes=row["notes"],
            ongoing_treatments=json.loads(row["ongoing_treatments"] or "[]"),
            test_results=[TestResult.model_validate(dict(t)) for t in tests_result.mappings()],
        )

    async def _insert_test_results(self, record_id: int, tests: list[TestResult]) -> None:
        await self.db.execute(
            insert(record_test_results),
            [{"record_id": record_id, "type": t.type, "result": t.result} for t in tests],
        )
