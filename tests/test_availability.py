"""Tests for doctor availability endpoints."""

from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI
from httpx import AsyncClient

from clinic_api.database import Database
from clinic_api.dependencies import get_availability_service
from clinic_api.repositories.audit_logs import AuditLogRepository
from clinic_api.services.availability_service import AvailabilityService


@pytest.mark.asyncio
async def test_set_and_get_availability(
    client: AsyncClient,
    database: Database,
    users: dict,
    auth_headers: dict,
) -> None:
    """Doctors publish slots that anyone signed in can read."""
    doctor_id = users["doctor"]
    response = await client.post(
        f"/api/doctors/{doctor_id}/availability",
        json={"date": "2025-01-15", "timeSlots": ["09:00", "10:00"]},
        headers=auth_headers["doctor"],
    )
    assert response.status_code == 200

    response = await client.get(
        f"/api/doctors/{doctor_id}/availability",
        params={"date": "2025-01-15"},
        headers=auth_headers["patient"],
    )
    assert response.status_code == 200
    assert response.json() == {
        "doctorId": doctor_id,
        "date": "2025-01-15",
        "timeSlots": ["09:00", "10:00"],
    }

    async with database.session() as session:
        logs = await AuditLogRepository(session).get_logs()
    assert logs[0].action == "SET_AVAILABILITY"
    assert logs[0].details == (
        f"Set availability for doctor ID {doctor_id} on 2025-01-15 with time slots 09:00, 10:00"
    )


@pytest.mark.asyncio
async def test_set_availability_replaces_slots(
    client: AsyncClient,
    users: dict,
    auth_headers: dict,
) -> None:
    """Publishing again for the same date overwrites the earlier slots."""
    path = f"/api/doctors/{users['doctor']}/availability"
    for slots in (["09:00"], ["13:00", "14:00"]):
        response = await client.post(
            path,
            json={"date": "2025-01-15", "timeSlots": slots},
            headers=auth_headers["doctor"],
        )
        assert response.status_code == 200

    response = await client.get(
        path, params={"date": "2025-01-15"}, headers=auth_headers["doctor"]
    )
    assert response.json()["timeSlots"] == ["13:00", "14:00"]


@pytest.mark.asyncio
async def test_set_availability_for_other_doctor(
    client: AsyncClient,
    users: dict,
    auth_headers: dict,
) -> None:
    """Doctors cannot publish slots for colleagues."""
    response = await client.post(
        f"/api/doctors/{users['doctor']}/availability",
        json={"date": "2025-01-15", "timeSlots": ["09:00"]},
        headers=auth_headers["other_doctor"],
    )
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_set_availability_requires_doctor(
    client: AsyncClient,
    users: dict,
    auth_headers: dict,
) -> None:
    """Patients cannot publish slots."""
    response = await client.post(
        f"/api/doctors/{users['doctor']}/availability",
        json={"date": "2025-01-15", "timeSlots": ["09:00"]},
        headers=auth_headers["patient"],
    )
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_get_unset_availability(
    client: AsyncClient,
    users: dict,
    auth_headers: dict,
) -> None:
    """Dates without published slots are reported as 404."""
    response = await client.get(
        f"/api/doctors/{users['doctor']}/availability",
        params={"date": "2025-03-01"},
        headers=auth_headers["patient"],
    )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_get_availability_bad_date(
    client: AsyncClient,
    users: dict,
    auth_headers: dict,
) -> None:
    """Malformed dates are rejected with 400."""
    response = await client.get(
        f"/api/doctors/{users['doctor']}/availability",
        params={"date": "March 1st"},
        headers=auth_headers["patient"],
    )
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_availability_uses_injected_service(
    app: FastAPI,
    client: AsyncClient,
    users: dict,
    auth_headers: dict,
) -> None:
    """Both availability routes go through the injectable service."""
    repository = AsyncMock()
    repository.get_availability.return_value = None
    app.dependency_overrides[get_availability_service] = lambda: AvailabilityService(repository)
    path = f"/api/doctors/{users['doctor']}/availability"

    response = await client.post(
        path,
        json={"date": "2025-01-15", "timeSlots": ["09:00"]},
        headers=auth_headers["doctor"],
    )
    assert response.status_code == 200
    repository.set_availability.assert_awaited_once_with(users["doctor"], "2025-01-15", ["09:00"])

    response = await client.get(path, params={"date": "2025-01-15"}, headers=auth_headers["patient"])
    assert response.status_code == 404
    repository.get_availability.assert_awaited_once_with(users["doctor"], "2025-01-15")
