"""Tests for appointment endpoints."""

import pytest
from httpx import AsyncClient

from clinic_api.database import Database
from clinic_api.repositories.appointments import AppointmentRepository
from clinic_api.repositories.audit_logs import AuditLogRepository
from clinic_api.repositories.notifications import NotificationRepository
from clinic_api.schemas.appointments import Appointment


async def fetch_appointment(database: Database, appointment_id: int) -> Appointment | None:
    async with database.session() as session:
        return await AppointmentRepository(session).get_appointment_by_id(appointment_id)


async def fetch_notifications(database: Database, recipient_id: int) -> list[str]:
    async with database.session() as session:
        rows = await NotificationRepository(session).get_by_recipient(recipient_id)
    return [row.message for row in rows]


async def fetch_audit_actions(database: Database) -> list[str]:
    async with database.session() as session:
        rows = await AuditLogRepository(session).get_logs()
    return [row.action for row in rows]


async def book(client: AsyncClient, headers: dict, payload: dict) -> int:
    response = await client.post("/api/appointments", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["appointmentId"]


@pytest.mark.asyncio
async def test_create_then_cancel_example(
    client: AsyncClient,
    database: Database,
    auth_headers: dict,
    sample_appointment_data: dict,
) -> None:
    """Booking as patient 1 with doctor 2 and cancelling it."""
    assert sample_appointment_data["patientId"] == 1
    assert sample_appointment_data["doctorId"] == 2

    response = await client.post(
        "/api/appointments",
        json=sample_appointment_data,
        headers=auth_headers["patient"],
    )
    assert response.status_code == 201
    assert response.json() == {
        "appointmentId": 1,
        "message": "Appointment created successfully",
    }

    response = await client.delete("/api/appointments/1", headers=auth_headers["patient"])
    assert response.status_code == 200
    assert response.json() == {"message": "Appointment cancelled successfully"}

    appointment = await fetch_appointment(database, 1)
    assert appointment is not None
    assert appointment.status == "Cancelled"


@pytest.mark.asyncio
@pytest.mark.parametrize("status", ["Cancelled", "Pending", "scheduled", 5, None])
async def test_create_ignores_supplied_status(
    client: AsyncClient,
    database: Database,
    auth_headers: dict,
    sample_appointment_data: dict,
    status: object,
) -> None:
    """New appointments are always Scheduled, whatever status is sent."""
    payload = {**sample_appointment_data, "status": status}
    appointment_id = await book(client, auth_headers["patient"], payload)

    appointment = await fetch_appointment(database, appointment_id)
    assert appointment.status == "Scheduled"
    assert appointment.reason == "Regular checkup"


@pytest.mark.asyncio
async def test_create_notifies_both_parties_and_audits(
    client: AsyncClient,
    database: Database,
    users: dict,
    auth_headers: dict,
    sample_appointment_data: dict,
) -> None:
    """Booking produces one notification each and one audit entry."""
    await book(client, auth_headers["patient"], sample_appointment_data)

    patient_messages = await fetch_notifications(database, users["patient"])
    doctor_messages = await fetch_notifications(database, users["doctor"])
    assert len(patient_messages) == 1
    assert len(doctor_messages) == 1
    assert "2025-01-15" in patient_messages[0]
    assert "09:00" in doctor_messages[0]

    assert await fetch_audit_actions(database) == ["CREATE_APPOINTMENT"]


@pytest.mark.asyncio
async def test_create_for_other_patient_is_forbidden(
    client: AsyncClient,
    database: Database,
    users: dict,
    auth_headers: dict,
    sample_appointment_data: dict,
) -> None:
    """A patient cannot book on behalf of someone else."""
    payload = {**sample_appointment_data, "patientId": users["other_patient"]}
    response = await client.post(
        "/api/appointments", json=payload, headers=auth_headers["patient"]
    )

    assert response.status_code == 403
    assert response.json()["error"] == (
        "Forbidden: Patients can only create their own appointments"
    )
    assert await fetch_appointment(database, 1) is None
    assert await fetch_notifications(database, users["doctor"]) == []
    assert await fetch_audit_actions(database) == []


@pytest.mark.asyncio
async def test_create_requires_patient_role(
    client: AsyncClient,
    auth_headers: dict,
    sample_appointment_data: dict,
) -> None:
    """Doctors cannot book appointments."""
    response = await client.post(
        "/api/appointments",
        json=sample_appointment_data,
        headers=auth_headers["doctor"],
    )
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_create_without_token(client: AsyncClient, sample_appointment_data: dict) -> None:
    """Missing credentials are rejected with 401."""
    response = await client.post("/api/appointments", json=sample_appointment_data)
    assert response.status_code == 401
    assert response.json()["error"] == "Access denied"


@pytest.mark.asyncio
async def test_create_with_invalid_token(
    client: AsyncClient,
    sample_appointment_data: dict,
) -> None:
    """Garbage tokens are rejected with 403."""
    response = await client.post(
        "/api/appointments",
        json=sample_appointment_data,
        headers={"Authorization": "Bearer not-a-jwt"},
    )
    assert response.status_code == 403
    assert response.json()["error"] == "Invalid token"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("field", "value"),
    [
        ("date", "15/01/2025"),
        ("date", "2025-02-30"),
        ("time", "9:00"),
        ("time", "24:00"),
    ],
)
async def test_create_rejects_malformed_date_or_time(
    client: AsyncClient,
    auth_headers: dict,
    sample_appointment_data: dict,
    field: str,
    value: str,
) -> None:
    """Dates must be YYYY-MM-DD and times 24-hour HH:mm."""
    payload = {**sample_appointment_data, field: value}
    response = await client.post(
        "/api/appointments", json=payload, headers=auth_headers["patient"]
    )

    assert response.status_code == 400
    assert "details" in response.json()


@pytest.mark.asyncio
async def test_create_with_unknown_doctor(
    client: AsyncClient,
    auth_headers: dict,
    sample_appointment_data: dict,
) -> None:
    """Unknown user ids violate the foreign key and return 400."""
    payload = {**sample_appointment_data, "doctorId": 999}
    response = await client.post(
        "/api/appointments", json=payload, headers=auth_headers["patient"]
    )
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_cancel_notifies_with_original_slot(
    client: AsyncClient,
    database: Database,
    users: dict,
    auth_headers: dict,
    sample_appointment_data: dict,
) -> None:
    """Cancelling sends one message to each party about the original slot."""
    appointment_id = await book(client, auth_headers["patient"], sample_appointment_data)

    response = await client.delete(
        f"/api/appointments/{appointment_id}", headers=auth_headers["patient"]
    )
    assert response.status_code == 200

    patient_messages = await fetch_notifications(database, users["patient"])
    doctor_messages = await fetch_notifications(database, users["doctor"])
    assert len(patient_messages) == 2
    assert len(doctor_messages) == 2
    assert "cancelled" in patient_messages[-1]
    assert "2025-01-15" in patient_messages[-1]
    assert "09:00" in doctor_messages[-1]

    assert await fetch_audit_actions(database) == ["CANCEL_APPOINTMENT", "CREATE_APPOINTMENT"]


@pytest.mark.asyncio
async def test_cancel_twice_is_allowed(
    client: AsyncClient,
    database: Database,
    auth_headers: dict,
    sample_appointment_data: dict,
) -> None:
    """Cancelling an already cancelled appointment succeeds."""
    appointment_id = await book(client, auth_headers["patient"], sample_appointment_data)

    for _ in range(2):
        response = await client.delete(
            f"/api/appointments/{appointment_id}", headers=auth_headers["patient"]
        )
        assert response.status_code == 200

    appointment = await fetch_appointment(database, appointment_id)
    assert appointment.status == "Cancelled"


@pytest.mark.asyncio
async def test_cancel_other_patients_appointment(
    client: AsyncClient,
    database: Database,
    auth_headers: dict,
    sample_appointment_data: dict,
) -> None:
    """Only the owning patient may cancel."""
    appointment_id = await book(client, auth_headers["patient"], sample_appointment_data)

    response = await client.delete(
        f"/api/appointments/{appointment_id}", headers=auth_headers["other_patient"]
    )

    assert response.status_code == 403
    appointment = await fetch_appointment(database, appointment_id)
    assert appointment.status == "Scheduled"


@pytest.mark.asyncio
async def test_cancel_missing_appointment(
    client: AsyncClient,
    database: Database,
    users: dict,
    auth_headers: dict,
) -> None:
    """Unknown ids report 400 and leave no trace."""
    response = await client.delete("/api/appointments/42", headers=auth_headers["patient"])

    assert response.status_code == 400
    assert response.json()["error"] == "Appointment not found"
    assert await fetch_notifications(database, users["patient"]) == []
    assert await fetch_audit_actions(database) == []


@pytest.mark.asyncio
async def test_reschedule_creates_replacement(
    client: AsyncClient,
    database: Database,
    users: dict,
    auth_headers: dict,
    sample_appointment_data: dict,
) -> None:
    """The original becomes Rescheduled and a new Scheduled copy is booked."""
    appointment_id = await book(client, auth_headers["patient"], sample_appointment_data)

    response = await client.put(
        f"/api/appointments/{appointment_id}",
        json={"newDate": "2025-01-20", "newTime": "14:30"},
        headers=auth_headers["patient"],
    )
    assert response.status_code == 200
    assert response.json() == {"message": "Appointment rescheduled successfully"}

    original = await fetch_appointment(database, appointment_id)
    replacement = await fetch_appointment(database, appointment_id + 1)
    assert original.status == "Rescheduled"
    assert original.date == "2025-01-15"
    assert replacement.status == "Scheduled"
    assert replacement.patient_id == users["patient"]
    assert replacement.doctor_id == users["doctor"]
    assert (replacement.date, replacement.time) == ("2025-01-20", "14:30")

    patient_messages = await fetch_notifications(database, users["patient"])
    doctor_messages = await fetch_notifications(database, users["doctor"])
    assert len(patient_messages) == 2
    assert len(doctor_messages) == 2
    assert "2025-01-20" in patient_messages[-1] and "14:30" in patient_messages[-1]
    assert "2025-01-20" in doctor_messages[-1] and "14:30" in doctor_messages[-1]

    actions = await fetch_audit_actions(database)
    assert actions[0] == "RESCHEDULE_APPOINTMENT"


@pytest.mark.asyncio
async def test_reschedule_other_patients_appointment(
    client: AsyncClient,
    database: Database,
    auth_headers: dict,
    sample_appointment_data: dict,
) -> None:
    """Only the owning patient may reschedule."""
    appointment_id = await book(client, auth_headers["patient"], sample_appointment_data)

    response = await client.put(
        f"/api/appointments/{appointment_id}",
        json={"newDate": "2025-01-20", "newTime": "14:30"},
        headers=auth_headers["other_patient"],
    )

    assert response.status_code == 403
    assert await fetch_appointment(database, appointment_id + 1) is None


@pytest.mark.asyncio
async def test_reschedule_missing_appointment(
    client: AsyncClient,
    database: Database,
    auth_headers: dict,
) -> None:
    """Unknown ids report 400 and leave no trace."""
    response = await client.put(
        "/api/appointments/42",
        json={"newDate": "2025-01-20", "newTime": "14:30"},
        headers=auth_headers["patient"],
    )

    assert response.status_code == 400
    assert response.json()["error"] == "Appointment not found"
    assert await fetch_audit_actions(database) == []


@pytest.mark.asyncio
async def test_doctor_schedule_lists_scheduled_in_order(
    client: AsyncClient,
    users: dict,
    auth_headers: dict,
    sample_appointment_data: dict,
) -> None:
    """Only Scheduled appointments appear, sorted by date then time."""
    slots = [("2025-01-16", "10:00"), ("2025-01-15", "11:00"), ("2025-01-15", "08:30")]
    ids = []
    for date, time in slots:
        payload = {**sample_appointment_data, "date": date, "time": time}
        ids.append(await book(client, auth_headers["patient"], payload))

    await client.delete(f"/api/appointments/{ids[0]}", headers=auth_headers["patient"])

    response = await client.get(
        f"/api/appointments/doctors/{users['doctor']}/schedule",
        headers=auth_headers["doctor"],
    )
    assert response.status_code == 200
    schedule = response.json()
    assert [(a["date"], a["time"]) for a in schedule] == [
        ("2025-01-15", "08:30"),
        ("2025-01-15", "11:00"),
    ]
    assert all(a["status"] == "Scheduled" for a in schedule)
    assert schedule[0]["patientId"] == users["patient"]


@pytest.mark.asyncio
async def test_doctor_schedule_of_other_doctor(
    client: AsyncClient,
    users: dict,
    auth_headers: dict,
) -> None:
    """Doctors only see their own schedule; admins see anyone's."""
    path = f"/api/appointments/doctors/{users['doctor']}/schedule"

    response = await client.get(path, headers=auth_headers["other_doctor"])
    assert response.status_code == 403
    assert response.json()["error"] == "Forbidden: Doctors can only access their own schedule"

    response = await client.get(path, headers=auth_headers["admin"])
    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_doctor_schedule_forbidden_for_patients(
    client: AsyncClient,
    users: dict,
    auth_headers: dict,
) -> None:
    """Patients cannot read schedules."""
    response = await client.get(
        f"/api/appointments/doctors/{users['doctor']}/schedule",
        headers=auth_headers["patient"],
    )
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_doctor_schedule_is_audited(
    client: AsyncClient,
    database: Database,
    users: dict,
    auth_headers: dict,
) -> None:
    """Reading a schedule records who looked."""
    await client.get(
        f"/api/appointments/doctors/{users['doctor']}/schedule",
        headers=auth_headers["admin"],
    )

    async with database.session() as session:
        logs = await AuditLogRepository(session).get_logs()
    assert len(logs) == 1
    assert logs[0].action == "GET_DOCTOR_SCHEDULE"
    assert logs[0].user_id == users["admin"]
    assert logs[0].details == f"Fetched schedule for doctor with ID {users['doctor']}"
