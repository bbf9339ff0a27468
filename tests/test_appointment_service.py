"""Unit tests for the appointment workflow with mocked collaborators."""

from unittest.mock import AsyncMock, call

import pytest

from clinic_api.core.exceptions import AppointmentNotFoundException
from clinic_api.schemas.appointments import (
    Appointment,
    AppointmentCreate,
    AppointmentStatus,
)
from clinic_api.services.appointment_service import AppointmentService


def make_service(
    existing: Appointment | None = None,
) -> tuple[AppointmentService, AsyncMock, AsyncMock]:
    repository = AsyncMock()
    repository.get_appointment_by_id.return_value = existing
    repository.create_appointment.return_value = 7
    notifications = AsyncMock()
    return AppointmentService(repository, notifications), repository, notifications


def stored_appointment(**overrides) -> Appointment:
    values = {
        "id": 3,
        "patient_id": 1,
        "doctor_id": 2,
        "date": "2025-01-15",
        "time": "09:00",
        "reason": "Checkup",
        "status": AppointmentStatus.SCHEDULED,
    }
    values.update(overrides)
    return Appointment(**values)


@pytest.mark.asyncio
async def test_create_notifies_patient_then_doctor() -> None:
    """Booking stores the row and sends two notifications in order."""
    service, repository, notifications = make_service()
    data = AppointmentCreate(patient_id=1, doctor_id=2, date="2025-01-15", time="09:00")

    appointment_id = await service.create_appointment(data)

    assert appointment_id == 7
    repository.create_appointment.assert_awaited_once_with(data)
    recipients = [c.args[0] for c in notifications.notify.await_args_list]
    assert recipients == [1, 2]


@pytest.mark.asyncio
async def test_cancel_sets_status_and_mentions_original_slot() -> None:
    """Cancelling marks the row Cancelled and names the original slot."""
    service, repository, notifications = make_service(stored_appointment())

    await service.cancel_appointment(3)

    repository.update_appointment_status.assert_awaited_once_with(
        3, AppointmentStatus.CANCELLED
    )
    assert notifications.notify.await_count == 2
    for awaited in notifications.notify.await_args_list:
        assert "2025-01-15" in awaited.args[1]
        assert "09:00" in awaited.args[1]


@pytest.mark.asyncio
async def test_cancel_does_not_check_current_status() -> None:
    """An already cancelled appointment can be cancelled again."""
    service, repository, _ = make_service(
        stored_appointment(status=AppointmentStatus.CANCELLED)
    )

    await service.cancel_appointment(3)

    repository.update_appointment_status.assert_awaited_once()


@pytest.mark.asyncio
async def test_reschedule_books_copy_with_new_slot() -> None:
    """The original is marked Rescheduled and a copy is booked."""
    service, repository, notifications = make_service(stored_appointment())

    new_id = await service.reschedule_appointment(3, "2025-01-20", "14:30")

    assert new_id == 7
    repository.update_appointment_status.assert_awaited_once_with(
        3, AppointmentStatus.RESCHEDULED
    )
    replacement = repository.create_appointment.await_args.args[0]
    assert (replacement.patient_id, replacement.doctor_id) == (1, 2)
    assert (replacement.date, replacement.time) == ("2025-01-20", "14:30")
    assert replacement.reason == "Checkup"

    assert notifications.notify.await_args_list[0] == call(
        1, "Your appointment has been rescheduled to 2025-01-20 at 14:30."
    )
    assert notifications.notify.await_args_list[1].args[0] == 2


@pytest.mark.asyncio
@pytest.mark.parametrize("operation", ["cancel", "reschedule"])
async def test_missing_appointment_raises_without_side_effects(operation: str) -> None:
    """Unknown ids raise before anything is written or sent."""
    service, repository, notifications = make_service(None)

    with pytest.raises(AppointmentNotFoundException) as exc_info:
        if operation == "cancel":
            await service.cancel_appointment(42)
        else:
            await service.reschedule_appointment(42, "2025-01-20", "14:30")

    assert exc_info.value.message == "Appointment not found"
    assert exc_info.value.status_code == 400
    repository.update_appointment_status.assert_not_awaited()
    repository.create_appointment.assert_not_awaited()
    notifications.notify.assert_not_awaited()


@pytest.mark.asyncio
async def test_get_doctor_schedule_delegates_to_store() -> None:
    """Schedule reads come straight from the store."""
    service, repository, _ = make_service()
    repository.get_doctor_schedule.return_value = [stored_appointment()]

    schedule = await service.get_doctor_schedule(2)

    assert [a.id for a in schedule] == [3]
    repository.get_doctor_schedule.assert_awaited_once_with(2)
