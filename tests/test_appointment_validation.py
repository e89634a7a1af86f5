import asyncio

from dental_clinic.application.ports.appointments_repo import AppointmentSlot
from dental_clinic.application.scheduling import (
    CandidateRequest,
    validate_appointment_scheduling,
    validate_candidate,
)

DOCTOR = "doc-1"
DAY = "2024-01-01"


class FakeStore:
    def __init__(self, slots):
        self.slots = list(slots)
        self.calls = []

    async def fetch(self, doctor_id, exclude_id):
        self.calls.append((doctor_id, exclude_id))
        return [s for s in self.slots if s.doctor_id == doctor_id and s.id != exclude_id]


def slot(id, time, duration=30, status="confirmed", date=DAY, doctor_id=DOCTOR):
    return AppointmentSlot(id=id, doctor_id=doctor_id, date=date, time=time, duration=duration, status=status)


def validate(store, date, time, duration, exclude=None, doctor_id=DOCTOR):
    return asyncio.run(validate_appointment_scheduling(store.fetch, doctor_id, date, time, duration, exclude))


def test_empty_calendar_is_valid():
    store = FakeStore([])
    result = validate(store, DAY, "09:00", 30)
    assert result.is_valid is True
    assert result.conflict_error is None
    assert store.calls == [(DOCTOR, None)]


def test_back_to_back_does_not_conflict():
    store = FakeStore([slot(1, "09:00")])
    assert validate(store, DAY, "09:30", 30).is_valid is True
    assert validate(store, DAY, "08:30", 30).is_valid is True


def test_overlap_reports_both_ranges():
    store = FakeStore([slot(1, "09:00")])
    result = validate(store, DAY, "09:15", 30)
    assert result.is_valid is False
    assert result.error_kind == "conflict"
    assert result.conflict_error == (
        "Doctor has a conflicting appointment from 09:00 to 09:30 on 2024-01-01. "
        "Your appointment would be from 09:15 to 09:45 on 2024-01-01."
    )


def test_conflict_across_midnight():
    store = FakeStore([slot(1, "23:45", duration=60, date="2024-01-01")])
    result = validate(store, "2024-01-02", "00:15", 30)
    assert result.is_valid is False
    assert "from 23:45 to 00:45 on 2024-01-01" in result.conflict_error
    assert "from 00:15 to 00:45 on 2024-01-02" in result.conflict_error


def test_terminal_statuses_do_not_block():
    for status in ("cancelled", "closed", "completed"):
        store = FakeStore([slot(1, "09:00", status=status)])
        assert validate(store, DAY, "09:00", 30).is_valid is True


def test_pending_and_no_show_still_block():
    for status in ("pending", "confirmed", "no-show"):
        store = FakeStore([slot(1, "09:00", status=status)])
        assert validate(store, DAY, "09:00", 30).is_valid is False


def test_missing_durations_default_to_thirty_minutes():
    store = FakeStore([slot(1, "09:00", duration=None)])
    assert validate(store, DAY, "09:20", None).is_valid is False
    assert validate(store, DAY, "09:30", None).is_valid is True
    # zero is treated like a missing duration
    assert validate(store, DAY, "09:29", 0).is_valid is False


def test_default_duration_applies_to_candidate():
    store = FakeStore([slot(1, "09:20", duration=10)])
    result = validate(store, DAY, "09:00", None)
    assert result.is_valid is False
    assert "from 09:00 to 09:30" in result.conflict_error


def test_editing_an_appointment_does_not_conflict_with_itself():
    store = FakeStore([slot(7, "09:00")])
    result = validate(store, DAY, "09:15", 30, exclude=7)
    assert result.is_valid is True
    assert store.calls == [(DOCTOR, 7)]


def test_other_doctors_never_conflict():
    store = FakeStore([slot(1, "09:00", doctor_id="doc-2")])
    assert validate(store, DAY, "09:00", 30).is_valid is True


def test_first_overlap_in_fetch_order_is_reported():
    store = FakeStore([slot(2, "10:00", duration=60), slot(1, "09:30", duration=60)])
    result = validate(store, DAY, "10:15", 15)
    assert "from 10:00 to 11:00" in result.conflict_error


def test_fetch_failure_is_reported_not_raised():
    async def broken_fetch(doctor_id, exclude_id):
        raise ConnectionError("database unreachable")

    result = asyncio.run(validate_appointment_scheduling(broken_fetch, DOCTOR, DAY, "09:00", 30))
    assert result.is_valid is False
    assert result.error_kind == "infrastructure"
    assert result.conflict_error == "Error validating appointment scheduling"


def test_validation_is_repeatable():
    store = FakeStore([slot(1, "09:00")])
    first = validate(store, DAY, "09:15", 30)
    second = validate(store, DAY, "09:15", 30)
    assert first == second


def test_validate_candidate_uses_request_fields():
    store = FakeStore([slot(3, "14:00", duration=45)])
    candidate = CandidateRequest(doctor_id=DOCTOR, date=DAY, time="14:30", duration=30, exclude_id=None)
    result = asyncio.run(validate_candidate(store.fetch, candidate))
    assert result.is_valid is False
    assert "from 14:00 to 14:45" in result.conflict_error


def test_configured_default_duration_applies_to_both_sides():
    store = FakeStore([slot(1, "09:00", duration=None)])
    result = asyncio.run(validate_appointment_scheduling(store.fetch, DOCTOR, DAY, "09:40", None, None, 45))
    assert result.is_valid is False
    assert result.conflict_error == (
        "Doctor has a conflicting appointment from 09:00 to 09:45 on 2024-01-01. "
        "Your appointment would be from 09:40 to 10:25 on 2024-01-01."
    )
    candidate = CandidateRequest(doctor_id=DOCTOR, date=DAY, time="09:45")
    assert asyncio.run(validate_candidate(store.fetch, candidate, default_duration=45)).is_valid is True
