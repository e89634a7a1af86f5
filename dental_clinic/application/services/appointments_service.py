from dataclasses import dataclass
from typing import Any, Dict, List, Optional
from datetime import datetime
import logging

from fastapi import HTTPException
from starlette.concurrency import run_in_threadpool

from ..ports.appointments_repo import AppointmentsRepository, AppointmentDto, AppointmentSlot
from ..scheduling.validator import (
    DEFAULT_DURATION_MINUTES,
    INACTIVE_STATUSES,
    INFRASTRUCTURE,
    CandidateRequest,
    ValidationResult,
    validate_candidate,
)

logger = logging.getLogger(__name__)

VALID_STATUSES = ["pending", "confirmed", "completed", "cancelled", "closed", "no-show"]
VALID_TYPES = ["Consultation", "Cleaning", "Filling", "Root Canal"]


def _check_date(value: str) -> None:
    try:
        datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid appointment date format. Use YYYY-MM-DD")


def _check_time(value: str) -> None:
    try:
        datetime.strptime(value, "%H:%M")
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid appointment time format. Use HH:MM")


def _check_type(value: str) -> None:
    if value not in VALID_TYPES:
        raise HTTPException(status_code=400, detail=f"Invalid appointment type. Must be one of: {VALID_TYPES}")


def _check_status(value: str) -> None:
    if value not in VALID_STATUSES:
        raise HTTPException(status_code=400, detail=f"Invalid status. Must be one of: {VALID_STATUSES}")


@dataclass
class AppointmentsService:
    repo: AppointmentsRepository
    default_duration: int = DEFAULT_DURATION_MINUTES

    # Repositories are synchronous SQLModel code; keep them off the event loop
    async def _fetch_for_doctor(self, doctor_id: str, exclude_id: Optional[int]) -> List[AppointmentSlot]:
        return await run_in_threadpool(self.repo.list_for_doctor, doctor_id, exclude_id)

    async def _get_or_404(self, appointment_id: int) -> AppointmentDto:
        appt = await run_in_threadpool(self.repo.get_by_id, appointment_id)
        if not appt:
            raise HTTPException(status_code=404, detail="Appointment not found")
        return appt

    async def check_availability(self, candidate: CandidateRequest) -> ValidationResult:
        _check_date(candidate.date)
        _check_time(candidate.time)
        return await validate_candidate(self._fetch_for_doctor, candidate, self.default_duration)

    async def _ensure_schedulable(self, candidate: CandidateRequest) -> None:
        result = await validate_candidate(self._fetch_for_doctor, candidate, self.default_duration)
        if not result.is_valid:
            if result.error_kind == INFRASTRUCTURE:
                logger.error(f"Could not validate slot for doctor {candidate.doctor_id}; rejecting")
            raise HTTPException(status_code=409, detail=result.conflict_error)

    async def book(self, patient_id: str, patient_name: str, doctor_id: str, date: str, time: str, type: str = "Consultation", chair: Optional[str] = None, duration: Optional[int] = None) -> AppointmentDto:
        _check_date(date)
        _check_time(time)
        _check_type(type)

        doctor = await run_in_threadpool(self.repo.get_doctor, doctor_id)
        if not doctor:
            raise HTTPException(status_code=400, detail="Invalid doctor selected")
        if not doctor.is_available:
            raise HTTPException(status_code=400, detail="Doctor is not available")

        await self._ensure_schedulable(CandidateRequest(doctor_id=doctor_id, date=date, time=time, duration=duration))

        appt = await run_in_threadpool(
            self.repo.create,
            patient_id=patient_id,
            patient_name=patient_name,
            doctor_id=doctor_id,
            doctor_name=doctor.name,
            date=date,
            time=time,
            type=type,
            status="confirmed",
            chair=chair,
            duration=duration or self.default_duration,
        )
        logger.info(f"Appointment {appt.id} booked with doctor {doctor_id} on {date} {time}")
        return appt

    async def update(self, appointment_id: int, changes: Dict[str, Any]) -> AppointmentDto:
        """Apply a partial update, re-checking the doctor's calendar when the
        appointment would claim time it does not already hold.

        That is the case when the slot moves, when the duration grows, or when
        a cancelled, closed or completed appointment becomes active again. An
        update that leaves the appointment inactive is never checked. The
        appointment being edited is excluded so it cannot conflict with its
        own stored state.
        """
        original = await self._get_or_404(appointment_id)

        changes = {k: v for k, v in changes.items() if v is not None}
        if "status" in changes:
            _check_status(changes["status"])
        if "type" in changes:
            _check_type(changes["type"])
        if "date" in changes:
            _check_date(changes["date"])
        if "time" in changes:
            _check_time(changes["time"])
        if "duration" in changes:
            changes["duration"] = changes["duration"] or self.default_duration

        new_date = changes.get("date", original.date)
        new_time = changes.get("time", original.time)
        new_status = changes.get("status", original.status)
        old_duration = original.duration or self.default_duration
        new_duration = changes.get("duration", old_duration)

        claims_new_time = (
            new_date != original.date
            or new_time != original.time
            or new_duration > old_duration
            or original.status in INACTIVE_STATUSES
        )
        if new_status not in INACTIVE_STATUSES and claims_new_time:
            await self._ensure_schedulable(CandidateRequest(
                doctor_id=original.doctor_id,
                date=new_date,
                time=new_time,
                duration=new_duration,
                exclude_id=appointment_id,
            ))

        updated = await run_in_threadpool(self.repo.update, appointment_id, changes)
        if not updated:
            raise HTTPException(status_code=404, detail="Appointment not found")
        return updated

    async def update_status(self, appointment_id: int, status: str) -> AppointmentDto:
        _check_status(status)
        return await self.update(appointment_id, {"status": status})

    async def list(self, doctor_id: Optional[str] = None) -> List[AppointmentDto]:
        return await run_in_threadpool(self.repo.list_all, doctor_id)

    async def get(self, appointment_id: int) -> AppointmentDto:
        return await self._get_or_404(appointment_id)

    async def delete(self, appointment_id: int) -> None:
        if not await run_in_threadpool(self.repo.delete, appointment_id):
            raise HTTPException(status_code=404, detail="Appointment not found")
