"""Appointment conflict detection.

A candidate slot is checked against every active appointment of the same
doctor. The check is advisory: it reads the current state and decides, it does
not lock anything, so two concurrent bookings can both pass before either is
stored.
"""
from dataclasses import dataclass
from typing import Awaitable, Callable, Iterable, List, Optional
import logging

from ..ports.appointments_repo import AppointmentSlot
from .overlap import appointments_overlap
from .time_arithmetic import date_time_to_absolute_minutes, format_absolute_minutes_to_time

logger = logging.getLogger(__name__)

DEFAULT_DURATION_MINUTES = 30

# Statuses that free up the slot. A no-show still blocks it.
INACTIVE_STATUSES = frozenset({"cancelled", "closed", "completed"})

CONFLICT = "conflict"
INFRASTRUCTURE = "infrastructure"

VALIDATION_FAILED_MESSAGE = "Error validating appointment scheduling"

FetchAppointments = Callable[[str, Optional[int]], Awaitable[Iterable[AppointmentSlot]]]


@dataclass
class CandidateRequest:
    doctor_id: str
    date: str
    time: str
    duration: Optional[int] = None
    exclude_id: Optional[int] = None


@dataclass
class ValidationResult:
    is_valid: bool
    conflict_error: Optional[str] = None
    error_kind: Optional[str] = None


def is_active(slot: AppointmentSlot) -> bool:
    return slot.status not in INACTIVE_STATUSES


def _conflict_message(existing: AppointmentSlot, existing_duration: int, date: str, time: str, duration: int) -> str:
    existing_end = format_absolute_minutes_to_time(
        date_time_to_absolute_minutes(existing.date, existing.time) + existing_duration
    )
    new_end = format_absolute_minutes_to_time(date_time_to_absolute_minutes(date, time) + duration)
    return (
        f"Doctor has a conflicting appointment from {existing.time} to {existing_end.time} on {existing.date}. "
        f"Your appointment would be from {time} to {new_end.time} on {date}."
    )


async def validate_appointment_scheduling(
    fetch_appointments: FetchAppointments,
    doctor_id: str,
    date: str,
    time: str,
    duration_minutes: Optional[int],
    exclude_appointment_id: Optional[int] = None,
    default_duration: int = DEFAULT_DURATION_MINUTES,
) -> ValidationResult:
    """Decide whether a doctor can take an appointment at date/time.

    The first active appointment that overlaps wins; the rest are not examined.
    Missing or zero durations count as default_duration on both sides.
    Failures are reported as an invalid result and never raised.
    """
    try:
        logger.debug(
            f"Validating slot doctor={doctor_id} date={date} time={time} "
            f"duration={duration_minutes} exclude={exclude_appointment_id}"
        )
        appointments: List[AppointmentSlot] = list(await fetch_appointments(doctor_id, exclude_appointment_id))
        active = [a for a in appointments if is_active(a)]
        logger.debug(f"Doctor {doctor_id}: {len(appointments)} appointments, {len(active)} active")

        new_duration = duration_minutes or default_duration
        for existing in active:
            existing_duration = existing.duration or default_duration
            logger.debug(
                f"Comparing with appointment {existing.id} "
                f"({existing.date} {existing.time}, {existing_duration}min, {existing.status})"
            )
            if appointments_overlap(date, time, new_duration, existing.date, existing.time, existing_duration):
                message = _conflict_message(existing, existing_duration, date, time, new_duration)
                logger.info(f"Scheduling conflict for doctor {doctor_id} with appointment {existing.id}")
                return ValidationResult(is_valid=False, conflict_error=message, error_kind=CONFLICT)

        return ValidationResult(is_valid=True)
    except Exception:
        logger.error(f"Appointment validation failed for doctor {doctor_id}", exc_info=True)
        return ValidationResult(
            is_valid=False,
            conflict_error=VALIDATION_FAILED_MESSAGE,
            error_kind=INFRASTRUCTURE,
        )


async def validate_candidate(
    fetch_appointments: FetchAppointments,
    candidate: CandidateRequest,
    default_duration: int = DEFAULT_DURATION_MINUTES,
) -> ValidationResult:
    return await validate_appointment_scheduling(
        fetch_appointments,
        candidate.doctor_id,
        candidate.date,
        candidate.time,
        candidate.duration,
        candidate.exclude_id,
        default_duration,
    )
