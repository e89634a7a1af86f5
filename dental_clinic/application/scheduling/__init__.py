# Scheduling package (re-export the conflict-detection API for stable imports)
from .time_arithmetic import (
    MINUTES_PER_DAY,
    DateTime,
    time_to_minutes,
    date_time_to_absolute_minutes,
    format_absolute_minutes_to_time,
)
from .overlap import appointments_overlap
from .validator import (
    DEFAULT_DURATION_MINUTES,
    INACTIVE_STATUSES,
    CandidateRequest,
    ValidationResult,
    is_active,
    validate_appointment_scheduling,
    validate_candidate,
)

__all__ = [
    "MINUTES_PER_DAY",
    "DateTime",
    "time_to_minutes",
    "date_time_to_absolute_minutes",
    "format_absolute_minutes_to_time",
    "appointments_overlap",
    "DEFAULT_DURATION_MINUTES",
    "INACTIVE_STATUSES",
    "CandidateRequest",
    "ValidationResult",
    "is_active",
    "validate_appointment_scheduling",
    "validate_candidate",
]
