# Models package (re-export feature modules for stable imports)
from .health.appointment import Appointment
from .health.doctor import Doctor

__all__ = [
    "Appointment",
    "Doctor",
]
