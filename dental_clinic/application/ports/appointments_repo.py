from dataclasses import dataclass
from typing import Any, Dict, List, Optional
from datetime import datetime


@dataclass
class DoctorDto:
    id: str
    name: str
    specialization: Optional[str]
    is_available: bool


@dataclass
class AppointmentSlot:
    """The part of a stored appointment the conflict validator looks at."""
    id: int
    doctor_id: str
    date: str  # YYYY-MM-DD
    time: str  # HH:MM
    duration: Optional[int]
    status: str


@dataclass
class AppointmentDto:
    id: int
    patient_id: str
    patient_name: str
    doctor_id: str
    doctor_name: str
    date: str
    time: str
    type: str
    status: str
    chair: Optional[str]
    duration: Optional[int]
    created_at: datetime

    def to_slot(self) -> AppointmentSlot:
        return AppointmentSlot(
            id=self.id,
            doctor_id=self.doctor_id,
            date=self.date,
            time=self.time,
            duration=self.duration,
            status=self.status,
        )


class AppointmentsRepository:
    def get_doctor(self, doctor_id: str) -> Optional[DoctorDto]:
        ...

    def list_for_doctor(self, doctor_id: str, exclude_id: Optional[int] = None) -> List[AppointmentSlot]:
        ...

    def list_all(self, doctor_id: Optional[str] = None) -> List[AppointmentDto]:
        ...

    def get_by_id(self, appointment_id: int) -> Optional[AppointmentDto]:
        ...

    def create(self, patient_id: str, patient_name: str, doctor_id: str, doctor_name: str, date: str, time: str, type: str, status: str, chair: Optional[str], duration: int) -> AppointmentDto:
        ...

    def update(self, appointment_id: int, changes: Dict[str, Any]) -> Optional[AppointmentDto]:
        ...

    def delete(self, appointment_id: int) -> bool:
        ...
