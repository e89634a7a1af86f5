from typing import Any, Dict, List, Optional
from sqlmodel import Session, select

from .....db.models import Appointment, Doctor
from .....application.ports.appointments_repo import (
    AppointmentsRepository,
    AppointmentDto,
    AppointmentSlot,
    DoctorDto,
)

_UPDATABLE_FIELDS = {"patient_id", "patient_name", "date", "time", "type", "status", "chair", "duration"}


class SqlAppointmentsRepository(AppointmentsRepository):
    def __init__(self, session: Session):
        self.session = session

    def _appt_to_dto(self, a: Appointment) -> AppointmentDto:
        return AppointmentDto(
            id=a.id,
            patient_id=a.patient_id,
            patient_name=a.patient_name,
            doctor_id=a.doctor_id,
            doctor_name=a.doctor_name,
            date=a.date,
            time=a.time,
            type=a.type,
            status=a.status,
            chair=a.chair,
            duration=a.duration,
            created_at=a.created_at,
        )

    def get_doctor(self, doctor_id: str) -> Optional[DoctorDto]:
        d = self.session.exec(select(Doctor).where(Doctor.id == doctor_id)).first()
        if not d:
            return None
        return DoctorDto(id=d.id, name=d.name, specialization=d.specialization, is_available=bool(d.is_available))

    def list_for_doctor(self, doctor_id: str, exclude_id: Optional[int] = None) -> List[AppointmentSlot]:
        query = select(Appointment).where(Appointment.doctor_id == doctor_id)
        if exclude_id is not None:
            query = query.where(Appointment.id != exclude_id)
        rows = self.session.exec(query).all()
        return [
            AppointmentSlot(id=r.id, doctor_id=r.doctor_id, date=r.date, time=r.time, duration=r.duration, status=r.status)
            for r in rows
        ]

    def list_all(self, doctor_id: Optional[str] = None) -> List[AppointmentDto]:
        query = select(Appointment)
        if doctor_id is not None:
            query = query.where(Appointment.doctor_id == doctor_id)
        rows = self.session.exec(query.order_by(Appointment.date.desc(), Appointment.time.desc())).all()
        return [self._appt_to_dto(r) for r in rows]

    def get_by_id(self, appointment_id: int) -> Optional[AppointmentDto]:
        a = self.session.get(Appointment, appointment_id)
        return self._appt_to_dto(a) if a else None

    def create(self, patient_id: str, patient_name: str, doctor_id: str, doctor_name: str, date: str, time: str, type: str, status: str, chair: Optional[str], duration: int) -> AppointmentDto:
        appt = Appointment(
            patient_id=patient_id,
            patient_name=patient_name,
            doctor_id=doctor_id,
            doctor_name=doctor_name,
            date=date,
            time=time,
            type=type,
            status=status,
            chair=chair,
            duration=duration,
        )
        self.session.add(appt)
        self.session.commit()
        self.session.refresh(appt)
        return self._appt_to_dto(appt)

    def update(self, appointment_id: int, changes: Dict[str, Any]) -> Optional[AppointmentDto]:
        a = self.session.get(Appointment, appointment_id)
        if not a:
            return None
        for field, value in changes.items():
            if field in _UPDATABLE_FIELDS:
                setattr(a, field, value)
        self.session.add(a)
        self.session.commit()
        self.session.refresh(a)
        return self._appt_to_dto(a)

    def delete(self, appointment_id: int) -> bool:
        a = self.session.get(Appointment, appointment_id)
        if not a:
            return False
        self.session.delete(a)
        self.session.commit()
        return True
