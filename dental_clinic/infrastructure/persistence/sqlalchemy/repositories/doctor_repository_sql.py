from typing import List, Optional
from sqlmodel import Session, select

from .....db.models import Doctor
from .....application.ports.appointments_repo import DoctorDto
from .....application.ports.doctors_repo import DoctorsRepository

class SqlDoctorsRepository(DoctorsRepository):
    def __init__(self, session: Session):
        self.session = session

    def _to_dto(self, doctor: Doctor) -> DoctorDto:
        return DoctorDto(
            id=doctor.id,
            name=doctor.name,
            specialization=doctor.specialization,
            is_available=bool(doctor.is_available),
        )

    def list(self, only_available: bool = False) -> List[DoctorDto]:
        query = select(Doctor)
        if only_available:
            query = query.where(Doctor.is_available == True)  # noqa: E712
        rows = self.session.exec(query.order_by(Doctor.name)).all()
        return [self._to_dto(d) for d in rows]

    def get(self, doctor_id: str) -> Optional[DoctorDto]:
        doctor = self.session.exec(select(Doctor).where(Doctor.id == doctor_id)).first()
        return self._to_dto(doctor) if doctor else None

    def create(self, name: str, specialization: Optional[str], is_available: bool) -> DoctorDto:
        doctor = Doctor(name=name, specialization=specialization, is_available=is_available)
        self.session.add(doctor)
        self.session.commit()
        self.session.refresh(doctor)
        return self._to_dto(doctor)
