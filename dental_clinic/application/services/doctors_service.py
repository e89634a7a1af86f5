from dataclasses import dataclass
from typing import List, Optional
from fastapi import HTTPException

from ..ports.appointments_repo import DoctorDto
from ..ports.doctors_repo import DoctorsRepository


@dataclass
class DoctorsService:
    repo: DoctorsRepository

    def register(self, name: str, specialization: Optional[str], is_available: bool = True) -> DoctorDto:
        if not name or not name.strip():
            raise HTTPException(status_code=400, detail="Doctor name is required")
        return self.repo.create(name.strip(), specialization, is_available)

    def list(self, only_available: bool = False) -> List[DoctorDto]:
        return self.repo.list(only_available)

    def get(self, doctor_id: str) -> DoctorDto:
        doctor = self.repo.get(doctor_id)
        if not doctor:
            raise HTTPException(status_code=404, detail="Doctor not found")
        return doctor
