from typing import List, Optional, Protocol

from .appointments_repo import DoctorDto


class DoctorsRepository(Protocol):
    def list(self, only_available: bool = False) -> List[DoctorDto]:
        ...

    def get(self, doctor_id: str) -> Optional[DoctorDto]:
        ...

    def create(self, name: str, specialization: Optional[str], is_available: bool) -> DoctorDto:
        ...
