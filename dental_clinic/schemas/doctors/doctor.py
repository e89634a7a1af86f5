# dental_clinic/schemas/doctors/doctor.py
from pydantic import BaseModel, Field
from typing import Optional

class DoctorCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    specialization: Optional[str] = Field(default=None, max_length=100)
    is_available: bool = True

class DoctorResponse(DoctorCreate):
    id: str
