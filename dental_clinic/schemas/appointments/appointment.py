# dental_clinic/schemas/appointments/appointment.py
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

class AppointmentBase(BaseModel):
    patient_id: str
    patient_name: str
    doctor_id: str
    date: str  # YYYY-MM-DD
    time: str  # HH:MM
    type: str = "Consultation"
    chair: Optional[str] = None
    duration: Optional[int] = Field(default=None, ge=0, le=24 * 60)

class AppointmentCreate(AppointmentBase):
    pass

class AppointmentUpdate(BaseModel):
    patient_id: Optional[str] = None
    patient_name: Optional[str] = None
    date: Optional[str] = None
    time: Optional[str] = None
    type: Optional[str] = None
    status: Optional[str] = None
    chair: Optional[str] = None
    duration: Optional[int] = Field(default=None, ge=0, le=24 * 60)

class AppointmentStatusUpdate(BaseModel):
    status: str

class AppointmentResponse(AppointmentBase):
    id: int
    doctor_name: str
    status: str
    created_at: datetime

class AvailabilityCheckRequest(BaseModel):
    doctor_id: str
    date: str  # YYYY-MM-DD
    time: str  # HH:MM
    duration: Optional[int] = Field(default=None, ge=0, le=24 * 60)
    exclude_appointment_id: Optional[int] = None

class AvailabilityCheckResponse(BaseModel):
    is_valid: bool
    conflict_error: Optional[str] = None
    error_kind: Optional[str] = None
