# dental_clinic/db/models/health/appointment.py
from typing import Optional
from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field, Relationship
from datetime import datetime, timezone

class Appointment(SQLModel, table=True):
    __tablename__ = "appointments"
    id: Optional[int] = Field(default=None, primary_key=True)
    patient_id: str = Field(index=True)
    patient_name: str
    doctor_id: str = Field(foreign_key="doctors.id", index=True)
    doctor_name: str
    date: str  # YYYY-MM-DD, timezone-naive
    time: str  # HH:MM, 24h
    type: str = Field(default="Consultation")
    status: str = Field(default="pending")
    chair: Optional[str] = None
    duration: Optional[int] = None  # minutes
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), sa_type=DateTime(timezone=True))

    # Relationships
    doctor: Optional["Doctor"] = Relationship(back_populates="appointments")
