# dental_clinic/db/models/health/doctor.py
from typing import Optional, List
from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field, Relationship
from datetime import datetime, timezone
import uuid

class Doctor(SQLModel, table=True):
    __tablename__ = "doctors"
    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True, max_length=36)
    name: str
    specialization: Optional[str] = None
    is_available: bool = Field(default=True)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), sa_type=DateTime(timezone=True))

    # Relationships
    appointments: List["Appointment"] = Relationship(back_populates="doctor")
