from typing import List
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlmodel import Session
import logging

from ..database import get_session
from ..application.services.doctors_service import DoctorsService
from ..infrastructure.persistence.sqlalchemy.repositories.doctor_repository_sql import SqlDoctorsRepository
from ..schemas.doctors.doctor import DoctorCreate, DoctorResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/doctors", tags=["Doctors"])


def get_doctors_service(session: Session = Depends(get_session)) -> DoctorsService:
    return DoctorsService(repo=SqlDoctorsRepository(session))


@router.get("/", response_model=List[DoctorResponse])
def get_doctors(
    available: bool = Query(False),
    doctors_service: DoctorsService = Depends(get_doctors_service),
):
    try:
        return [
            DoctorResponse(id=d.id, name=d.name, specialization=d.specialization, is_available=d.is_available)
            for d in doctors_service.list(only_available=available)
        ]
    except Exception as e:
        logger.error(f"Error retrieving doctors: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to retrieve doctors")


@router.post("/", response_model=DoctorResponse)
def create_doctor(
    doctor_data: DoctorCreate,
    doctors_service: DoctorsService = Depends(get_doctors_service),
):
    d = doctors_service.register(doctor_data.name, doctor_data.specialization, doctor_data.is_available)
    logger.info(f"Registered doctor {d.id}")
    return DoctorResponse(id=d.id, name=d.name, specialization=d.specialization, is_available=d.is_available)


@router.get("/{doctor_id}", response_model=DoctorResponse)
def get_doctor(
    doctor_id: str,
    doctors_service: DoctorsService = Depends(get_doctors_service),
):
    d = doctors_service.get(doctor_id)
    return DoctorResponse(id=d.id, name=d.name, specialization=d.specialization, is_available=d.is_available)
