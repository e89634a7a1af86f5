from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlmodel import Session
import logging

from ..database import get_session
from ..config import settings
from ..application.ports.appointments_repo import AppointmentDto
from ..application.scheduling.validator import CandidateRequest
from ..application.services.appointments_service import AppointmentsService
from ..infrastructure.persistence.sqlalchemy.repositories.appointments_repository_sql import SqlAppointmentsRepository
from ..schemas.appointments.appointment import (
    AppointmentCreate,
    AppointmentUpdate,
    AppointmentStatusUpdate,
    AppointmentResponse,
    AvailabilityCheckRequest,
    AvailabilityCheckResponse,
)
from ..schemas.common.common import ErrorResponse, MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/appointments", tags=["Appointments"])


def get_appointments_service(session: Session = Depends(get_session)) -> AppointmentsService:
    return AppointmentsService(
        repo=SqlAppointmentsRepository(session),
        default_duration=settings.DEFAULT_APPOINTMENT_DURATION,
    )


def _to_response(a: AppointmentDto) -> AppointmentResponse:
    return AppointmentResponse(
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


@router.get("/", response_model=List[AppointmentResponse])
async def list_appointments(
    doctor_id: Optional[str] = Query(None),
    appt_service: AppointmentsService = Depends(get_appointments_service),
):
    try:
        return [_to_response(a) for a in await appt_service.list(doctor_id)]
    except Exception as e:
        logger.error(f"Error retrieving appointments: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to fetch appointments")


@router.post("/", response_model=AppointmentResponse, responses={409: {"model": ErrorResponse}})
async def create_appointment(
    appointment_data: AppointmentCreate,
    appt_service: AppointmentsService = Depends(get_appointments_service),
):
    try:
        appt = await appt_service.book(
            patient_id=appointment_data.patient_id,
            patient_name=appointment_data.patient_name,
            doctor_id=appointment_data.doctor_id,
            date=appointment_data.date,
            time=appointment_data.time,
            type=appointment_data.type,
            chair=appointment_data.chair,
            duration=appointment_data.duration,
        )
        return _to_response(appt)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error creating appointment: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to create appointment")


@router.post("/check", response_model=AvailabilityCheckResponse)
async def check_availability(
    request: AvailabilityCheckRequest,
    appt_service: AppointmentsService = Depends(get_appointments_service),
):
    result = await appt_service.check_availability(CandidateRequest(
        doctor_id=request.doctor_id,
        date=request.date,
        time=request.time,
        duration=request.duration,
        exclude_id=request.exclude_appointment_id,
    ))
    return AvailabilityCheckResponse(
        is_valid=result.is_valid,
        conflict_error=result.conflict_error,
        error_kind=result.error_kind,
    )


@router.get("/{appointment_id}", response_model=AppointmentResponse)
async def get_appointment(
    appointment_id: int,
    appt_service: AppointmentsService = Depends(get_appointments_service),
):
    return _to_response(await appt_service.get(appointment_id))


@router.put("/{appointment_id}", response_model=AppointmentResponse, responses={409: {"model": ErrorResponse}})
async def update_appointment(
    appointment_id: int,
    update_data: AppointmentUpdate,
    appt_service: AppointmentsService = Depends(get_appointments_service),
):
    try:
        appt = await appt_service.update(appointment_id, update_data.model_dump(exclude_unset=True))
        return _to_response(appt)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error updating appointment {appointment_id}: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to update appointment")


@router.put("/{appointment_id}/status", response_model=AppointmentResponse)
async def update_appointment_status(
    appointment_id: int,
    status_data: AppointmentStatusUpdate,
    appt_service: AppointmentsService = Depends(get_appointments_service),
):
    try:
        appt = await appt_service.update_status(appointment_id, status_data.status)
        return _to_response(appt)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error updating appointment {appointment_id} status: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to update appointment status")


@router.delete("/{appointment_id}", response_model=MessageResponse)
async def delete_appointment(
    appointment_id: int,
    appt_service: AppointmentsService = Depends(get_appointments_service),
):
    try:
        await appt_service.delete(appointment_id)
        return MessageResponse(message="Appointment deleted")
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error deleting appointment {appointment_id}: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to delete appointment")
