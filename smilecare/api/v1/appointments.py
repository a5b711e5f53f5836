from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from ...api.deps import get_client_claims
from ...core.database import get_db
from ...core.security import SessionClaims
from ...services.appointment_service import AppointmentService
from ...schemas.appointment import AppointmentCreate, AppointmentResponse

router = APIRouter(prefix="/appointments", tags=["Appointments"])

@router.post("", response_model=AppointmentResponse)
def book_appointment(
    data: AppointmentCreate,
    claims: SessionClaims = Depends(get_client_claims),
    db: Session = Depends(get_db),
):
    """Book an appointment for the logged-in client."""
    return AppointmentService(db).book(claims.id, data)

@router.get("", response_model=List[AppointmentResponse])
def list_my_appointments(
    claims: SessionClaims = Depends(get_client_claims),
    db: Session = Depends(get_db),
):
    return AppointmentService(db).list_for_user(claims.id)
