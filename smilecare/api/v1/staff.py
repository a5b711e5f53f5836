from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from ...api.deps import get_staff_claims
from ...core.database import get_db
from ...services.appointment_service import AppointmentService
from ...services.user_store import UserStore
from ...schemas.appointment import StaffAppointmentResponse
from ...schemas.auth import PatientResponse

# Every route here requires a staff session
router = APIRouter(
    prefix="/staff",
    tags=["Staff"],
    dependencies=[Depends(get_staff_claims)],
)

@router.get("/appointments", response_model=List[StaffAppointmentResponse])
def list_all_appointments(db: Session = Depends(get_db)):
    """All booked appointments with patient details."""
    return AppointmentService(db).list_all()

@router.get("/patients", response_model=List[PatientResponse])
def list_patients(db: Session = Depends(get_db)):
    """All registered clients, ordered by name."""
    return UserStore(db).list_clients()
