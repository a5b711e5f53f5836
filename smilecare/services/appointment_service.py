from sqlalchemy.orm import Session
from typing import List

from ..core.exceptions import ValidationError
from ..models.appointment import Appointment
from ..models.user import User
from ..schemas.appointment import (
    AppointmentCreate, AppointmentResponse, StaffAppointmentResponse
)

class AppointmentService:
    def __init__(self, db: Session):
        self.db = db

    def book(self, user_id: int, data: AppointmentCreate) -> AppointmentResponse:
        """Book an appointment for a client. Overlapping bookings are accepted."""
        if data.date is None or data.time is None or not (data.reason and data.reason.strip()):
            raise ValidationError("date, time, reason are required")

        appointment = Appointment(
            user_id=user_id,
            date=data.date,
            time=data.time,
            reason=data.reason.strip(),
        )
        self.db.add(appointment)
        self.db.commit()
        self.db.refresh(appointment)

        return AppointmentResponse.model_validate(appointment)

    def list_for_user(self, user_id: int) -> List[AppointmentResponse]:
        appointments = (
            self.db.query(Appointment)
            .filter(Appointment.user_id == user_id)
            .order_by(Appointment.date.asc(), Appointment.time.asc())
            .all()
        )
        return [AppointmentResponse.model_validate(a) for a in appointments]

    def list_all(self) -> List[StaffAppointmentResponse]:
        """All appointments with the booking patient's name and email."""
        rows = (
            self.db.query(Appointment, User)
            .join(User, User.id == Appointment.user_id)
            .order_by(Appointment.date.asc(), Appointment.time.asc())
            .all()
        )
        return [
            StaffAppointmentResponse(
                id=appointment.id,
                date=appointment.date,
                time=appointment.time,
                reason=appointment.reason,
                patient_name=user.name,
                patient_email=user.email,
            )
            for appointment, user in rows
        ]
