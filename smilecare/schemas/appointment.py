import datetime as dt
from pydantic import BaseModel, field_serializer
from typing import Optional

TIME_FORMAT = "%H:%M"

class AppointmentCreate(BaseModel):
    date: Optional[dt.date] = None
    time: Optional[dt.time] = None
    reason: Optional[str] = None

class AppointmentResponse(BaseModel):
    id: int
    user_id: int
    date: dt.date
    time: dt.time
    reason: str
    created_at: Optional[dt.datetime] = None

    class Config:
        from_attributes = True

    # Booked times are returned as HH:MM, the same shape they are sent in
    @field_serializer("time")
    def serialize_time(self, value: dt.time) -> str:
        return value.strftime(TIME_FORMAT)

# Staff view of the appointment book
class StaffAppointmentResponse(BaseModel):
    id: int
    date: dt.date
    time: dt.time
    reason: str
    patient_name: str
    patient_email: str

    @field_serializer("time")
    def serialize_time(self, value: dt.time) -> str:
        return value.strftime(TIME_FORMAT)
