from sqlalchemy import Column, Integer, ForeignKey, DateTime, Date, Time, Text
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from ..core.database import Base

class Appointment(Base):
    __tablename__ = "appointments"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    # Appointment details
    date = Column(Date, nullable=False, index=True)
    time = Column(Time, nullable=False)
    reason = Column(Text, nullable=False)

    created_at = Column(DateTime, server_default=func.now())

    user = relationship("User", back_populates="appointments")

    def __repr__(self):
        return f"<Appointment(id={self.id}, user_id={self.user_id}, date='{self.date}', time='{self.time}')>"
