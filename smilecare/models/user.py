from sqlalchemy import Column, Integer, String, DateTime, Enum as SQLEnum
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from ..core.database import Base
from ..core.security import UserRole

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    # Stored lowercase; uniqueness is therefore case-insensitive
    email = Column(String(255), unique=True, index=True, nullable=False)
    phone = Column(String(50), nullable=False, default="")
    dob = Column(String(20), nullable=False, default="")
    role = Column(
        SQLEnum(UserRole, values_callable=lambda roles: [role.value for role in roles]),
        nullable=False,
    )
    password_hash = Column(String(255), nullable=False)

    created_at = Column(DateTime, server_default=func.now())

    appointments = relationship("Appointment", back_populates="user")

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}', role='{self.role}')>"
