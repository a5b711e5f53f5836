from pydantic import BaseModel
from typing import Optional

from ..core.security import UserRole

# Required fields are checked by AuthService so that a missing field is a 400
class UserRegister(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    dob: Optional[str] = None
    password: Optional[str] = None

class UserLogin(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None

# Public-safe summary embedded in auth responses
class UserSummary(BaseModel):
    id: int
    name: str
    role: UserRole

    class Config:
        from_attributes = True

class TokenResponse(BaseModel):
    token: str
    user: UserSummary

class UserResponse(BaseModel):
    id: int
    name: str
    email: str
    phone: Optional[str] = None
    dob: Optional[str] = None
    role: UserRole

    class Config:
        from_attributes = True

class PatientResponse(BaseModel):
    id: int
    name: str
    email: str
    phone: Optional[str] = None
    dob: Optional[str] = None

    class Config:
        from_attributes = True
