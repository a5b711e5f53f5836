from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...core.config import Settings, get_settings
from ...core.database import get_db
from ...services.auth_service import AuthService
from ...schemas.auth import UserLogin, UserRegister, TokenResponse

router = APIRouter(prefix="/auth", tags=["Authentication"])

@router.post("/register", response_model=TokenResponse)
def register(
    user_data: UserRegister,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Register a new client account."""
    auth_service = AuthService(db, settings)
    return auth_service.register_user(user_data)

@router.post("/login", response_model=TokenResponse)
def login(
    login_data: UserLogin,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Authenticate user and return a session token."""
    auth_service = AuthService(db, settings)
    return auth_service.authenticate_user(login_data)
