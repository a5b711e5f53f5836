from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...api.deps import get_current_claims
from ...core.config import Settings, get_settings
from ...core.database import get_db
from ...core.security import SessionClaims
from ...services.auth_service import AuthService
from ...schemas.auth import UserResponse

router = APIRouter(tags=["Users"])

@router.get("/me", response_model=UserResponse)
def get_current_user_info(
    claims: SessionClaims = Depends(get_current_claims),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Get current user information."""
    auth_service = AuthService(db, settings)
    return auth_service.get_current_user(claims.id)
