from sqlalchemy.orm import Session
from datetime import timedelta
from typing import Optional
import logging

from ..core.config import Settings
from ..core.exceptions import ValidationError, InvalidCredentialsError, NotFoundError
from ..core.security import (
    verify_password, get_password_hash, dummy_verify, create_session_token
)
from ..models.user import User
from ..schemas.auth import (
    UserLogin, UserRegister, TokenResponse, UserSummary, UserResponse
)
from .user_store import UserStore

logger = logging.getLogger(__name__)

def _present(value: Optional[str]) -> bool:
    return value is not None and value.strip() != ""

class AuthService:
    def __init__(self, db: Session, settings: Settings):
        self.users = UserStore(db)
        self.secret = settings.JWT_SECRET
        self.token_lifetime = timedelta(days=settings.SESSION_TOKEN_EXPIRE_DAYS)

    def register_user(self, user_data: UserRegister) -> TokenResponse:
        """Register a new client and open a session for them."""
        if not (
            _present(user_data.name)
            and _present(user_data.email)
            and user_data.password
        ):
            raise ValidationError("Name, email, and password are required")

        email = user_data.email.strip().lower()
        hashed_password = get_password_hash(user_data.password)

        user = self.users.insert_client(
            name=user_data.name.strip(),
            email=email,
            phone=user_data.phone,
            dob=user_data.dob,
            password_hash=hashed_password,
        )
        logger.info(f"Registered client account id={user.id}")

        return self._session_for(user)

    def authenticate_user(self, login_data: UserLogin) -> TokenResponse:
        """Authenticate user and return a session token."""
        if not (_present(login_data.email) and login_data.password):
            raise ValidationError("Email and password required")

        user = self.users.find_by_email(login_data.email.strip().lower())

        if not user:
            dummy_verify()
            logger.info("Failed login attempt for unknown email")
            raise InvalidCredentialsError()

        if not verify_password(login_data.password, user.password_hash):
            logger.info(f"Failed login attempt for user id={user.id}")
            raise InvalidCredentialsError()

        return self._session_for(user)

    def get_current_user(self, user_id: int) -> UserResponse:
        """Return the profile of an authenticated user."""
        user = self.users.find_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")

        return UserResponse.model_validate(user)

    def _session_for(self, user: User) -> TokenResponse:
        token = create_session_token(
            user.id, user.role, user.name, self.secret,
            expires_delta=self.token_lifetime,
        )
        return TokenResponse(token=token, user=UserSummary.model_validate(user))
