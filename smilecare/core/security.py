from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt
from passlib.context import CryptContext
from fastapi import HTTPException, status
from pydantic import BaseModel
from enum import Enum
import logging

from .config import settings

logger = logging.getLogger(__name__)

# Password hashing
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)

class UserRole(str, Enum):
    CLIENT = "client"
    STAFF = "staff"

class SessionClaims(BaseModel):
    id: int
    role: UserRole
    name: str
    iat: int
    exp: int

# Password utilities
def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    """Verify a plain password against its hash.

    Unrecognised or missing hashes fail closed instead of raising.
    """
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        logger.warning("Password verification failed on a malformed hash")
        return False

def get_password_hash(password: str) -> str:
    """Generate password hash."""
    return pwd_context.hash(password)

def dummy_verify() -> None:
    """Spend the time of a real verification when there is no hash to check."""
    pwd_context.dummy_verify()

# Session token errors
class TokenError(Exception):
    """Base class for session token failures."""

class InvalidToken(TokenError):
    pass

class TokenExpired(TokenError):
    pass

def _epoch(now: Optional[datetime]) -> int:
    if now is None:
        now = datetime.now(timezone.utc)
    return int(now.timestamp())

# JWT utilities
def create_session_token(
    user_id: int,
    role: UserRole,
    name: str,
    secret: str,
    now: Optional[datetime] = None,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """Create a signed session token for the given user."""
    if expires_delta is None:
        expires_delta = timedelta(days=settings.SESSION_TOKEN_EXPIRE_DAYS)

    issued_at = _epoch(now)
    to_encode = {
        "sub": str(user_id),
        "role": UserRole(role).value,
        "name": name,
        "iat": issued_at,
        "exp": issued_at + int(expires_delta.total_seconds()),
    }

    return jwt.encode(to_encode, secret, algorithm=settings.JWT_ALGORITHM)

def verify_session_token(
    token: str,
    secret: str,
    now: Optional[datetime] = None,
) -> SessionClaims:
    """Verify a session token and return its claims.

    Raises InvalidToken when the signature or structure is wrong and
    TokenExpired when a correctly signed token is past its expiry.
    """
    try:
        # Expiry is checked below against the caller's clock
        payload = jwt.decode(
            token,
            secret,
            algorithms=[settings.JWT_ALGORITHM],
            options={"verify_exp": False},
        )
    except JWTError as exc:
        raise InvalidToken(str(exc)) from exc

    try:
        claims = SessionClaims(
            id=int(payload["sub"]),
            role=payload["role"],
            name=payload["name"],
            iat=payload["iat"],
            exp=payload["exp"],
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise InvalidToken("Malformed token claims") from exc

    if _epoch(now) > claims.exp:
        raise TokenExpired("Token has expired")

    return claims

# Security exceptions
class AuthenticationError(HTTPException):
    def __init__(self, detail: str = "Could not validate credentials"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )

class AuthorizationError(HTTPException):
    def __init__(self, detail: str = "Forbidden"):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=detail,
        )
