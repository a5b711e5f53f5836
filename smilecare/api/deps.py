from fastapi import Depends, Request, status
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional, Union

from ..core.config import Settings, get_settings
from ..core.security import (
    verify_session_token, InvalidToken, TokenExpired, SessionClaims,
    AuthenticationError, AuthorizationError, UserRole
)

BEARER_PREFIX = "Bearer "

class RejectReason(str, Enum):
    MISSING_TOKEN = "Missing token"
    INVALID_TOKEN = "Invalid token"
    EXPIRED = "Token expired"
    FORBIDDEN = "Forbidden"

@dataclass(frozen=True)
class Authorized:
    claims: SessionClaims

@dataclass(frozen=True)
class Rejected:
    reason: RejectReason

    @property
    def status_code(self) -> int:
        if self.reason is RejectReason.FORBIDDEN:
            return status.HTTP_403_FORBIDDEN
        return status.HTTP_401_UNAUTHORIZED

AuthDecision = Union[Authorized, Rejected]

def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Return the token from an ``Authorization: Bearer <token>`` header."""
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        return None
    token = authorization[len(BEARER_PREFIX):].strip()
    return token or None

def authorize(
    authorization: Optional[str],
    secret: str,
    required_role: Optional[UserRole] = None,
    now: Optional[datetime] = None,
) -> AuthDecision:
    """Decide whether a request may proceed.

    Depends only on the header value, the signing secret, the required
    role and the clock, so it can be exercised without a request.
    """
    token = extract_bearer_token(authorization)
    if token is None:
        return Rejected(RejectReason.MISSING_TOKEN)

    try:
        claims = verify_session_token(token, secret, now=now)
    except TokenExpired:
        return Rejected(RejectReason.EXPIRED)
    except InvalidToken:
        return Rejected(RejectReason.INVALID_TOKEN)

    if required_role is not None and claims.role != required_role:
        return Rejected(RejectReason.FORBIDDEN)

    return Authorized(claims)

# Role-based access control dependencies
def require_role(required_role: Optional[UserRole] = None):
    """Create a dependency that authenticates the caller and checks their role."""
    async def guard(
        request: Request,
        settings: Settings = Depends(get_settings),
    ) -> SessionClaims:
        decision = authorize(
            request.headers.get("Authorization"),
            settings.JWT_SECRET,
            required_role,
        )
        if isinstance(decision, Rejected):
            if decision.status_code == status.HTTP_403_FORBIDDEN:
                raise AuthorizationError(decision.reason.value)
            raise AuthenticationError(decision.reason.value)

        request.state.user = decision.claims
        return decision.claims

    return guard

get_current_claims = require_role()
get_client_claims = require_role(UserRole.CLIENT)
get_staff_claims = require_role(UserRole.STAFF)
