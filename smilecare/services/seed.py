from sqlalchemy.orm import Session
import logging

from ..core.config import Settings
from ..core.exceptions import DuplicateEmailError
from ..core.security import get_password_hash
from ..models.user import User
from .user_store import UserStore

logger = logging.getLogger(__name__)

def seed_staff_account(db: Session, settings: Settings) -> User:
    """Create the clinic staff account unless it already exists."""
    store = UserStore(db)
    email = settings.STAFF_SEED_EMAIL.strip().lower()

    existing = store.find_by_email(email)
    if existing:
        return existing

    try:
        user = store.insert_staff(
            name=settings.STAFF_SEED_NAME,
            email=email,
            password_hash=get_password_hash(settings.STAFF_SEED_PASSWORD),
        )
    except DuplicateEmailError:
        # Another worker seeded it first
        return store.find_by_email(email)

    logger.info(f"Seeded staff account: {email}")
    return user
