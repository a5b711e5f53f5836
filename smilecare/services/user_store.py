from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from typing import List, Optional

from ..core.exceptions import DuplicateEmailError
from ..core.security import UserRole
from ..models.user import User

class UserStore:
    """Credential store over the users table."""

    def __init__(self, db: Session):
        self.db = db

    def find_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def find_by_id(self, user_id: int) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id).first()

    def insert_client(
        self,
        name: str,
        email: str,
        phone: Optional[str],
        dob: Optional[str],
        password_hash: str,
    ) -> User:
        """Insert a client account, raising DuplicateEmailError on a taken email."""
        return self._insert(name, email, phone, dob, password_hash, UserRole.CLIENT)

    def insert_staff(self, name: str, email: str, password_hash: str) -> User:
        return self._insert(name, email, None, None, password_hash, UserRole.STAFF)

    def list_clients(self) -> List[User]:
        return (
            self.db.query(User)
            .filter(User.role == UserRole.CLIENT)
            .order_by(User.name.asc())
            .all()
        )

    def _insert(self, name, email, phone, dob, password_hash, role: UserRole) -> User:
        user = User(
            name=name,
            email=email,
            phone=phone or "",
            dob=dob or "",
            role=role,
            password_hash=password_hash,
        )
        self.db.add(user)

        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            if "unique" in str(exc.orig).lower():
                raise DuplicateEmailError() from exc
            raise

        self.db.refresh(user)
        return user
