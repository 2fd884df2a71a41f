"""User directory: CRUD over the users table."""

import logging
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from userauth.models import User
from userauth.services.errors import EmailInUseError, UserNotFoundError

logger = logging.getLogger(__name__)

# Columns a caller may change through update().
UPDATABLE_FIELDS = frozenset({"email", "password", "admin"})


class UsersService:
    """
    Lookups and writes for User records backed by a SQLAlchemy session.

    create() expects an already hashed password; use AuthService.signup to
    register accounts. A unique-constraint violation on email is reported as
    EmailInUseError.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def find(self, email: str) -> list[User]:
        """Return every user whose email matches exactly (normally zero or one)."""
        return self.db.query(User).filter(User.email == email).order_by(User.id).all()

    def find_one(self, user_id: int | None) -> User | None:
        if not user_id:
            return None
        return self.db.query(User).filter(User.id == user_id).first()

    def create(self, email: str, password: str) -> User:
        user = User(email=email, password=password)
        self.db.add(user)
        self._commit()
        self.db.refresh(user)
        logger.info("User created: user_id=%s", user.id)
        return user

    def update(self, user_id: int, attrs: dict[str, Any]) -> User:
        user = self.find_one(user_id)
        if user is None:
            raise UserNotFoundError()
        unknown = set(attrs) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update fields: {', '.join(sorted(unknown))}")
        for key, value in attrs.items():
            setattr(user, key, value)
        self._commit()
        self.db.refresh(user)
        logger.info("User updated: user_id=%s fields=%s", user.id, ",".join(sorted(attrs)))
        return user

    def remove(self, user_id: int) -> None:
        user = self.find_one(user_id)
        if user is None:
            raise UserNotFoundError()
        self.db.delete(user)
        self.db.commit()
        logger.info("User removed: user_id=%s", user_id)

    def _commit(self) -> None:
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise EmailInUseError() from e
