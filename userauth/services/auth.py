"""Signup and signin on top of the user directory and the password hasher."""

import logging
from typing import Protocol

from userauth.core.security import PasswordHasher
from userauth.models import User
from userauth.services.errors import (
    INVALID_CREDENTIALS_MESSAGE,
    EmailInUseError,
    InvalidCredentialsError,
    UserNotFoundError,
)

logger = logging.getLogger(__name__)


class UserDirectory(Protocol):
    """The subset of UsersService that AuthService depends on."""

    def find(self, email: str) -> list[User]: ...

    def create(self, email: str, password: str) -> User: ...


class AuthService:
    """Stateless signup/signin workflow; collaborators are passed in explicitly."""

    def __init__(self, users: UserDirectory, hasher: PasswordHasher) -> None:
        self.users = users
        self.hasher = hasher

    def signup(self, email: str, password: str) -> User:
        """
        Create an account for an unused email and return it.

        The uniqueness check runs before hashing so a duplicate request does not
        pay for key derivation. The unique index on users.email still rejects a
        concurrent duplicate that slips past the check (EmailInUseError either way).
        """
        if self.users.find(email):
            logger.info("Signup rejected: email already registered")
            raise EmailInUseError()

        hashed_password = self.hasher.hash(password)
        user = self.users.create(email, hashed_password)
        logger.info("Signup completed: user_id=%s", user.id)
        return user

    def signin(self, email: str, password: str) -> User:
        """Return the user for valid credentials; both failure kinds carry the same message."""
        users = self.users.find(email)
        if not users:
            logger.info("Signin failed: reason=unknown_email")
            raise UserNotFoundError(INVALID_CREDENTIALS_MESSAGE)

        user = users[0]
        if not self.hasher.verify(password, user.password):
            logger.info("Signin failed: reason=bad_password user_id=%s", user.id)
            raise InvalidCredentialsError()

        logger.info("Signin completed: user_id=%s", user.id)
        return user
