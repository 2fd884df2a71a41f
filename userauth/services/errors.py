"""Domain errors raised by the user and auth services."""

EMAIL_IN_USE_MESSAGE = "Email already registered!"
USER_NOT_FOUND_MESSAGE = "User not found!"
# Shared by "no such email" and "wrong password" so signin does not reveal which accounts exist.
INVALID_CREDENTIALS_MESSAGE = "Invalid email or password!"


class UserServiceError(Exception):
    """Base class for user/auth failures; carries a user-facing message."""

    default_message = "User service error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class EmailInUseError(UserServiceError):
    """Raised when signing up (or changing email) to an address that already has an account."""

    default_message = EMAIL_IN_USE_MESSAGE


class UserNotFoundError(UserServiceError):
    """Raised when a user lookup by id or email yields no record."""

    default_message = USER_NOT_FOUND_MESSAGE


class InvalidCredentialsError(UserServiceError):
    """Raised when signin finds the email but the password does not verify."""

    default_message = INVALID_CREDENTIALS_MESSAGE
