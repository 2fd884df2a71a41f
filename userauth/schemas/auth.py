"""Request/response schemas for auth and user endpoints."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, TypeAdapter

from userauth.core.security import PASSWORD_MAX_LEN, PASSWORD_MIN_LEN

_email_adapter = TypeAdapter(EmailStr)


def normalize_email(value: str) -> str:
    """
    Validate an email and return the stored form (domain lowercased).

    Same normalization the request schemas apply, for callers outside the API.
    Raises pydantic.ValidationError for an invalid address.
    """
    return _email_adapter.validate_python(value.strip())


class CredentialsRequest(BaseModel):
    """Email and password for signup and signin."""

    email: EmailStr = Field(..., description="Account email")
    password: str = Field(
        ...,
        min_length=PASSWORD_MIN_LEN,
        max_length=PASSWORD_MAX_LEN,
        description="Password",
    )


class UpdateUserRequest(BaseModel):
    """Partial update for a user; omitted fields are left unchanged."""

    email: EmailStr | None = None
    password: str | None = Field(
        default=None,
        min_length=PASSWORD_MIN_LEN,
        max_length=PASSWORD_MAX_LEN,
    )


class UserRead(BaseModel):
    """User as returned by the API (no password)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    admin: bool
