"""Pydantic schemas for API request/response."""

from userauth.schemas.auth import CredentialsRequest, UpdateUserRequest, UserRead
from userauth.schemas.health import HealthResponse

__all__ = ["CredentialsRequest", "HealthResponse", "UpdateUserRequest", "UserRead"]
