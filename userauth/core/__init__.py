"""Core app configuration, database and password hashing."""

from userauth.core.config import get_settings, settings
from userauth.core.database import get_db
from userauth.core.security import PasswordHasher

__all__ = ["get_settings", "settings", "get_db", "PasswordHasher"]
