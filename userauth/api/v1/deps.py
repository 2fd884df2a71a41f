"""Request-scoped dependencies: services, session access and current-user resolution."""

from typing import Annotated, Any

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from userauth.core.database import get_db
from userauth.core.security import PasswordHasher
from userauth.models import User
from userauth.services.auth import AuthService
from userauth.services.current_user import resolve_current_user
from userauth.services.users import UsersService


def get_users_service(db: Annotated[Session, Depends(get_db)]) -> UsersService:
    return UsersService(db)


def get_password_hasher(request: Request) -> PasswordHasher:
    """Hasher configured by the app factory."""
    return request.app.state.password_hasher


def get_auth_service(
    users: Annotated[UsersService, Depends(get_users_service)],
    hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
) -> AuthService:
    return AuthService(users, hasher)


def get_session(request: Request) -> dict[str, Any]:
    """The signed cookie session (requires SessionMiddleware)."""
    return request.session


def attach_current_user(
    request: Request,
    users: Annotated[UsersService, Depends(get_users_service)],
) -> User | None:
    """
    Interceptor-style resolver: runs as a route dependency right before the handler.

    Stores the session's user on request.state.current_user when it resolves;
    never raises for a missing or stale session user id.
    """
    user = resolve_current_user(request.scope.get("session"), users)
    if user is not None:
        request.state.current_user = user
    return user


def get_current_user(request: Request) -> User | None:
    """Current user attached by the middleware or the interceptor, if any."""
    return getattr(request.state, "current_user", None)


def require_current_user(
    current_user: Annotated[User | None, Depends(get_current_user)],
) -> User:
    """Dependency: require a signed-in user. Raises 401 otherwise."""
    if current_user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return current_user
