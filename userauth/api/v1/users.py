"""Signup/signin/signout and user lookup routes; session holds the signed-in user id."""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import EmailStr

from userauth.api.v1.deps import (
    get_auth_service,
    get_password_hasher,
    get_session,
    get_users_service,
    require_current_user,
)
from userauth.core.security import PasswordHasher
from userauth.models import User
from userauth.schemas.auth import CredentialsRequest, UpdateUserRequest, UserRead
from userauth.services.auth import AuthService
from userauth.services.current_user import SESSION_USER_KEY
from userauth.services.errors import (
    EmailInUseError,
    InvalidCredentialsError,
    UserNotFoundError,
)
from userauth.services.users import UsersService

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/signup", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def signup(
    body: CredentialsRequest,
    session: Annotated[dict[str, Any], Depends(get_session)],
    auth: Annotated[AuthService, Depends(get_auth_service)],
) -> User:
    """Register a new account and sign it in."""
    try:
        user = auth.signup(body.email, body.password)
    except EmailInUseError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e
    session[SESSION_USER_KEY] = user.id
    return user


@router.post("/signin", response_model=UserRead)
def signin(
    body: CredentialsRequest,
    session: Annotated[dict[str, Any], Depends(get_session)],
    auth: Annotated[AuthService, Depends(get_auth_service)],
) -> User:
    """
    Sign in with email and password and store the user id in the session.

    Unknown email and wrong password return the same status and message.
    """
    try:
        user = auth.signin(body.email, body.password)
    except (UserNotFoundError, InvalidCredentialsError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e
    session[SESSION_USER_KEY] = user.id
    return user


@router.post("/signout", status_code=status.HTTP_204_NO_CONTENT)
def signout(session: Annotated[dict[str, Any], Depends(get_session)]) -> None:
    if session.get(SESSION_USER_KEY):
        logger.info("Signout: user_id=%s", session[SESSION_USER_KEY])
    session[SESSION_USER_KEY] = None


@router.get("/whoami", response_model=UserRead)
def whoami(current_user: Annotated[User, Depends(require_current_user)]) -> User:
    return current_user


@router.get("", response_model=list[UserRead])
def find_all_users(
    email: Annotated[EmailStr, Query()],
    users: Annotated[UsersService, Depends(get_users_service)],
) -> list[User]:
    """List users with exactly this email (normalized the same way signup stores it)."""
    return users.find(email)


@router.get("/{user_id}", response_model=UserRead)
def find_user(
    user_id: int,
    users: Annotated[UsersService, Depends(get_users_service)],
) -> User:
    user = users.find_one(user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=UserNotFoundError().message,
        )
    return user


@router.patch("/{user_id}", response_model=UserRead)
def update_user(
    user_id: int,
    body: UpdateUserRequest,
    users: Annotated[UsersService, Depends(get_users_service)],
    hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
) -> User:
    """Change email and/or password. A new password is hashed before it is stored."""
    attrs = body.model_dump(exclude_none=True)
    if "password" in attrs:
        attrs["password"] = hasher.hash(attrs["password"])
    try:
        return users.update(user_id, attrs)
    except UserNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e
    except EmailInUseError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_user(
    user_id: int,
    users: Annotated[UsersService, Depends(get_users_service)],
) -> None:
    """Delete a user and the reports they own."""
    try:
        users.remove(user_id)
    except UserNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e
