"""Middleware that attaches the signed-in user to request.state before routing."""

from sqlalchemy.orm import Session, sessionmaker
from starlette.concurrency import run_in_threadpool
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from userauth.models import User
from userauth.services.current_user import resolve_current_user
from userauth.services.users import UsersService


class CurrentUserMiddleware(BaseHTTPMiddleware):
    """
    Resolve session["user_id"] to a User and store it on request.state.current_user.

    Must sit inside SessionMiddleware. The request always continues, whether or
    not a user was found. The lookup runs in the threadpool with its own DB session.
    """

    def __init__(self, app: ASGIApp, session_factory: sessionmaker[Session]) -> None:
        super().__init__(app)
        self.session_factory = session_factory

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        session = request.scope.get("session")
        if session:
            user = await run_in_threadpool(self._resolve, session)
            if user is not None:
                request.state.current_user = user
        return await call_next(request)

    def _resolve(self, session: dict) -> User | None:
        db = self.session_factory()
        try:
            return resolve_current_user(session, UsersService(db))
        finally:
            db.close()
