"""FastAPI application entrypoint. No business logic; only wiring and middleware."""

from dotenv import load_dotenv

load_dotenv()

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import Session, sessionmaker
from starlette.middleware.sessions import SessionMiddleware

from userauth.api.middleware import CurrentUserMiddleware
from userauth.api.v1 import build_router
from userauth.core.config import Settings, get_settings
from userauth.core.database import SessionLocal
from userauth.core.logging_config import configure_logging
from userauth.core.security import PasswordHasher

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    session_factory: sessionmaker[Session] | None = None,
    password_hasher: PasswordHasher | None = None,
) -> FastAPI:
    """
    Build the application. Tests pass their own settings, session factory and
    hasher; production uses the module-level defaults.
    """
    settings = settings or get_settings()
    session_factory = session_factory or SessionLocal
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title="User Auth API",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.settings = settings
    app.state.session_factory = session_factory
    app.state.password_hasher = password_hasher or PasswordHasher.from_settings(settings)

    # Middleware added last runs first: CORS -> sessions -> current user.
    if settings.CURRENT_USER_RESOLVER == "middleware":
        app.add_middleware(CurrentUserMiddleware, session_factory=session_factory)
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.SESSION_SECRET.get_secret_value(),
        session_cookie=settings.SESSION_COOKIE_NAME,
        max_age=settings.SESSION_MAX_AGE_SEC,
        https_only=settings.SESSION_HTTPS_ONLY,
        same_site="lax",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.APP_ENV == "dev" else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(
        build_router(settings.CURRENT_USER_RESOLVER),
        prefix=settings.API_V1_PREFIX,
    )

    @app.get("/")
    def root() -> dict[str, str]:
        """Root route; minimal payload for discovery."""
        return {"message": "User Auth API"}

    logger.info(
        "App created: env=%s current_user_resolver=%s",
        settings.APP_ENV,
        settings.CURRENT_USER_RESOLVER,
    )
    return app


app = create_app()
