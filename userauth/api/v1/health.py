"""Health check endpoint: database connectivity and the active current-user resolver."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from userauth.core.database import check_db_connected, get_db
from userauth.schemas.health import HealthResponse

router = APIRouter()


@router.get("/", response_model=HealthResponse)
def get_health(request: Request, db: Annotated[Session, Depends(get_db)]) -> HealthResponse:
    """Used by load balancers and monitoring."""
    settings = request.app.state.settings
    return HealthResponse(
        status="ok",
        environment=settings.APP_ENV,
        database="connected" if check_db_connected(db) else "disconnected",
        current_user_resolver=settings.CURRENT_USER_RESOLVER,
    )
