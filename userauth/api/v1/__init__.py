"""API v1 routes."""

from fastapi import APIRouter, Depends

from userauth.api.v1 import health, users
from userauth.api.v1.deps import attach_current_user


def build_router(current_user_resolver: str = "middleware") -> APIRouter:
    """
    Assemble the v1 router. In "interceptor" mode the user routes resolve the
    current user through a route dependency instead of the app middleware.
    """
    user_dependencies = (
        [Depends(attach_current_user)] if current_user_resolver == "interceptor" else []
    )
    router = APIRouter()
    router.include_router(health.router, prefix="/health", tags=["health"])
    router.include_router(
        users.router,
        prefix="/auth",
        tags=["auth"],
        dependencies=user_dependencies,
    )
    return router
