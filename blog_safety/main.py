"""FastAPI application entrypoint."""
from __future__ import annotations

from fastapi import FastAPI

from .api.routes.comments import router as comments_router
from .api.routes.health import router as health_router
from .api.routes.moderation import router as moderation_router
from .api.routes.usernames import router as usernames_router
from .core.config import get_settings
from .core.logging import configure_logging, get_logger


def create_app() -> FastAPI:
    """Application factory used by ASGI servers."""
    settings = get_settings()
    configure_logging(settings)

    app = FastAPI(title=settings.app_name)

    app.include_router(health_router, prefix=f"{settings.api_prefix}/health", tags=["health"])
    app.include_router(moderation_router, prefix=settings.api_prefix)
    app.include_router(usernames_router, prefix=settings.api_prefix)
    app.include_router(comments_router, prefix=settings.api_prefix)

    get_logger(__name__).info(
        "app_created", environment=settings.environment, api_prefix=settings.api_prefix
    )
    return app


app = create_app()
