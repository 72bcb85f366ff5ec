"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from user_directory.config import get_settings
from user_directory.application.formatting import DateFormatter
from user_directory.infrastructure.dependencies import build_http_user_store, build_workspace
from user_directory.infrastructure.logging.log_config import setup_logging
from user_directory.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: open the user API client and build the workspace."""
    settings = get_settings()
    setup_logging(settings)

    http_client = httpx.AsyncClient(timeout=settings.user_api_timeout)
    user_store = build_http_user_store(settings, http_client=http_client)
    app.state.workspace = build_workspace(
        user_store,
        date_formatter=DateFormatter(settings.user_api_date_format),
    )
    logger.info(
        "User directory ready: store=%s, wire dates=%s",
        settings.user_api_base_url,
        settings.user_api_date_format,
    )

    yield

    # Shutdown
    await http_client.aclose()
    app.state.workspace = None


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "user_directory.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
