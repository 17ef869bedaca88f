"""
FastAPI Application Entry Point.

Builds the application: middleware, exception handlers, API routes,
the in-memory repositories and the static mounts for uploaded images.
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from modules.backend.api import health
from modules.backend.api.router import router as api_router
from modules.backend.core.config import find_project_root, get_app_config
from modules.backend.core.exception_handlers import register_exception_handlers
from modules.backend.core.logging import get_logger, log_with_source, setup_logging
from modules.backend.core.middleware import RequestContextMiddleware
from modules.backend.repositories.note import NoteRepository
from modules.backend.repositories.user import UserRepository
from modules.backend.services.media import MediaIngress

logger = get_logger(__name__)

_app: FastAPI | None = None


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    app_config = get_app_config()
    setup_logging(level=app_config.logging.level)

    if app_config.features.security_startup_checks_enabled:
        from modules.backend.core.startup_checks import run_startup_checks
        run_startup_checks()

    log_with_source(
        logger,
        "internal",
        "info",
        "Application starting",
        app_name=app_config.application.name,
        env=app_config.application.environment,
    )
    yield
    log_with_source(logger, "internal", "info", "Application shutting down")


def create_app(
    media_root: Path | None = None,
    users: UserRepository | None = None,
    notes: NoteRepository | None = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        media_root: Directory the upload folders live under (project root by default)
        users: User repository to serve from (a fresh empty one by default)
        notes: Note repository to serve from (a fresh empty one by default)
    """
    app_config = get_app_config()
    app_settings = app_config.application

    app = FastAPI(
        title=app_settings.name,
        description=app_settings.description,
        version=app_settings.version,
        docs_url="/docs" if app_settings.docs_enabled else None,
        redoc_url="/redoc" if app_settings.docs_enabled else None,
        lifespan=lifespan,
    )

    app.state.users = users if users is not None else UserRepository()
    app.state.notes = notes if notes is not None else NoteRepository()
    app.state.media = MediaIngress.from_config(media_root or find_project_root())
    app.state.media.ensure_directories()

    app.add_middleware(RequestContextMiddleware)

    cors_origins = app_settings.cors.origins
    if cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=cors_origins,
            allow_credentials="*" not in cors_origins,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_exception_handlers(app)

    app.include_router(health.router, tags=["health"])
    app.include_router(api_router, prefix="/api")

    _mount_media(app, app.state.media)

    return app


def _mount_media(app: FastAPI, media: MediaIngress) -> None:
    """Serve each upload directory read-only at its mount path."""
    for target in media.targets.values():
        app.mount(
            target.mount_path,
            StaticFiles(directory=target.directory),
            name=target.mount_path.strip("/"),
        )


def get_app() -> FastAPI:
    """
    Get the application instance (lazy initialization).

    Use this instead of importing `app` directly to avoid
    import-time configuration errors.
    """
    global _app
    if _app is None:
        _app = create_app()
    return _app


# For uvicorn: `uvicorn modules.backend.main:app`
def __getattr__(name: str) -> FastAPI:
    """Support lazy access to `app` for uvicorn compatibility."""
    if name == "app":
        return get_app()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
