"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from teacher_records.api import create_router
from teacher_records.config import Settings, get_settings
from teacher_records.utils.exception_handlers import register_exception_handlers
from teacher_records.utils.ids import TimestampIdGenerator
from teacher_records.utils.storage import TeacherStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    # Startup
    store: TeacherStore = app.state.store
    store.ensure()
    logger.info("Teacher store ready", extra={"path": str(store.path)})
    yield
    # Shutdown
    logger.info("Shutting down")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        settings: Settings to build the app from. Defaults to the global
            settings instance.

    Returns:
        Configured FastAPI application.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.API_TITLE,
        description="Create, update, filter and search teacher records",
        version=settings.API_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.store = TeacherStore(
        settings.DATA_FILE, strict=settings.STRICT_PERSISTENCE
    )
    app.state.id_generator = TimestampIdGenerator()

    register_exception_handlers(app)
    app.include_router(create_router())

    return app
