"""FastAPI application entry point."""

import logging

from teacher_records.application import create_app
from teacher_records.config import get_settings
from teacher_records.utils.logging import setup_logging

# Setup logging before creating app
setup_logging()

# Create application instance
app = create_app()


def run() -> None:
    """Serve the application with uvicorn using configured host and port."""
    import uvicorn

    settings = get_settings()
    logging.getLogger(__name__).info(
        f"Server running on http://localhost:{settings.PORT}"
    )

    uvicorn.run(
        "teacher_records.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
