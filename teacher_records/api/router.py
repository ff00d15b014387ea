"""API router factory with core endpoints."""

from fastapi import APIRouter, status
from fastapi.responses import PlainTextResponse

BANNER = "Teacher Management Home Page"


def create_router() -> APIRouter:
    """Create router with the banner, health check and teacher endpoints.

    Returns:
        APIRouter with all application routes.
    """
    from teacher_records.api.teachers import router as teachers_router

    router = APIRouter()

    @router.get("/", response_class=PlainTextResponse, include_in_schema=False)
    async def root() -> str:
        """Banner text for liveness checks from a browser."""
        return BANNER

    @router.get("/health", tags=["Health"], status_code=status.HTTP_200_OK)
    async def health_check() -> dict:
        """Health check endpoint - basic application health.

        Returns:
            Health status response.
        """
        return {"status": "healthy", "service": "teacher-records"}

    router.include_router(teachers_router)

    return router
