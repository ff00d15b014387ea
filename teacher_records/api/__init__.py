"""API endpoints package."""

from teacher_records.api.router import create_router

__all__ = ["create_router"]
