"""Dependency injection functions for FastAPI routes.

Uses descriptor pattern to create dependency functions for services
backed by the application's teacher store.
"""

from typing import Any, Type, TypeVar

from fastapi import Depends, Request

from teacher_records.services.teacher_service import TeacherService
from teacher_records.utils.ids import TimestampIdGenerator
from teacher_records.utils.storage import TeacherStore

T = TypeVar("T")


def get_store(request: Request) -> TeacherStore:
    """Get the teacher store attached to the running application."""
    return request.app.state.store


def get_id_generator(request: Request) -> TimestampIdGenerator:
    """Get the id generator attached to the running application."""
    return request.app.state.id_generator


class ServiceDependency:
    """Descriptor that creates a dependency injection function for a service.

    Caches the dependency function to ensure the same function object is returned
    each time, enabling proper use of FastAPI's dependency_overrides.
    """

    def __init__(self, service_class: Type[T]) -> None:
        """Initialize service dependency descriptor.

        Args:
            service_class: The service class to create instances of.
        """
        self.service_class = service_class
        self._cached_func: Any = None

    def __get__(self, instance: Any, owner: type) -> Any:
        """Create and return cached dependency function when accessed."""
        if self._cached_func is None:

            def dependency_func(
                store: TeacherStore = Depends(get_store),
                id_generator: TimestampIdGenerator = Depends(get_id_generator),
            ) -> T:
                """Get service instance for dependency injection."""
                return self.service_class(store, id_generator)

            self._cached_func = dependency_func
        return self._cached_func


class ServiceDependencies:
    """Container for all service dependency injection functions."""

    teacher = ServiceDependency(TeacherService)


# Create singleton instance for easy access
dependencies = ServiceDependencies()
