"""Teachers API endpoints."""

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Query, Response
from fastapi import status as http_status

from teacher_records.schemas.teacher import AverageClassesResponse, Teacher
from teacher_records.services.teacher_service import TeacherService
from teacher_records.utils.api_helpers import operation_guard, parse_int
from teacher_records.utils.dependencies import dependencies

router = APIRouter(
    prefix="/teachers",
    tags=["Teachers"],
)


@router.get("")
async def list_teachers(
    service: TeacherService = Depends(dependencies.teacher),
) -> list[dict[str, Any]]:
    """Return every teacher in collection order."""
    with operation_guard("Failed to retrieve teachers"):
        return await service.get_all()


@router.post(
    "",
    status_code=http_status.HTTP_201_CREATED,
    response_model=None,
    responses={http_status.HTTP_201_CREATED: {"model": Teacher}},
)
async def create_teacher(
    payload: Any = Body(...),
    service: TeacherService = Depends(dependencies.teacher),
) -> dict[str, Any]:
    """Create a new teacher.

    The body is an open JSON object; fields beyond the required ones are
    stored as given.

    Args:
        payload: Candidate teacher record.
        service: TeacherService instance.

    Returns:
        Created teacher in the submitted key order, with its
        assigned id last.
    """
    with operation_guard("Failed to add teacher"):
        return await service.create(payload)


@router.get("/filter/age")
async def filter_teachers_by_age(
    age: Optional[str] = Query(default=None, description="Exact age to match"),
    service: TeacherService = Depends(dependencies.teacher),
) -> list[dict[str, Any]]:
    """Return teachers whose age equals the given integer."""
    with operation_guard("Failed to filter teachers by age"):
        return await service.filter_by_age(parse_int(age))


@router.get("/filter/classes")
async def filter_teachers_by_classes(
    classes: Optional[str] = Query(
        default=None, description="Exact number of classes to match"
    ),
    service: TeacherService = Depends(dependencies.teacher),
) -> list[dict[str, Any]]:
    """Return teachers whose number of classes equals the given integer."""
    with operation_guard("Failed to filter teachers by number of classes"):
        return await service.filter_by_classes(parse_int(classes))


@router.get("/search")
async def search_teacher(
    name: Optional[str] = Query(default=None, description="Name fragment"),
    service: TeacherService = Depends(dependencies.teacher),
) -> Optional[dict[str, Any]]:
    """Find the first teacher whose name contains the given text.

    Matching is case-insensitive. A missing ``name`` is reported as a
    server error, like any other failure of this endpoint.

    Args:
        name: Text to search for in full names.
        service: TeacherService instance.

    Returns:
        First matching teacher, or null.
    """
    with operation_guard("Failed to search for teacher"):
        if name is None:
            raise ValueError("name query parameter is required")
        return await service.search_by_name(name)


@router.get("/average-classes")
async def average_classes(
    service: TeacherService = Depends(dependencies.teacher),
) -> AverageClassesResponse:
    """Return the average number of classes across all teachers."""
    with operation_guard("Failed to calculate average number of classes"):
        average = await service.average_classes()
        return AverageClassesResponse(averageClasses=average)


@router.put(
    "/{teacher_id}",
    response_model=None,
    responses={http_status.HTTP_200_OK: {"model": Teacher}},
)
async def update_teacher(
    teacher_id: str,
    payload: Any = Body(...),
    service: TeacherService = Depends(dependencies.teacher),
) -> dict[str, Any]:
    """Update a teacher by shallow-merging the supplied fields.

    Args:
        teacher_id: Teacher id.
        payload: Fields to change.
        service: TeacherService instance.

    Returns:
        Updated teacher.
    """
    with operation_guard("Failed to update teacher"):
        return await service.update(teacher_id, payload)


@router.delete("/{teacher_id}", status_code=http_status.HTTP_204_NO_CONTENT)
async def delete_teacher(
    teacher_id: str,
    service: TeacherService = Depends(dependencies.teacher),
) -> Response:
    """Delete a teacher by id."""
    with operation_guard("Failed to delete teacher"):
        await service.delete(teacher_id)
    return Response(status_code=http_status.HTTP_204_NO_CONTENT)
