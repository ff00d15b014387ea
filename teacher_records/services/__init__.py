"""Business logic services package."""

from teacher_records.services.teacher_service import TeacherService
from teacher_records.services.validation import is_valid_teacher

__all__ = ["TeacherService", "is_valid_teacher"]
