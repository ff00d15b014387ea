"""Pydantic schemas for API request/response models."""

from teacher_records.schemas.teacher import AverageClassesResponse, Teacher

__all__ = ["AverageClassesResponse", "Teacher"]
