"""Pydantic models for REST API."""

from datetime import date
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

from roster.students import Student

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """Standard API response wrapper."""

    data: T | None = None
    error: str | None = None


# Student models
# Blank names are rejected by StudentService, not here, so every client
# sees the same error text.


class StudentCreate(BaseModel):
    """Request model for creating a student."""

    id: str = Field(..., max_length=50)
    first_name: str = Field(..., max_length=255)
    last_name: str | None = Field(default="", max_length=255)
    birth_date: date | None = None


class StudentUpdate(BaseModel):
    """Request model for updating a student (full overwrite)."""

    first_name: str = Field(..., max_length=255)
    last_name: str | None = Field(default="", max_length=255)
    birth_date: date | None = None


class StudentResponse(BaseModel):
    """Response model for a student, including derived fields."""

    id: str
    first_name: str
    last_name: str | None
    birth_date: date | None
    full_name: str
    age: int | None


def student_to_response(student: Student, today: date | None = None) -> StudentResponse:
    """Convert a Student to StudentResponse, computing age as of today."""
    return StudentResponse(
        id=student.id,
        first_name=student.first_name,
        last_name=student.last_name,
        birth_date=student.birth_date,
        full_name=student.full_name,
        age=student.age_years(today) if student.birth_date is not None else None,
    )
