"""Students - entity, storage and business rules for student records."""

from roster.students.exceptions import (
    StudentError,
    StudentExistsError,
    StudentNotFoundError,
    StudentValidationError,
)
from roster.students.models import Student
from roster.students.repository import InMemoryStudentRepository, StudentRepository
from roster.students.service import StudentService

__all__ = [
    "InMemoryStudentRepository",
    "Student",
    "StudentError",
    "StudentExistsError",
    "StudentNotFoundError",
    "StudentRepository",
    "StudentService",
    "StudentValidationError",
]
