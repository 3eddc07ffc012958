"""StudentService - validation and orchestration for student records."""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import TYPE_CHECKING, NoReturn

from roster.students.exceptions import (
    StudentExistsError,
    StudentNotFoundError,
    StudentValidationError,
)
from roster.students.models import Student

if TYPE_CHECKING:
    from collections.abc import Callable

    from roster.students.repository import StudentRepository

logger = logging.getLogger(__name__)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


class StudentService:
    """Main API for student record operations.

    Holds every business rule about student records and delegates storage
    to an injected repository. Each check completes before the repository
    is touched, so a rejected call never leaves a partial change behind.
    """

    def __init__(
        self,
        repository: StudentRepository,
        clock: Callable[[], date] = date.today,
    ) -> None:
        """Initialize the service.

        Args:
            repository: Storage backend for student records.
            clock: Returns today's date. Used to reject future birth dates.
        """
        self._repository = repository
        self._clock = clock

    def create_student(
        self,
        student_id: str,
        first_name: str,
        last_name: str | None,
        birth_date: date | None,
    ) -> Student:
        """Create a new student.

        Args:
            student_id: Roster number, must be non-blank and unused
            first_name: Must be non-blank
            last_name: Optional, may be empty or None
            birth_date: Required, must not be in the future

        Returns:
            The stored Student

        Raises:
            StudentValidationError: If a required field is missing or invalid
            StudentExistsError: If a student with this ID already exists
        """
        if _is_blank(student_id):
            self._reject("id", "Student ID must not be empty")
        birth_date = self._validate_profile(first_name, birth_date)
        if self._repository.find_by_id(student_id) is not None:
            logger.warning("Rejected create: student %s already exists", student_id)
            raise StudentExistsError(student_id)

        student = Student(
            id=student_id,
            first_name=first_name,
            last_name=last_name,
            birth_date=birth_date,
        )
        self._repository.save(student)
        logger.info("Created student %s", student_id)
        return student

    def update_student(
        self,
        student_id: str,
        first_name: str,
        last_name: str | None,
        birth_date: date | None,
    ) -> Student:
        """Overwrite the profile fields of an existing student.

        The ID is never changed.

        Raises:
            StudentNotFoundError: If no student has this ID
            StudentValidationError: If first_name or birth_date is invalid
        """
        student = self._repository.find_by_id(student_id)
        if student is None:
            logger.warning("Rejected update: student %s not found", student_id)
            raise StudentNotFoundError(student_id)
        birth_date = self._validate_profile(first_name, birth_date)

        student.first_name = first_name
        student.last_name = last_name
        student.birth_date = birth_date
        self._repository.update(student)
        logger.info("Updated student %s", student_id)
        return student

    def delete_student(self, student_id: str) -> None:
        """Delete a student.

        Raises:
            StudentNotFoundError: If no student has this ID
        """
        if self._repository.find_by_id(student_id) is None:
            logger.warning("Rejected delete: student %s not found", student_id)
            raise StudentNotFoundError(student_id)
        self._repository.delete_by_id(student_id)
        logger.info("Deleted student %s", student_id)

    def get_all_students(self) -> list[Student]:
        """List all students in repository order."""
        return self._repository.find_all()

    def find_student(self, student_id: str) -> Student | None:
        """Look up a student, returning None when absent."""
        return self._repository.find_by_id(student_id)

    def get_student(self, student_id: str) -> Student:
        """Look up a student.

        Raises:
            StudentNotFoundError: If no student has this ID
        """
        student = self._repository.find_by_id(student_id)
        if student is None:
            raise StudentNotFoundError(student_id)
        return student

    # --- Validation ---

    def _validate_profile(self, first_name: str, birth_date: date | None) -> date:
        """Check the profile fields and return birth_date as a plain date."""
        if _is_blank(first_name):
            self._reject("first_name", "First name must not be empty")
        if birth_date is None:
            self._reject("birth_date", "Birth date is required")
        if isinstance(birth_date, datetime):
            birth_date = birth_date.date()
        if birth_date > self._clock():
            self._reject("birth_date", f"Birth date {birth_date.isoformat()} is in the future")
        return birth_date

    def _reject(self, field: str, message: str) -> NoReturn:
        logger.warning("Rejected student data (%s): %s", field, message)
        raise StudentValidationError(field, message)
