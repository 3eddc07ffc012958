"""Storage for student records."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from roster.students.models import Student


class StudentRepository(Protocol):
    """Interface for student storage backends.

    Implementations are mechanical stores: they never raise domain errors
    and report absence with None rather than an exception.
    """

    def save(self, student: Student) -> None:
        """Append a record. Uniqueness is not checked here."""
        ...

    def find_by_id(self, student_id: str) -> Student | None:
        """Return the first record with this ID, or None."""
        ...

    def find_all(self) -> list[Student]:
        """Return a snapshot of all records in insertion order."""
        ...

    def delete_by_id(self, student_id: str) -> None:
        """Remove every record with this ID. No-op when none match."""
        ...

    def update(self, student: Student) -> None:
        """Replace the record with the same ID."""
        ...


class InMemoryStudentRepository:
    """List-backed StudentRepository.

    Contents live for the lifetime of the process. There is no locking;
    callers must serialize access.
    """

    def __init__(self) -> None:
        self._students: list[Student] = []

    def save(self, student: Student) -> None:
        self._students.append(student)

    def find_by_id(self, student_id: str) -> Student | None:
        return next((s for s in self._students if s.id == student_id), None)

    def find_all(self) -> list[Student]:
        return list(self._students)

    def delete_by_id(self, student_id: str) -> None:
        self._students = [s for s in self._students if s.id != student_id]

    def update(self, student: Student) -> None:
        # Replace, not patch: the record moves to the end of find_all() order.
        self.delete_by_id(student.id)
        self.save(student)

    def __len__(self) -> int:
        return len(self._students)
