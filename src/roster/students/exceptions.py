"""Custom exceptions for student records."""


class StudentError(Exception):
    """Base exception for student record errors."""


class StudentValidationError(StudentError):
    """A required field is missing or holds an unusable value."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class StudentExistsError(StudentError):
    """Student with given ID already exists."""

    def __init__(self, student_id: str) -> None:
        super().__init__(f"Student with id '{student_id}' already exists")
        self.student_id = student_id


class StudentNotFoundError(StudentError):
    """Student with given ID does not exist."""

    def __init__(self, student_id: str) -> None:
        super().__init__(f"Student with id '{student_id}' not found")
        self.student_id = student_id
