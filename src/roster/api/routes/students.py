"""Student CRUD endpoints."""

from fastapi import APIRouter, status

from roster.api.dependencies import StudentServiceDep
from roster.api.models import (
    APIResponse,
    StudentCreate,
    StudentResponse,
    StudentUpdate,
    student_to_response,
)

router = APIRouter(prefix="/students", tags=["students"])


@router.get("", response_model=APIResponse[list[StudentResponse]])
def list_students(service: StudentServiceDep) -> APIResponse[list[StudentResponse]]:
    """List all students."""
    students = service.get_all_students()
    return APIResponse(data=[student_to_response(s) for s in students])


@router.post(
    "",
    response_model=APIResponse[StudentResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_student(
    student: StudentCreate, service: StudentServiceDep
) -> APIResponse[StudentResponse]:
    """Create a new student."""
    created = service.create_student(
        student.id,
        student.first_name,
        student.last_name,
        student.birth_date,
    )
    return APIResponse(data=student_to_response(created))


@router.get("/{student_id:path}", response_model=APIResponse[StudentResponse])
def get_student(student_id: str, service: StudentServiceDep) -> APIResponse[StudentResponse]:
    """Get a student by ID."""
    student = service.get_student(student_id)
    return APIResponse(data=student_to_response(student))


@router.put("/{student_id:path}", response_model=APIResponse[StudentResponse])
def update_student(
    student_id: str, student: StudentUpdate, service: StudentServiceDep
) -> APIResponse[StudentResponse]:
    """Overwrite a student's name and birth date."""
    updated = service.update_student(
        student_id,
        student.first_name,
        student.last_name,
        student.birth_date,
    )
    return APIResponse(data=student_to_response(updated))


@router.delete("/{student_id:path}", status_code=status.HTTP_204_NO_CONTENT)
def delete_student(student_id: str, service: StudentServiceDep) -> None:
    """Delete a student."""
    service.delete_student(student_id)
