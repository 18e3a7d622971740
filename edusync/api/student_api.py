from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException

from edusync.api.common import deleted_or_404, get_or_404
from edusync.auth.dependencies import admin_only, any_user, get_storage, staff_only
from edusync.models import Student, StudentDocument, User, UserRole
from edusync.schemas.academic_schema import StudentCreate, StudentUpdate, StudentWithUser
from edusync.schemas.resource_schema import StudentDocumentCreate, StudentDocumentUpdate
from edusync.schemas.user_schema import UserSummary
from edusync.storage import Storage

router = APIRouter(tags=["Students"])


def with_user(storage: Storage, student: Student) -> StudentWithUser:
    user = storage.users.get(student.user_id)
    return StudentWithUser(**student.model_dump(), user=UserSummary.from_user(user))


def ensure_student_user(storage: Storage, user_id: int) -> None:
    # The store accepts any user_id, so the reference is checked here
    user = storage.users.get(user_id)
    if user is None or user.role != UserRole.student:
        raise HTTPException(status_code=400, detail="user_id must reference a student account")


def ensure_can_view(storage: Storage, user: User, student_id: int) -> Student:
    student = get_or_404(storage.students.get(student_id), "Student")
    if user.role == UserRole.student and student.user_id != user.id:
        raise HTTPException(status_code=403, detail="Students can only view their own record")
    return student


@router.get("/students", response_model=List[StudentWithUser], dependencies=[Depends(staff_only)])
def list_students(class_id: Optional[int] = None, storage: Storage = Depends(get_storage)):
    if class_id is not None:
        students = storage.get_students_by_class(class_id)
    else:
        students = storage.students.list_all()
    return [with_user(storage, student) for student in students]


@router.get("/students/{student_id}", response_model=StudentWithUser)
def get_student(student_id: int, user: User = Depends(any_user), storage: Storage = Depends(get_storage)):
    return with_user(storage, ensure_can_view(storage, user, student_id))


@router.post("/students", response_model=Student, status_code=201, dependencies=[Depends(admin_only)])
def create_student(payload: StudentCreate, storage: Storage = Depends(get_storage)):
    ensure_student_user(storage, payload.user_id)
    return storage.students.create(payload)


@router.patch("/students/{student_id}", response_model=Student, dependencies=[Depends(admin_only)])
def update_student(student_id: int, payload: StudentUpdate, storage: Storage = Depends(get_storage)):
    if payload.user_id is not None:
        ensure_student_user(storage, payload.user_id)
    return get_or_404(storage.students.update(student_id, payload), "Student")


@router.delete("/students/{student_id}", status_code=204, dependencies=[Depends(admin_only)])
def delete_student(student_id: int, storage: Storage = Depends(get_storage)):
    return deleted_or_404(storage.students.delete(student_id), "Student")


@router.get("/student-documents", response_model=List[StudentDocument])
def list_student_documents(student_id: int, user: User = Depends(any_user),
                           storage: Storage = Depends(get_storage)):
    ensure_can_view(storage, user, student_id)
    return storage.get_student_documents_by_student(student_id)


@router.post("/student-documents", response_model=StudentDocument, status_code=201,
             dependencies=[Depends(staff_only)])
def create_student_document(payload: StudentDocumentCreate, storage: Storage = Depends(get_storage)):
    get_or_404(storage.students.get(payload.student_id), "Student")
    return storage.student_documents.create(payload)


@router.patch("/student-documents/{document_id}", response_model=StudentDocument,
              dependencies=[Depends(staff_only)])
def update_student_document(document_id: int, payload: StudentDocumentUpdate,
                            storage: Storage = Depends(get_storage)):
    return get_or_404(storage.student_documents.update(document_id, payload), "Student document")


@router.delete("/student-documents/{document_id}", status_code=204, dependencies=[Depends(staff_only)])
def delete_student_document(document_id: int, storage: Storage = Depends(get_storage)):
    return deleted_or_404(storage.student_documents.delete(document_id), "Student document")
