from typing import List

from fastapi import APIRouter, Depends, HTTPException

from edusync.api.common import deleted_or_404, get_or_404
from edusync.auth.dependencies import admin_only, any_user, get_storage
from edusync.models import Teacher, UserRole
from edusync.schemas.academic_schema import TeacherCreate, TeacherUpdate, TeacherWithUser
from edusync.schemas.user_schema import UserSummary
from edusync.storage import Storage

router = APIRouter(prefix="/teachers", tags=["Teachers"])


def with_user(storage: Storage, teacher: Teacher) -> TeacherWithUser:
    user = storage.users.get(teacher.user_id)
    return TeacherWithUser(**teacher.model_dump(), user=UserSummary.from_user(user))


def ensure_teacher_user(storage: Storage, user_id: int) -> None:
    user = storage.users.get(user_id)
    if user is None or user.role != UserRole.teacher:
        raise HTTPException(status_code=400, detail="user_id must reference a teacher account")


@router.get("/", response_model=List[TeacherWithUser], dependencies=[Depends(any_user)])
def list_teachers(storage: Storage = Depends(get_storage)):
    return [with_user(storage, teacher) for teacher in storage.get_all_teachers()]


@router.get("/{teacher_id}", response_model=TeacherWithUser, dependencies=[Depends(any_user)])
def get_teacher(teacher_id: int, storage: Storage = Depends(get_storage)):
    return with_user(storage, get_or_404(storage.teachers.get(teacher_id), "Teacher"))


@router.post("/", response_model=Teacher, status_code=201, dependencies=[Depends(admin_only)])
def create_teacher(payload: TeacherCreate, storage: Storage = Depends(get_storage)):
    ensure_teacher_user(storage, payload.user_id)
    return storage.teachers.create(payload)


@router.patch("/{teacher_id}", response_model=Teacher, dependencies=[Depends(admin_only)])
def update_teacher(teacher_id: int, payload: TeacherUpdate, storage: Storage = Depends(get_storage)):
    if payload.user_id is not None:
        ensure_teacher_user(storage, payload.user_id)
    return get_or_404(storage.teachers.update(teacher_id, payload), "Teacher")


@router.delete("/{teacher_id}", status_code=204, dependencies=[Depends(admin_only)])
def delete_teacher(teacher_id: int, storage: Storage = Depends(get_storage)):
    return deleted_or_404(storage.teachers.delete(teacher_id), "Teacher")
