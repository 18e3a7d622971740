from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException

from edusync.api.common import deleted_or_404, get_or_404
from edusync.auth.dependencies import any_user, get_storage, staff_only
from edusync.models import Attendance
from edusync.schemas.coursework_schema import AttendanceCreate, AttendanceUpdate
from edusync.storage import Storage

router = APIRouter(prefix="/attendance", tags=["Attendance"])


@router.get("/", response_model=List[Attendance], dependencies=[Depends(any_user)])
def list_attendance(student_id: Optional[int] = None, subject_assignment_id: Optional[int] = None,
                    on: Optional[date] = None, storage: Storage = Depends(get_storage)):
    if student_id is not None and subject_assignment_id is not None:
        return storage.get_attendance_by_student_and_subject(student_id, subject_assignment_id)
    if on is not None:
        return storage.get_attendance_by_date(on)
    raise HTTPException(status_code=400,
                        detail="Provide student_id and subject_assignment_id, or a date via 'on'")


@router.get("/{attendance_id}", response_model=Attendance, dependencies=[Depends(any_user)])
def get_attendance(attendance_id: int, storage: Storage = Depends(get_storage)):
    return get_or_404(storage.attendance.get(attendance_id), "Attendance record")


@router.post("/", response_model=Attendance, status_code=201, dependencies=[Depends(staff_only)])
def create_attendance(payload: AttendanceCreate, storage: Storage = Depends(get_storage)):
    return storage.attendance.create(payload)


@router.patch("/{attendance_id}", response_model=Attendance, dependencies=[Depends(staff_only)])
def update_attendance(attendance_id: int, payload: AttendanceUpdate, storage: Storage = Depends(get_storage)):
    return get_or_404(storage.attendance.update(attendance_id, payload), "Attendance record")


@router.delete("/{attendance_id}", status_code=204, dependencies=[Depends(staff_only)])
def delete_attendance(attendance_id: int, storage: Storage = Depends(get_storage)):
    return deleted_or_404(storage.attendance.delete(attendance_id), "Attendance record")
