from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from edusync.api.common import get_or_404
from edusync.auth.dependencies import get_storage, staff_only
from edusync.schemas.report_schema import AssignmentStats, AttendanceStats, ClassPerformance
from edusync.services import report_service
from edusync.storage import Storage

router = APIRouter(prefix="/reports", tags=["Reports"], dependencies=[Depends(staff_only)])


@router.get("/attendance", response_model=AttendanceStats)
def attendance_report(student_id: Optional[int] = None, subject_assignment_id: Optional[int] = None,
                      on: Optional[date] = None, storage: Storage = Depends(get_storage)):
    if student_id is not None and subject_assignment_id is not None:
        records = storage.get_attendance_by_student_and_subject(student_id, subject_assignment_id)
    elif on is not None:
        records = storage.get_attendance_by_date(on)
    else:
        raise HTTPException(status_code=400,
                            detail="Provide student_id and subject_assignment_id, or a date via 'on'")
    return report_service.attendance_stats(records)


@router.get("/assignments/{assignment_id}", response_model=AssignmentStats)
def assignment_report(assignment_id: int, storage: Storage = Depends(get_storage)):
    return get_or_404(report_service.assignment_stats(storage, assignment_id), "Assignment")


@router.get("/classes/{class_id}/performance", response_model=ClassPerformance)
def class_performance_report(class_id: int, storage: Storage = Depends(get_storage)):
    get_or_404(storage.classes.get(class_id), "Class")
    return report_service.class_performance(storage, class_id)
