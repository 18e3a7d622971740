from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException

from edusync.api.common import deleted_or_404, get_or_404
from edusync.auth.dependencies import any_user, get_storage, staff_only
from edusync.models import Assignment, Submission, SubmissionStatus, User, UserRole
from edusync.schemas.coursework_schema import (
    AssignmentCreate, AssignmentUpdate, SubmissionCreate, SubmissionUpdate,
)
from edusync.storage import Storage

router = APIRouter(tags=["Assignments"])


@router.get("/assignments", response_model=List[Assignment], dependencies=[Depends(any_user)])
def list_assignments(subject_assignment_id: Optional[int] = None, storage: Storage = Depends(get_storage)):
    if subject_assignment_id is not None:
        return storage.get_assignments_by_subject_assignment(subject_assignment_id)
    return storage.assignments.list_all()


@router.get("/assignments/{assignment_id}", response_model=Assignment, dependencies=[Depends(any_user)])
def get_assignment(assignment_id: int, storage: Storage = Depends(get_storage)):
    return get_or_404(storage.assignments.get(assignment_id), "Assignment")


@router.post("/assignments", response_model=Assignment, status_code=201, dependencies=[Depends(staff_only)])
def create_assignment(payload: AssignmentCreate, storage: Storage = Depends(get_storage)):
    return storage.assignments.create(payload)


@router.patch("/assignments/{assignment_id}", response_model=Assignment, dependencies=[Depends(staff_only)])
def update_assignment(assignment_id: int, payload: AssignmentUpdate, storage: Storage = Depends(get_storage)):
    return get_or_404(storage.assignments.update(assignment_id, payload), "Assignment")


@router.delete("/assignments/{assignment_id}", status_code=204, dependencies=[Depends(staff_only)])
def delete_assignment(assignment_id: int, storage: Storage = Depends(get_storage)):
    return deleted_or_404(storage.assignments.delete(assignment_id), "Assignment")


@router.get("/submissions", response_model=List[Submission], dependencies=[Depends(any_user)])
def list_submissions(assignment_id: Optional[int] = None, student_id: Optional[int] = None,
                     storage: Storage = Depends(get_storage)):
    if assignment_id is not None:
        return storage.get_submissions_by_assignment(assignment_id)
    if student_id is not None:
        return storage.get_submissions_by_student(student_id)
    raise HTTPException(status_code=400, detail="Provide assignment_id or student_id")


@router.post("/submissions", response_model=Submission, status_code=201)
def create_submission(payload: SubmissionCreate, user: User = Depends(any_user),
                      storage: Storage = Depends(get_storage)):
    if user.role == UserRole.student:
        student = storage.get_student_by_user_id(user.id)
        if student is None or student.id != payload.student_id:
            raise HTTPException(status_code=403, detail="Students can only submit their own work")
        if payload.status == SubmissionStatus.marked or payload.marks is not None:
            raise HTTPException(status_code=403, detail="Students cannot mark submissions")
    get_or_404(storage.assignments.get(payload.assignment_id), "Assignment")
    return storage.submissions.create(payload)


@router.patch("/submissions/{submission_id}", response_model=Submission, dependencies=[Depends(staff_only)])
def update_submission(submission_id: int, payload: SubmissionUpdate, storage: Storage = Depends(get_storage)):
    return get_or_404(storage.submissions.update(submission_id, payload), "Submission")


@router.delete("/submissions/{submission_id}", status_code=204, dependencies=[Depends(staff_only)])
def delete_submission(submission_id: int, storage: Storage = Depends(get_storage)):
    return deleted_or_404(storage.submissions.delete(submission_id), "Submission")
