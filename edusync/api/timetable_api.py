from typing import List, Optional

from fastapi import APIRouter, Depends

from edusync.api.common import deleted_or_404, get_or_404
from edusync.auth.dependencies import admin_only, any_user, get_storage
from edusync.models import TimetableEntry
from edusync.schemas.schedule_schema import TimetableEntryCreate, TimetableEntryDetail, TimetableEntryUpdate
from edusync.storage import Storage

router = APIRouter(prefix="/timetable", tags=["Timetable"])


def entry_detail(storage: Storage, entry: TimetableEntry) -> TimetableEntryDetail:
    subject_assignment = storage.subject_assignments.get(entry.subject_assignment_id)
    subject = school_class = None
    if subject_assignment is not None:
        subject = storage.subjects.get(subject_assignment.subject_id)
        school_class = storage.classes.get(subject_assignment.class_id)
    return TimetableEntryDetail(**entry.model_dump(), subject_assignment=subject_assignment,
                                subject=subject, school_class=school_class)


@router.get("/", response_model=List[TimetableEntryDetail], dependencies=[Depends(any_user)])
def list_timetable(subject_assignment_id: Optional[int] = None, day: Optional[str] = None,
                   storage: Storage = Depends(get_storage)):
    if subject_assignment_id is not None:
        entries = storage.get_timetable_by_subject_assignment(subject_assignment_id)
    elif day is not None:
        entries = storage.get_timetable_by_day(day)
    else:
        entries = storage.timetable.list_all()
    return [entry_detail(storage, entry) for entry in entries]


@router.post("/", response_model=TimetableEntry, status_code=201, dependencies=[Depends(admin_only)])
def create_entry(payload: TimetableEntryCreate, storage: Storage = Depends(get_storage)):
    return storage.timetable.create(payload)


@router.patch("/{entry_id}", response_model=TimetableEntry, dependencies=[Depends(admin_only)])
def update_entry(entry_id: int, payload: TimetableEntryUpdate, storage: Storage = Depends(get_storage)):
    return get_or_404(storage.timetable.update(entry_id, payload), "Timetable entry")


@router.delete("/{entry_id}", status_code=204, dependencies=[Depends(admin_only)])
def delete_entry(entry_id: int, storage: Storage = Depends(get_storage)):
    return deleted_or_404(storage.timetable.delete(entry_id), "Timetable entry")
