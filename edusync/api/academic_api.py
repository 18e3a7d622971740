from typing import List, Optional

from fastapi import APIRouter, Depends

from edusync.api.common import deleted_or_404, get_or_404
from edusync.api.teacher_api import with_user as teacher_with_user
from edusync.auth.dependencies import admin_only, any_user, get_storage
from edusync.models import Branch, SchoolClass, Section, Subject, SubjectAssignment
from edusync.schemas.academic_schema import (
    BranchCreate, BranchUpdate, SchoolClassCreate, SchoolClassDetail, SchoolClassUpdate,
    SectionCreate, SectionUpdate, SubjectAssignmentCreate, SubjectAssignmentDetail,
    SubjectAssignmentUpdate, SubjectCreate, SubjectUpdate,
)
from edusync.storage import Storage

router = APIRouter(tags=["Academics"])


# Branches
@router.get("/branches", response_model=List[Branch], dependencies=[Depends(any_user)])
def list_branches(storage: Storage = Depends(get_storage)):
    return storage.branches.list_all()


@router.post("/branches", response_model=Branch, status_code=201, dependencies=[Depends(admin_only)])
def create_branch(payload: BranchCreate, storage: Storage = Depends(get_storage)):
    return storage.branches.create(payload)


@router.patch("/branches/{branch_id}", response_model=Branch, dependencies=[Depends(admin_only)])
def update_branch(branch_id: int, payload: BranchUpdate, storage: Storage = Depends(get_storage)):
    return get_or_404(storage.branches.update(branch_id, payload), "Branch")


@router.delete("/branches/{branch_id}", status_code=204, dependencies=[Depends(admin_only)])
def delete_branch(branch_id: int, storage: Storage = Depends(get_storage)):
    return deleted_or_404(storage.branches.delete(branch_id), "Branch")


# Sections
@router.get("/sections", response_model=List[Section], dependencies=[Depends(any_user)])
def list_sections(storage: Storage = Depends(get_storage)):
    return storage.sections.list_all()


@router.post("/sections", response_model=Section, status_code=201, dependencies=[Depends(admin_only)])
def create_section(payload: SectionCreate, storage: Storage = Depends(get_storage)):
    return storage.sections.create(payload)


@router.patch("/sections/{section_id}", response_model=Section, dependencies=[Depends(admin_only)])
def update_section(section_id: int, payload: SectionUpdate, storage: Storage = Depends(get_storage)):
    return get_or_404(storage.sections.update(section_id, payload), "Section")


@router.delete("/sections/{section_id}", status_code=204, dependencies=[Depends(admin_only)])
def delete_section(section_id: int, storage: Storage = Depends(get_storage)):
    return deleted_or_404(storage.sections.delete(section_id), "Section")


# Classes
def class_detail(storage: Storage, school_class: SchoolClass) -> SchoolClassDetail:
    return SchoolClassDetail(**school_class.model_dump(),
                             branch=storage.branches.get(school_class.branch_id),
                             section=storage.sections.get(school_class.section_id))


@router.get("/classes", response_model=List[SchoolClassDetail], dependencies=[Depends(any_user)])
def list_classes(branch_id: Optional[int] = None, year: Optional[int] = None,
                 storage: Storage = Depends(get_storage)):
    if branch_id is not None:
        classes = storage.get_classes_by_branch(branch_id)
    elif year is not None:
        classes = storage.get_classes_by_year(year)
    else:
        classes = storage.classes.list_all()
    return [class_detail(storage, school_class) for school_class in classes]


@router.get("/classes/{class_id}", response_model=SchoolClassDetail, dependencies=[Depends(any_user)])
def get_class(class_id: int, storage: Storage = Depends(get_storage)):
    return class_detail(storage, get_or_404(storage.classes.get(class_id), "Class"))


@router.post("/classes", response_model=SchoolClass, status_code=201, dependencies=[Depends(admin_only)])
def create_class(payload: SchoolClassCreate, storage: Storage = Depends(get_storage)):
    return storage.classes.create(payload)


@router.patch("/classes/{class_id}", response_model=SchoolClass, dependencies=[Depends(admin_only)])
def update_class(class_id: int, payload: SchoolClassUpdate, storage: Storage = Depends(get_storage)):
    return get_or_404(storage.classes.update(class_id, payload), "Class")


@router.delete("/classes/{class_id}", status_code=204, dependencies=[Depends(admin_only)])
def delete_class(class_id: int, storage: Storage = Depends(get_storage)):
    return deleted_or_404(storage.classes.delete(class_id), "Class")


# Subjects
@router.get("/subjects", response_model=List[Subject], dependencies=[Depends(any_user)])
def list_subjects(storage: Storage = Depends(get_storage)):
    return storage.subjects.list_all()


@router.post("/subjects", response_model=Subject, status_code=201, dependencies=[Depends(admin_only)])
def create_subject(payload: SubjectCreate, storage: Storage = Depends(get_storage)):
    return storage.subjects.create(payload)


@router.patch("/subjects/{subject_id}", response_model=Subject, dependencies=[Depends(admin_only)])
def update_subject(subject_id: int, payload: SubjectUpdate, storage: Storage = Depends(get_storage)):
    return get_or_404(storage.subjects.update(subject_id, payload), "Subject")


@router.delete("/subjects/{subject_id}", status_code=204, dependencies=[Depends(admin_only)])
def delete_subject(subject_id: int, storage: Storage = Depends(get_storage)):
    return deleted_or_404(storage.subjects.delete(subject_id), "Subject")


# Subject assignments
def subject_assignment_detail(storage: Storage, item: SubjectAssignment) -> SubjectAssignmentDetail:
    teacher = storage.teachers.get(item.teacher_id)
    return SubjectAssignmentDetail(
        **item.model_dump(),
        subject=storage.subjects.get(item.subject_id),
        teacher=teacher_with_user(storage, teacher) if teacher else None,
        school_class=storage.classes.get(item.class_id),
    )


@router.get("/subject-assignments", response_model=List[SubjectAssignmentDetail],
            dependencies=[Depends(any_user)])
def list_subject_assignments(teacher_id: Optional[int] = None, class_id: Optional[int] = None,
                             subject_id: Optional[int] = None, storage: Storage = Depends(get_storage)):
    if teacher_id is not None:
        items = storage.get_subject_assignments_by_teacher(teacher_id)
    elif class_id is not None:
        items = storage.get_subject_assignments_by_class(class_id)
    elif subject_id is not None:
        items = storage.get_subject_assignments_by_subject(subject_id)
    else:
        items = storage.subject_assignments.list_all()
    return [subject_assignment_detail(storage, item) for item in items]


@router.post("/subject-assignments", response_model=SubjectAssignment, status_code=201,
             dependencies=[Depends(admin_only)])
def create_subject_assignment(payload: SubjectAssignmentCreate, storage: Storage = Depends(get_storage)):
    return storage.subject_assignments.create(payload)


@router.patch("/subject-assignments/{item_id}", response_model=SubjectAssignment,
              dependencies=[Depends(admin_only)])
def update_subject_assignment(item_id: int, payload: SubjectAssignmentUpdate,
                              storage: Storage = Depends(get_storage)):
    return get_or_404(storage.subject_assignments.update(item_id, payload), "Subject assignment")


@router.delete("/subject-assignments/{item_id}", status_code=204, dependencies=[Depends(admin_only)])
def delete_subject_assignment(item_id: int, storage: Storage = Depends(get_storage)):
    return deleted_or_404(storage.subject_assignments.delete(item_id), "Subject assignment")
