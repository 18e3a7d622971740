from typing import Any, Dict, Optional

from sqlmodel import Field, SQLModel

from edusync.models import Branch, SchoolClass, Section, Student, Subject, Teacher
from edusync.models.branch import BranchBase
from edusync.models.school_class import SchoolClassBase
from edusync.models.section import SectionBase
from edusync.models.student import StudentBase
from edusync.models.subject import SubjectBase
from edusync.models.subject_assignment import SubjectAssignmentBase
from edusync.models.teacher import TeacherBase
from edusync.schemas.user_schema import UserSummary


class StudentCreate(StudentBase):
    documents: Dict[str, Any] = Field(default_factory=dict)


class StudentUpdate(SQLModel):
    user_id: Optional[int] = None
    student_id: Optional[str] = None
    year_level: Optional[int] = None
    branch_id: Optional[int] = None
    section_id: Optional[int] = None
    documents: Optional[Dict[str, Any]] = None


class StudentWithUser(StudentBase):
    id: int
    documents: Dict[str, Any] = {}
    user: Optional[UserSummary] = None


class TeacherCreate(TeacherBase):
    pass


class TeacherUpdate(SQLModel):
    user_id: Optional[int] = None
    teacher_id: Optional[str] = None
    specialization: Optional[str] = None


class TeacherWithUser(TeacherBase):
    id: int
    user: Optional[UserSummary] = None


class BranchCreate(BranchBase):
    pass


class BranchUpdate(SQLModel):
    name: Optional[str] = None
    description: Optional[str] = None


class SectionCreate(SectionBase):
    pass


class SectionUpdate(SQLModel):
    name: Optional[str] = None


class SchoolClassCreate(SchoolClassBase):
    pass


class SchoolClassUpdate(SQLModel):
    year_level: Optional[int] = None
    branch_id: Optional[int] = None
    section_id: Optional[int] = None
    name: Optional[str] = None


class SchoolClassDetail(SchoolClassBase):
    id: int
    branch: Optional[Branch] = None
    section: Optional[Section] = None


class SubjectCreate(SubjectBase):
    pass


class SubjectUpdate(SQLModel):
    name: Optional[str] = None
    code: Optional[str] = None
    description: Optional[str] = None


class SubjectAssignmentCreate(SubjectAssignmentBase):
    pass


class SubjectAssignmentUpdate(SQLModel):
    teacher_id: Optional[int] = None
    subject_id: Optional[int] = None
    class_id: Optional[int] = None


class SubjectAssignmentDetail(SubjectAssignmentBase):
    id: int
    subject: Optional[Subject] = None
    teacher: Optional[TeacherWithUser] = None
    school_class: Optional[SchoolClass] = None
