"""
Storage contract shared by the in-memory and the relational backends.

A ``Repository`` covers the CRUD primitives for one entity type. ``Storage``
owns one repository per entity and implements every named query on top of
those primitives, so both backends answer the queries the same way.
"""
import logging
import secrets
from abc import ABC, abstractmethod
from datetime import date, datetime, timedelta
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlmodel import SQLModel

from edusync.models import (
    Announcement, Assignment, Attendance, Branch, Message, Resource, SchoolClass, Section,
    SessionRecord, Student, StudentDocument, Subject, SubjectAssignment, TARGET_ALL, Task,
    Teacher, TimetableEntry, User, UserStatus, Submission,
)
from edusync.models.common import utcnow
from edusync.models.timetable import normalize_day
from edusync.schemas.user_schema import UserUpdate

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=SQLModel)

COLLECTION_TYPES = (list, tuple, set, frozenset)


class Repository(ABC, Generic[E]):
    """CRUD for one entity type. Reads return ``None`` for a missing id."""

    def __init__(self, model: Type[E]):
        self.model = model

    @abstractmethod
    def get(self, record_id: int) -> Optional[E]:
        ...

    @abstractmethod
    def list_where(self, **criteria: Any) -> List[E]:
        """Records whose fields equal every criterion, ordered by id.

        A list, tuple or set criterion matches any of its values.
        """

    @abstractmethod
    def create(self, data: SQLModel) -> E:
        ...

    @abstractmethod
    def update(self, record_id: int, patch: SQLModel) -> Optional[E]:
        ...

    @abstractmethod
    def delete(self, record_id: int) -> bool:
        ...

    def list_all(self) -> List[E]:
        return self.list_where()

    def first_where(self, **criteria: Any) -> Optional[E]:
        records = self.list_where(**criteria)
        return records[0] if records else None

    def changes(self, patch: SQLModel) -> Dict[str, Any]:
        """Fields the patch explicitly sets, minus ones the table cannot hold.

        ``id`` is never patched, and ``None`` is dropped for fields that are
        not nullable on the stored model.
        """
        fields = self.model.model_fields
        result = {}
        for name, value in patch.model_dump(exclude_unset=True).items():
            if name == "id" or name not in fields:
                continue
            if value is None and fields[name].default is not None:
                continue
            result[name] = value
        return result

    def build(self, data: SQLModel) -> E:
        # Generated fields (created_at & co.) come from the model's default factories
        values = data.model_dump()
        values.pop("id", None)
        return self.model(**values)


class SessionStore(ABC):
    """Server-side session records keyed by an opaque session id."""

    def __init__(self, ttl: timedelta):
        self.ttl = ttl

    def create(self, user_id: int) -> SessionRecord:
        now = utcnow()
        record = SessionRecord(sid=secrets.token_urlsafe(32), user_id=user_id,
                               created_at=now, expires_at=now + self.ttl)
        self._save(record)
        return record

    def get(self, sid: str) -> Optional[SessionRecord]:
        record = self._load(sid)
        if record is None:
            return None
        if record.expires_at <= utcnow():
            self.destroy(sid)
            return None
        return record

    @abstractmethod
    def _save(self, record: SessionRecord) -> None:
        ...

    @abstractmethod
    def _load(self, sid: str) -> Optional[SessionRecord]:
        ...

    @abstractmethod
    def destroy(self, sid: str) -> bool:
        ...

    @abstractmethod
    def destroy_user_sessions(self, user_id: int) -> int:
        ...

    @abstractmethod
    def purge_expired(self) -> int:
        ...


class Storage(ABC):
    """Persistence for every EduSync entity plus the login session store.

    The store does not enforce foreign keys and never cascades deletes: removing
    a user leaves its student, teacher, attendance and other rows in place.
    Callers own validation and cleanup ordering.
    """

    session_store: SessionStore

    def __init__(self):
        self.users: Repository[User] = self._repository(User)
        self.students: Repository[Student] = self._repository(Student)
        self.teachers: Repository[Teacher] = self._repository(Teacher)
        self.branches: Repository[Branch] = self._repository(Branch)
        self.sections: Repository[Section] = self._repository(Section)
        self.classes: Repository[SchoolClass] = self._repository(SchoolClass)
        self.subjects: Repository[Subject] = self._repository(Subject)
        self.subject_assignments: Repository[SubjectAssignment] = self._repository(SubjectAssignment)
        self.attendance: Repository[Attendance] = self._repository(Attendance)
        self.assignments: Repository[Assignment] = self._repository(Assignment)
        self.submissions: Repository[Submission] = self._repository(Submission)
        self.messages: Repository[Message] = self._repository(Message)
        self.announcements: Repository[Announcement] = self._repository(Announcement)
        self.resources: Repository[Resource] = self._repository(Resource)
        self.student_documents: Repository[StudentDocument] = self._repository(StudentDocument)
        self.timetable: Repository[TimetableEntry] = self._repository(TimetableEntry)
        self.tasks: Repository[Task] = self._repository(Task)

    @abstractmethod
    def _repository(self, model: Type[E]) -> Repository[E]:
        ...

    def close(self) -> None:
        pass

    # User operations
    def get_user_by_email(self, email: str) -> Optional[User]:
        return self.users.first_where(email=email)

    def get_pending_users(self) -> List[User]:
        return self.users.list_where(status=UserStatus.pending)

    def approve_user(self, user_id: int) -> Optional[User]:
        return self.users.update(user_id, UserUpdate(status=UserStatus.approved))

    def reject_user(self, user_id: int) -> Optional[User]:
        return self.users.update(user_id, UserUpdate(status=UserStatus.rejected))

    # Student and teacher operations
    def get_student_by_user_id(self, user_id: int) -> Optional[Student]:
        return self.students.first_where(user_id=user_id)

    def get_students_by_class(self, class_id: int) -> List[Student]:
        """Students whose (year_level, branch_id, section_id) equals the class's.

        Membership is derived on every call; there is no stored roster.
        """
        school_class = self.classes.get(class_id)
        if school_class is None:
            return []
        return self.students.list_where(year_level=school_class.year_level,
                                        branch_id=school_class.branch_id,
                                        section_id=school_class.section_id)

    def get_teacher_by_user_id(self, user_id: int) -> Optional[Teacher]:
        return self.teachers.first_where(user_id=user_id)

    def get_all_teachers(self) -> List[Teacher]:
        return self.teachers.list_all()

    # Class operations
    def get_classes_by_branch(self, branch_id: int) -> List[SchoolClass]:
        return self.classes.list_where(branch_id=branch_id)

    def get_classes_by_year(self, year_level: int) -> List[SchoolClass]:
        return self.classes.list_where(year_level=year_level)

    # Subject assignment operations
    def get_subject_assignments_by_teacher(self, teacher_id: int) -> List[SubjectAssignment]:
        return self.subject_assignments.list_where(teacher_id=teacher_id)

    def get_subject_assignments_by_class(self, class_id: int) -> List[SubjectAssignment]:
        return self.subject_assignments.list_where(class_id=class_id)

    def get_subject_assignments_by_subject(self, subject_id: int) -> List[SubjectAssignment]:
        return self.subject_assignments.list_where(subject_id=subject_id)

    # Attendance operations
    def get_attendance_by_student_and_subject(self, student_id: int,
                                              subject_assignment_id: int) -> List[Attendance]:
        return self.attendance.list_where(student_id=student_id,
                                          subject_assignment_id=subject_assignment_id)

    def get_attendance_by_date(self, day: date) -> List[Attendance]:
        if isinstance(day, datetime):
            day = day.date()
        return self.attendance.list_where(date=day)

    # Assignment and submission operations
    def get_assignments_by_subject_assignment(self, subject_assignment_id: int) -> List[Assignment]:
        return self.assignments.list_where(subject_assignment_id=subject_assignment_id)

    def get_submissions_by_assignment(self, assignment_id: int) -> List[Submission]:
        return self.submissions.list_where(assignment_id=assignment_id)

    def get_submissions_by_student(self, student_id: int) -> List[Submission]:
        return self.submissions.list_where(student_id=student_id)

    # Message and announcement operations
    def get_messages_by_sender(self, sender_id: int) -> List[Message]:
        return self.messages.list_where(sender_id=sender_id)

    def get_messages_by_receiver(self, receiver_id: int) -> List[Message]:
        return self.messages.list_where(receiver_id=receiver_id)

    def get_announcements_by_user(self, user_id: int) -> List[Announcement]:
        return self.announcements.list_where(user_id=user_id)

    def get_announcements_by_role(self, role: str) -> List[Announcement]:
        role = getattr(role, "value", role)
        return self.announcements.list_where(target_role=(role, TARGET_ALL))

    def get_announcements_by_class(self, class_id: int) -> List[Announcement]:
        return self.announcements.list_where(target_class_id=class_id)

    # Resource and document operations
    def get_resources_by_user(self, user_id: int) -> List[Resource]:
        return self.resources.list_where(uploaded_by=user_id)

    def get_resources_by_subject(self, subject_id: int) -> List[Resource]:
        return self.resources.list_where(subject_id=subject_id)

    def get_student_documents_by_student(self, student_id: int) -> List[StudentDocument]:
        return self.student_documents.list_where(student_id=student_id)

    # Timetable and task operations
    def get_timetable_by_subject_assignment(self, subject_assignment_id: int) -> List[TimetableEntry]:
        return self.timetable.list_where(subject_assignment_id=subject_assignment_id)

    def get_timetable_by_day(self, day: str) -> List[TimetableEntry]:
        return self.timetable.list_where(day=normalize_day(day))

    def get_tasks_by_user(self, user_id: int) -> List[Task]:
        return self.tasks.list_where(user_id=user_id)
