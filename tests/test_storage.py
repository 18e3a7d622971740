import unittest
from datetime import date, datetime

from sqlalchemy import DateTime

from edusync.configs.database import make_engine
from edusync.configs.settings import Settings
from edusync.exceptions import ConnectivityError
from edusync.models import (
    Announcement, AttendanceStatus, Message, SessionRecord, Submission, Task, User, UserRole, UserStatus,
)
from edusync.schemas.academic_schema import (
    BranchCreate, SchoolClassCreate, SchoolClassUpdate, SectionCreate, StudentCreate, StudentUpdate,
    SubjectAssignmentCreate,
)
from edusync.schemas.communication_schema import AnnouncementCreate
from edusync.schemas.coursework_schema import AttendanceCreate
from edusync.schemas.schedule_schema import TaskCreate, TimetableEntryCreate, TimetableEntryUpdate
from edusync.schemas.user_schema import UserUpdate
from edusync.storage import DatabaseStorage

from tests.helpers import make_user, memory_storage, sqlite_storage


class StorageContract:
    """Behaviour every storage backend must share."""

    def make_storage(self):
        raise NotImplementedError

    def setUp(self):
        self.storage = self.make_storage()

    def tearDown(self):
        self.storage.close()

    def _cohort(self):
        branch = self.storage.branches.create(BranchCreate(name="CSE"))
        section_a = self.storage.sections.create(SectionCreate(name="Section A"))
        section_b = self.storage.sections.create(SectionCreate(name="Section B"))
        return branch, section_a, section_b

    def _student(self, email, year_level, branch_id, section_id):
        user = make_user(self.storage, email)
        return self.storage.students.create(StudentCreate(
            user_id=user.id, student_id=email.split("@")[0].upper(), year_level=year_level,
            branch_id=branch_id, section_id=section_id))

    def test_create_then_get_returns_equal_record(self):
        user = make_user(self.storage, "ada@school.test", role=UserRole.teacher)
        fetched = self.storage.users.get(user.id)
        self.assertEqual(fetched.model_dump(), user.model_dump())
        self.assertEqual(fetched.password, user.password)
        self.assertIsNotNone(fetched.created_at)

    def test_ids_increase_and_are_not_reused(self):
        first = self.storage.branches.create(BranchCreate(name="CSE"))
        second = self.storage.branches.create(BranchCreate(name="ECE"))
        self.assertGreater(second.id, first.id)

        self.assertTrue(self.storage.branches.delete(second.id))
        third = self.storage.branches.create(BranchCreate(name="ME"))
        self.assertGreater(third.id, second.id)

    def test_get_missing_returns_none(self):
        self.assertIsNone(self.storage.users.get(999))
        self.assertIsNone(self.storage.get_user_by_email("nobody@school.test"))

    def test_update_merges_only_given_fields(self):
        user = make_user(self.storage, "bob@school.test", status=UserStatus.pending)
        updated = self.storage.users.update(user.id, UserUpdate(first_name="Robert"))
        self.assertEqual(updated.first_name, "Robert")
        self.assertEqual(updated.last_name, user.last_name)
        self.assertEqual(updated.status, UserStatus.pending)
        self.assertEqual(self.storage.users.get(user.id).first_name, "Robert")

    def test_empty_update_returns_unchanged_record(self):
        user = make_user(self.storage, "carol@school.test")
        unchanged = self.storage.users.update(user.id, UserUpdate())
        self.assertEqual(unchanged.model_dump(), user.model_dump())

    def test_update_ignores_null_for_required_fields(self):
        user = make_user(self.storage, "dan@school.test")
        updated = self.storage.users.update(user.id, UserUpdate(first_name=None, profile_image=None))
        self.assertEqual(updated.first_name, user.first_name)

    def test_update_missing_returns_none(self):
        self.assertIsNone(self.storage.users.update(42, UserUpdate(first_name="Ghost")))

    def test_delete_reports_whether_record_existed(self):
        branch = self.storage.branches.create(BranchCreate(name="CSE"))
        self.assertTrue(self.storage.branches.delete(branch.id))
        self.assertIsNone(self.storage.branches.get(branch.id))
        self.assertFalse(self.storage.branches.delete(branch.id))

    def test_returned_records_are_copies(self):
        branch = self.storage.branches.create(BranchCreate(name="CSE"))
        fetched = self.storage.branches.get(branch.id)
        fetched.name = "Changed locally"
        self.assertEqual(self.storage.branches.get(branch.id).name, "CSE")

    def test_pending_users_and_approval(self):
        pending = make_user(self.storage, "eve@school.test", status=UserStatus.pending)
        make_user(self.storage, "fay@school.test")
        self.assertEqual([u.id for u in self.storage.get_pending_users()], [pending.id])

        approved = self.storage.approve_user(pending.id)
        self.assertEqual(approved.status, UserStatus.approved)
        self.assertEqual(self.storage.get_pending_users(), [])

        rejected = self.storage.reject_user(pending.id)
        self.assertEqual(rejected.status, UserStatus.rejected)
        self.assertIsNone(self.storage.approve_user(999))

    def test_students_by_class_follow_the_cohort_triple(self):
        branch, section_a, section_b = self._cohort()
        school_class = self.storage.classes.create(SchoolClassCreate(
            year_level=1, branch_id=branch.id, section_id=section_a.id, name="CSE Year 1 - A"))
        s1 = self._student("s1@school.test", 1, branch.id, section_a.id)
        s2 = self._student("s2@school.test", 1, branch.id, section_b.id)
        self._student("s3@school.test", 2, branch.id, section_a.id)

        self.assertEqual([s.id for s in self.storage.get_students_by_class(school_class.id)], [s1.id])

        self.storage.students.update(s2.id, StudentUpdate(section_id=section_a.id))
        self.assertEqual([s.id for s in self.storage.get_students_by_class(school_class.id)],
                         [s1.id, s2.id])

    def test_student_leaves_class_when_section_changes(self):
        branch, section_a, section_b = self._cohort()
        school_class = self.storage.classes.create(SchoolClassCreate(
            year_level=1, branch_id=branch.id, section_id=section_a.id, name="CSE Year 1 - A"))
        s1 = self._student("s1@school.test", 1, branch.id, section_a.id)
        s2 = self._student("s2@school.test", 1, branch.id, section_a.id)

        self.storage.students.update(s1.id, StudentUpdate(section_id=section_b.id))
        self.assertEqual([s.id for s in self.storage.get_students_by_class(school_class.id)], [s2.id])

    def test_roster_follows_changes_to_the_class_triple(self):
        branch, section_a, section_b = self._cohort()
        school_class = self.storage.classes.create(SchoolClassCreate(
            year_level=1, branch_id=branch.id, section_id=section_a.id, name="CSE Year 1 - A"))
        in_a = self._student("s1@school.test", 1, branch.id, section_a.id)
        in_b = self._student("s2@school.test", 1, branch.id, section_b.id)
        year_two = self._student("s3@school.test", 2, branch.id, section_b.id)

        self.storage.classes.update(school_class.id, SchoolClassUpdate(section_id=section_b.id))
        self.assertEqual([s.id for s in self.storage.get_students_by_class(school_class.id)], [in_b.id])

        self.storage.classes.update(school_class.id, SchoolClassUpdate(year_level=2))
        self.assertEqual([s.id for s in self.storage.get_students_by_class(school_class.id)], [year_two.id])
        self.assertNotIn(in_a.id, [s.id for s in self.storage.get_students_by_class(school_class.id)])

    def test_students_by_missing_class_is_empty(self):
        self.assertEqual(self.storage.get_students_by_class(404), [])

    def test_lookup_by_user_id(self):
        branch, section_a, _ = self._cohort()
        student = self._student("s1@school.test", 1, branch.id, section_a.id)
        self.assertEqual(self.storage.get_student_by_user_id(student.user_id).id, student.id)
        self.assertIsNone(self.storage.get_teacher_by_user_id(student.user_id))

    def test_announcements_for_role_include_everyone_targeted(self):
        author = make_user(self.storage, "head@school.test", role=UserRole.admin)
        for_students = self.storage.announcements.create(AnnouncementCreate(
            user_id=author.id, title="Exams", content="Next week", target_role="student"))
        for_all = self.storage.announcements.create(AnnouncementCreate(
            user_id=author.id, title="Holiday", content="Friday off", target_role="all"))
        self.storage.announcements.create(AnnouncementCreate(
            user_id=author.id, title="Staff meeting", content="Room 4", target_role="teacher"))

        ids = [a.id for a in self.storage.get_announcements_by_role(UserRole.student)]
        self.assertEqual(ids, [for_students.id, for_all.id])
        self.assertEqual(len(self.storage.get_announcements_by_user(author.id)), 3)

    def test_attendance_by_date_accepts_datetime(self):
        record = self.storage.attendance.create(AttendanceCreate(
            student_id=1, subject_assignment_id=1, date=date(2024, 3, 4), status=AttendanceStatus.late))
        self.storage.attendance.create(AttendanceCreate(
            student_id=1, subject_assignment_id=1, date=date(2024, 3, 5), status=AttendanceStatus.present))

        by_date = self.storage.get_attendance_by_date(datetime(2024, 3, 4, 9, 30))
        self.assertEqual([a.id for a in by_date], [record.id])
        self.assertEqual(len(self.storage.get_attendance_by_student_and_subject(1, 1)), 2)
        self.assertEqual(self.storage.get_attendance_by_student_and_subject(1, 2), [])

    def test_timetable_by_day_is_case_insensitive(self):
        entry = self.storage.timetable.create(TimetableEntryCreate(
            subject_assignment_id=1, day="monday", start_time="09:00", end_time="10:00"))
        self.assertEqual([e.id for e in self.storage.get_timetable_by_day("Monday")], [entry.id])

    def test_timetable_day_is_stored_lower_case(self):
        entry = self.storage.timetable.create(TimetableEntryCreate(
            subject_assignment_id=1, day="Monday", start_time="09:00", end_time="10:00"))
        self.assertEqual(entry.day, "monday")
        self.assertEqual([e.id for e in self.storage.get_timetable_by_day("Monday")], [entry.id])

        self.storage.timetable.update(entry.id, TimetableEntryUpdate(day="TUESDAY"))
        self.assertEqual(self.storage.get_timetable_by_day("monday"), [])
        self.assertEqual([e.id for e in self.storage.get_timetable_by_day("Tuesday")], [entry.id])

    def test_subject_assignment_queries(self):
        sa = self.storage.subject_assignments.create(SubjectAssignmentCreate(teacher_id=1, subject_id=2, class_id=3))
        self.assertEqual([a.id for a in self.storage.get_subject_assignments_by_teacher(1)], [sa.id])
        self.assertEqual([a.id for a in self.storage.get_subject_assignments_by_subject(2)], [sa.id])
        self.assertEqual([a.id for a in self.storage.get_subject_assignments_by_class(3)], [sa.id])
        self.assertEqual(self.storage.get_subject_assignments_by_class(4), [])

    def test_deleting_a_user_leaves_dependants(self):
        branch, section_a, _ = self._cohort()
        student = self._student("s1@school.test", 1, branch.id, section_a.id)
        self.assertTrue(self.storage.users.delete(student.user_id))
        self.assertIsNotNone(self.storage.students.get(student.id))


class TestMemoryStorage(StorageContract, unittest.TestCase):

    def make_storage(self):
        return memory_storage()


class TestDatabaseStorage(StorageContract, unittest.TestCase):

    def make_storage(self):
        return sqlite_storage()


class TestTimestampColumns(unittest.TestCase):

    def test_timestamps_use_plain_naive_datetime_columns(self):
        for model, name in [(User, "created_at"), (Submission, "submitted_at"), (Message, "sent_at"),
                            (Announcement, "created_at"), (Task, "created_at"),
                            (SessionRecord, "created_at"), (SessionRecord, "expires_at")]:
            column_type = model.__table__.c[name].type
            self.assertIs(type(column_type), DateTime, f"{model.__name__}.{name}")
            self.assertFalse(column_type.timezone)

    def test_timestamped_records_round_trip_through_sqlite(self):
        storage = sqlite_storage()
        self.addCleanup(storage.close)
        user = make_user(storage, "ana@school.test")
        task = storage.tasks.create(TaskCreate(user_id=user.id, title="Plan lessons"))
        self.assertIsNone(storage.users.get(user.id).created_at.tzinfo)
        self.assertEqual(storage.tasks.get(task.id).created_at, task.created_at)
        record = storage.session_store.create(user.id)
        self.assertEqual(storage.session_store.get(record.sid).expires_at, record.expires_at)


class TestDatabaseConnectivity(unittest.TestCase):

    def setUp(self):
        settings = Settings(DATABASE_URL="sqlite:////nonexistent-edusync-dir/nested/edusync.db")
        self.storage = DatabaseStorage(make_engine(settings))

    def tearDown(self):
        self.storage.close()

    def test_unreachable_database_raises_connectivity_error(self):
        with self.assertRaises(ConnectivityError):
            self.storage.users.get(1)

    def test_schema_creation_failure_raises_connectivity_error(self):
        with self.assertRaises(ConnectivityError):
            self.storage.create_schema()


if __name__ == '__main__':
    unittest.main()
