import json
import unittest
from datetime import date
from types import SimpleNamespace
from unittest.mock import MagicMock

from edusync.exceptions import AIServiceError
from edusync.models import Attendance, AttendanceStatus, SubmissionStatus, UserRole
from edusync.schemas.coursework_schema import SubmissionCreate
from edusync.services import report_service
from edusync.services.ai_service import TutorAssistant
from edusync.services.seed_service import ADMIN_EMAIL, seed_admin, seed_demo_data

from tests.helpers import HASHER, memory_storage


def _completion(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


class TestReports(unittest.TestCase):

    def setUp(self):
        self.storage = memory_storage()
        seed_demo_data(self.storage, HASHER)

    def test_attendance_stats_counts_each_status(self):
        records = [Attendance(student_id=1, subject_assignment_id=1, date=date(2024, 1, 1), status=status)
                   for status in (AttendanceStatus.present, AttendanceStatus.present,
                                  AttendanceStatus.absent, AttendanceStatus.late)]
        stats = report_service.attendance_stats(records)
        self.assertEqual((stats.present, stats.absent, stats.late, stats.total), (2, 1, 1, 4))

    def test_assignment_stats_against_class_roster(self):
        maths = self.storage.assignments.list_all()[0]
        stats = report_service.assignment_stats(self.storage, maths.id)
        self.assertEqual(stats.total_students, 3)
        self.assertEqual(stats.submitted, 3)
        self.assertEqual(stats.marked, 3)
        self.assertEqual(stats.not_submitted, 0)

        physics = self.storage.assignments.list_all()[1]
        student = self.storage.students.list_all()[0]
        self.storage.submissions.create(SubmissionCreate(assignment_id=physics.id, student_id=student.id))
        stats = report_service.assignment_stats(self.storage, physics.id)
        self.assertEqual((stats.submitted, stats.not_submitted, stats.not_marked), (1, 2, 1))

    def test_each_roster_student_counts_once(self):
        physics = self.storage.assignments.list_all()[1]
        student = self.storage.students.list_all()[0]
        self.storage.submissions.create(SubmissionCreate(assignment_id=physics.id, student_id=student.id))
        self.storage.submissions.create(SubmissionCreate(assignment_id=physics.id, student_id=student.id,
                                                         marks=60, status=SubmissionStatus.marked))
        self.storage.submissions.create(SubmissionCreate(assignment_id=physics.id, student_id=999))

        stats = report_service.assignment_stats(self.storage, physics.id)
        self.assertEqual((stats.submitted, stats.not_submitted), (1, 2))
        self.assertEqual((stats.marked, stats.not_marked), (1, 0))

    def test_drafts_do_not_count_as_submitted(self):
        physics = self.storage.assignments.list_all()[1]
        student = self.storage.students.list_all()[0]
        self.storage.submissions.create(SubmissionCreate(
            assignment_id=physics.id, student_id=student.id, status=SubmissionStatus.draft))
        self.assertEqual(report_service.assignment_stats(self.storage, physics.id).submitted, 0)

    def test_assignment_stats_for_missing_assignment(self):
        self.assertIsNone(report_service.assignment_stats(self.storage, 999))

    def test_class_performance_ranks_students(self):
        school_class = self.storage.classes.list_all()[0]
        performance = report_service.class_performance(self.storage, school_class.id)
        self.assertEqual([item.percentage for item in performance.students], [70.0, 48.0, 21.0])
        self.assertEqual(performance.students[0].student.user.first_name, "James")


class TestSeed(unittest.TestCase):

    def test_demo_seed_runs_once(self):
        storage = memory_storage()
        seed_demo_data(storage, HASHER)
        seed_demo_data(storage, HASHER)
        self.assertEqual(len(storage.branches.list_all()), 3)
        self.assertEqual(len(storage.get_students_by_class(storage.classes.list_all()[0].id)), 3)
        self.assertEqual(storage.get_user_by_email(ADMIN_EMAIL).role, UserRole.admin)

    def test_admin_seed_is_idempotent(self):
        storage = memory_storage()
        first = seed_admin(storage, HASHER)
        second = seed_admin(storage, HASHER)
        self.assertEqual(first.id, second.id)
        self.assertEqual(len(storage.users.list_all()), 1)


class TestTutorAssistant(unittest.TestCase):

    def test_fallbacks_without_api_key(self):
        tutor = TutorAssistant()
        self.assertFalse(tutor.enabled)
        self.assertTrue(tutor.summarize("Photosynthesis turns light into energy").startswith("This is a summary of:"))
        self.assertIn("What is x?", tutor.answer_question("What is x?"))
        self.assertEqual(tutor.generate_quiz("Maths", "Fractions")[0]["correct_answer"], "Option A")

    def test_summarize_uses_client(self):
        client = MagicMock()
        client.chat.completions.create.return_value = _completion("Short version")
        tutor = TutorAssistant(client=client, model_name="gpt-test")
        self.assertEqual(tutor.summarize("Long text"), "Short version")
        kwargs = client.chat.completions.create.call_args.kwargs
        self.assertEqual(kwargs["model"], "gpt-test")
        self.assertIn("Long text", kwargs["messages"][1]["content"])

    def test_generate_returns_message_content(self):
        client = MagicMock()
        client.chat.completions.create.return_value = _completion("Fractions are parts of a whole")
        self.assertEqual(TutorAssistant(client=client).generate("What is a fraction?"),
                         "Fractions are parts of a whole")

    def test_quiz_accepts_camel_case_answers(self):
        client = MagicMock()
        client.chat.completions.create.return_value = _completion(json.dumps({"questions": [
            {"question": "1/2 + 1/2?", "options": ["1", "2", "3", "4"], "correctAnswer": "1"}]}))
        questions = TutorAssistant(client=client).generate_quiz("Maths", "Fractions", count=1)
        self.assertEqual(questions[0]["correct_answer"], "1")

    def test_quiz_with_malformed_json_fails(self):
        client = MagicMock()
        client.chat.completions.create.return_value = _completion("not json")
        with self.assertRaises(AIServiceError):
            TutorAssistant(client=client).generate_quiz("Maths", "Fractions")

    def test_provider_failure_raises(self):
        client = MagicMock()
        client.chat.completions.create.side_effect = RuntimeError("rate limited")
        with self.assertRaises(AIServiceError):
            TutorAssistant(client=client).analyze_performance({"student": "James", "marks": [70]})


if __name__ == '__main__':
    unittest.main()
