from typing import Iterable, List, Optional

from edusync.models import Attendance, AttendanceStatus, SubmissionStatus
from edusync.schemas.academic_schema import StudentWithUser
from edusync.schemas.report_schema import (
    AssignmentStats, AttendanceStats, ClassPerformance, StudentPerformanceItem,
)
from edusync.schemas.user_schema import UserSummary
from edusync.storage import Storage


def attendance_stats(records: Iterable[Attendance]) -> AttendanceStats:
    stats = AttendanceStats()
    for record in records:
        if record.status == AttendanceStatus.present:
            stats.present += 1
        elif record.status == AttendanceStatus.absent:
            stats.absent += 1
        elif record.status == AttendanceStatus.late:
            stats.late += 1
        stats.total += 1
    return stats


def assignment_stats(storage: Storage, assignment_id: int) -> Optional[AssignmentStats]:
    """Submission counts for an assignment against the roster of its class."""
    assignment = storage.assignments.get(assignment_id)
    if assignment is None:
        return None
    roster = []
    subject_assignment = storage.subject_assignments.get(assignment.subject_assignment_id)
    if subject_assignment is not None:
        roster = storage.get_students_by_class(subject_assignment.class_id)

    # Each roster student counts once, however many submissions they made
    roster_ids = {student.id for student in roster}
    handed_in = set()
    marked = set()
    for submission in storage.get_submissions_by_assignment(assignment_id):
        if submission.student_id not in roster_ids or submission.status == SubmissionStatus.draft:
            continue
        handed_in.add(submission.student_id)
        if submission.status == SubmissionStatus.marked:
            marked.add(submission.student_id)
    total = len(roster)
    return AssignmentStats(
        total_students=total,
        assigned=total,
        submitted=len(handed_in),
        not_submitted=total - len(handed_in),
        marked=len(marked),
        not_marked=len(handed_in - marked),
    )


def class_performance(storage: Storage, class_id: int) -> ClassPerformance:
    """Percentage of available marks each student in the class has earned."""
    assignments = []
    for subject_assignment in storage.get_subject_assignments_by_class(class_id):
        assignments.extend(storage.get_assignments_by_subject_assignment(subject_assignment.id))
    max_marks = {a.id: a.max_marks or 0 for a in assignments}

    items: List[StudentPerformanceItem] = []
    for student in storage.get_students_by_class(class_id):
        earned = possible = 0
        for submission in storage.get_submissions_by_student(student.id):
            if submission.assignment_id not in max_marks or submission.marks is None:
                continue
            earned += submission.marks
            possible += max_marks[submission.assignment_id]
        percentage = round(earned * 100 / possible, 1) if possible else 0.0
        items.append(StudentPerformanceItem(
            student=StudentWithUser(**student.model_dump(),
                                    user=UserSummary.from_user(storage.users.get(student.user_id))),
            percentage=percentage,
        ))
    items.sort(key=lambda item: item.percentage, reverse=True)
    return ClassPerformance(class_id=class_id, students=items)
