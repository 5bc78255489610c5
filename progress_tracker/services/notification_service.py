"""
Notifications for students who completed a course.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Set, TextIO

from ..core.entities import Course, Student
from ..core.interfaces import NotificationSink
from ..repositories import CourseRegistry, StudentRepository

logger = logging.getLogger(__name__)

SUBJECT = "Your Learning Progress"


@dataclass(frozen=True)
class Notification:
    """A notice sent to one student for one completed course."""
    student_id: str
    course_name: str
    recipient: str
    subject: str
    body: str


@dataclass
class NotificationReport:
    """Outcome of one notify pass."""
    notifications: List[Notification] = field(default_factory=list)
    notified_students: Set[str] = field(default_factory=set)

    @property
    def notified_count(self) -> int:
        return len(self.notified_students)


class StreamNotificationSink(NotificationSink):
    """Writes notices to a text stream as a short mail."""

    def __init__(self, stream: TextIO):
        self._stream = stream

    def deliver(self, recipient: str, subject: str, body: str) -> None:
        print(f"To: {recipient}", file=self._stream)
        print(f"Re: {subject}", file=self._stream)
        print(body, file=self._stream)


class NotificationService:
    """Finds graduates, notifies them and stops tracking the completed course."""

    def __init__(self, students: StudentRepository, courses: CourseRegistry, sink: NotificationSink):
        self._students = students
        self._courses = courses
        self._sink = sink

    def notify_graduates(self) -> NotificationReport:
        """
        Notify every student whose points exactly match a course budget.

        A student who overshoots the budget is never considered complete.
        """
        report = NotificationReport()

        for student in self._students.all():
            for course in self._courses.all():
                if not student.is_tracking(course):
                    continue
                if student.points_for(course) != course.total_points:
                    continue

                notification = self._build_notification(student, course)
                self._sink.deliver(notification.recipient, notification.subject, notification.body)
                report.notifications.append(notification)
                report.notified_students.add(student.id)

                course.remove_enrollment(student)
                student.remove_course(course)

        logger.info("Notified %d students", report.notified_count)
        return report

    @staticmethod
    def _build_notification(student: Student, course: Course) -> Notification:
        body = f"Hello, {student.full_name}! You have accomplished our {course.name} course!"
        return Notification(
            student_id=student.id,
            course_name=course.name,
            recipient=student.email,
            subject=SUBJECT,
            body=body,
        )
