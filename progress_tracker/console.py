"""
Interactive command loop of the learning progress tracker.
"""

import logging
import sys
from typing import Callable, Dict, Iterator, Optional, TextIO

from .config import TrackerConfig
from .core.enums import Command, TrackerState
from .core.exceptions import TrackerException
from .core.schemas import PointsEntry, StudentCredentials
from .repositories import CourseRegistry, StudentRepository
from .services import EnrollmentService, NotificationService, StatisticsService, StreamNotificationSink

logger = logging.getLogger(__name__)

BANNER = "Learning Progress Tracker"


class ProgressTracker:
    """
    Reads commands line by line and dispatches them to the services.

    Every command runs to completion before the next line is read. The
    add students, add points, find and statistics commands open a dialog
    that lasts until 'back' is entered.
    """

    def __init__(
        self,
        config: Optional[TrackerConfig] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        id_factory: Optional[Callable[[], str]] = None,
    ) -> None:
        self._config = config or TrackerConfig()
        self._stdin = stdin or sys.stdin
        self._stdout = stdout or sys.stdout
        self._state = TrackerState.STOPPED

        self._courses = CourseRegistry()
        self._students = StudentRepository(
            id_factory=id_factory,
            id_length=self._config.student_id_length,
        )
        self._enrollment_service = EnrollmentService(self._students, self._courses)
        self._statistics_service = StatisticsService(self._students, self._courses)
        self._notification_service = NotificationService(
            self._students,
            self._courses,
            StreamNotificationSink(self._stdout),
        )

        self._handlers: Dict[Command, Callable[[], None]] = {
            Command.EXIT: self.exit,
            Command.START: self.start,
            Command.BACK: self.back,
            Command.ADD_STUDENTS: self.add_students,
            Command.LIST: self.list_students,
            Command.ADD_POINTS: self.add_points,
            Command.FIND: self.find_student,
            Command.STATISTICS: self.show_statistics,
            Command.NOTIFY: self.notify_students,
        }

    @property
    def state(self) -> TrackerState:
        return self._state

    @property
    def students(self) -> StudentRepository:
        return self._students

    @property
    def courses(self) -> CourseRegistry:
        return self._courses

    def run(self) -> None:
        """Run the command loop until 'exit' or end of input."""
        self._state = TrackerState.RUNNING
        self._write(BANNER)

        while self._state is TrackerState.RUNNING:
            line = self._read_line()
            if line is None:
                self.exit()
                break
            self.dispatch(line)

    def dispatch(self, line: str) -> None:
        """Execute one top-level command line."""
        raw = line.strip().lower()
        if not raw:
            self._write("No input!")
            return

        command = Command.parse(raw)
        if command is None:
            self._write("Error: unknown command!")
            return

        logger.debug("Dispatching command %s", command.value)
        self._handlers[command]()

    def exit(self) -> None:
        self._state = TrackerState.STOPPED
        self._write("Bye!")

    def start(self) -> None:
        self._write(BANNER)

    def back(self) -> None:
        self._write("Enter 'exit' to exit the program.")

    def add_students(self) -> None:
        """Add students from credential lines until 'back'."""
        self._write("Enter student credentials or 'back' to return:")
        added = 0

        for line in self._dialog_lines():
            try:
                credentials = StudentCredentials.from_line(line)
                self._enrollment_service.register_student(credentials)
            except TrackerException as e:
                self._write(e.message)
                continue

            added += 1
            self._write("The student has been added.")

        self._write(f"Total {added} students have been added.")

    def list_students(self) -> None:
        students = self._students.all()
        if not students:
            self._write("No students found")
            return

        self._write("Students:")
        for student in students:
            self._write(student.id)

    def add_points(self) -> None:
        """Record points from "id p1 p2 p3 p4" lines until 'back'."""
        self._write("Enter an id and points or 'back' to return:")
        course_count = self._courses.count()

        for line in self._dialog_lines():
            try:
                entry = PointsEntry.from_line(line, course_count)
                self._enrollment_service.award_points(entry)
            except TrackerException as e:
                self._write(e.message)
                continue

            self._write("Points updated.")

    def find_student(self) -> None:
        """Print the points of students by id until 'back'."""
        self._write("Enter an id or 'back' to return:")

        for line in self._dialog_lines():
            try:
                student = self._students.require(line.strip())
            except TrackerException as e:
                self._write(e.message)
                continue

            summary = "; ".join(
                f"{course.name}={points}" for course, points in student.get_points().items()
            )
            self._write(f"{student.id} points: {summary}")

    def show_statistics(self) -> None:
        """Print course rankings, then course leaderboards until 'back'."""
        self._write("Type the name of a course to see details or 'back' to quit")
        for text in self._statistics_service.compute().lines():
            self._write(text)

        for line in self._dialog_lines():
            try:
                course = self._courses.require(line)
            except TrackerException as e:
                self._write(e.message)
                continue

            self._write(course.name)
            self._write("id\tpoints\tcompleted")
            for row in self._statistics_service.leaderboard(course):
                self._write(f"{row.student_id}\t{row.points}\t{row.completed:.1f}%")

    def notify_students(self) -> None:
        report = self._notification_service.notify_graduates()
        self._write(f"Total {report.notified_count} students have been notified.")

    def _dialog_lines(self) -> Iterator[str]:
        """Yield dialog input lines until 'back' or end of input."""
        while True:
            line = self._read_line()
            if line is None or line.strip().lower() == Command.BACK.value:
                return
            yield line

    def _read_line(self) -> Optional[str]:
        """Read one line, None at end of input."""
        if self._config.prompt:
            self._stdout.write(self._config.prompt)
            self._stdout.flush()

        line = self._stdin.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def _write(self, text: str) -> None:
        print(text, file=self._stdout)
