"""
Enrollment service: registers students and applies completed-task points.
"""

import logging
from typing import List

from ..core.entities import Course, Student
from ..core.exceptions import DuplicateEntityError
from ..core.schemas import PointsEntry, StudentCredentials
from ..repositories import CourseRegistry, StudentRepository

logger = logging.getLogger(__name__)


class EnrollmentService:
    """Service for adding students to the roster and recording their points."""

    def __init__(self, students: StudentRepository, courses: CourseRegistry):
        self._students = students
        self._courses = courses

    def register_student(self, credentials: StudentCredentials) -> Student:
        """Create a student tracking every course, rejecting taken emails."""
        if self._students.exists_with_email(credentials.email):
            raise DuplicateEntityError(
                "This email is already taken",
                error_code="email",
                details={"email": credentials.email},
            )

        student = Student(
            first_name=credentials.first_name,
            last_name=credentials.last_name,
            email=credentials.email,
            courses=self._courses.all(),
            entity_id=self._students.next_id(),
        )
        self._students.add(student)
        logger.info("Added student %s", student.id)
        return student

    def award_points(self, entry: PointsEntry) -> List[Course]:
        """
        Apply one points entry to a student.

        Points are matched to courses by position in catalog order. Zero
        points leave a course untouched. Returns the courses that changed.
        """
        student = self._students.require(entry.student_id)

        updated = []
        for course, points in zip(self._courses.all(), entry.points):
            if student.update_points(course, points):
                updated.append(course)

        logger.debug("Student %s earned points in %s", student.id, [c.name for c in updated])
        return updated
