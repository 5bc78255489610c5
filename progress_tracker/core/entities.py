"""
Core entities for the learning progress tracker.
"""

import math
import uuid
from abc import ABC
from typing import Dict, Iterable, List, Optional, Set


DEFAULT_ID_LENGTH = 5


def generate_short_id(length: int = DEFAULT_ID_LENGTH) -> str:
    """Generate a short random identifier from a UUID."""
    return uuid.uuid4().hex[:length]


def round_half_up(value: float, digits: int = 1) -> float:
    """Round a value half-up to the given number of decimal places."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


class AbstractEntity(ABC):
    """Base abstract entity with a universal identifier."""

    def __init__(self, entity_id: Optional[str] = None):
        self._id = entity_id or generate_short_id()

    @property
    def id(self) -> str:
        """Get the entity ID."""
        return self._id

    def __str__(self) -> str:
        return self._id

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self._id})"


class Course(AbstractEntity):
    """
    A course with a fixed point budget and running aggregates.

    The course keeps only the ids of its active students. Completed-task
    counters never decrease, even when a student graduates.
    """

    def __init__(self, name: str, total_points: int, description: str = ""):
        super().__init__(entity_id=name)
        self._name = name
        self._total_points = total_points
        self._description = description
        self._completed_tasks = 0
        self._completed_points = 0
        self._enrolled_ids: Set[str] = set()

    @property
    def name(self) -> str:
        return self._name

    @property
    def total_points(self) -> int:
        return self._total_points

    @property
    def description(self) -> str:
        return self._description

    @description.setter
    def description(self, value: str) -> None:
        self._description = value

    @property
    def completed_tasks(self) -> int:
        return self._completed_tasks

    @property
    def completed_points(self) -> int:
        return self._completed_points

    @property
    def enrolled_ids(self) -> Set[str]:
        return self._enrolled_ids.copy()

    def total_enrolled(self) -> int:
        """Number of students actively enrolled."""
        return len(self._enrolled_ids)

    def has_enrolled(self, student_id: str) -> bool:
        """Check if a student id is in the active enrollment set."""
        return student_id in self._enrolled_ids

    def enroll(self, student: "Student") -> None:
        """Add a student to the active enrollment set."""
        self._enrolled_ids.add(student.id)

    def remove_enrollment(self, student: "Student") -> None:
        """Remove a student from the active enrollment set."""
        self._enrolled_ids.discard(student.id)

    def record_completed_task(self, points: int) -> None:
        """Count one completed task worth the given points."""
        self._completed_tasks += 1
        self._completed_points += points

    def average_per_task(self) -> float:
        """Average points per completed task, 0 when nothing was completed."""
        if self._completed_tasks < 1:
            return 0
        return self._completed_points / self._completed_tasks

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Course):
            return NotImplemented
        return self._name == other._name and self._total_points == other._total_points

    def __hash__(self) -> int:
        return hash((self._name, self._total_points))


class Student(AbstractEntity):
    """
    A student with earned points per tracked course.

    Equality uses first name, last name and email; the id is only the
    lookup and display key.
    """

    def __init__(self, first_name: str, last_name: str, email: str,
                 courses: Iterable[Course] = (), entity_id: Optional[str] = None):
        super().__init__(entity_id=entity_id)
        self._first_name = first_name
        self._last_name = last_name
        self._email = email
        self._points: Dict[Course, int] = {}
        for course in courses:
            self._points[course] = 0

    @property
    def first_name(self) -> str:
        return self._first_name

    @first_name.setter
    def first_name(self, value: str) -> None:
        self._first_name = value

    @property
    def last_name(self) -> str:
        return self._last_name

    @last_name.setter
    def last_name(self, value: str) -> None:
        self._last_name = value

    @property
    def email(self) -> str:
        return self._email

    @email.setter
    def email(self, value: str) -> None:
        self._email = value

    @property
    def full_name(self) -> str:
        return f"{self._first_name} {self._last_name}"

    @property
    def courses(self) -> List[Course]:
        """Courses still tracked for this student, in insertion order."""
        return list(self._points)

    def get_points(self) -> Dict[Course, int]:
        """Get a copy of the points mapping."""
        return dict(self._points)

    def is_tracking(self, course: Course) -> bool:
        return course in self._points

    def points_for(self, course: Course) -> int:
        """Earned points for a course, 0 when the course is not tracked."""
        return self._points.get(course, 0)

    def add_course(self, course: Course) -> bool:
        """Start tracking a course. Returns False if it is already tracked."""
        if course in self._points:
            return False
        self._points[course] = 0
        return True

    def update_points(self, course: Course, points: int) -> bool:
        """
        Add points for one completed task.

        Non-positive points and untracked courses are ignored. Returns
        whether anything changed.
        """
        if course not in self._points or points <= 0:
            return False
        self._points[course] += points
        course.record_completed_task(points)
        course.enroll(self)
        return True

    def completion_percentage(self, course: Course) -> float:
        """Share of the course budget earned, in percent with one decimal."""
        percentage = self.points_for(course) / course.total_points * 100
        return round_half_up(percentage, 1)

    def remove_course(self, course: Course) -> None:
        """Stop tracking a course."""
        self._points.pop(course, None)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Student):
            return NotImplemented
        return (self._first_name, self._last_name, self._email) == \
            (other._first_name, other._last_name, other._email)

    def __hash__(self) -> int:
        return hash((self._last_name, self._first_name, self._email))
