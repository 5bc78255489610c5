"""
In-memory repositories for courses and students.
"""

import logging
from typing import Callable, Dict, Iterable, List, Optional

from .core.entities import Course, Student, DEFAULT_ID_LENGTH, generate_short_id
from .core.enums import CourseDefinition
from .core.exceptions import DuplicateEntityError, ResourceNotFoundError
from .core.interfaces import Repository

logger = logging.getLogger(__name__)

MAX_ID_ATTEMPTS = 100


class CourseRegistry(Repository[Course]):
    """Registry of the courses tracked in a session, in catalog order."""

    def __init__(self, definitions: Iterable[CourseDefinition] = CourseDefinition):
        self._courses: Dict[str, Course] = {}
        for definition in definitions:
            self.register(definition.course_name, definition.total_points)

    def register(self, name: str, total_points: int) -> Course:
        """Create and store a new course."""
        if self.get(name) is not None:
            raise DuplicateEntityError(f"Course {name} already exists.", error_code="course")
        return self.add(Course(name, total_points))

    def add(self, entity: Course) -> Course:
        """Store a course under its lower-cased name."""
        self._courses[entity.name.lower()] = entity
        logger.debug("Registered course %s (%d points)", entity.name, entity.total_points)
        return entity

    def find(self, entity_id: str) -> Optional[Course]:
        """Find a course by its exact name."""
        course = self._courses.get(entity_id.lower())
        if course is not None and course.name == entity_id:
            return course
        return None

    def get(self, name: str) -> Optional[Course]:
        """Find a course by name, ignoring case."""
        return self._courses.get(name.strip().lower())

    def require(self, name: str) -> Course:
        """Find a course by name, ignoring case, or raise."""
        course = self.get(name)
        if course is None:
            raise ResourceNotFoundError("Unknown course.", error_code="course", details={"name": name})
        return course

    def all(self) -> List[Course]:
        return list(self._courses.values())

    def count(self) -> int:
        return len(self._courses)


class StudentRepository(Repository[Student]):
    """Ordered student roster with an id index."""

    def __init__(self, id_factory: Optional[Callable[[], str]] = None,
                 id_length: int = DEFAULT_ID_LENGTH):
        self._students: Dict[str, Student] = {}
        self._id_factory = id_factory or (lambda: generate_short_id(id_length))

    def next_id(self) -> str:
        """Generate an id that no stored student uses yet."""
        for _ in range(MAX_ID_ATTEMPTS):
            candidate = self._id_factory()
            if candidate not in self._students:
                return candidate
        raise DuplicateEntityError("Could not generate a unique student id.", error_code="id")

    def add(self, entity: Student) -> Student:
        """Store a student. Ids must be unique."""
        if entity.id in self._students:
            raise DuplicateEntityError(
                f"Student id {entity.id} is already taken.",
                error_code="id",
                details={"id": entity.id},
            )
        self._students[entity.id] = entity
        return entity

    def find(self, entity_id: str) -> Optional[Student]:
        return self._students.get(entity_id)

    def require(self, entity_id: str) -> Student:
        """Find a student by id or raise."""
        student = self.find(entity_id)
        if student is None:
            raise ResourceNotFoundError(
                f"No student is found for id={entity_id}.",
                error_code="student",
                details={"id": entity_id},
            )
        return student

    def all(self) -> List[Student]:
        return list(self._students.values())

    def count(self) -> int:
        return len(self._students)

    def exists_with_email(self, email: str) -> bool:
        """Check if any student already uses the email."""
        return any(student.email == email for student in self._students.values())
