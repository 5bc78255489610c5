"""
Course rankings and per-course leaderboards.
"""

from dataclasses import dataclass
from typing import Callable, List, Tuple

from ..core.entities import Course
from ..repositories import CourseRegistry, StudentRepository

NOT_AVAILABLE = "n/a"


@dataclass(frozen=True)
class CourseStatistics:
    """The six ranking facts shown by the statistics command."""
    most_popular: str
    least_popular: str
    highest_activity: str
    lowest_activity: str
    easiest_course: str
    hardest_course: str

    def lines(self) -> List[str]:
        return [
            f"Most popular: {self.most_popular}",
            f"Least popular: {self.least_popular}",
            f"Highest activity: {self.highest_activity}",
            f"Lowest activity: {self.lowest_activity}",
            f"Easiest course: {self.easiest_course}",
            f"Hardest course: {self.hardest_course}",
        ]


@dataclass(frozen=True)
class LeaderboardRow:
    """One student's standing in a course."""
    student_id: str
    points: int
    completed: float


class StatisticsService:
    """Computes course rankings from the registries."""

    def __init__(self, students: StudentRepository, courses: CourseRegistry):
        self._students = students
        self._courses = courses

    def compute(self) -> CourseStatistics:
        """Rank courses by popularity, activity and difficulty."""
        courses = self._courses.all()

        most_popular, least_popular = self._rank(courses, lambda c: c.total_enrolled())
        highest_activity, lowest_activity = self._rank(courses, lambda c: c.completed_tasks)
        easiest, hardest = self._rank(courses, lambda c: c.average_per_task())

        return CourseStatistics(
            most_popular=most_popular,
            least_popular=least_popular,
            highest_activity=highest_activity,
            lowest_activity=lowest_activity,
            easiest_course=easiest,
            hardest_course=hardest,
        )

    def leaderboard(self, course: Course) -> List[LeaderboardRow]:
        """
        Students active in a course with points, best first.

        Ties on points are ordered by ascending id.
        """
        ranked = [
            student for student in self._students.all()
            if course.has_enrolled(student.id) and student.points_for(course) > 0
        ]
        ranked.sort(key=lambda s: (-s.points_for(course), s.id))

        return [
            LeaderboardRow(
                student_id=student.id,
                points=student.points_for(course),
                completed=student.completion_percentage(course),
            )
            for student in ranked
        ]

    @staticmethod
    def _rank(courses: List[Course], metric: Callable[[Course], float]) -> Tuple[str, str]:
        """
        Names of the courses at the top and at the bottom of a metric.

        Courses without data (metric 0) are left out and ties are joined
        with ", ". The bottom side is n/a when it reads the same as the top.
        """
        scored = [(course, metric(course)) for course in courses]
        scored = [(course, value) for course, value in scored if value != 0]
        if not scored:
            return NOT_AVAILABLE, NOT_AVAILABLE

        highest = max(value for _, value in scored)
        lowest = min(value for _, value in scored)
        top = ", ".join(course.name for course, value in scored if value == highest)
        bottom = ", ".join(course.name for course, value in scored if value == lowest)

        if bottom == top:
            bottom = NOT_AVAILABLE
        return top, bottom
