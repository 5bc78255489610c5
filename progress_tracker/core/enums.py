"""
Enumerations and constants for the learning progress tracker.
"""

from enum import Enum
from typing import Optional


class CourseDefinition(Enum):
    """The fixed course catalog. Member order is the positional order of points."""
    JAVA = ("Java", 600)
    DSA = ("DSA", 400)
    DATABASES = ("Databases", 480)
    SPRING = ("Spring", 550)

    def __init__(self, course_name: str, total_points: int):
        self.course_name = course_name
        self.total_points = total_points


class TrackerState(Enum):
    """States of the command loop."""
    RUNNING = "running"
    STOPPED = "stopped"


class Command(Enum):
    """Top-level commands accepted by the command loop."""
    EXIT = "exit"
    START = "start"
    BACK = "back"
    ADD_STUDENTS = "add students"
    LIST = "list"
    ADD_POINTS = "add points"
    FIND = "find"
    STATISTICS = "statistics"
    NOTIFY = "notify"

    @classmethod
    def parse(cls, raw: str) -> Optional["Command"]:
        """Map a trimmed, lower-cased input line to a command."""
        try:
            return cls(raw)
        except ValueError:
            return None
