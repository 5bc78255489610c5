"""
Core module containing the object model, validation rules and exceptions.
"""

from .entities import *
from .enums import *
from .exceptions import *
from .interfaces import *
from .schemas import *

__all__ = [
    # Entities
    "AbstractEntity",
    "Course",
    "Student",

    # Interfaces
    "Repository",
    "NotificationSink",

    # Schemas
    "StudentCredentials",
    "PointsEntry",

    # Enums
    "CourseDefinition",
    "TrackerState",
    "Command",

    # Exceptions
    "TrackerException",
    "ValidationError",
    "ResourceNotFoundError",
    "DuplicateEntityError",
    "ConfigurationError",
]
