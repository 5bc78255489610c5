"""
Services module containing the use cases behind the console commands.
"""

from .enrollment_service import EnrollmentService
from .statistics_service import StatisticsService, CourseStatistics, LeaderboardRow
from .notification_service import (
    NotificationService, Notification, NotificationReport, StreamNotificationSink
)

__all__ = [
    "EnrollmentService",
    "StatisticsService",
    "CourseStatistics",
    "LeaderboardRow",
    "NotificationService",
    "Notification",
    "NotificationReport",
    "StreamNotificationSink",
]
