"""
Learning Progress Tracker: an interactive console program that tracks
students enrolled in a fixed set of courses, records point-based task
completions and reports course statistics.
"""

__version__ = "1.0.0"
__author__ = "Learning Progress Tracker Team"
__description__ = "Console tracker for student learning progress"
