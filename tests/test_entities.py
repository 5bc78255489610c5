"""Tests for the Course and Student entities."""

from __future__ import annotations

import pytest

from progress_tracker.core.entities import (
    Course, Student, generate_short_id, round_half_up,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

class TestHelpers:
    def test_short_id_length(self):
        assert len(generate_short_id()) == 5
        assert len(generate_short_id(12)) == 12

    def test_short_ids_differ(self):
        assert generate_short_id(32) != generate_short_id(32)

    @pytest.mark.parametrize("value, expected", [
        (0.25, 0.3),
        (0.75, 0.8),
        (0.1666, 0.2),
        (33.33, 33.3),
        (100.0, 100.0),
    ])
    def test_round_half_up(self, value, expected):
        assert round_half_up(value, 1) == expected


# ---------------------------------------------------------------------------
# Course
# ---------------------------------------------------------------------------

class TestCourse:
    def test_new_course_has_no_data(self):
        course = Course("Java", 600)
        assert course.total_enrolled() == 0
        assert course.completed_tasks == 0
        assert course.average_per_task() == 0
        assert course.description == ""

    def test_record_completed_task(self):
        course = Course("Java", 600)
        course.record_completed_task(10)
        course.record_completed_task(25)
        assert course.completed_tasks == 2
        assert course.completed_points == 35
        assert course.average_per_task() == 17.5

    def test_enroll_is_idempotent(self):
        course = Course("DSA", 400)
        student = Student("Ann", "Lee", "ann@x.io", entity_id="aaaaa")
        course.enroll(student)
        course.enroll(student)
        assert course.total_enrolled() == 1
        assert course.has_enrolled("aaaaa")

    def test_remove_enrollment(self):
        course = Course("DSA", 400)
        student = Student("Ann", "Lee", "ann@x.io", entity_id="aaaaa")
        course.enroll(student)
        course.remove_enrollment(student)
        assert not course.has_enrolled("aaaaa")
        assert course.enrolled_ids == set()

    def test_equality_uses_name_and_budget(self):
        assert Course("Java", 600) == Course("Java", 600)
        assert Course("Java", 600) != Course("Java", 500)
        assert hash(Course("Java", 600)) == hash(Course("Java", 600))

    def test_description_update(self):
        course = Course("Spring", 550)
        course.description = "Spring Boot basics"
        assert course.description == "Spring Boot basics"

    def test_entity_has_only_identity(self):
        course = Course("Spring", 550)
        assert course.id == "Spring"
        assert repr(course) == "Course(id=Spring)"
        assert not hasattr(course, "version")


# ---------------------------------------------------------------------------
# Student
# ---------------------------------------------------------------------------

class TestStudent:
    def test_initial_points_are_zero(self, courses):
        student = Student("Ann", "Lee", "ann@x.io", courses=courses.all())
        assert list(student.get_points().values()) == [0, 0, 0, 0]
        assert [c.name for c in student.courses] == ["Java", "DSA", "Databases", "Spring"]

    def test_update_points_positive(self, courses, java):
        student = Student("Ann", "Lee", "ann@x.io", courses=courses.all(), entity_id="aaaaa")
        assert student.update_points(java, 30) is True
        assert student.points_for(java) == 30
        assert java.completed_tasks == 1
        assert java.completed_points == 30
        assert java.has_enrolled("aaaaa")

    @pytest.mark.parametrize("points", [0, -5])
    def test_update_points_non_positive_is_noop(self, courses, java, points):
        student = Student("Ann", "Lee", "ann@x.io", courses=courses.all())
        assert student.update_points(java, points) is False
        assert student.points_for(java) == 0
        assert java.completed_tasks == 0
        assert java.completed_points == 0
        assert java.total_enrolled() == 0

    def test_update_points_ignores_untracked_course(self, java):
        student = Student("Ann", "Lee", "ann@x.io")
        assert student.update_points(java, 10) is False
        assert java.completed_tasks == 0

    def test_add_course(self, java):
        student = Student("Ann", "Lee", "ann@x.io")
        assert student.add_course(java) is True
        assert student.add_course(java) is False
        assert student.courses == [java]

    def test_remove_course(self, courses, java):
        student = Student("Ann", "Lee", "ann@x.io", courses=courses.all())
        student.remove_course(java)
        assert not student.is_tracking(java)
        assert "Java" not in [c.name for c in student.courses]

    def test_completion_percentage(self, courses, java):
        student = Student("Ann", "Lee", "ann@x.io", courses=courses.all())
        student.update_points(java, 1)
        assert student.completion_percentage(java) == 0.2
        student.update_points(java, 299)
        assert student.completion_percentage(java) == 50.0

    def test_equality_ignores_id(self):
        a = Student("Ann", "Lee", "ann@x.io", entity_id="aaaaa")
        b = Student("Ann", "Lee", "ann@x.io", entity_id="bbbbb")
        c = Student("Ann", "Lee", "other@x.io", entity_id="aaaaa")
        assert a == b
        assert hash(a) == hash(b)
        assert a != c

    def test_setters(self):
        student = Student("Ann", "Lee", "ann@x.io")
        student.first_name = "Anna"
        student.last_name = "Li"
        student.email = "anna@x.io"
        assert student.full_name == "Anna Li"
        assert student.email == "anna@x.io"

    def test_str_is_id(self):
        assert str(Student("Ann", "Lee", "ann@x.io", entity_id="abc12")) == "abc12"
