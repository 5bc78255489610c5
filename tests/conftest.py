"""Shared fixtures for the tracker test suite."""

from __future__ import annotations

import io
from typing import Callable, Iterable, List

import pytest

from progress_tracker.console import ProgressTracker
from progress_tracker.core.entities import Student
from progress_tracker.repositories import CourseRegistry, StudentRepository


def sequential_ids(ids: Iterable[str]) -> Callable[[], str]:
    """Id factory handing out the given ids in order."""
    iterator = iter(ids)
    return lambda: next(iterator)


@pytest.fixture
def courses() -> CourseRegistry:
    return CourseRegistry()


@pytest.fixture
def students() -> StudentRepository:
    return StudentRepository(id_factory=sequential_ids(f"s{n:04d}" for n in range(1, 1000)))


@pytest.fixture
def java(courses: CourseRegistry):
    return courses.require("Java")


@pytest.fixture
def make_student(students: StudentRepository, courses: CourseRegistry):
    def _make(first: str = "John", last: str = "Doe", email: str | None = None,
              student_id: str | None = None) -> Student:
        entity_id = student_id or students.next_id()
        student = Student(
            first, last, email or f"{entity_id}@example.com",
            courses=courses.all(), entity_id=entity_id,
        )
        return students.add(student)
    return _make


@pytest.fixture
def run_session():
    """Feed lines to a fresh tracker and return its output lines."""
    def _run(lines: List[str], ids: Iterable[str] | None = None) -> List[str]:
        stdin = io.StringIO("".join(f"{line}\n" for line in lines))
        stdout = io.StringIO()
        id_factory = sequential_ids(ids) if ids is not None else None
        tracker = ProgressTracker(stdin=stdin, stdout=stdout, id_factory=id_factory)
        tracker.run()
        return stdout.getvalue().splitlines()
    return _run
