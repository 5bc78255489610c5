"""
Typed models for the lines entered in the add students and add points dialogs.
"""

from typing import Any, List

import pydantic
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .exceptions import ValidationError
from .validation import (
    MIN_CREDENTIAL_TOKENS, is_valid_email, is_valid_name, is_valid_points, split_tokens
)


INCORRECT_CREDENTIALS = "Incorrect credentials."
INCORRECT_POINTS = "Incorrect points format."

FIELD_MESSAGES = {
    "first_name": "Incorrect first name.",
    "last_name": "Incorrect last name.",
    "email": "Incorrect email.",
}


class StudentCredentials(BaseModel):
    """Credentials of a new student: first name, last name and email."""

    model_config = ConfigDict(frozen=True)

    first_name: str
    last_name: str
    email: str

    @field_validator("first_name", "last_name")
    @classmethod
    def check_name(cls, value: str) -> str:
        if not is_valid_name(value):
            raise ValueError("invalid name")
        return value

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        if not is_valid_email(value):
            raise ValueError("invalid email")
        return value

    @classmethod
    def from_line(cls, line: str) -> "StudentCredentials":
        """
        Parse "first last... email".

        The first token is the first name, the last token the email and
        everything in between the last name. Fields are checked in that
        order and the first failing one is reported.
        """
        tokens = split_tokens(line)
        if len(tokens) < MIN_CREDENTIAL_TOKENS:
            raise ValidationError(INCORRECT_CREDENTIALS, error_code="credentials")

        try:
            return cls(
                first_name=tokens[0],
                last_name=" ".join(tokens[1:-1]),
                email=tokens[-1],
            )
        except pydantic.ValidationError as e:
            field = e.errors()[0]["loc"][0]
            raise ValidationError(
                FIELD_MESSAGES[field],
                error_code=field,
                details={"line": line.strip()},
            ) from e


class PointsEntry(BaseModel):
    """A student id followed by the points earned per course, in catalog order."""

    model_config = ConfigDict(frozen=True)

    student_id: str = Field(..., min_length=1)
    points: List[int]

    @field_validator("points", mode="before")
    @classmethod
    def check_points(cls, value: Any) -> Any:
        parsed = []
        for token in value:
            if isinstance(token, bool) or not is_valid_points(str(token)):
                raise ValueError("points must be non-negative integers")
            parsed.append(int(str(token).lstrip("0") or "0"))
        return parsed

    @classmethod
    def from_line(cls, line: str, course_count: int) -> "PointsEntry":
        """Parse "id p1 ... pN" where N is the number of courses."""
        tokens = split_tokens(line)
        if len(tokens) != course_count + 1:
            raise ValidationError(INCORRECT_POINTS, error_code="points")

        try:
            return cls(student_id=tokens[0], points=tokens[1:])
        except pydantic.ValidationError as e:
            raise ValidationError(
                INCORRECT_POINTS,
                error_code="points",
                details={"line": line.strip()},
            ) from e
