"""
Format rules for student credentials and points entries.
"""

import re
from typing import List

NAME_PATTERN = re.compile(r"[A-Za-z][A-Za-z' -]+(?<!['-])", re.ASCII)
ADJACENT_PATTERN = re.compile(r"(?!.*['-]{2})[A-Za-z' -]+", re.ASCII)
EMAIL_PATTERN = re.compile(r"[\w.]+@\w+\.\w+", re.ASCII)
POINTS_PATTERN = re.compile(r"[0-9]+", re.ASCII)

MIN_NAME_LENGTH = 2
MIN_CREDENTIAL_TOKENS = 3
MAX_POINTS = 2 ** 31 - 1


def is_valid_name(name: str) -> bool:
    """Check a first or last name against the length, shape and adjacency rules."""
    if len(name) < MIN_NAME_LENGTH:
        return False
    return NAME_PATTERN.fullmatch(name) is not None and ADJACENT_PATTERN.fullmatch(name) is not None


def is_valid_email(email: str) -> bool:
    """Check an email of the form local@domain.tld."""
    return EMAIL_PATTERN.fullmatch(email) is not None


def is_valid_points(token: str) -> bool:
    """Check a plain non-negative integer token no larger than MAX_POINTS."""
    if POINTS_PATTERN.fullmatch(token) is None:
        return False
    digits = token.lstrip("0")
    if len(digits) > len(str(MAX_POINTS)):
        return False
    return int(digits or "0") <= MAX_POINTS


def split_tokens(line: str) -> List[str]:
    """Split a trimmed input line on runs of whitespace."""
    return line.strip().split()
