"""Input validation helpers for raw student fields.

Pure functions with no state and no dependency on the record model or the
store. The shell runs all four checks on raw text before it builds a
Student; none of them raises.
"""

import re

from config import GRADE_MAX, GRADE_MIN, ROLL_NUMBER_PATTERN

_ROLL_NUMBER_RE = re.compile(ROLL_NUMBER_PATTERN, re.ASCII)
# Optional sign then ASCII digits, nothing else (no padding, no underscores)
_INTEGER_RE = re.compile(r"([+-]?)0*([0-9]+)")
# Significant digits beyond this are never a grade; also keeps int() under its digit limit
_MAX_SIGNIFICANT_DIGITS = 18


def is_valid_text(value) -> bool:
    """True when value is a string that is non-empty once trimmed.

    Examples:
        "John" -> True, "" -> False, "   " -> False, None -> False
    """
    if not isinstance(value, str):
        return False
    return bool(value.strip())


def is_valid_grade(grade) -> bool:
    """True when grade is an int in the closed range [GRADE_MIN, GRADE_MAX]."""
    if isinstance(grade, bool) or not isinstance(grade, int):
        return False
    return GRADE_MIN <= grade <= GRADE_MAX


def is_valid_grade_text(text) -> bool:
    """True when text is a base-10 integer whose value is a valid grade.

    Examples:
        "5" -> True, "-1" -> False, "6" -> False, "abc" -> False
    """
    return parse_grade_text(text) is not None


def parse_grade_text(text) -> int | None:
    """The grade text holds as an int, or None when is_valid_grade_text is False.

    Never raises, however long the digit string is.
    """
    if not isinstance(text, str):
        return None
    match = _INTEGER_RE.fullmatch(text)
    if match is None:
        return None
    sign, digits = match.groups()
    if len(digits) > _MAX_SIGNIFICANT_DIGITS:
        return None
    try:
        grade = int(sign + digits)
    except ValueError:
        return None
    return grade if is_valid_grade(grade) else None


def is_valid_roll_number(roll_number) -> bool:
    """True when the trimmed roll number is letters and digits only.

    Examples:
        "CS101" -> True, "R2D2" -> True, "CS-101" -> False, "Stud 1" -> False
    """
    if not is_valid_text(roll_number):
        return False
    return _ROLL_NUMBER_RE.match(roll_number.strip()) is not None
