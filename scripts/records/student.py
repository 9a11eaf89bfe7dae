"""Student record: the one concrete person kind held by the store.

Standalone module with no I/O, safe to import from the shell, the
store and tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as SchemaError

from config import GRADE_MAX, GRADE_MIN
from fs_store.errors import ValidationError
from fs_store.person_record import PersonRecord
from fs_store.record_types import RecordType
from utils import validator


class StudentPayload(BaseModel):
    """Persisted shape of one student; types only, range checks live on Student."""

    model_config = ConfigDict(strict=True, extra="ignore")

    name: str
    roll_number: str
    course: str
    grade: int


def validation_errors(name, roll_number, course, grade_text) -> dict[str, str]:
    """Map each raw input field that fails validation to a message."""
    errors: dict[str, str] = {}
    if not validator.is_valid_text(name):
        errors["name"] = "Student name is required"
    if not validator.is_valid_roll_number(roll_number):
        errors["roll_number"] = "Roll number is required and must contain only letters and numbers"
    if not validator.is_valid_text(course):
        errors["course"] = "Course is required"
    if not validator.is_valid_grade_text(grade_text):
        errors["grade"] = f"Grade must be a number between {GRADE_MIN} and {GRADE_MAX}"
    return errors


@dataclass
class Student(PersonRecord):
    """A student record value.

    ``grade`` is checked on every assignment, the dataclass ``__init__``
    included, so an instance never holds a grade outside the allowed range.
    """

    role: ClassVar[str] = RecordType.STUDENT

    roll_number: str
    course: str
    grade: int

    def __setattr__(self, name: str, value):
        if name == "grade":
            self._check_grade(value)
        super().__setattr__(name, value)

    @staticmethod
    def _check_grade(value) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError(
                f"Grade must be an integer, got {type(value).__name__}", fields=("grade",)
            )
        if not GRADE_MIN <= value <= GRADE_MAX:
            raise ValidationError(
                f"Grade must be between {GRADE_MIN} and {GRADE_MAX}, got {value}", fields=("grade",)
            )

    @classmethod
    def from_input(cls, name, roll_number, course, grade_text) -> Student:
        """Build a Student from raw text fields, trimming each one.

        Raises ValidationError naming every failing field.
        """
        errors = validation_errors(name, roll_number, course, grade_text)
        if errors:
            raise ValidationError("; ".join(errors.values()), fields=list(errors))
        return cls(
            name=name.strip(),
            roll_number=roll_number.strip(),
            course=course.strip(),
            grade=validator.parse_grade_text(grade_text),
        )

    @classmethod
    def from_dict(cls, data: dict) -> Student:
        """Deserialize from a plain dict, checking field types first."""
        try:
            payload = StudentPayload.model_validate(data)
        except SchemaError as exc:
            bad = [str(err["loc"][0]) for err in exc.errors() if err["loc"]]
            raise ValidationError(f"Malformed student record: {exc}", fields=bad) from exc
        return cls(**payload.model_dump())
