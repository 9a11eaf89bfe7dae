"""Test utilities package."""

from .student_factory import make_student, make_students, write_payload

__all__ = [
    "make_student",
    "make_students",
    "write_payload",
]
