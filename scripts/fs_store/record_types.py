"""Role constants reported by concrete record kinds."""

from enum import StrEnum


class RecordType(StrEnum):
    STUDENT = "Student"
