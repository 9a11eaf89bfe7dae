"""Error taxonomy shared by the record model, the store and persistence."""

from __future__ import annotations


class StudentRecordsError(Exception):
    """Base class for every error raised inside the records core."""


class ValidationError(StudentRecordsError, ValueError):
    """A field value that a record refuses to hold.

    ``fields`` names every offending field so a caller can report all of
    them at once.
    """

    def __init__(self, message: str, fields: tuple[str, ...] | list[str] = ()):
        super().__init__(message)
        self.fields = tuple(fields)


class PersistenceError(StudentRecordsError):
    """The persisted collection could not be written, read or decoded."""
