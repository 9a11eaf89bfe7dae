"""In-memory student collection with positional CRUD, persisted as one unit."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator

from conf import DATA_FILE
from fs_store import LoadStatus, persistence
from log import records_log

from .student import Student


@dataclass
class StudentManager:
    """Sole owner of the live student list.

    Callers get copies from ``list_all`` and hand in whole Student values;
    nothing outside this class touches ``_students``. ``save`` and ``load``
    always move the entire collection through ``fs_store.persistence``.

    Not safe for concurrent use: every call must come from one thread of
    control, and only one process may own ``data_file`` at a time.
    """

    data_file: Path | None = None
    _students: list[Student] = field(default_factory=list, init=False, repr=False)
    _last_load: LoadStatus | None = field(default=None, init=False, repr=False)

    def __post_init__(self):
        self.data_file = DATA_FILE if self.data_file is None else Path(self.data_file)

    # -- CRUD --

    def add(self, student: Student) -> bool:
        """Append a student at the end. False when student is missing."""
        if not isinstance(student, Student):
            records_log(f"add rejected, not a Student: {student!r}", level="WARN")
            return False
        self._students.append(student)
        return True

    def update(self, index: int, student: Student) -> bool:
        """Replace the student at index. False (store untouched) on a bad index or student."""
        if not self._valid_index(index):
            records_log(f"update rejected, index {index!r} out of range (size {len(self._students)})", level="WARN")
            return False
        if not isinstance(student, Student):
            records_log(f"update rejected, not a Student: {student!r}", level="WARN")
            return False
        self._students[index] = student
        return True

    def delete(self, index: int) -> bool:
        """Remove the student at index; later students shift down by one."""
        if not self._valid_index(index):
            records_log(f"delete rejected, index {index!r} out of range (size {len(self._students)})", level="WARN")
            return False
        del self._students[index]
        return True

    def list_all(self) -> list[Student]:
        """Snapshot of the collection in current order."""
        return list(self._students)

    def get(self, index: int) -> Student | None:
        """Student at index, or None when the index is out of range."""
        if not self._valid_index(index):
            return None
        return self._students[index]

    # -- Persistence --

    def save(self) -> bool:
        """Write the whole collection to data_file."""
        return persistence.write(self._students, self.data_file)

    def load(self) -> bool:
        """Replace the in-memory collection with the persisted one.

        Unsaved changes are discarded. A missing file loads as empty and
        counts as success; an unreadable one also leaves the collection
        empty but returns False.
        """
        students, status = persistence.read_with_status(Student, self.data_file)
        self._students = students
        self._last_load = status
        records_log(f"Loaded {len(students)} student(s) from {self.data_file} ({status})")
        return status is not LoadStatus.CORRUPT

    @property
    def last_load_status(self) -> LoadStatus | None:
        """How the most recent ``load`` went; None before the first load."""
        return self._last_load

    # -- Collection access --

    def __iter__(self) -> Iterator[Student]:
        return iter(self.list_all())

    def __len__(self) -> int:
        return len(self._students)

    # -- Internals --

    def _valid_index(self, index) -> bool:
        if isinstance(index, bool) or not isinstance(index, int):
            return False
        return 0 <= index < len(self._students)
