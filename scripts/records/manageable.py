"""The CRUD contract the presentation shell depends on."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .student import Student


@runtime_checkable
class StudentManageable(Protocol):
    """Positional CRUD over an ordered student collection plus save/load.

    Indexes are 0-based slots in the current ``list_all()`` order and shift
    down after a delete, so an index taken from an older listing may no
    longer point at the same student.
    """

    def add(self, student: Student) -> bool: ...

    def update(self, index: int, student: Student) -> bool: ...

    def delete(self, index: int) -> bool: ...

    def list_all(self) -> list[Student]: ...

    def save(self) -> bool: ...

    def load(self) -> bool: ...
