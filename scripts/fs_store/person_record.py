"""Base person record: pure data contract shared by every person kind (stdlib only).

No filesystem I/O here; see ``persistence`` for reading and writing collections.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass, fields
from typing import Any, TypeVar

T = TypeVar("T", bound="PersonRecord")


@dataclass
class PersonRecord(ABC):
    """Shape shared by every person kind.

    Never instantiated directly: each concrete kind sets ``role`` to a
    constant ``RecordType`` value.
    """

    name: str

    @property
    @abstractmethod
    def role(self) -> str:
        """Constant role string of the concrete kind."""

    # -- Serialization --

    def to_dict(self) -> dict:
        """Serialize to a plain dict, role included."""
        data = asdict(self)
        data["role"] = str(self.role)
        return data

    @classmethod
    def from_dict(cls: type[T], data: dict) -> T:
        """Deserialize from a plain dict. Unknown keys (``role``) are ignored."""
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {k: v for k, v in data.items() if k in known}
        return cls(**kwargs)
