"""Whole-collection persistence: one JSON document holds every record.

``write`` overwrites the target in full and ``read`` rebuilds the full
ordered list; there is no per-record or incremental I/O. Neither function
raises: failures come back as ``False`` or an empty list and are logged.

The write goes straight to the target (no staging file), so a crash
mid-write can leave a truncated document behind. The next ``read`` then
reports ``LoadStatus.CORRUPT``.
"""

from __future__ import annotations

import json
from enum import StrEnum
from pathlib import Path
from typing import Any, Iterable, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as SchemaError

from conf import DATA_FILE
from config import PAYLOAD_FORMAT, PAYLOAD_VERSION
from log import records_log

from .errors import PersistenceError, ValidationError
from .person_record import PersonRecord

T = TypeVar("T", bound=PersonRecord)


class LoadStatus(StrEnum):
    """Outcome of reading the persisted collection."""

    MISSING = "missing"    # no file yet, empty collection by design
    LOADED = "loaded"      # file decoded in full
    CORRUPT = "corrupt"    # file present but unreadable or undecodable


class PersistedCollection(BaseModel):
    """Envelope written around the ordered record list."""

    model_config = ConfigDict(extra="ignore")

    format: str = Field(default=PAYLOAD_FORMAT)
    version: int = Field(default=PAYLOAD_VERSION, ge=0)
    records: list[dict[str, Any]] = Field(default_factory=list)

    @field_validator("format")
    @classmethod
    def _known_format(cls, value: str) -> str:
        if value != PAYLOAD_FORMAT:
            raise ValueError(f"expected format {PAYLOAD_FORMAT!r}, got {value!r}")
        return value


def _resolve(path: str | Path | None) -> Path:
    return Path(path) if path is not None else DATA_FILE


# -- Encoding --

def encode(records: Iterable[PersonRecord], indent: int = 2) -> str:
    """Serialize the whole ordered collection to one JSON document."""
    try:
        envelope = PersistedCollection(records=[r.to_dict() for r in records])
        return json.dumps(envelope.model_dump(), indent=indent, ensure_ascii=False)
    except (AttributeError, TypeError, ValueError) as exc:
        raise PersistenceError(f"Cannot serialize collection: {exc}") from exc


def encode_bytes(records: Iterable[PersonRecord]) -> bytes:
    """UTF-8 bytes of ``encode``; fails before any file is touched."""
    try:
        return encode(records).encode("utf-8")
    except UnicodeEncodeError as exc:
        raise PersistenceError(f"Collection is not valid UTF-8 text: {exc}") from exc


def decode(text: str, record_class: type[T]) -> list[T]:
    """Rebuild the ordered collection from a JSON document.

    A bare JSON list is accepted as a header-less (version 0) payload.
    Any bad record rejects the whole document.
    """
    try:
        raw = json.loads(text)
    except (ValueError, RecursionError) as exc:
        # JSONDecodeError, oversized integers, nesting deeper than the recursion limit
        raise PersistenceError(f"Not a JSON document: {exc}") from exc

    if isinstance(raw, list):
        raw = {"format": PAYLOAD_FORMAT, "version": 0, "records": raw}
    try:
        envelope = PersistedCollection.model_validate(raw)
    except SchemaError as exc:
        raise PersistenceError(f"Unexpected payload layout: {exc}") from exc
    if envelope.version > PAYLOAD_VERSION:
        raise PersistenceError(
            f"Payload version {envelope.version} is newer than supported version {PAYLOAD_VERSION}"
        )

    records: list[T] = []
    for position, data in enumerate(envelope.records):
        try:
            records.append(record_class.from_dict(data))
        except (ValidationError, TypeError) as exc:
            raise PersistenceError(f"Record {position} is invalid: {exc}") from exc
    return records


# -- File I/O --

def write(records: Iterable[PersonRecord], path: str | Path | None = None) -> bool:
    """Overwrite the target with the full collection. Returns False on failure."""
    p = _resolve(path)
    try:
        data = encode_bytes(records)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_bytes(data)
    except (PersistenceError, OSError) as exc:
        records_log(f"Failed to save records to {p}: {exc}", level="ERROR")
        return False
    return True


def read_with_status(record_class: type[T], path: str | Path | None = None) -> tuple[list[T], LoadStatus]:
    """Read the full collection and report how the read went."""
    p = _resolve(path)
    if not p.exists():
        return [], LoadStatus.MISSING
    try:
        try:
            text = p.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise PersistenceError(f"Cannot read file: {exc}") from exc
        records = decode(text, record_class)
    except PersistenceError as exc:
        records_log(f"Failed to load records from {p}: {exc}", level="ERROR")
        return [], LoadStatus.CORRUPT
    return records, LoadStatus.LOADED


def read(record_class: type[T], path: str | Path | None = None) -> list[T]:
    """Read the full collection; missing or unreadable targets give ``[]``."""
    records, _ = read_with_status(record_class, path)
    return records
