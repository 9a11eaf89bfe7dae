"""File-system backed storage utilities."""

from .errors import PersistenceError, StudentRecordsError, ValidationError
from .person_record import PersonRecord
from .record_types import RecordType
from .persistence import LoadStatus, PersistedCollection
from . import persistence
