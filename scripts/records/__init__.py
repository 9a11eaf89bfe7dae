"""Concrete student records and the store that owns them."""

from .manageable import StudentManageable
from .student import Student, StudentPayload, validation_errors
from .student_manager import StudentManager
