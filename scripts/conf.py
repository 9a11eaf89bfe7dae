"""Student records - Central path configuration."""

import os
from pathlib import Path

USER_HOME = Path.home()

_home_override = os.environ.get("STUDENT_RECORDS_HOME")
STUDENTS_HOME = Path(_home_override).expanduser() if _home_override else USER_HOME / ".student_records"

SCRIPT_DIR = Path(__file__).parent.resolve()

DATA_FILE = STUDENTS_HOME / "students.json"
LOG_FILE = STUDENTS_HOME / "student_records.log"
