"""
Fixed values for the student records core.
"""

# Closed grade range accepted by Student and the validator
GRADE_MIN = 0
GRADE_MAX = 5

# Roll numbers: letters and digits only, checked after trimming
ROLL_NUMBER_PATTERN = r"^[A-Za-z0-9]+$"

# Header written at the top of every persisted collection
PAYLOAD_FORMAT = "student-records"
PAYLOAD_VERSION = 1
