"""
Student Records - Logging Module
Best-effort, levelled log lines shared by the core and the shell.

Logging never raises: when the log file cannot be created or written,
the line goes to stderr instead and the caller carries on.
"""
import sys
from datetime import datetime

from conf import LOG_FILE, SCRIPT_DIR

# =============================================================================
# CONFIGURATION
# =============================================================================

LOG = True  # Set to False to disable logging
LOG_TO_STDERR = True  # Use stderr so logs don't pollute command stdout
LEVELS = ("DEBUG", "INFO", "WARN", "ERROR")
first_line = True

# =============================================================================
# LOGGING
# =============================================================================

def _format_line(message: str, level: str) -> str:
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    return f"[{timestamp}] {level:<5} {message}\n"


def _append(lines: list[str]) -> None:
    """Append lines to LOG_FILE, falling back to stderr on any OS error."""
    try:
        LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
        with open(LOG_FILE, "a", encoding="utf-8", errors="backslashreplace") as f:
            f.writelines(lines)
    except OSError as exc:
        sys.stderr.write(_format_line(f"cannot write log file {LOG_FILE}: {exc}", "WARN"))
        if not LOG_TO_STDERR:
            sys.stderr.writelines(lines)


def records_log(message: str, level: str = "INFO") -> None:
    """Log message at level if LOG is enabled.

    The first call of a process also writes a session header.
    """
    global first_line
    if not LOG:
        return
    if level not in LEVELS:
        level = "INFO"
    lines = []
    if first_line:
        first_line = False
        lines.append(_format_line("--- New Student Records Session ---", "INFO"))
        lines.append(_format_line(f"Script started folder: {SCRIPT_DIR}", "INFO"))
    lines.append(_format_line(message, level))
    if LOG_TO_STDERR:
        sys.stderr.write(lines[-1])
    _append(lines)


def read_log() -> str | None:
    """Contents of the log file, or None when there is none yet."""
    try:
        return LOG_FILE.read_text(encoding="utf-8", errors="replace")
    except FileNotFoundError:
        return None


def clear_log() -> bool:
    """Delete the log file. Returns False when it could not be removed."""
    try:
        LOG_FILE.unlink(missing_ok=True)
    except OSError as exc:
        sys.stderr.write(_format_line(f"cannot delete log file {LOG_FILE}: {exc}", "WARN"))
        return False
    return True
