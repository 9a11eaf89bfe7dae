#!/usr/bin/env python3
"""
Student Records - Main Entry Point
Thin text shell over the records core: gathers raw input, validates it,
calls the store, saves, and re-renders the table from list_all().
"""
import argparse
import json
import sys
from pathlib import Path

from conf import DATA_FILE
from log import clear_log, read_log, records_log
from records import Student, StudentManageable, StudentManager, validation_errors

# =============================================================================
# RENDERING
# =============================================================================

COLUMNS = [
    ("#", 4),
    ("Name", 24),
    ("Roll Number", 14),
    ("Course", 20),
    ("Grade", 5),
]


def render_table(students: list[Student]) -> str:
    """Render the collection as a fixed-width text table, one row per position."""
    header = "  ".join(title.ljust(width) for title, width in COLUMNS)
    lines = [header, "-" * len(header)]
    for index, s in enumerate(students):
        cells = [str(index), s.name, s.roll_number, s.course, str(s.grade)]
        lines.append("  ".join(cell.ljust(width) for cell, (_, width) in zip(cells, COLUMNS)))
    if not students:
        lines.append("(no students)")
    return "\n".join(lines)


def _print_students(manager: StudentManageable, as_json: bool) -> None:
    students = manager.list_all()
    if as_json:
        print(json.dumps([s.to_dict() for s in students], indent=2, ensure_ascii=False))
    else:
        print(render_table(students))


def _build_student(args: argparse.Namespace) -> Student | None:
    """Validate raw fields; print every failure and return None if any."""
    errors = validation_errors(args.name, args.roll_number, args.course, args.grade)
    if errors:
        print("Please correct the following errors:", file=sys.stderr)
        for message in errors.values():
            print(f"- {message}", file=sys.stderr)
        return None
    return Student.from_input(args.name, args.roll_number, args.course, args.grade)


def _confirm(prompt: str) -> bool:
    try:
        answer = input(f"{prompt} [y/N] ")
    except EOFError:
        return False
    return answer.strip().lower() in {"y", "yes"}


# =============================================================================
# COMMANDS
# =============================================================================

def cmd_list(manager: StudentManageable, args: argparse.Namespace) -> int:
    _print_students(manager, args.json)
    return 0


def cmd_add(manager: StudentManageable, args: argparse.Namespace) -> int:
    student = _build_student(args)
    if student is None:
        return 1
    if not manager.add(student):
        print("Error: student could not be added.", file=sys.stderr)
        return 1
    return _save_and_show(manager, args)


def cmd_update(manager: StudentManageable, args: argparse.Namespace) -> int:
    student = _build_student(args)
    if student is None:
        return 1
    if not manager.update(args.index, student):
        print(f"Error: no student at position {args.index}.", file=sys.stderr)
        return 1
    return _save_and_show(manager, args)


def cmd_delete(manager: StudentManageable, args: argparse.Namespace) -> int:
    if not args.yes and not _confirm(f"Delete student at position {args.index}?"):
        print("Delete cancelled.")
        return 0
    if not manager.delete(args.index):
        print(f"Error: no student at position {args.index}.", file=sys.stderr)
        return 1
    return _save_and_show(manager, args)


def cmd_log(args: argparse.Namespace) -> int:
    """Show or clear the records log; runs without loading the data file."""
    if args.clear:
        if not clear_log():
            print("Error: log file could not be deleted.", file=sys.stderr)
            return 1
        print("Log cleared.")
        return 0
    contents = read_log()
    if contents is None:
        print("[Student Records Log file does not exist]")
    elif not contents:
        print("[Student Records Log is empty]")
    else:
        print(contents, end="")
    return 0


def _save_and_show(manager: StudentManageable, args: argparse.Namespace) -> int:
    if not manager.save():
        print("Error: changes could not be saved.", file=sys.stderr)
        return 1
    _print_students(manager, args.json)
    return 0


COMMANDS = {
    "list": cmd_list,
    "add": cmd_add,
    "update": cmd_update,
    "delete": cmd_delete,
}

# =============================================================================
# MAIN LOGIC
# =============================================================================

def _add_student_fields(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("name", help="Student name")
    parser.add_argument("roll_number", help="Roll number (letters and digits only)")
    parser.add_argument("course", help="Course name")
    parser.add_argument("grade", help="Grade, an integer from 0 to 5")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Manage student records stored in a single file")
    parser.add_argument(
        "--data-file",
        type=Path,
        default=DATA_FILE,
        help=f"Path of the records file (default: {DATA_FILE})",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the collection as JSON instead of a table",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="Show every student")

    add = sub.add_parser("add", help="Append a student")
    _add_student_fields(add)

    update = sub.add_parser("update", help="Replace the student at a position")
    update.add_argument("index", type=int, help="0-based position from 'list'")
    _add_student_fields(update)

    delete = sub.add_parser("delete", help="Remove the student at a position")
    delete.add_argument("index", type=int, help="0-based position from 'list'")
    delete.add_argument("--yes", "-y", action="store_true", help="Skip the confirmation prompt")

    log_parser = sub.add_parser("log", help="Show the records log")
    log_parser.add_argument("--clear", action="store_true", help="Delete the log file instead of showing it")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)
    if args.command == "log":
        return cmd_log(args)
    manager = StudentManager(data_file=args.data_file)
    if not manager.load():
        print(f"Warning: {args.data_file} could not be read; starting with no students.", file=sys.stderr)
    records_log(f"Command: {args.command}")
    return COMMANDS[args.command](manager, args)


if __name__ == "__main__":
    sys.exit(main())
