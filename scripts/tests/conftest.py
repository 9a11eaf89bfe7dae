"""Pytest fixtures shared by the student records tests."""

import pytest

import log
from fs_store import persistence
from records import student_manager


@pytest.fixture(autouse=True)
def isolated_records_env(tmp_path, monkeypatch):
    """Point the data file and the log file at a per-test temporary directory."""
    home = tmp_path / "student_records_home"
    data_file = home / "students.json"
    monkeypatch.setattr(log, "LOG_FILE", home / "student_records.log")
    monkeypatch.setattr(log, "LOG_TO_STDERR", False)
    monkeypatch.setattr(log, "first_line", True)
    monkeypatch.setattr(persistence, "DATA_FILE", data_file)
    monkeypatch.setattr(student_manager, "DATA_FILE", data_file)
    yield home


@pytest.fixture
def data_file(isolated_records_env):
    """Default records file inside the isolated environment (not created)."""
    return isolated_records_env / "students.json"
