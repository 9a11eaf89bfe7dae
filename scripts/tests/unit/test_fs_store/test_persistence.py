"""Tests for fs_store.persistence – whole-collection JSON write/read."""

import json

import pytest

from config import PAYLOAD_FORMAT, PAYLOAD_VERSION
from fs_store import LoadStatus, PersistenceError, persistence
from records import Student
from tests.test_utils import make_student, make_students, write_payload


# ---------------------------------------------------------------------------
# write / read
# ---------------------------------------------------------------------------

class TestRoundTrip:
    @pytest.mark.parametrize("count", [0, 1, 6])
    def test_read_reproduces_written_collection(self, tmp_path, count):
        fp = tmp_path / "students.json"
        students = make_students(count)
        assert persistence.write(students, fp) is True
        assert persistence.read(Student, fp) == students

    def test_unicode_and_whitespace_survive(self, tmp_path):
        fp = tmp_path / "students.json"
        s = make_student(name="Zoë  Ñúñez", course=" Física ")
        persistence.write([s], fp)
        assert persistence.read(Student, fp) == [s]

    def test_write_overwrites_in_full(self, tmp_path):
        fp = tmp_path / "students.json"
        persistence.write(make_students(5), fp)
        persistence.write(make_students(2), fp)
        assert len(persistence.read(Student, fp)) == 2

    def test_write_creates_parent_dirs(self, tmp_path):
        fp = tmp_path / "a" / "b" / "students.json"
        assert persistence.write(make_students(1), fp) is True
        assert fp.exists()

    def test_default_path(self, data_file):
        students = make_students(2)
        assert persistence.write(students) is True
        assert data_file.exists()
        assert persistence.read(Student) == students


class TestPayloadLayout:
    def test_envelope_has_header(self, tmp_path):
        fp = tmp_path / "students.json"
        persistence.write([make_student(3)], fp)
        data = json.loads(fp.read_text(encoding="utf-8"))
        assert data["format"] == PAYLOAD_FORMAT
        assert data["version"] == PAYLOAD_VERSION
        assert data["records"] == [{
            "name": "Student 3",
            "roll_number": "CS103",
            "course": "Computer Science",
            "grade": 3,
            "role": "Student",
        }]

    def test_headerless_list_is_accepted(self, tmp_path):
        fp = write_payload(tmp_path / "legacy.json", [
            {"name": "Ann", "roll_number": "A1", "course": "Math", "grade": 2},
        ])
        records, status = persistence.read_with_status(Student, fp)
        assert status == LoadStatus.LOADED
        assert records == [Student(name="Ann", roll_number="A1", course="Math", grade=2)]


# ---------------------------------------------------------------------------
# Missing vs corrupt
# ---------------------------------------------------------------------------

class TestReadFailures:
    def test_missing_file_is_empty_not_error(self, tmp_path):
        records, status = persistence.read_with_status(Student, tmp_path / "nope.json")
        assert records == []
        assert status == LoadStatus.MISSING

    @pytest.mark.parametrize("text", ["", "{not json", "42", '"text"', "null"])
    def test_unparsable_is_corrupt(self, tmp_path, text):
        fp = tmp_path / "students.json"
        fp.write_text(text, encoding="utf-8")
        records, status = persistence.read_with_status(Student, fp)
        assert records == []
        assert status == LoadStatus.CORRUPT

    def test_truncated_write_is_corrupt(self, tmp_path):
        fp = tmp_path / "students.json"
        persistence.write(make_students(3), fp)
        text = fp.read_text(encoding="utf-8")
        fp.write_text(text[: len(text) // 2], encoding="utf-8")
        assert persistence.read(Student, fp) == []
        assert persistence.read_with_status(Student, fp)[1] == LoadStatus.CORRUPT

    def test_one_bad_record_rejects_whole_payload(self, tmp_path):
        fp = write_payload(tmp_path / "students.json", {
            "format": PAYLOAD_FORMAT,
            "version": PAYLOAD_VERSION,
            "records": [
                {"name": "Ann", "roll_number": "A1", "course": "Math", "grade": 2},
                {"name": "Bob", "roll_number": "B1", "course": "Math", "grade": 7},
            ],
        })
        assert persistence.read_with_status(Student, fp) == ([], LoadStatus.CORRUPT)

    def test_wrong_format_marker_is_corrupt(self, tmp_path):
        fp = write_payload(tmp_path / "students.json", {"format": "something-else", "version": 1, "records": []})
        assert persistence.read_with_status(Student, fp)[1] == LoadStatus.CORRUPT

    def test_newer_version_is_corrupt(self, tmp_path):
        fp = write_payload(tmp_path / "students.json", {
            "format": PAYLOAD_FORMAT, "version": PAYLOAD_VERSION + 1, "records": [],
        })
        assert persistence.read_with_status(Student, fp)[1] == LoadStatus.CORRUPT

    def test_directory_target_is_corrupt(self, tmp_path):
        target = tmp_path / "students.json"
        target.mkdir()
        assert persistence.read_with_status(Student, target) == ([], LoadStatus.CORRUPT)

    def test_non_utf8_is_corrupt(self, tmp_path):
        fp = tmp_path / "students.json"
        fp.write_bytes(b"\xff\xfe\x00garbage")
        assert persistence.read_with_status(Student, fp)[1] == LoadStatus.CORRUPT

    def test_failure_is_logged(self, tmp_path):
        import log

        fp = tmp_path / "students.json"
        fp.write_text("{not json", encoding="utf-8")
        persistence.read(Student, fp)
        assert "Failed to load records" in log.LOG_FILE.read_text(encoding="utf-8")


class TestWriteFailures:
    def test_unwritable_target_returns_false(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("x", encoding="utf-8")
        assert persistence.write(make_students(1), blocker / "students.json") is False

    def test_directory_target_returns_false(self, tmp_path):
        target = tmp_path / "students.json"
        target.mkdir()
        assert persistence.write(make_students(1), target) is False

    def test_unserializable_record_returns_false(self, tmp_path):
        fp = tmp_path / "students.json"
        assert persistence.write([object()], fp) is False
        assert not fp.exists()


class TestCodec:
    def test_decode_rejects_garbage(self):
        with pytest.raises(PersistenceError):
            persistence.decode("[1, 2]", Student)

    def test_encode_decode(self):
        students = make_students(2)
        assert persistence.decode(persistence.encode(students), Student) == students


# ---------------------------------------------------------------------------
# Inputs that must not escape the no-raise boundary
# ---------------------------------------------------------------------------

class TestHostileInput:
    def test_unencodable_name_keeps_previous_file(self, tmp_path):
        fp = tmp_path / "students.json"
        good = make_students(2)
        assert persistence.write(good, fp) is True
        before = fp.read_bytes()

        bad = make_student(5, name="x\ud800")
        assert persistence.write([*good, bad], fp) is False
        assert fp.read_bytes() == before
        assert persistence.read(Student, fp) == good

    def test_encode_bytes_rejects_surrogates(self):
        with pytest.raises(PersistenceError):
            persistence.encode_bytes([make_student(name="x\ud800")])

    def test_oversized_integer_is_corrupt(self, tmp_path):
        fp = tmp_path / "students.json"
        fp.write_text(
            '[{"name": "a", "roll_number": "A1", "course": "c", "grade": ' + "1" * 5000 + "}]",
            encoding="utf-8",
        )
        assert persistence.read_with_status(Student, fp) == ([], LoadStatus.CORRUPT)

    def test_deep_nesting_is_corrupt(self, tmp_path):
        fp = tmp_path / "students.json"
        fp.write_text("[" * 200000, encoding="utf-8")
        assert persistence.read_with_status(Student, fp) == ([], LoadStatus.CORRUPT)


class TestFormatMarker:
    def test_format_default_comes_from_config(self):
        assert persistence.PersistedCollection().format == PAYLOAD_FORMAT

    def test_explicit_matching_format_accepted(self):
        envelope = persistence.PersistedCollection.model_validate({"format": PAYLOAD_FORMAT, "records": []})
        assert envelope.version == PAYLOAD_VERSION
