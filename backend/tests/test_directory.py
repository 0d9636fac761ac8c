"""Tests for the in-memory directory and the lookup service."""

import threading

from app.api.registration.crud import find_attendee, list_attendees
from app.core.database import AttendeeDirectory


class TestFindAttendee:
    def test_every_present_identifier_is_found(self, directory):
        for record in list_attendees(directory):
            assert find_attendee(directory, record.identifier) is record

    def test_absent_identifier_is_none(self, directory):
        assert find_attendee(directory, "99999999") is None

    def test_input_is_trimmed(self, directory):
        assert find_attendee(directory, " 50012345 ") == find_attendee(directory, "50012345")
        assert find_attendee(directory, " 50012345 ") is not None

    def test_no_leading_zero_normalisation(self, make_workbook):
        path = make_workbook(rows=[["a", "X", "00123", 1]])
        directory = AttendeeDirectory(str(path), seed_sample=False)
        directory.load()

        assert find_attendee(directory, "123") is None
        assert find_attendee(directory, "00123").name == "a"

    def test_first_duplicate_wins(self, make_workbook):
        path = make_workbook(rows=[["first", "X", "1111", 1], ["second", "Y", "1111", 2]])
        directory = AttendeeDirectory(str(path), seed_sample=False)
        directory.load()

        assert find_attendee(directory, "1111").name == "first"

    def test_empty_directory(self, tmp_path):
        directory = AttendeeDirectory(str(tmp_path / "missing.xlsx"), seed_sample=False)
        directory.load()

        assert len(directory) == 0
        assert find_attendee(directory, "50012345") is None


class TestReload:
    def test_reload_picks_up_changed_assignment(self, make_workbook, directory):
        make_workbook(rows=[
            ["satish", "Technology", "50012345", 9],
            ["nithin", "EHS", "50012347", 2],
        ])

        count = directory.reload()

        assert count == 2
        assert find_attendee(directory, "50012345").assignment == 9
        assert find_attendee(directory, "50012347").assignment == 2

    def test_snapshot_taken_before_reload_is_untouched(self, make_workbook, directory):
        before = directory.snapshot()
        make_workbook(rows=[["someone", "X", "1111", 1]])

        directory.reload()

        assert len(before) == 6
        assert [r.identifier for r in directory.snapshot()] == ["1111"]

    def test_reload_of_vanished_source_degrades_to_empty(self, database_file, directory):
        database_file.unlink()

        assert directory.reload() == 0
        assert directory.snapshot() == ()

    def test_concurrent_lookups_never_see_mixed_directories(self, make_workbook, tmp_path):
        identifiers = [str(1000 + i) for i in range(50)]
        old_path = make_workbook(rows=[["old", "", i, "A"] for i in identifiers], name="old.xlsx")
        new_path = make_workbook(rows=[["new", "", i, "B"] for i in identifiers], name="new.xlsx")
        directory = AttendeeDirectory(str(old_path), seed_sample=False)
        directory.load()

        mixed = []
        stop = threading.Event()

        def read():
            while not stop.is_set():
                assignments = {record.assignment for record in directory.snapshot()}
                if len(assignments) > 1:
                    mixed.append(assignments)

        readers = [threading.Thread(target=read) for _ in range(4)]
        for reader in readers:
            reader.start()
        for i in range(10):
            directory.path = str(new_path if i % 2 == 0 else old_path)
            directory.reload()
        stop.set()
        for reader in readers:
            reader.join()

        assert mixed == []
        assert {r.assignment for r in directory.snapshot()} == {"A"}
