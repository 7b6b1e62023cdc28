"""Tests for file_sync.observers module."""

import io
import logging

from file_sync.observers import ConsoleOutputObserver, LoggingObserver, SyncObserver


class TestConsoleOutputObserver:

    def test_lines(self):
        stream = io.StringIO()
        observer = ConsoleOutputObserver(stream)
        observer.on_created("/b/a.txt")
        observer.on_changed("/b/a.txt")
        observer.on_renamed("/b/a.txt", "/b/c.txt")
        observer.on_deleted("/b/c.txt")

        assert stream.getvalue().splitlines() == [
            "Created /b/a.txt",
            "Changed /b/a.txt",
            "Renamed /b/a.txt to /b/c.txt",
            "Deleted /b/c.txt",
        ]

    def test_defaults_to_stdout(self, capsys):
        ConsoleOutputObserver().on_created("/b/x")
        assert capsys.readouterr().out == "Created /b/x\n"


class TestLoggingObserver:

    def test_records_carry_event_fields(self, caplog):
        observer = LoggingObserver(logging.getLogger("test.sync.events"))
        with caplog.at_level(logging.INFO, logger="test.sync.events"):
            observer.on_created("/b/a.txt")
            observer.on_renamed("/b/a.txt", "/b/c.txt")

        first, second = caplog.records
        assert first.getMessage() == "Created /b/a.txt"
        assert first.event == "created"
        assert first.path == "/b/a.txt"
        assert second.event == "renamed"
        assert second.old_path == "/b/a.txt"
        assert second.path == "/b/c.txt"

    def test_default_logger_name(self):
        assert LoggingObserver().logger.name == "file_sync.events"


class TestSyncObserver:

    def test_hooks_return_none(self):
        observer = SyncObserver()
        assert observer.on_created("/x") is None
        assert observer.on_changed("/x") is None
        assert observer.on_deleted("/x") is None
        assert observer.on_renamed("/x", "/y") is None
