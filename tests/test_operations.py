"""Tests for file_sync.sync.operations module.

Validates best-effort mutations: success paths, suppressed failures and the
failure callback.
"""

import os
import stat

import pytest

from file_sync.sync.operations import FileOperations


@pytest.fixture
def failures():
    return []


@pytest.fixture
def ops(failures):
    return FileOperations(on_failure=lambda op, path, err: failures.append((op, path, err)))


class TestCopyFile:

    def test_copies_bytes_and_mtime(self, tmp_path, ops):
        src = tmp_path / "a.bin"
        src.write_bytes(b"\x00\x01\x02" * 10)
        os.utime(src, (1_600_000_000, 1_600_000_000))
        dst = tmp_path / "b.bin"

        assert ops.copy_file(str(src), str(dst)) is True
        assert dst.read_bytes() == src.read_bytes()
        assert dst.stat().st_mtime == pytest.approx(1_600_000_000)

    def test_creates_missing_parents(self, tmp_path, ops):
        src = tmp_path / "a.txt"
        src.write_text("x")
        dst = tmp_path / "new" / "deeper" / "a.txt"

        assert ops.copy_file(str(src), str(dst)) is True
        assert dst.read_text() == "x"

    def test_overwrites_existing(self, tmp_path, ops):
        src = tmp_path / "a.txt"
        src.write_text("new content")
        dst = tmp_path / "b.txt"
        dst.write_text("old")

        assert ops.copy_file(str(src), str(dst)) is True
        assert dst.read_text() == "new content"

    def test_missing_source_is_suppressed(self, tmp_path, ops, failures):
        dst = tmp_path / "b.txt"
        assert ops.copy_file(str(tmp_path / "missing.txt"), str(dst)) is False
        assert not dst.exists()
        assert len(failures) == 1
        assert failures[0][0] == "copy"
        assert failures[0][1] == str(dst)
        assert isinstance(failures[0][2], OSError)


class TestDirectories:

    def test_make_directory(self, tmp_path, ops):
        target = tmp_path / "x" / "y"
        assert ops.make_directory(str(target)) is True
        assert target.is_dir()

    def test_remove_empty_directory(self, tmp_path, ops):
        target = tmp_path / "empty"
        target.mkdir()
        assert ops.remove_directory(str(target)) is True
        assert not target.exists()

    def test_remove_non_empty_directory_fails(self, tmp_path, ops, failures):
        target = tmp_path / "full"
        target.mkdir()
        (target / "keep.txt").write_text("keep")

        assert ops.remove_directory(str(target)) is False
        assert (target / "keep.txt").exists()
        assert failures[0][0] == "rmdir"


class TestRemoveAndMove:

    def test_remove_file(self, tmp_path, ops):
        target = tmp_path / "f.txt"
        target.write_text("x")
        assert ops.remove_file(str(target)) is True
        assert not target.exists()

    def test_remove_missing_file_fails(self, tmp_path, ops, failures):
        assert ops.remove_file(str(tmp_path / "gone.txt")) is False
        assert failures[0][0] == "remove"

    def test_move(self, tmp_path, ops):
        src = tmp_path / "old.txt"
        src.write_text("x")
        dst = tmp_path / "new.txt"
        assert ops.move(str(src), str(dst)) is True
        assert dst.read_text() == "x"
        assert not src.exists()

    def test_move_missing_source_fails(self, tmp_path, ops, failures):
        assert ops.move(str(tmp_path / "old.txt"), str(tmp_path / "new.txt")) is False
        assert failures[0][0] == "rename"


class TestFailureCallback:

    def test_no_callback(self, tmp_path):
        ops = FileOperations()
        assert ops.remove_file(str(tmp_path / "gone.txt")) is False

    def test_callback_errors_are_contained(self, tmp_path):
        def broken(op, path, err):
            raise RuntimeError("callback broke")

        ops = FileOperations(on_failure=broken)
        assert ops.remove_file(str(tmp_path / "gone.txt")) is False


class TestClearAttributes:

    def test_read_only_file_becomes_writable(self, tmp_path):
        target = tmp_path / "ro.txt"
        target.write_text("x")
        os.chmod(target, 0o444)

        assert FileOperations().clear_attributes(str(target)) is True
        assert target.stat().st_mode & stat.S_IWUSR
