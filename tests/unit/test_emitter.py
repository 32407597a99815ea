"""
Tests for atomic emission.
"""

import os
import stat
from pathlib import Path

import pytest

from enumbind.core.errors import EmitError
from enumbind.emitter import Emitter, atomic_write


def _leftovers(directory: Path) -> list[str]:
    return sorted(p.name for p in directory.iterdir() if p.name.endswith(".tmp"))


class TestAtomicWrite:
    """Test the temp-file-then-replace context manager."""

    def test_writes_new_file(self, tmp_path: Path):
        target = tmp_path / "pkg" / "Color.java"

        with atomic_write(target) as handle:
            handle.write("enum Color {}\n")

        assert target.read_text() == "enum Color {}\n"
        assert _leftovers(target.parent) == []

    def test_new_file_mode(self, tmp_path: Path):
        target = tmp_path / "Color.java"

        with atomic_write(target) as handle:
            handle.write("x")

        assert stat.S_IMODE(target.stat().st_mode) == 0o644

    def test_preserves_existing_mode(self, tmp_path: Path):
        target = tmp_path / "Color.java"
        target.write_text("old")
        os.chmod(target, 0o600)

        with atomic_write(target) as handle:
            handle.write("new")

        assert target.read_text() == "new"
        assert stat.S_IMODE(target.stat().st_mode) == 0o600

    def test_failure_leaves_destination_untouched(self, tmp_path: Path):
        target = tmp_path / "Color.java"
        target.write_text("previous")

        with pytest.raises(RuntimeError):
            with atomic_write(target) as handle:
                handle.write("partial")
                raise RuntimeError("boom")

        assert target.read_text() == "previous"
        assert _leftovers(tmp_path) == []

    def test_failure_creates_nothing(self, tmp_path: Path):
        target = tmp_path / "Color.java"

        with pytest.raises(RuntimeError):
            with atomic_write(target) as handle:
                handle.write("partial")
                raise RuntimeError("boom")

        assert not target.exists()
        assert list(tmp_path.iterdir()) == []


class TestEmitter:
    """Test the Emitter facade."""

    def test_emit(self, tmp_path: Path):
        target = tmp_path / "out" / "Color.java"

        assert Emitter().emit(target, "enum Color {}\n", "Color") == target
        assert target.read_text() == "enum Color {}\n"

    def test_read_existing(self, tmp_path: Path):
        target = tmp_path / "Color.java"
        emitter = Emitter()

        assert emitter.read_existing(target) is None
        target.write_text("enum Color {}\n")
        assert emitter.read_existing(target) == "enum Color {}\n"

    def test_read_existing_directory(self, tmp_path: Path):
        target = tmp_path / "Color.java"
        target.mkdir()

        with pytest.raises(EmitError, match="Color: cannot read existing"):
            Emitter().read_existing(target, "Color")

    def test_read_existing_undecodable(self, tmp_path: Path):
        target = tmp_path / "Color.java"
        target.write_bytes(b"enum Color \xff {}\n")

        with pytest.raises(EmitError, match="Color: cannot read existing"):
            Emitter().read_existing(target, "Color")

    def test_os_error_becomes_emit_error(self, tmp_path: Path, monkeypatch):
        def fail_replace(src, dst):
            raise PermissionError("read-only destination")

        monkeypatch.setattr("enumbind.emitter.os.replace", fail_replace)

        with pytest.raises(EmitError, match="Color: cannot write"):
            Emitter().emit(tmp_path / "Color.java", "enum Color {}\n", "Color")

        assert list(tmp_path.iterdir()) == []
