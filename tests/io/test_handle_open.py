"""Tests for FileHandle construction, close semantics, and the open() helpers."""

import os
from pathlib import Path

import pytest

from pathkit.core.location import Location
from pathkit.io import FileHandle, HandleMode, open, open_for_reading, open_for_writing
from pathkit.io.errors import HandleClosedError


def test_for_reading_missing_file_returns_none(tmp_path: Path) -> None:
    assert FileHandle.for_reading(tmp_path / "missing.txt") is None


def test_for_reading_sets_initial_state(tmp_path: Path) -> None:
    target = tmp_path / "in.txt"
    target.write_bytes(b"abc")

    fh = FileHandle.for_reading(target)
    assert fh is not None
    assert fh.mode is HandleMode.READ
    assert fh.location == Location(str(target))
    assert fh.eof is False
    assert fh.buffered == 0
    assert fh.closed is False
    fh.close()


def test_for_writing_creates_missing_file(tmp_path: Path) -> None:
    target = tmp_path / "out.txt"
    assert not target.exists()

    fh = FileHandle.for_writing(target)
    assert fh is not None
    assert fh.mode is HandleMode.WRITE
    assert target.exists()
    assert target.stat().st_size == 0
    fh.close()


def test_for_writing_fails_when_parent_is_missing(tmp_path: Path) -> None:
    assert FileHandle.for_writing(tmp_path / "no" / "such" / "dir" / "f.txt") is None


def test_for_writing_retries_open_exactly_once(tmp_path: Path, monkeypatch) -> None:
    target = tmp_path / "out.txt"
    calls: list[str] = []
    real_open = os.open

    def counting_open(path, flags, *args):
        if flags == os.O_WRONLY:
            calls.append(path)
        return real_open(path, flags, *args)

    monkeypatch.setattr(os, "open", counting_open)
    fh = FileHandle.for_writing(target)
    assert fh is not None
    fh.close()
    assert calls == [str(target), str(target)]


def test_for_writing_does_not_truncate(tmp_path: Path) -> None:
    target = tmp_path / "out.txt"
    target.write_bytes(b"0123456789")

    fh = FileHandle.for_writing(target)
    assert fh is not None
    fh.write(b"ab")
    fh.close()

    assert target.read_bytes() == b"ab23456789"


def test_close_is_idempotent(tmp_path: Path) -> None:
    target = tmp_path / "f.txt"
    target.write_bytes(b"x")
    fh = FileHandle.for_reading(target)
    assert fh is not None

    fh.close()
    fh.close()
    assert fh.closed is True


def test_operations_after_close_are_misuse(tmp_path: Path) -> None:
    target = tmp_path / "f.txt"
    target.write_bytes(b"x\n")
    fh = FileHandle.for_reading(target)
    assert fh is not None
    fh.close()

    with pytest.raises(HandleClosedError):
        fh.read()
    with pytest.raises(HandleClosedError):
        fh.readline()

    wh = FileHandle.for_writing(target)
    assert wh is not None
    wh.close()
    with pytest.raises(HandleClosedError):
        wh.write(b"y")


def test_context_manager_closes(tmp_path: Path) -> None:
    target = tmp_path / "f.txt"
    target.write_bytes(b"x")
    with FileHandle.for_reading(target) as fh:
        assert fh.closed is False
    assert fh.closed is True


def test_unreferenced_handle_releases_descriptor(tmp_path: Path, monkeypatch) -> None:
    target = tmp_path / "f.txt"
    target.write_bytes(b"x")
    closed: list[int] = []
    real_close = os.close

    def tracking_close(fd):
        closed.append(fd)
        real_close(fd)

    fh = FileHandle.for_reading(target)
    assert fh is not None
    fd = fh._fd
    monkeypatch.setattr(os, "close", tracking_close)
    del fh
    assert closed == [fd]


def test_repr_reports_mode(tmp_path: Path) -> None:
    target = tmp_path / "f.txt"
    target.write_bytes(b"")

    rh = FileHandle.for_reading(target)
    wh = FileHandle.for_writing(target)
    assert repr(rh) == f"<FileHandle: {target} READ-ONLY>"
    assert repr(wh) == f"<FileHandle: {target} WRITE>"
    rh.close()
    wh.close()
    assert repr(rh) == f"<FileHandle: {target} READ-ONLY CLOSED>"


def test_open_by_mode_string(tmp_path: Path) -> None:
    target = tmp_path / "f.txt"

    wh = open(str(target), "w")
    assert wh is not None and wh.mode is HandleMode.WRITE
    wh.close()

    rh = open(str(target), "r")
    assert rh is not None and rh.mode is HandleMode.READ
    rh.close()


@pytest.mark.parametrize("mode", ["a", "rw", "", "R", "wb"])
def test_open_rejects_other_modes(tmp_path: Path, mode: str) -> None:
    target = tmp_path / "f.txt"
    target.write_bytes(b"")
    assert open(str(target), mode) is None


def test_location_level_helpers(tmp_path: Path) -> None:
    directory = Location(str(tmp_path))
    missing = directory / "missing.txt"

    assert open_for_reading(missing) is None
    assert open_for_reading(directory) is None
    assert open_for_writing(directory) is None

    wh = open_for_writing(missing)
    assert wh is not None
    wh.close()

    rh = open_for_reading(missing)
    assert rh is not None
    assert rh.readline() is None
    rh.close()
