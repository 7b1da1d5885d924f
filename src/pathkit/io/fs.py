"""
Filesystem helpers for pathkit.io (file protocol baseline).

Responsibilities
- Provide the filesystem provider consumed by pathkit.io.handle and by callers holding a
  Location: existence and type checks, empty-file creation, directory listing, sizes,
  whole-file reads, and atomic whole-file writes.
- Establish clear semantics for the atomic write path: tmp write → fsync → atomic rename.

Source of truth
- Path derivations (name, parent, child joins) live in pathkit.core.location; this module does
  not redefine them and focuses solely on file operations.

Import DAG discipline
- stdlib + pathkit.core only.

Notes
- Every helper accepts a Location, a str, or any os.PathLike.
- Query helpers answer False/None/[] instead of raising when the OS call fails.
- Atomicity via os.replace is guaranteed only when src and dst reside on the same filesystem.
"""

from __future__ import annotations

import logging
import os
import uuid
from typing import BinaryIO

from pathkit.core.location import Location

logger = logging.getLogger(__name__)

PathArg = Location | str | os.PathLike[str]

_TMP_SUFFIX = ".tmp"


def openable(location: PathArg) -> str:
    """
    Return the string form the OS open call needs.

    Args:
        location (Location | str | os.PathLike): Target location.

    Returns:
        str: Path string.
    """
    return os.fspath(location)


def exists(location: PathArg) -> bool:
    """
    Check whether a location exists.

    Args:
        location (Location | str | os.PathLike): Filesystem path.

    Returns:
        bool: True if the path exists, False otherwise.
    """
    return os.path.exists(openable(location))


def is_directory(location: PathArg) -> bool:
    """True if the location exists and is a directory."""
    return os.path.isdir(openable(location))


def is_file(location: PathArg) -> bool:
    """True if the location exists and is not a directory."""
    path = openable(location)
    return os.path.exists(path) and not os.path.isdir(path)


def create_empty_file(location: PathArg) -> bool:
    """
    Create a zero-byte file at location if nothing exists there yet.

    Args:
        location (Location | str | os.PathLike): File to create.

    Returns:
        bool: True if the file exists afterwards as a regular file, False on OS failure.

    Notes:
        Existing files are left untouched (no truncation).
    """
    path = openable(location)
    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT, 0o666)
    except OSError as exc:
        logger.debug("could not create %s: %s", path, exc)
        return False
    os.close(fd)
    return True


def makedirs(location: PathArg, exist_ok: bool = True) -> None:
    """
    Create directories recursively.

    Args:
        location (Location | str | os.PathLike): Directory path to create.
        exist_ok (bool): Do not error if the directory already exists.
    """
    os.makedirs(openable(location), exist_ok=exist_ok)


def contents(location: PathArg) -> list[Location]:
    """
    List direct children of a directory (non-recursive).

    Args:
        location (Location | str | os.PathLike): Directory to list.

    Returns:
        list[Location]: Child locations sorted by name; [] if location is not a readable directory.
    """
    base = Location(openable(location))
    try:
        names = sorted(os.listdir(base.string))
    except (NotADirectoryError, FileNotFoundError, PermissionError):
        return []
    return [base.child(name) for name in names]


def listdir(location: PathArg = "./") -> list[Location]:
    """
    List a directory, defaulting to the current working directory.

    Args:
        location (Location | str | os.PathLike): Directory to list (default "./").

    Returns:
        list[Location]: Same as contents(location).
    """
    return contents(location)


def files(location: PathArg) -> list[Location]:
    """Children of location that are not directories."""
    return [entry for entry in contents(location) if is_file(entry)]


def directories(location: PathArg) -> list[Location]:
    """Children of location that are directories."""
    return [entry for entry in contents(location) if is_directory(entry)]


def size(location: PathArg) -> int | None:
    """
    Byte size of a file.

    Args:
        location (Location | str | os.PathLike): File path.

    Returns:
        int | None: Size in bytes; None for directories or paths that cannot be stat'ed.
    """
    path = openable(location)
    if os.path.isdir(path):
        return None
    try:
        return os.path.getsize(path)
    except OSError:
        return None


def read_bytes(location: PathArg) -> bytes | None:
    """
    Read a whole file into memory.

    Args:
        location (Location | str | os.PathLike): File path.

    Returns:
        bytes | None: File contents, or None if the file cannot be read.
    """
    path = openable(location)
    try:
        with open(path, "rb") as fh:
            return fh.read()
    except OSError as exc:
        logger.debug("could not read %s: %s", path, exc)
        return None


def fsync_file(fh: BinaryIO) -> None:
    """
    Flush and fsync an open file handle.

    Args:
        fh (BinaryIO): A file object with .flush() and .fileno().

    Notes:
        Ensures file contents reach the storage device (subject to OS/filesystem semantics).
    """
    fh.flush()
    os.fsync(fh.fileno())


def rename_atomic(src: str, dst: str) -> None:
    """
    Atomically rename src -> dst on the same filesystem.

    Args:
        src (str): Existing source path (typically a temporary file).
        dst (str): Final destination path.

    Notes:
        Uses os.replace, which is atomic only if src and dst reside on the same filesystem.
    """
    os.replace(src, dst)


def write_bytes_atomic(location: PathArg, data: bytes) -> None:
    """
    Replace a file's contents atomically.

    Args:
        location (Location | str | os.PathLike): Destination file.
        data (bytes): Full new contents.

    Raises:
        OSError: If the temporary write, fsync, or rename fails. The temporary file is
            removed on a best-effort basis.

    Notes:
        Write path is "<dst>.<uuid>.tmp" → fsync → os.replace(tmp, dst). The temporary name is
        unique per call so existing siblings are never clobbered, and it sits next to the
        destination so the rename stays on one filesystem.
    """
    dst = openable(location)
    tmp = f"{dst}.{uuid.uuid4().hex}{_TMP_SUFFIX}"
    try:
        with open(tmp, "wb") as fh:
            fh.write(data)
            fsync_file(fh)
        rename_atomic(tmp, dst)
    except OSError:
        try:
            os.remove(tmp)
        except FileNotFoundError:
            pass
        raise
