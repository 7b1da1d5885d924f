"""
Buffered line reader/writer over an OS file descriptor.

Responsibilities
- FileHandle owns one descriptor opened either for reading or for writing.
- Raw byte access (read/write) plus line access (readline/readlines/iteration) with explicit
  end-of-stream tracking.
- Location-level helpers (open_for_reading/open_for_writing) and the ``open(path, mode)``
  convenience used by callers that only hold a path string.

Line reading
- Bytes read from the descriptor accumulate in a pending buffer. readline() searches the buffer
  for the delimiter; when none is present it refills with one chunk (IoSettings.chunk_size) and
  searches again. Memory stays bounded by the current unterminated line plus one chunk.
- An empty or failed refill sets eof. A non-empty remainder is then returned as the final line,
  so content without a trailing newline loses nothing.
- eof is monotonic; once set, readline() returns None without touching the descriptor.

Failure semantics
- Open failures return None (never raise).
- Raw read failures return None; inside readline they are folded into end-of-stream.
- write() on a read handle and any operation after close() raise HandleMisuseError subclasses.

Notes
- One handle must not be shared between threads; no locking is done.
- close() is idempotent and also runs from __exit__ and, as a backstop, __del__.
"""

from __future__ import annotations

import enum
import logging
import os
from collections.abc import Iterator
from typing import Literal

from pathkit.core.constants import LINE_DELIMITER
from pathkit.core.location import Location

from . import fs
from .config import IoSettings
from .errors import HandleClosedError, HandleModeError, LineDecodeError

logger = logging.getLogger(__name__)

__all__ = [
    "FileHandle",
    "HandleMode",
    "open",
    "open_for_reading",
    "open_for_writing",
    "read_lines",
]


class HandleMode(enum.Enum):
    READ = "r"
    WRITE = "w"


class FileHandle:
    """
    One open channel to a filesystem location.

    Attributes:
        location (Location): Target of the handle; fixed for its lifetime.
        mode (HandleMode): READ or WRITE; fixed for its lifetime.
        settings (IoSettings): Chunk size and decoding policy for line reads.

    Notes:
        Construct through FileHandle.for_reading / FileHandle.for_writing, which return None
        when the descriptor cannot be opened.

    Examples:
        >>> from pathkit.io import FileHandle
        >>> fh = FileHandle.for_reading("/etc/hostname")  # doctest: +SKIP
        >>> fh.readline()  # doctest: +SKIP
        'myhost'
    """

    def __init__(
        self,
        location: Location,
        fd: int,
        mode: HandleMode,
        settings: IoSettings | None = None,
    ) -> None:
        self.location = location
        self.mode = mode
        self.settings = settings or IoSettings()
        self._fd: int | None = fd
        self._eof = False
        self._pending = bytearray()

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def for_reading(
        cls, location: fs.PathArg, settings: IoSettings | None = None
    ) -> FileHandle | None:
        """
        Open location for input.

        Args:
            location (Location | str | os.PathLike): File to read.
            settings (IoSettings | None): Line reading settings; defaults to IoSettings().

        Returns:
            FileHandle | None: Read handle, or None if the OS refuses the open.
        """
        loc = Location(fs.openable(location))
        try:
            fd = os.open(loc.string, os.O_RDONLY)
        except OSError as exc:
            logger.debug("open for reading failed: %s: %s", loc, exc)
            return None
        logger.debug("opened %s for reading (fd=%d)", loc, fd)
        return cls(loc, fd, HandleMode.READ, settings)

    @classmethod
    def for_writing(
        cls, location: fs.PathArg, settings: IoSettings | None = None
    ) -> FileHandle | None:
        """
        Open location for output, creating an empty file on the first failure.

        Args:
            location (Location | str | os.PathLike): File to write.
            settings (IoSettings | None): Settings carried by the handle.

        Returns:
            FileHandle | None: Write handle, or None if both the open and the
            create-then-reopen attempt fail.

        Notes:
            The file is not truncated; writes start at offset 0 and overwrite in place.
        """
        loc = Location(fs.openable(location))
        try:
            fd = os.open(loc.string, os.O_WRONLY)
        except OSError as exc:
            logger.debug("open for writing failed, creating %s: %s", loc, exc)
            fs.create_empty_file(loc)
            try:
                fd = os.open(loc.string, os.O_WRONLY)
            except OSError as retry_exc:
                logger.debug("open for writing failed after create: %s: %s", loc, retry_exc)
                return None
        logger.debug("opened %s for writing (fd=%d)", loc, fd)
        return cls(loc, fd, HandleMode.WRITE, settings)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def eof(self) -> bool:
        """True once a line read found no further bytes on the descriptor."""
        return self._eof

    @property
    def closed(self) -> bool:
        return self._fd is None

    @property
    def buffered(self) -> int:
        """Number of bytes read ahead and not yet returned by readline()."""
        return len(self._pending)

    def _require_open(self) -> int:
        if self._fd is None:
            raise HandleClosedError(f"I/O operation on closed handle for {self.location}")
        return self._fd

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Release the descriptor. Calling close() again is a no-op."""
        fd, self._fd = self._fd, None
        if fd is None:
            return
        try:
            os.close(fd)
        except OSError as exc:
            logger.debug("close failed for %s (fd=%d): %s", self.location, fd, exc)
        else:
            logger.debug("closed %s (fd=%d)", self.location, fd)

    def __enter__(self) -> FileHandle:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __del__(self) -> None:
        if getattr(self, "_fd", None) is not None:
            logger.debug("closing unreferenced handle for %s", self.location)
            self.close()

    # ------------------------------------------------------------------
    # Raw access
    # ------------------------------------------------------------------

    def read(self, length: int = 0) -> bytes | None:
        """
        Read raw bytes from the current position.

        Args:
            length (int): Maximum bytes to read; <= 0 reads everything up to end of file.

        Returns:
            bytes | None: Bytes read (b"" at end of file), or None if the OS read failed.

        Raises:
            HandleClosedError: If the handle is closed.

        Notes:
            Does not consult or update eof or the line buffer.
        """
        fd = self._require_open()
        try:
            if length > 0:
                return os.read(fd, length)
            parts = []
            while True:
                chunk = os.read(fd, self.settings.chunk_size)
                if not chunk:
                    break
                parts.append(chunk)
            return b"".join(parts)
        except OSError as exc:
            logger.debug("read failed on %s: %s", self.location, exc)
            return None

    def write(self, data: bytes) -> None:
        """
        Write all of data at the current position.

        Args:
            data (bytes): Bytes to write.

        Raises:
            HandleModeError: If the handle was opened for reading.
            HandleClosedError: If the handle is closed.
            OSError: If the OS write fails.
        """
        if self.mode is not HandleMode.WRITE:
            raise HandleModeError(f"handle for {self.location} is read-only")
        fd = self._require_open()
        view = memoryview(data)
        while view:
            written = os.write(fd, view)
            view = view[written:]

    # ------------------------------------------------------------------
    # Line access
    # ------------------------------------------------------------------

    def readline(self) -> str | None:
        """
        Return the next line without its delimiter.

        Returns:
            str | None: Next line, or None when no lines remain.

        Raises:
            HandleClosedError: If the handle is closed.
            LineDecodeError: If decode_errors="strict" and the line is not valid text.

        Notes:
            With decode_errors="skip" a malformed line is dropped with a warning and reading
            continues with the next one, so None always means end of stream.
        """
        self._require_open()
        while not self._eof:
            index = self._pending.find(LINE_DELIMITER)
            if index >= 0:
                raw = bytes(self._pending[:index])
                del self._pending[: index + len(LINE_DELIMITER)]
                line = self._decode(raw)
                if line is not None:
                    return line
                continue

            chunk = self.read(self.settings.chunk_size)
            if chunk is None:
                logger.warning("read failed on %s, treating as end of stream", self.location)
            if not chunk:
                self._eof = True
                if self._pending:
                    raw = bytes(self._pending)
                    self._pending.clear()
                    return self._decode(raw)
                return None
            self._pending += chunk
        return None

    def readlines(self) -> list[str]:
        """Read lines until readline() returns None."""
        return list(self)

    def __iter__(self) -> Iterator[str]:
        while (line := self.readline()) is not None:
            yield line

    def _decode(self, raw: bytes) -> str | None:
        try:
            return raw.decode(self.settings.encoding)
        except UnicodeDecodeError as exc:
            if self.settings.decode_errors == "strict":
                raise LineDecodeError(raw, self.settings.encoding) from exc
            logger.warning(
                "dropping %d-byte line in %s: not valid %s",
                len(raw),
                self.location,
                self.settings.encoding,
            )
            return None

    # ------------------------------------------------------------------
    # Whole-file access
    # ------------------------------------------------------------------

    @property
    def data(self) -> bytes | None:
        """Entire file contents read by path (independent of the descriptor position)."""
        return fs.read_bytes(self.location)

    @data.setter
    def data(self, value: bytes | None) -> None:
        if value is not None:
            fs.write_bytes_atomic(self.location, value)

    @property
    def text(self) -> str | None:
        """Entire file contents as text; None if unreadable or not valid in settings.encoding."""
        raw = self.data
        if raw is None:
            return None
        try:
            return raw.decode(self.settings.encoding)
        except UnicodeDecodeError:
            return None

    @text.setter
    def text(self, value: str) -> None:
        self.data = value.encode(self.settings.encoding)

    def __repr__(self) -> str:
        access = "READ-ONLY" if self.mode is HandleMode.READ else "WRITE"
        suffix = " CLOSED" if self.closed else ""
        return f"<FileHandle: {self.location} {access}{suffix}>"


def open_for_reading(
    location: fs.PathArg, settings: IoSettings | None = None
) -> FileHandle | None:
    """
    Read handle for an existing regular file.

    Returns:
        FileHandle | None: None if location is missing, a directory, or cannot be opened.
    """
    if not fs.exists(location) or fs.is_directory(location):
        return None
    return FileHandle.for_reading(location, settings)


def open_for_writing(
    location: fs.PathArg, settings: IoSettings | None = None
) -> FileHandle | None:
    """
    Write handle for a file, creating it when missing.

    Returns:
        FileHandle | None: None if location is a directory, cannot be created, or cannot
        be opened.
    """
    if fs.is_directory(location):
        return None
    if not fs.exists(location) and not fs.create_empty_file(location):
        return None
    return FileHandle.for_writing(location, settings)


def read_lines(
    location: fs.PathArg, settings: IoSettings | None = None
) -> list[str] | None:
    """
    Non-empty lines of a regular file.

    Args:
        location (Location | str | os.PathLike): File to read.
        settings (IoSettings | None): Settings for the temporary read handle.

    Returns:
        list[str] | None: Lines in file order with empty lines omitted; None if location is
        missing, a directory, or cannot be opened.
    """
    fh = open_for_reading(location, settings)
    if fh is None:
        return None
    with fh:
        return [line for line in fh if line]


def open(
    path: fs.PathArg, mode: Literal["r", "w"] | str, settings: IoSettings | None = None
) -> FileHandle | None:
    """
    Open a handle by mode string.

    Args:
        path (Location | str | os.PathLike): Target path.
        mode (str): "r" for a read handle, "w" for a write handle.
        settings (IoSettings | None): Settings for the handle.

    Returns:
        FileHandle | None: Handle, or None for an unknown mode or an open failure.
    """
    if mode == HandleMode.READ.value:
        return FileHandle.for_reading(path, settings)
    if mode == HandleMode.WRITE.value:
        return FileHandle.for_writing(path, settings)
    return None
