"""
Custom exceptions for the pathkit.io module.

Purpose
- Provide IO-layer specific error types that map cleanly to responsibilities in pathkit.io.
- Keep pathkit.core as the source of truth for path value errors (see pathkit.core.errors).

Recoverable errors (IoError)
- IoConfigError: invalid or unsupported settings.
- LineDecodeError: a delimited line is not valid text under strict decoding.

Caller bugs (HandleMisuseError)
- HandleModeError: write on a read-mode handle.
- HandleClosedError: read/write/readline after close.
These derive from AssertionError rather than IoError: they signal a contract violation by the
caller and are not meant to be caught and retried.

Notes
- Open failures are never raised; FileHandle constructors return None instead.
- These exceptions do not perform any IO and are stdlib-only.
"""

from __future__ import annotations


class IoError(Exception):
    """
    Base class for recoverable IO-related errors in pathkit.io.

    Notes:
        Use this as a catch-all for IO-layer failures, distinct from pathkit.core errors.
    """


class IoConfigError(IoError):
    """
    Raised when IO configuration is invalid or unsupported.

    Examples:
        - chunk_size < 1
        - decode_errors not in {"skip", "strict"}
    """


class LineDecodeError(IoError):
    """
    Raised by FileHandle.readline when decode_errors="strict" and a line is malformed.

    Attributes:
        raw (bytes): Undecodable bytes of the line (delimiter excluded).
        encoding (str): Encoding that failed.

    Notes:
        The pending buffer has already advanced past the offending line when this is raised,
        so the next readline() continues with the following line.
    """

    def __init__(self, raw: bytes, encoding: str):
        self.raw = raw
        self.encoding = encoding
        super().__init__(f"line of {len(raw)} bytes is not valid {encoding}")


class HandleMisuseError(AssertionError):
    """Base class for precondition violations on a FileHandle."""


class HandleModeError(HandleMisuseError):
    """Raised when writing through a handle opened for reading."""


class HandleClosedError(HandleMisuseError):
    """Raised when operating on a handle after close()."""
