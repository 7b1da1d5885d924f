"""
pathkit core IO-facing defaults.

Defines the buffering and decoding defaults consumed by the line handle in pathkit.io.
This module is zero-IO and uses only the Python standard library.

Notes:
    - The line reader pulls ``CHUNK_SIZE`` bytes per refill of its pending buffer.
    - ``LINE_DELIMITER`` is fixed; lines are always split on the UTF-8 encoding of ``"\\n"``.
    - pathkit.io.config.IoSettings sources its defaults from here.
"""

from __future__ import annotations

__all__ = [
    "CHUNK_SIZE",
    "LINE_DELIMITER",
    "ENCODING",
    "DECODE_ERRORS",
]

# Bytes requested from the descriptor each time the line buffer needs more data.
CHUNK_SIZE: int = 1024

# Line separator searched for in the pending buffer.
LINE_DELIMITER: bytes = "\n".encode("utf-8")

# Text encoding used to decode delimited lines.
ENCODING: str = "utf-8"

# Malformed-line policy: "skip" drops the line, "strict" raises LineDecodeError.
DECODE_ERRORS: str = "skip"
