"""
pathkit.io — filesystem layer and buffered line handle.

## Responsibilities
- Provide FileHandle, a buffered reader/writer over one OS descriptor with line access and
  explicit end-of-stream tracking.
- Provide the filesystem provider helpers (pathkit.io.fs) that FileHandle and Location-holding
  callers rely on.
- Keep pathkit.core as the single source of truth for constants and the Location value.

## Public API
- FileHandle, HandleMode — the handle and its access mode.
- open(path, mode) — "r"/"w" convenience returning a handle or None.
- open_for_reading / open_for_writing — Location-level helpers with existence/type checks.
- read_lines — non-empty lines of a whole file in one call.
- IoSettings — chunk size and decoding policy (defaults sourced from pathkit.core.constants).

## Examples
```python
from pathkit.io import open

fh = open("notes.txt", "w")  # doctest: +SKIP
fh.write("first\\nsecond".encode())  # doctest: +SKIP
fh.close()  # doctest: +SKIP

with open("notes.txt", "r") as fh:  # doctest: +SKIP
    fh.readlines()  # ['first', 'second']
```

## Notes
- Open failures are reported as None, never raised.
- write() on a read handle and use after close() raise HandleMisuseError subclasses.
"""

from __future__ import annotations

from .config import IoSettings
from .handle import (
    FileHandle,
    HandleMode,
    open,
    open_for_reading,
    open_for_writing,
    read_lines,
)

__all__ = [
    "FileHandle",
    "HandleMode",
    "IoSettings",
    "open",
    "open_for_reading",
    "open_for_writing",
    "read_lines",
]
