"""
pathkit — path values and a buffered line reader/writer over OS file descriptors.

Subpackages
- pathkit.core — zero-IO contracts (constants, errors, Location).
- pathkit.io — filesystem helpers and FileHandle.
"""

from __future__ import annotations

import logging

from .core.location import Location
from .io import (
    FileHandle,
    HandleMode,
    IoSettings,
    open,
    open_for_reading,
    open_for_writing,
    read_lines,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "FileHandle",
    "HandleMode",
    "IoSettings",
    "Location",
    "open",
    "open_for_reading",
    "open_for_writing",
    "read_lines",
]
