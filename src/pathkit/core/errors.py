"""
Core exception types raised by path value validation.

Notes:
    - This module uses only the Python standard library and has no side effects.
    - pathkit.core.location.Location raises LocationError from its validators, which
      pydantic surfaces as ``pydantic.ValidationError``.
    - Filesystem and handle failures live in pathkit.io.errors.

Examples:
    >>> from pathkit.core.errors import LocationError
    >>> issubclass(LocationError, ValueError)
    True
"""

from __future__ import annotations

__all__ = [
    "LocationError",
]


class LocationError(ValueError):
    """Path string cannot identify a filesystem location (e.g., contains a NUL byte)."""
