"""
Pydantic v2 path value used to identify filesystem locations.

Responsibilities
- Define Location, an immutable string-like identifier for a filesystem entry.
- Derive name, stem, extension, hidden flag, parent, and child locations purely from the
  path string.
- Expose the openable string via ``str()`` and ``os.fspath()``.

Style
- Zero-IO (stdlib + pydantic only). Existence, type, size, and listing queries live in
  pathkit.io.fs, which accepts Location values.
- Separator is always ``"/"``; no platform-specific normalization is applied.

References
- errors: src/pathkit/core/errors.py (LocationError)
- tests: tests/core/test_location.py
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from .errors import LocationError

__all__ = [
    "Location",
    "SEPARATOR",
]

SEPARATOR = "/"


class Location(BaseModel):
    """
    Immutable path value.

    Attributes:
        string (str): Normalized path string. A single trailing "/" is dropped unless the
            whole path is the root "/".

    Notes:
        Equality and hashing are by value; two Locations built from "/a/b/" and "/a/b"
        compare equal.

    Examples:
        >>> from pathkit.core.location import Location
        >>> loc = Location("/tmp/report.final.txt")
        >>> loc.name, loc.stem, loc.extension
        ('report.final.txt', 'report.final', 'txt')
        >>> str(loc.parent)
        '/tmp'
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    string: str

    def __init__(self, string: Any = None, /, **data: Any) -> None:
        if string is not None:
            if isinstance(string, Location):
                string = string.string
            data["string"] = string
        super().__init__(**data)

    @field_validator("string", mode="before")
    @classmethod
    def _normalize(cls, v: Any) -> str:
        """
        Coerce path-likes to str and drop a single trailing separator.

        Args:
            v (Any): Proposed path string or os.PathLike.

        Returns:
            str: Normalized path string.

        Raises:
            LocationError: If the value is not path-like or contains a NUL byte.
        """
        if hasattr(v, "__fspath__"):
            v = v.__fspath__()
        if isinstance(v, bytes):
            raise LocationError("Location expects text paths, got bytes")
        if not isinstance(v, str):
            raise LocationError(f"Location expects a path string, got {type(v).__name__}")
        if "\x00" in v:
            raise LocationError("Location must not contain NUL bytes")
        if len(v) > 1 and v.endswith(SEPARATOR):
            v = v[:-1]
        return v

    # ------------------------------------------------------------------
    # Derived components
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        """Last path component ("" for the root)."""
        return self.string.rpartition(SEPARATOR)[2]

    @property
    def extension(self) -> str:
        """Text after the last "." of name, or "" when name has no dot."""
        head, dot, tail = self.name.rpartition(".")
        return tail if dot else ""

    @property
    def stem(self) -> str:
        """
        Name without its final extension.

        Hidden names without a further dot (".bashrc") are returned unchanged.
        """
        head, dot, _tail = self.name.rpartition(".")
        if not dot or not head:
            return self.name
        return head

    @property
    def is_hidden(self) -> bool:
        return self.name.startswith(".")

    @property
    def is_absolute(self) -> bool:
        return self.string.startswith(SEPARATOR)

    @property
    def parent(self) -> Location | None:
        """
        Location of the containing directory.

        Returns:
            Location | None: Parent location; "/" for top-level absolute entries; None for
            the root, the empty path, and single relative components.
        """
        if self.string in ("", SEPARATOR):
            return None
        head, sep, _tail = self.string.rpartition(SEPARATOR)
        if not sep:
            return None
        return Location(head or SEPARATOR)

    def child(self, name: str) -> Location:
        """
        Join a child component onto this location.

        Args:
            name (str): Child entry name (may itself contain separators).

        Returns:
            Location: New location "<self>/<name>".
        """
        if self.string == SEPARATOR:
            return Location(SEPARATOR + name)
        return Location(f"{self.string}{SEPARATOR}{name}")

    def __truediv__(self, name: str) -> Location:
        return self.child(name)

    # ------------------------------------------------------------------
    # String views
    # ------------------------------------------------------------------

    def __fspath__(self) -> str:
        return self.string

    def __str__(self) -> str:
        return self.string

    def __repr__(self) -> str:
        return f"Location({self.string!r})"
