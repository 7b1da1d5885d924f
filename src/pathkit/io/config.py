"""
Configuration for the pathkit.io module.

Defines IoSettings, a frozen dataclass carrying runtime configuration for the buffered line
handle. Defaults are sourced from pathkit.core.constants (the single source of truth).

Source of truth
- pathkit.core.constants.CHUNK_SIZE, ENCODING, DECODE_ERRORS
- The line delimiter is not configurable (pathkit.core.constants.LINE_DELIMITER).

Import DAG discipline
- Depends only on stdlib, pathkit.core.constants and pathkit.io.errors.

Notes
- chunk_size only tunes how many bytes each refill requests; line results never depend on it.
"""

from __future__ import annotations

import codecs
import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Literal

from pathkit.core.constants import CHUNK_SIZE as CORE_CHUNK_SIZE
from pathkit.core.constants import DECODE_ERRORS as CORE_DECODE_ERRORS
from pathkit.core.constants import ENCODING as CORE_ENCODING
from pathkit.core.constants import LINE_DELIMITER

from .errors import IoConfigError

DecodeErrors = Literal["skip", "strict"]

_DECODE_ERRORS_CHOICES = ("skip", "strict")


def is_line_encoding(name: str) -> bool:
    """
    Check that a codec exists and encodes "\\n" as LINE_DELIMITER.

    Args:
        name (str): Codec name.

    Returns:
        bool: False for unknown codecs, non-text codecs, and codecs (e.g., utf-16, cp500)
        whose newline bytes differ from the fixed delimiter.
    """
    try:
        codecs.lookup(name)
        return "\n".encode(name) == LINE_DELIMITER
    except (LookupError, UnicodeError):
        return False


@dataclass(frozen=True)
class IoSettings:
    """
    Runtime settings for the pathkit.io layer.

    Attributes:
        chunk_size (int): Bytes requested per refill of the line buffer (>= 1).
        encoding (str): Codec used to decode delimited lines.
        decode_errors (Literal["skip","strict"]): "skip" drops malformed lines with a warning;
            "strict" raises LineDecodeError.

    Raises:
        IoConfigError: If chunk_size < 1, encoding is unknown or splits lines differently
            from LINE_DELIMITER, or decode_errors is not a known policy.

    Examples:
        >>> from pathkit.io import IoSettings
        >>> IoSettings(chunk_size=4096)  # doctest: +ELLIPSIS
        IoSettings(...)
    """

    chunk_size: int = CORE_CHUNK_SIZE
    encoding: str = CORE_ENCODING
    decode_errors: DecodeErrors = CORE_DECODE_ERRORS  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if not isinstance(self.chunk_size, int) or self.chunk_size < 1:
            raise IoConfigError(f"chunk_size must be >= 1, got {self.chunk_size!r}")
        if not isinstance(self.encoding, str) or not is_line_encoding(self.encoding):
            raise IoConfigError(
                f"encoding must be a codec that encodes newline as {LINE_DELIMITER!r}, "
                f"got {self.encoding!r}"
            )
        if self.decode_errors not in _DECODE_ERRORS_CHOICES:
            raise IoConfigError(
                f"decode_errors must be one of {_DECODE_ERRORS_CHOICES}, got {self.decode_errors!r}"
            )

    # Configuration loaders (env/TOML) with precedence: env > TOML > defaults.

    @classmethod
    def _apply_mapping(cls, base: IoSettings, cfg: dict[str, Any] | None) -> IoSettings:
        """Apply a loose config mapping onto IoSettings, returning a new instance."""
        if not isinstance(cfg, dict):
            return base

        s = base

        # chunk_size
        if "chunk_size" in cfg:
            try:
                size = int(cfg["chunk_size"])
            except (TypeError, ValueError):
                size = 0
            if size >= 1:
                s = replace(s, chunk_size=size)

        # encoding
        if "encoding" in cfg and isinstance(cfg["encoding"], str):
            enc = cfg["encoding"].strip()
            if enc and is_line_encoding(enc):
                s = replace(s, encoding=enc)

        # decode_errors
        if "decode_errors" in cfg and isinstance(cfg["decode_errors"], str):
            policy = cfg["decode_errors"].strip().lower()
            if policy in _DECODE_ERRORS_CHOICES:
                s = replace(s, decode_errors=policy)  # type: ignore[arg-type]

        return s

    @classmethod
    def from_env(cls, base: IoSettings | None = None, prefix: str = "PATHKIT_IO_") -> IoSettings:
        """
        Build IoSettings from environment variables. Precedence is env > base (if provided) > defaults.

        Recognized variables:
            - PATHKIT_IO_CHUNK_SIZE
            - PATHKIT_IO_ENCODING
            - PATHKIT_IO_DECODE_ERRORS ("skip" | "strict")
        """
        s = base or cls()

        mapping: dict[str, Any] = {}
        for key in ("chunk_size", "encoding", "decode_errors"):
            v = os.getenv(prefix + key.upper())
            if v:
                mapping[key] = v

        return cls._apply_mapping(s, mapping)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str] | None = None) -> IoSettings:
        """
        Build IoSettings from a TOML file.

        Search order when `path` is None:
            1) ./pathkit.toml (with either top-level [io] or direct keys)
            2) ./pyproject.toml under [tool.pathkit.io]

        Returns defaults if no file is present or it cannot be parsed.
        """
        s = cls()

        def _load_toml(p: Path) -> dict[str, Any] | None:
            try:
                with p.open("rb") as fh:
                    return tomllib.load(fh)
            except (OSError, tomllib.TOMLDecodeError):
                return None

        cfg: dict[str, Any] | None = None

        cand: list[Path] = []
        if path is not None:
            cand.append(Path(path))
        else:
            cand.append(Path.cwd() / "pathkit.toml")
            cand.append(Path.cwd() / "pyproject.toml")

        for p in cand:
            if not p.exists():
                continue
            data = _load_toml(p)
            if not isinstance(data, dict):
                continue
            if p.name == "pyproject.toml":
                # Expect [tool.pathkit.io]
                cfg = data
                for key in ("tool", "pathkit", "io"):
                    cfg = cfg.get(key) if isinstance(cfg, dict) else None
            else:
                # pathkit.toml - accept either [io] table or top-level keys
                if "io" in data and isinstance(data["io"], dict):
                    cfg = data["io"]
                else:
                    cfg = data
            if cfg:
                break

        return cls._apply_mapping(s, cfg)

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> IoSettings:
        """
        Load IoSettings applying precedence: environment > TOML > defaults.

        Args:
            path: Optional explicit TOML path. If None, search defaults (pathkit.toml, pyproject.toml).

        Returns:
            IoSettings
        """
        s = cls.from_toml(path)
        s = cls.from_env(base=s)
        return s
