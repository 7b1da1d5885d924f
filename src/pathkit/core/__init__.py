"""
Core package aggregator for pathkit contracts (constants, errors, path value).

## Contracts (single source of truth)
- Constants — chunk size, line delimiter, encoding, and decode policy defaults.
- Errors — LocationError for invalid path strings.
- Location — immutable path value with pure name/extension/parent derivations.

## Notes
- Zero-IO policy: stdlib + pydantic only; no file IO. Filesystem queries live in pathkit.io.fs.

## Examples
```python
from pathkit.core import Location
loc = Location("/var/log/app.log")
loc.extension  # 'log'
loc.parent  # Location('/var/log')
```
"""

from __future__ import annotations

from .constants import CHUNK_SIZE, DECODE_ERRORS, ENCODING, LINE_DELIMITER
from .errors import LocationError
from .location import Location

__all__ = [
    "CHUNK_SIZE",
    "DECODE_ERRORS",
    "ENCODING",
    "LINE_DELIMITER",
    "Location",
    "LocationError",
]
