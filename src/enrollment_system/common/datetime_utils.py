from __future__ import annotations

import re
from datetime import datetime
from typing import Optional

from ..core.constants import TIMESTAMP_FORMAT, TIMESTAMP_PATTERN

_TIMESTAMP_RE = re.compile(TIMESTAMP_PATTERN)


def now_local() -> datetime:
    """Local server time, truncated to whole seconds."""
    return datetime.now().replace(microsecond=0)


def format_timestamp(value: datetime) -> str:
    return value.strftime(TIMESTAMP_FORMAT)


def format_optional_timestamp(value: Optional[datetime]) -> Optional[str]:
    return format_timestamp(value) if value is not None else None


def is_timestamp(value: str) -> bool:
    """True when ``value`` has the exact DD/MM/YYYY HH:MM:SS shape."""
    return bool(_TIMESTAMP_RE.match(value))


def parse_timestamp(value: str) -> datetime:
    """Parse a DD/MM/YYYY HH:MM:SS string.

    strptime alone accepts single-digit fields, so the shape is checked first.
    Raises ValueError on shape mismatch or an impossible calendar moment.
    """
    if not is_timestamp(value):
        raise ValueError(f"Invalid timestamp: {value!r}")
    return datetime.strptime(value, TIMESTAMP_FORMAT)


def parse_optional_timestamp(value: Optional[str]) -> Optional[datetime]:
    return parse_timestamp(value) if value is not None else None
