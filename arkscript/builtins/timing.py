"""Time builtin."""

from __future__ import annotations

import time
from typing import Any, Sequence


def time_since_epoch(args: Sequence[Any]) -> float:
    """Seconds since the epoch, with microsecond precision; arguments are ignored."""
    microseconds = time.time_ns() // 1000
    return microseconds / 1_000_000