from __future__ import annotations

import time
from typing import Callable

# ----------------------------
# Utilities
# ----------------------------
Clock = Callable[[], float]  # returns "now" in milliseconds


def now_ms() -> int:
    return int(time.time() * 1000)


def monotonic_ms() -> float:
    """
    Default clock for the opmode: milliseconds from a monotonic source,
    so wall-clock adjustments never produce a backwards tick.
    """
    return time.monotonic() * 1000.0


def rescale(value: float, old_min: float, old_max: float, new_min: float, new_max: float) -> float:
    return new_min + (value - old_min) * (new_max - new_min) / (old_max - old_min)


def _escape_bytes(b: bytes, max_len: int = 240) -> str:
    if len(b) > max_len:
        b = b[:max_len] + b"..."
    return b.decode("utf-8", "backslashreplace").replace("\n", "\\n").replace("\r", "\\r")
