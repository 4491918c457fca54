# selector.py
from __future__ import annotations
from enum import Enum

SENSITIVITY = 0.05


class TimeUnit(Enum):
    """Dial columns with their largest value and caption."""
    HOUR = (23, "hour")
    MINUTE = (59, "minute")
    SECOND = (59, "second")

    def __init__(self, max_value: int, title: str):
        self.max = max_value
        self.title = title


def select(current_value: int, raw_delta: float, unit_max: int,
           sensitivity: float = SENSITIVITY) -> int:
    """
    map a drag delta onto a new dial value.
    upward drags arrive as negative deltas and raise the value;
    the scaled step is truncated toward zero and the result clamped to [0, unit_max].
    """
    if unit_max < 0:
        raise ValueError(f"unit_max must be >= 0, got {unit_max}")
    step = int(-raw_delta * sensitivity)
    return max(0, min(unit_max, int(current_value) + step))
