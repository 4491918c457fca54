# timer.py
from __future__ import annotations
import itertools
import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)

MS_PER_HOUR = 3_600_000
MS_PER_MINUTE = 60_000
MS_PER_SECOND = 1_000


def format_hms(remaining_ms: int) -> str:
    """format milliseconds as HH:MM:SS"""
    remaining_ms = int(remaining_ms)
    hh = remaining_ms // MS_PER_HOUR
    mm = (remaining_ms // MS_PER_MINUTE) % 60
    ss = (remaining_ms // MS_PER_SECOND) % 60
    return f"{hh:02d}:{mm:02d}:{ss:02d}"


def to_millis(hour: int, minute: int, second: int) -> int:
    """freeze a dialled duration into total milliseconds"""
    if not 0 <= hour <= 23:
        raise ValueError(f"hour out of range: {hour}")
    if not 0 <= minute <= 59:
        raise ValueError(f"minute out of range: {minute}")
    if not 0 <= second <= 59:
        raise ValueError(f"second out of range: {second}")
    return hour * MS_PER_HOUR + minute * MS_PER_MINUTE + second * MS_PER_SECOND


class CountdownState(Enum):
    CREATED = "created"
    TICKING = "ticking"
    DONE = "done"
    CANCELLED = "cancelled"


@dataclass(eq=False)
class CountdownHandle:
    """One started countdown. Callers only keep it around to cancel it."""
    id: int
    total_ms: int
    on_tick: Callable[[int], None]
    on_finish: Callable[[], None]
    state: CountdownState = CountdownState.CREATED
    end_ts: Optional[float] = None
    after_id: Any = None

    @property
    def active(self) -> bool:
        return self.state is CountdownState.TICKING


class Countdown:
    """
    a countdown engine on top of a Tk-style scheduler
    (anything with after(ms, fn) and after_cancel(job)).
    fires on_tick(remaining_ms) about once per interval and on_finish() once at zero.
    only the most recently started handle is live.
    """
    def __init__(self,
                 scheduler,
                 interval_ms: int = 1000,
                 clock: Callable[[], float] = time.monotonic):
        if interval_ms <= 0:
            raise ValueError("interval_ms must be positive")
        self._scheduler = scheduler
        self._interval_ms = int(interval_ms)
        self._clock = clock # seconds, monotonic
        self._active: Optional[CountdownHandle] = None
        self._ids = itertools.count(1)

    # ----- properties -----
    @property
    def active(self) -> Optional[CountdownHandle]:
        """the live handle, or None"""
        if self._active is not None and self._active.active:
            return self._active
        return None

    @property
    def running(self) -> bool:
        return self.active is not None

    # ----- outer controls -----
    def start(self,
              total_ms: int,
              on_tick: Callable[[int], None],
              on_finish: Callable[[], None]) -> CountdownHandle:
        """start a new countdown, superseding any previous one"""
        total_ms = max(0, int(total_ms))
        if self._active is not None:
            self.cancel(self._active)

        handle = CountdownHandle(next(self._ids), total_ms, on_tick, on_finish)
        handle.end_ts = self._clock() + total_ms / 1000.0
        handle.state = CountdownState.TICKING
        self._active = handle
        logger.debug("countdown %d started for %d ms", handle.id, total_ms)
        self._schedule(handle, min(self._interval_ms, total_ms))
        return handle

    def cancel(self, handle: Optional[CountdownHandle] = None) -> None:
        """cancel a countdown (default: the live one); no-op once it has ended"""
        if handle is None:
            handle = self._active
        if handle is None or not handle.active:
            return
        handle.state = CountdownState.CANCELLED
        self._cancel_after(handle)
        if handle is self._active:
            self._active = None
        logger.debug("countdown %d cancelled", handle.id)

    # ----- internal methods -----
    def _remaining_ms(self, handle: CountdownHandle) -> int:
        return max(0, int(round((handle.end_ts - self._clock()) * 1000)))

    def _schedule(self, handle: CountdownHandle, delay_ms: int) -> None:
        handle.after_id = self._scheduler.after(int(delay_ms), lambda: self._tick(handle))

    def _tick(self, handle: CountdownHandle) -> None:
        """
        one wake-up: report remaining time, finish at zero,
        otherwise schedule the next wake-up
        """
        handle.after_id = None
        # cancelled or superseded in the meantime
        if not handle.active or handle is not self._active:
            return

        remaining = self._remaining_ms(handle)
        handle.on_tick(remaining)
        # on_tick may have cancelled us
        if not handle.active:
            return

        if remaining <= 0:
            handle.state = CountdownState.DONE
            self._active = None
            logger.debug("countdown %d finished", handle.id)
            handle.on_finish()
            return
        self._schedule(handle, min(self._interval_ms, remaining))

    def _cancel_after(self, handle: CountdownHandle) -> None:
        """cancel any pending scheduler job"""
        if handle.after_id is not None:
            try:
                self._scheduler.after_cancel(handle.after_id)
            finally:
                handle.after_id = None
