# app_state.py
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List

from selector import TimeUnit

logger = logging.getLogger(__name__)


class TimerStatus(Enum):
    IDLE = "idle"
    RUNNING = "running"
    FINISHED = "finished"


@dataclass
class AppState:
    """Holds the dial values and what the screen shows; simple pub-sub for re-render."""
    hour: int = 0
    minute: int = 0
    second: int = 0
    status: TimerStatus = TimerStatus.IDLE
    display: str = "00:00:00"

    _subscribers: List[Callable[[], None]] = field(default_factory=list, repr=False)

    @property
    def running(self) -> bool:
        """True while the countdown view is shown (running or finished)"""
        return self.status is not TimerStatus.IDLE

    def value(self, unit: TimeUnit) -> int:
        return getattr(self, unit.name.lower())

    def set_value(self, unit: TimeUnit, value: int) -> None:
        setattr(self, unit.name.lower(), value)

    # ---------- pub-sub ----------
    def subscribe(self, fn: Callable[[], None]) -> None:
        """Register a callback to be invoked whenever the state changes."""
        self._subscribers.append(fn)

    def _notify(self) -> None:
        for fn in list(self._subscribers):
            try:
                fn()
            except Exception:
                logger.exception("state subscriber %r failed", fn)
