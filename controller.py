# controller.py
from __future__ import annotations
import logging

from alarm import NO_STREAM
from app_state import AppState, TimerStatus
from selector import SENSITIVITY, TimeUnit, select
from timer import format_hms, to_millis

logger = logging.getLogger(__name__)


class ScreenController:
    """
    Glue between the dial, the countdown engine and the alarm.
    - adjust(): dial a unit while idle
    - start(): freeze the dial and count down
    - stop(): cancel, silence, back to the dial
    """
    def __init__(self, state: AppState, countdown, alarm,
                 finish_text: str = "FINISH!", sensitivity: float = SENSITIVITY):
        self.state = state
        self.countdown = countdown
        self.alarm = alarm
        self.finish_text = finish_text
        self.sensitivity = sensitivity
        self._stream = NO_STREAM

    # ---------- dial ----------
    def adjust(self, unit: TimeUnit, raw_delta: float) -> int:
        if self.state.running:
            return self.state.value(unit)
        current = self.state.value(unit)
        value = select(current, raw_delta, unit.max, self.sensitivity)
        if value != current:
            self.state.set_value(unit, value)
            self.state._notify()
        return value

    def total_ms(self) -> int:
        s = self.state
        return to_millis(s.hour, s.minute, s.second)

    # ---------- actions ----------
    def start(self) -> None:
        # a previous alarm may still be ringing
        self._stop_alarm()
        total = self.total_ms()
        self.state.display = format_hms(total)
        self.state.status = TimerStatus.RUNNING
        self.countdown.start(total, self._on_tick, self._on_finish)
        logger.info("countdown started: %s", self.state.display)
        self.state._notify()

    def stop(self) -> None:
        self.countdown.cancel()
        self._stop_alarm()
        self.state.status = TimerStatus.IDLE
        self.state.display = format_hms(self.total_ms())
        logger.info("countdown stopped")
        self.state._notify()

    def shutdown(self) -> None:
        """stop everything and release the audio device"""
        self.countdown.cancel()
        self._stop_alarm()
        self.alarm.close()

    # ---------- countdown callbacks ----------
    def _on_tick(self, remaining_ms: int) -> None:
        self.state.display = format_hms(remaining_ms)
        self.state._notify()

    def _on_finish(self) -> None:
        self.state.display = self.finish_text
        self.state.status = TimerStatus.FINISHED
        self._stream = self.alarm.play()
        logger.info("countdown finished")
        self.state._notify()

    def _stop_alarm(self) -> None:
        self.alarm.stop(self._stream)
        self._stream = NO_STREAM
