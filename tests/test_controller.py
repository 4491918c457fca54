"""Tests for controller — ScreenController wiring state, countdown and alarm."""
from __future__ import annotations

import pytest

from alarm import NO_STREAM
from app_state import AppState, TimerStatus
from controller import ScreenController
from selector import TimeUnit
from timer import Countdown


class RecordingAlarm:
    def __init__(self) -> None:
        self.played = 0
        self.stopped: list[int] = []
        self.closed = False

    def play(self) -> int:
        self.played += 1
        return self.played

    def stop(self, stream: int) -> None:
        self.stopped.append(stream)

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def alarm() -> RecordingAlarm:
    return RecordingAlarm()


@pytest.fixture
def controller(scheduler, alarm) -> ScreenController:
    countdown = Countdown(scheduler, interval_ms=1000, clock=scheduler.clock)
    return ScreenController(AppState(), countdown, alarm)


def dial(controller: ScreenController, h: int, m: int, s: int) -> None:
    controller.state.hour, controller.state.minute, controller.state.second = h, m, s


class TestAdjust:
    def test_drag_up_raises_value(self, controller) -> None:
        assert controller.adjust(TimeUnit.MINUTE, -100) == 5
        assert controller.state.minute == 5

    def test_clamped_per_unit(self, controller) -> None:
        controller.adjust(TimeUnit.HOUR, -10_000)
        controller.adjust(TimeUnit.SECOND, -10_000)
        assert controller.state.hour == 23
        assert controller.state.second == 59

    def test_notifies_only_on_change(self, controller) -> None:
        calls: list = []
        controller.state.subscribe(lambda: calls.append(1))
        controller.adjust(TimeUnit.SECOND, 100)  # already 0
        controller.adjust(TimeUnit.SECOND, -20)
        assert calls == [1]

    def test_ignored_while_running(self, controller) -> None:
        dial(controller, 0, 0, 5)
        controller.start()
        controller.adjust(TimeUnit.SECOND, -200)
        assert controller.state.second == 5


class TestStartStop:
    def test_start_shows_total(self, controller) -> None:
        dial(controller, 1, 1, 1)
        controller.start()
        assert controller.state.status is TimerStatus.RUNNING
        assert controller.state.running
        assert controller.state.display == "01:01:01"

    def test_ticks_update_display(self, controller, scheduler) -> None:
        dial(controller, 0, 0, 3)
        controller.start()
        scheduler.advance(1)
        assert controller.state.display == "00:00:02"
        scheduler.advance(1)
        assert controller.state.display == "00:00:01"

    def test_finish_plays_alarm(self, controller, scheduler, alarm) -> None:
        dial(controller, 0, 0, 3)
        controller.start()
        scheduler.advance(3)
        assert controller.state.display == "FINISH!"
        assert controller.state.status is TimerStatus.FINISHED
        assert controller.state.running
        assert alarm.played == 1

    def test_custom_finish_text(self, scheduler, alarm) -> None:
        countdown = Countdown(scheduler, clock=scheduler.clock)
        c = ScreenController(AppState(), countdown, alarm, finish_text="DONE")
        c.start()
        scheduler.advance(0)
        assert c.state.display == "DONE"

    def test_stop_while_running(self, controller, scheduler, alarm) -> None:
        dial(controller, 0, 0, 3)
        controller.start()
        scheduler.advance(1)
        controller.stop()
        scheduler.advance(10)
        assert controller.state.status is TimerStatus.IDLE
        assert not controller.state.running
        assert alarm.played == 0
        assert alarm.stopped == [NO_STREAM, NO_STREAM]

    def test_stop_after_finish_silences_alarm(self, controller, scheduler, alarm) -> None:
        dial(controller, 0, 0, 1)
        controller.start()
        scheduler.advance(1)
        controller.stop()
        assert alarm.stopped[-1] == 1
        assert controller.state.status is TimerStatus.IDLE
        # dial values survive a run
        assert controller.state.second == 1
        assert controller.state.display == "00:00:01"

    def test_restart_supersedes(self, controller, scheduler, alarm) -> None:
        dial(controller, 0, 0, 3)
        controller.start()
        scheduler.advance(2)
        controller.start()
        scheduler.advance(2)
        assert controller.state.status is TimerStatus.RUNNING
        assert alarm.played == 0
        scheduler.advance(1)
        assert alarm.played == 1

    def test_shutdown(self, controller, scheduler, alarm) -> None:
        dial(controller, 0, 0, 3)
        controller.start()
        controller.shutdown()
        scheduler.advance(10)
        assert alarm.closed
        assert alarm.played == 0
