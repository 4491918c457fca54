"""Shared fakes: a Tk-style scheduler with a manual clock, and a pygame-style mixer."""
from __future__ import annotations

import pytest


class FakeScheduler:
    """after/after_cancel on a virtual clock; advance() runs due jobs in order."""

    def __init__(self) -> None:
        self.now = 0.0  # seconds
        self._jobs: dict[int, tuple[float, object]] = {}
        self._next_id = 0
        self.cancelled: list[int] = []

    def clock(self) -> float:
        return self.now

    def after(self, ms: int, fn) -> int:
        self._next_id += 1
        self._jobs[self._next_id] = (self.now + ms / 1000.0, fn)
        return self._next_id

    def after_cancel(self, job: int) -> None:
        self.cancelled.append(job)
        self._jobs.pop(job, None)

    @property
    def pending(self) -> int:
        return len(self._jobs)

    def advance(self, seconds: float) -> None:
        target = self.now + seconds
        while True:
            due = [(t, jid) for jid, (t, _) in self._jobs.items() if t <= target + 1e-9]
            if not due:
                break
            t, jid = min(due)
            _, fn = self._jobs.pop(jid)
            self.now = t
            fn()
        self.now = target


class FakeChannel:
    def __init__(self) -> None:
        self.stopped = False

    def stop(self) -> None:
        self.stopped = True


class FakeSound:
    def __init__(self, path: str) -> None:
        self.path = path
        self.volume = None
        self.plays: list[int] = []
        self.channels: list[FakeChannel] = []

    def set_volume(self, volume: float) -> None:
        self.volume = volume

    def play(self, loops: int = 0):
        self.plays.append(loops)
        channel = FakeChannel()
        self.channels.append(channel)
        return channel


class FakeMixer:
    def __init__(self, fail_init: Exception | None = None) -> None:
        self.fail_init = fail_init
        self.init_args = None
        self.num_channels = 8
        self.sounds: list[FakeSound] = []
        self.quit_called = False

    def get_init(self):
        if self.init_args is None:
            return None
        return (self.init_args["frequency"], self.init_args["size"], self.init_args["channels"])

    def init(self, **kwargs) -> None:
        if self.fail_init is not None:
            raise self.fail_init
        self.init_args = kwargs

    def set_num_channels(self, n: int) -> None:
        self.num_channels = n

    def Sound(self, path: str) -> FakeSound:
        sound = FakeSound(path)
        self.sounds.append(sound)
        return sound

    def quit(self) -> None:
        self.quit_called = True
        self.init_args = None


@pytest.fixture
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture
def mixer() -> FakeMixer:
    return FakeMixer()


@pytest.fixture
def make_mixer():
    return FakeMixer
