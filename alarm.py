# alarm.py
from __future__ import annotations
import itertools
import logging
from typing import Any, Dict, Optional

import numpy as np
import pygame
from pygame import mixer as pg_mixer
from pygame import sndarray

logger = logging.getLogger(__name__)

NO_STREAM = -1
SAMPLE_RATE = 44100


def build_alarm_samples(sample_rate: int = SAMPLE_RATE,
                        tones=(880.0, 660.0),
                        beep_s: float = 0.18,
                        gap_s: float = 0.07,
                        volume: float = 0.6) -> np.ndarray:
    """
    synthesise the alarm clip: alternating beeps with short gaps,
    as 16-bit mono samples
    """
    n_beep = max(1, int(sample_rate * beep_s))
    n_gap = max(0, int(sample_rate * gap_s))
    t = np.arange(n_beep) / float(sample_rate)
    # short linear fade in/out so beeps don't click
    fade = min(n_beep // 2, int(sample_rate * 0.01))
    env = np.ones(n_beep)
    if fade:
        ramp = np.linspace(0.0, 1.0, fade)
        env[:fade] = ramp
        env[-fade:] = ramp[::-1]

    parts = []
    for freq in tones:
        wave = np.sin(2 * np.pi * freq * t) * env
        parts.append(wave)
        parts.append(np.zeros(n_gap))
    clip = np.concatenate(parts) * volume
    return (np.clip(clip, -1.0, 1.0) * 32767).astype(np.int16)


class AlarmPlayer:
    """
    plays one short clip through a single-stream mixer.
    if loading fails the player stays silent: play() returns NO_STREAM
    and stop() does nothing.
    """
    def __init__(self, mixer=pg_mixer, loops: int = 10, volume: float = 1.0,
                 sample_rate: int = SAMPLE_RATE):
        self._mixer = mixer
        self._loops = loops
        self._volume = volume
        self._sample_rate = sample_rate

        self._sound: Any = None
        self._channels: Dict[int, Any] = {}
        self._current = NO_STREAM
        self._ids = itertools.count(1)

    @property
    def loaded(self) -> bool:
        return self._sound is not None

    @property
    def current_stream(self) -> int:
        return self._current

    def load(self, path: Optional[str] = None) -> bool:
        """init the mixer with one channel and load the clip (from path, or synthesised)"""
        try:
            if not self._mixer.get_init():
                self._mixer.init(frequency=self._sample_rate, size=-16, channels=1)
            self._mixer.set_num_channels(1)
            if path is not None:
                sound = self._mixer.Sound(str(path))
            else:
                sound = self._make_sound(build_alarm_samples(self._sample_rate))
            sound.set_volume(self._volume)
        except (pygame.error, OSError, ValueError) as exc:
            logger.warning("alarm sound unavailable, playback disabled: %s", exc)
            self._sound = None
            return False
        self._sound = sound
        logger.debug("alarm sound loaded (%s)", path or "built-in")
        return True

    def _make_sound(self, samples: np.ndarray):
        # mixer may have been opened in stereo by someone else
        init = self._mixer.get_init()
        if init and init[2] == 2:
            samples = np.column_stack((samples, samples))
        return sndarray.make_sound(np.ascontiguousarray(samples))

    def play(self) -> int:
        """play the clip looped; returns the stream id or NO_STREAM"""
        if self._sound is None:
            return NO_STREAM
        self.stop()
        channel = self._sound.play(loops=self._loops)
        if channel is None:
            return NO_STREAM
        stream = next(self._ids)
        self._channels[stream] = channel
        self._current = stream
        return stream

    def stop(self, stream: Optional[int] = None) -> None:
        """stop a stream (default: the current one); unknown or NO_STREAM is a no-op"""
        if stream is None:
            stream = self._current
        if stream is None or stream < 0:
            return
        channel = self._channels.pop(stream, None)
        if stream == self._current:
            self._current = NO_STREAM
        if channel is not None:
            channel.stop()

    def close(self) -> None:
        self.stop()
        if self._sound is not None:
            self._sound = None
            self._mixer.quit()
