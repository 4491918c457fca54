# config.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Tuple

RGB = Tuple[int, int, int]


@dataclass(frozen=True)
class TimerConfig:
    """In-memory tuning values; nothing is read from disk."""
    tick_interval_ms: int = 1000
    sensitivity: float = 0.05
    alarm_loops: int = 10
    alarm_volume: float = 1.0
    sample_rate: int = 44100
    finish_text: str = "FINISH!"
    window_size: Tuple[int, int] = (360, 640)
    theme: str = "light"


DEFAULT_CONFIG = TimerConfig()

# colours per theme
_PALETTES: Dict[str, Dict[str, RGB]] = {
    "light": {
        "background": (235, 94, 11),
        "hour": (94, 170, 168),
        "minute": (163, 210, 202),
        "second": (248, 241, 241),
        "selector_text": (33, 65, 81),
        "countdown_text": (248, 241, 241),
    },
    "dark": {
        "background": (120, 48, 6),
        "hour": (33, 65, 81),
        "minute": (47, 85, 96),
        "second": (62, 62, 62),
        "selector_text": (248, 241, 241),
        "countdown_text": (248, 241, 241),
    },
}


def hex_color(rgb: RGB) -> str:
    """(r, g, b) -> '#rrggbb' for Tk"""
    r, g, b = rgb
    return f"#{r:02x}{g:02x}{b:02x}"


def palette(theme: str) -> Dict[str, str]:
    """Return Tk colour strings for the given theme."""
    try:
        colors = _PALETTES[theme]
    except KeyError:
        raise ValueError(f"unknown theme: {theme!r}") from None
    return {name: hex_color(rgb) for name, rgb in colors.items()}
