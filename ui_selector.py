# ui_selector.py
from __future__ import annotations
import sys
import tkinter as tk
from typing import Callable, Dict, Optional

from selector import TimeUnit

# fixed pixel delta for one notch on X11 wheels (Button-4/5)
X11_WHEEL_DELTA = 20


class NumberSelector:
    """
    One dial column: the value in big digits with the unit title under it.
    Vertical drags and the mouse wheel are turned into raw deltas and handed to on_delta;
    the controller decides the new value and the screen re-renders it.
    """
    def __init__(self, parent, unit: TimeUnit,
                 on_delta: Callable[[TimeUnit, float], int],
                 colors: Dict[str, str], bg: str):
        self.unit = unit
        self._on_delta = on_delta
        self._anchor_y: Optional[int] = None

        self.frame = tk.Frame(parent, bg=bg, cursor="sb_v_double_arrow")
        self.value_var = tk.StringVar(value="0")
        self.value_label = tk.Label(self.frame, textvariable=self.value_var, bg=bg,
                                    fg=colors["selector_text"], font=("Segoe UI", 36))
        self.title_label = tk.Label(self.frame, text=unit.title, bg=bg,
                                    fg=colors["selector_text"], font=("Segoe UI", 14))
        self.value_label.place(relx=0.5, rely=0.5, anchor="center")
        self.title_label.place(relx=0.5, rely=0.5, y=56, anchor="center")

        for w in (self.frame, self.value_label, self.title_label):
            w.bind("<ButtonPress-1>", self._on_press)
            w.bind("<B1-Motion>", self._on_drag)
            w.bind("<ButtonRelease-1>", self._on_release)
            w.bind("<MouseWheel>", self._on_wheel)
            w.bind("<Button-4>", lambda e: self._emit(-X11_WHEEL_DELTA))
            w.bind("<Button-5>", lambda e: self._emit(X11_WHEEL_DELTA))

    def set(self, value: int) -> None:
        self.value_var.set(str(value))

    # ---------- gestures ----------
    def _on_press(self, event) -> None:
        self._anchor_y = event.y_root

    def _on_drag(self, event) -> None:
        if self._anchor_y is None:
            self._anchor_y = event.y_root
            return
        delta = event.y_root - self._anchor_y
        before = int(self.value_var.get() or 0)
        after = self._emit(delta)
        # keep accumulating until the drag was long enough for a step
        if after != before:
            self._anchor_y = event.y_root

    def _on_release(self, _event) -> None:
        self._anchor_y = None

    def _on_wheel(self, event) -> None:
        # wheel up is positive; macOS reports small steps, Windows multiples of 120
        step = event.delta if sys.platform == "darwin" else event.delta / 120
        self._emit(-step * X11_WHEEL_DELTA)

    def _emit(self, delta: float) -> int:
        return self._on_delta(self.unit, delta)
