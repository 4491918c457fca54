# ui_timer.py
from __future__ import annotations
import tkinter as tk
from typing import Dict

from config import TimerConfig, palette
from controller import ScreenController
from selector import TimeUnit
from ui_selector import NumberSelector


class TimerScreen:
    """
    The only screen:
    - Idle: three dial columns (hour / minute / second)
    - Running / finished: the remaining time in big digits
    - Bottom bar: START while idle, STOP otherwise
    Re-rendered from AppState notifications.
    """
    def __init__(self, parent, controller: ScreenController, config: TimerConfig):
        self.controller = controller
        self.state = controller.state
        self.colors: Dict[str, str] = palette(config.theme)
        bg = self.colors["background"]

        self.frame = tk.Frame(parent, bg=bg)
        self.frame.grid_rowconfigure(0, weight=1)
        self.frame.grid_columnconfigure(0, weight=1)

        # ------- upper area: dial or countdown -------
        self.body = tk.Frame(self.frame, bg=bg)
        self.body.grid(row=0, column=0, sticky="nsew")
        self.body.grid_rowconfigure(0, weight=1)
        self.body.grid_columnconfigure(0, weight=1)

        self.dial = tk.Frame(self.body, bg=bg)
        self.dial.grid_rowconfigure(0, weight=1)
        self.selectors: Dict[TimeUnit, NumberSelector] = {}
        for col, unit in enumerate(TimeUnit):
            sel = NumberSelector(self.dial, unit, self.controller.adjust,
                                 self.colors, bg=self.colors[unit.name.lower()])
            sel.frame.grid(row=0, column=col, sticky="nsew")
            self.dial.grid_columnconfigure(col, weight=1, uniform="dial")
            self.selectors[unit] = sel

        self.countdown_view = tk.Frame(self.body, bg=bg)
        self.countdown_var = tk.StringVar(value=self.state.display)
        tk.Label(self.countdown_view, textvariable=self.countdown_var, bg=bg,
                 fg=self.colors["countdown_text"],
                 font=("Consolas", 48, "bold")).place(relx=0.5, rely=0.5, anchor="center")

        # ------- bottom bar -------
        self.button = tk.Button(self.frame, text="START", command=self._on_button,
                                bg=bg, activebackground=bg,
                                fg=self.colors["countdown_text"],
                                activeforeground=self.colors["countdown_text"],
                                relief="flat", bd=0, height=2,
                                font=("Segoe UI", 24, "bold"))
        self.button.grid(row=1, column=0, sticky="nsew")

        # hotkeys
        self.frame.bind_all("<Return>", lambda e: self.controller.start() if not self.state.running else None)
        self.frame.bind_all("<Escape>", lambda e: self.controller.stop() if self.state.running else None)

        self.state.subscribe(self.render)
        self.render()

    def _on_button(self) -> None:
        if self.state.running:
            self.controller.stop()
        else:
            self.controller.start()

    def render(self) -> None:
        if self.state.running:
            self.dial.grid_forget()
            self.countdown_view.grid(row=0, column=0, sticky="nsew")
            self.countdown_var.set(self.state.display)
            self.button.config(text="STOP")
        else:
            self.countdown_view.grid_forget()
            self.dial.grid(row=0, column=0, sticky="nsew")
            for unit, sel in self.selectors.items():
                sel.set(self.state.value(unit))
            self.button.config(text="START")
