# main.py
import ctypes
import logging
import tkinter as tk
from tkinter import font as tkfont

from alarm import AlarmPlayer
from app_state import AppState
from config import DEFAULT_CONFIG, TimerConfig
from controller import ScreenController
from timer import Countdown
from ui_timer import TimerScreen

logger = logging.getLogger(__name__)


def enable_dpi_awareness():
    """
    Windows-only: enable per-monitor DPI awareness before creating Tk root.
    Safe to no-op on other platforms.
    """
    try:
        ctypes.windll.shcore.SetProcessDpiAwareness(2)   # Per-monitor v2
    except Exception:
        try:
            ctypes.windll.user32.SetProcessDPIAware()    # Legacy fallback
        except Exception:
            pass


def apply_tk_scaling_and_fonts(root: tk.Tk):
    """
    Align Tk's scaling to the real screen PPI and set one base font.
    """
    try:
        ppi = float(root.winfo_fpixels('1i'))
    except Exception:
        ppi = 96.0
    try:
        scale = max(0.5, min(ppi / 72.0, 4.0))
        root.tk.call('tk', 'scaling', scale)
    except Exception:
        pass
    try:
        tkfont.nametofont("TkDefaultFont").configure(family="Segoe UI", size=10)
    except Exception:
        pass


def center_window(window: tk.Tk, width: int, height: int) -> None:
    """Center a fixed-size window on the screen."""
    window.update_idletasks()
    sw, sh = window.winfo_screenwidth(), window.winfo_screenheight()
    x = max(0, (sw - width) // 2)
    y = max(0, (sh - height) // 2)
    window.geometry(f"{width}x{height}+{x}+{y}")


def build_app(root: tk.Tk, config: TimerConfig = DEFAULT_CONFIG) -> ScreenController:
    """Wire the state, engine, alarm and screen onto a Tk root."""
    alarm = AlarmPlayer(loops=config.alarm_loops, volume=config.alarm_volume,
                        sample_rate=config.sample_rate)
    # loaded once; a silent player is fine if there is no audio device
    alarm.load()

    countdown = Countdown(root, interval_ms=config.tick_interval_ms)
    controller = ScreenController(AppState(), countdown, alarm,
                                  finish_text=config.finish_text,
                                  sensitivity=config.sensitivity)
    screen = TimerScreen(root, controller, config)
    screen.frame.grid(row=0, column=0, sticky="nsew")

    def on_close():
        controller.shutdown()
        root.destroy()

    root.protocol("WM_DELETE_WINDOW", on_close)
    return controller


def main():
    logging.basicConfig(level=logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    config = DEFAULT_CONFIG

    enable_dpi_awareness()
    root = tk.Tk()
    root.title("Dialtimer")
    apply_tk_scaling_and_fonts(root)

    root.grid_rowconfigure(0, weight=1)
    root.grid_columnconfigure(0, weight=1)

    build_app(root, config)
    root.after_idle(lambda: center_window(root, *config.window_size))
    logger.info("Dialtimer ready")

    root.mainloop()


if __name__ == "__main__":
    main()
