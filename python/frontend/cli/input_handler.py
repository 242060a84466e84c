"""Cross-platform single-keypress reader for the terminal frontends.

Handles arrow keys, WASD, Space and Enter without waiting for a newline.
Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys


# -- shared key mapping --------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "W": "up",
    "s": "down",
    "S": "down",
    "a": "left",
    "A": "left",
    "d": "right",
    "D": "right",
    "q": "quit",
    "Q": "quit",
    "\x03": "quit",  # Ctrl-C
    "r": "restart",
    "R": "restart",
    " ": "flip",
    "\r": "flip",
    "\n": "flip",
    "1": "easy",
    "2": "normal",
    "3": "hard",
}

_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}


def resolve_key(ch: str) -> str:
    """Map a raw character to its action string."""
    return _KEY_MAP.get(ch, ch if ch.isprintable() else "")


# -- low-level character readers -----------------------------------------------


def _getch_unix() -> str:
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    return ch


def _getch_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    return msvcrt.getch().decode("utf-8", errors="ignore")


_getch = _getch_windows if os.name == "nt" else _getch_unix


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Block for a single keypress and return a normalised action string.

    Possible return values:
        "up", "down", "left", "right"  : cursor movement
        "flip"                         : Space / Enter
        "easy", "normal", "hard"       : 1 / 2 / 3
        "restart"                      : r
        "quit"                         : q / Ctrl-C / Escape
        "<char>"                       : unmapped printable char
        ""                             : unrecognised key
    """
    ch = _getch()

    # Arrow keys (Unix escape sequences: ESC [ A/B/C/D)
    if ch == "\x1b":
        if _getch() == "[":
            return _ARROW_MAP.get(_getch(), "")
        return "quit"  # bare Escape

    return resolve_key(ch)


def get_key_timeout(timeout: float) -> str | None:
    """Like ``get_key`` but gives up after *timeout* seconds.

    Returns ``None`` when nothing was pressed, which lets callers poll the
    game scheduler between keypresses.
    """
    if os.name == "nt":
        import msvcrt  # type: ignore[import-not-found]
        import time as _time

        end = _time.monotonic() + timeout
        while _time.monotonic() < end:
            if msvcrt.kbhit():
                return get_key()
            _time.sleep(0.02)
        return None

    import select
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)

    def read_ready(wait: float) -> str | None:
        ready, _, _ = select.select([fd], [], [], wait)
        if not ready:
            return None
        # os.read is unbuffered, so select() still sees the rest of an
        # escape sequence.
        return os.read(fd, 1).decode("utf-8", errors="ignore")

    try:
        tty.setraw(fd)
        ch = read_ready(timeout)
        if ch is None:
            return None

        if ch == "\x1b":
            if read_ready(0.1) != "[":
                return "quit"  # bare Escape
            ch3 = read_ready(0.1)
            return _ARROW_MAP.get(ch3, "") if ch3 else ""

        return resolve_key(ch)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
