"""Single-keypress reader for the terminal frontend.

Arrow keys and WASD are reported as movement actions, a handful of letters
as commands. Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable

MOVES = ("up", "down", "left", "right")

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
    "r": "restart",
    "u": "undo",
    "h": "help",
    "?": "help",
    "\r": "enter",
    "\n": "enter",
}

_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}


def resolve(ch: str) -> str:
    """Map a raw character to its action string (case-insensitive)."""
    action = _KEY_MAP.get(ch) or _KEY_MAP.get(ch.lower())
    if action:
        return action
    return ch if ch.isprintable() else ""


def decode_escape(read_next: Callable[[], str | None]) -> str:
    """Decode what follows an ESC byte.

    *read_next* returns the next character or None if nothing arrived in
    time. ``ESC [ A..D`` are arrow keys; a bare Escape quits.
    """
    ch2 = read_next()
    if ch2 != "[":
        return "quit"
    ch3 = read_next()
    if ch3 is None:
        return ""
    return _ARROW_MAP.get(ch3, "")


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
    """Block until a key is pressed and return its action string.

    Movement comes back as one of ``MOVES``; commands as "quit",
    "restart", "undo", "help" or "enter"; other printable keys as themselves.
    """
    ch = _getch()
    if ch == "\x1b":
        return decode_escape(_getch)
    return resolve(ch)


def get_key_timeout(timeout: float) -> str | None:
    """Like ``get_key`` but return None if nothing is pressed in *timeout* s.

    Reads with ``os.read`` so ``select`` sees the remaining bytes of
    multi-byte arrow-key sequences.
    """
    if os.name == "nt":
        import msvcrt  # type: ignore[import-not-found]
        import time

        end = time.monotonic() + timeout
        while time.monotonic() < end:
            if msvcrt.kbhit():
                return get_key()
            time.sleep(0.02)
        return None

    import select
    import termios
    import tty

    fd = sys.stdin.fileno()

    def read_within(seconds: float) -> str | None:
        ready, _, _ = select.select([fd], [], [], seconds)
        if not ready:
            return None
        return os.read(fd, 1).decode("utf-8", errors="ignore")

    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = read_within(timeout)
        if ch is None:
            return None
        if ch == "\x1b":
            return decode_escape(lambda: read_within(0.1))
        return resolve(ch)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
