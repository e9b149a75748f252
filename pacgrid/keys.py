"""Keyboard input: decoding key presses and reading them without blocking."""

from __future__ import annotations

import enum
import os
import sys

try:
    import termios
except ImportError:  # not available on Windows
    termios = None  # type: ignore[assignment]

ESC = 27
_WINDOWS_PREFIXES = (0, 224)

_ANSI_ARROWS = {
    ord("A"): "UP",
    ord("B"): "DOWN",
    ord("C"): "RIGHT",
    ord("D"): "LEFT",
}

_WINDOWS_ARROWS = {
    72: "UP",
    80: "DOWN",
    75: "LEFT",
    77: "RIGHT",
}


class Key(enum.Enum):
    NONE = enum.auto()
    UP = enum.auto()
    DOWN = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    QUIT = enum.auto()


def decode_key(data: bytes) -> Key:
    """Turn the bytes of one key press into a Key.

    Arrow keys are recognised both as ANSI escape sequences (ESC [ A..D)
    and as console scan codes (0 or 224 followed by the arrow code).
    """
    if not data:
        return Key.NONE
    first = data[0]
    if first == ESC:
        if len(data) < 3 or data[1] != ord("["):
            return Key.NONE
        return Key[_ANSI_ARROWS.get(data[2], "NONE")]
    if first in _WINDOWS_PREFIXES:
        if len(data) < 2:
            return Key.NONE
        return Key[_WINDOWS_ARROWS.get(data[1], "NONE")]
    if data[:1] in (b"q", b"Q"):
        return Key.QUIT
    return Key.NONE


class KeyReader:
    """Reads key presses without waiting; use as a context manager.

    Inside the context a terminal is put into non-canonical, no-echo,
    non-blocking mode; the previous settings are restored on exit.
    """

    def __init__(self, fd: int | None = None) -> None:
        self._console = fd is None and sys.platform == "win32"
        self._fd = fd if fd is not None else (None if self._console else sys.stdin.fileno())
        self._saved_attrs: list | None = None
        self._was_blocking: bool | None = None

    def __enter__(self) -> KeyReader:
        if self._console:
            return self
        fd = self._fd
        if termios is not None and os.isatty(fd):
            self._saved_attrs = termios.tcgetattr(fd)
            attrs = termios.tcgetattr(fd)
            attrs[3] &= ~(termios.ICANON | termios.ECHO)
            termios.tcsetattr(fd, termios.TCSANOW, attrs)
        self._was_blocking = os.get_blocking(fd)
        os.set_blocking(fd, False)
        return self

    def __exit__(self, *exc_info) -> None:
        if self._console:
            return
        fd = self._fd
        if self._saved_attrs is not None:
            termios.tcsetattr(fd, termios.TCSANOW, self._saved_attrs)
            self._saved_attrs = None
        if self._was_blocking is not None:
            os.set_blocking(fd, self._was_blocking)
            self._was_blocking = None

    def read_key(self) -> Key:
        """Return the key pressed, or Key.NONE if nothing is waiting."""
        if self._console:
            return self._read_console_key()
        first = self._read_byte()
        if not first:
            return Key.NONE
        if first[0] == ESC:
            second = self._read_byte()
            if not second:
                return Key.NONE
            third = self._read_byte()
            if not third:
                return Key.NONE
            return decode_key(first + second + third)
        return decode_key(first)

    def _read_byte(self) -> bytes:
        try:
            return os.read(self._fd, 1)
        except BlockingIOError:
            return b""

    @staticmethod
    def _read_console_key() -> Key:
        import msvcrt

        if not msvcrt.kbhit():
            return Key.NONE
        data = msvcrt.getch()
        if data[0] in _WINDOWS_PREFIXES:
            data += msvcrt.getch()
        return decode_key(data)