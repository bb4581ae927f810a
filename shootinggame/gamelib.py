"""Shared helpers: standard colours, quitting the game and debug output."""

import sys
from enum import IntEnum


class Colors(IntEnum):
    """The sixteen standard colours as 0xAARRGGBB values."""

    BLACK = 0xFF000000
    BLUE = 0xFF0000FF
    CYAN = 0xFF00FFFF
    GRAY = 0xFF808080
    GREEN = 0xFF008000
    LIME = 0xFF00FF00
    MAGENTA = 0xFFFF00FF
    MAROON = 0xFF800000
    NAVY = 0xFF000080
    OLIVE = 0xFF808000
    PURPLE = 0xFF800080
    RED = 0xFFFF0000
    SILVER = 0xFFC0C0C0
    TEAL = 0xFF008080
    WHITE = 0xFFFFFFFF
    YELLOW = 0xFFFFFF00


class ExitGame(Exception):
    """Raised to ask the main loop to stop."""


def exit_game():
    """Request that the game finish."""
    raise ExitGame()


def output_debug_string(format, first_arg, *args):
    """Format a printf-style message, write it to stderr and return it."""
    try:
        text = format % (first_arg, *args)
    except (TypeError, ValueError, KeyError) as exc:
        raise RuntimeError("String Formatting Error.") from exc
    sys.stderr.write(text)
    sys.stderr.flush()
    return text


def to_rgba(color):
    """Split a 0xAARRGGBB value into an (r, g, b, a) tuple."""
    value = int(color)
    if not 0 <= value <= 0xFFFFFFFF:
        raise ValueError(f"colour out of range: {value:#x}")
    alpha = (value >> 24) & 0xFF
    red = (value >> 16) & 0xFF
    green = (value >> 8) & 0xFF
    blue = value & 0xFF
    return red, green, blue, alpha