"""Dimensions of the game screen."""


class _Frozen(type):
    """Metaclass that makes class-level constants read-only."""

    def __setattr__(cls, name, value):
        raise AttributeError(f"{cls.__name__}.{name} is read-only")

    def __delattr__(cls, name):
        raise AttributeError(f"{cls.__name__}.{name} is read-only")


class Screen(metaclass=_Frozen):
    """Screen geometry in pixels."""

    WIDTH = 1280
    HEIGHT = 720

    TOP = 0
    BOTTOM = HEIGHT
    LEFT = 0
    RIGHT = WIDTH

    CENTER_X = WIDTH // 2
    CENTER_Y = HEIGHT // 2