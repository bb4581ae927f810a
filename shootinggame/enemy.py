"""An enemy that drifts down the screen."""

from shootinggame.player import draw_sprite


class Enemy:
    """An enemy moving straight down at a constant speed."""

    SIZE = 64
    SPEED = 5
    SPRITE_RECT = (96, 0, 32, 32)

    def __init__(self):
        self._x = 0
        self._y = 0
        self._velocity = (0, self.SPEED)

    def initialize(self, position):
        """Place the enemy at ``position``."""
        self._x, self._y = position

    def update(self):
        """Move by one step of the enemy's velocity."""
        vx, vy = self._velocity
        self._x += vx
        self._y += vy

    def render(self, surface, sprite_sheet):
        """Draw the enemy onto ``surface``."""
        draw_sprite(surface, sprite_sheet, self.position, self.SIZE, self.SPRITE_RECT)

    @property
    def position(self):
        """Top-left corner as an (x, y) tuple."""
        return (self._x, self._y)