"""The game as a whole: its objects and their per-frame work."""

from shootinggame.enemy import Enemy
from shootinggame.player import Player
from shootinggame.screen import Screen


class Game:
    """Holds the player and the enemy and drives them each frame."""

    TITLE = "Shooting Game"

    PLAYER_START_POSITION_X = (Screen.WIDTH - Player.SIZE) // 2
    PLAYER_START_POSITION_Y = 600

    ENEMY_START_POSITION = (100, 100)

    def __init__(self):
        self._key = 0
        self._old_key = 0
        self._sprite_sheet = None
        self._player = Player()
        self._enemy = Enemy()

    def initialize(self, sprite_sheet):
        """Set up the objects; ``sprite_sheet`` may be None if it failed to load."""
        self._sprite_sheet = sprite_sheet
        self._player.initialize(
            (self.PLAYER_START_POSITION_X, self.PLAYER_START_POSITION_Y)
        )
        self._enemy.initialize(self.ENEMY_START_POSITION)

    def update(self, elapsed_time, key):
        """Advance the game one frame with ``key`` as the pad input state."""
        self._old_key = self._key
        self._key = key
        self._player.update(self._key, ~self._old_key & self._key)
        self._enemy.update()

    def render(self, surface):
        """Draw the game onto ``surface``."""
        self._player.render(surface, self._sprite_sheet)
        self._enemy.render(surface, self._sprite_sheet)

    def finalize(self):
        """Release what the game holds."""
        self._sprite_sheet = None

    @property
    def player(self):
        return self._player

    @property
    def enemy(self):
        return self._enemy