"""A small arcade shooting game on pygame: player, enemy, game loop and frame timer."""

__version__ = "0.1.0"