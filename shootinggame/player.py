"""The player's ship."""

from enum import IntFlag

import pygame

from shootinggame.screen import Screen


class PadInput(IntFlag):
    """Bits of the joypad input state."""

    DOWN = 0x0001
    LEFT = 0x0002
    RIGHT = 0x0004
    UP = 0x0008
    BUTTON_1 = 0x0010
    BUTTON_2 = 0x0020
    BUTTON_3 = 0x0040
    BUTTON_4 = 0x0080
    BUTTON_5 = 0x0100
    BUTTON_6 = 0x0200
    BUTTON_7 = 0x0400
    BUTTON_8 = 0x0800
    BUTTON_9 = 0x1000
    BUTTON_10 = 0x2000


def draw_sprite(surface, sprite_sheet, position, size, source_rect):
    """Draw a cell of the sprite sheet scaled to a square of ``size`` pixels."""
    if sprite_sheet is None:
        return
    cell = sprite_sheet.subsurface(pygame.Rect(source_rect))
    surface.blit(pygame.transform.scale(cell, (size, size)), position)


class Player:
    """The ship the player steers left and right along the bottom."""

    SIZE = 64
    SPEED = 5
    SPRITE_RECT = (0, 0, 32, 32)

    def __init__(self):
        self._x = 0
        self._y = 0
        self._velocity = (0, 0)

    def initialize(self, position):
        """Place the player at ``position``."""
        self._x, self._y = position

    def update(self, key_condition, key_trigger):
        """Move by the held direction keys and keep the ship on screen."""
        vx, vy = 0, 0
        if key_condition & PadInput.RIGHT:
            vx = self.SPEED
        if key_condition & PadInput.LEFT:
            vx = -self.SPEED
        self._velocity = (vx, vy)

        self._x += vx
        self._y += vy

        self._x = max(0, min(self._x, Screen.WIDTH - self.SIZE))

    def render(self, surface, sprite_sheet):
        """Draw the player onto ``surface``."""
        draw_sprite(surface, sprite_sheet, self.position, self.SIZE, self.SPRITE_RECT)

    @property
    def position(self):
        """Top-left corner as an (x, y) tuple."""
        return (self._x, self._y)