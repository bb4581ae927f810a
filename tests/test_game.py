import pygame
import pytest

from shootinggame.game import Game
from shootinggame.player import PadInput, Player
from shootinggame.screen import Screen


@pytest.fixture
def sheet():
    s = pygame.Surface((128, 32))
    s.fill((255, 0, 0), pygame.Rect(0, 0, 32, 32))
    s.fill((0, 255, 0), pygame.Rect(96, 0, 32, 32))
    return s


@pytest.fixture
def game(sheet):
    g = Game()
    g.initialize(sheet)
    return g


def test_title():
    assert Game().TITLE == "Shooting Game"


def test_player_start_is_centred(game):
    assert game.player.position == ((Screen.WIDTH - Player.SIZE) // 2, 600)
    assert game.player.position == (608, 600)


def test_initialize_places_objects(game):
    assert game.player.position == (
        Game.PLAYER_START_POSITION_X,
        Game.PLAYER_START_POSITION_Y,
    )
    assert game.enemy.position == (100, 100)


def test_update_moves_player_and_enemy(game):
    start_x, start_y = game.player.position
    game.update(1 / 60, PadInput.RIGHT)
    assert game.player.position == (start_x + Player.SPEED, start_y)
    assert game.enemy.position == (100, 100 + game.enemy.SPEED)


def test_held_key_keeps_moving(game):
    start_x, _ = game.player.position
    for _ in range(3):
        game.update(1 / 60, PadInput.LEFT)
    assert game.player.position[0] == start_x - 3 * Player.SPEED


def test_render_draws_both(game):
    target = pygame.Surface((Screen.WIDTH, Screen.HEIGHT))
    game.render(target)
    assert target.get_at(game.player.position)[:3] == (255, 0, 0)
    assert target.get_at(game.enemy.position)[:3] == (0, 255, 0)


def test_render_after_finalize_draws_nothing(game):
    game.finalize()
    target = pygame.Surface((Screen.WIDTH, Screen.HEIGHT))
    game.render(target)
    assert target.get_at(game.player.position)[:3] == (0, 0, 0)