import pygame

from shootinggame.enemy import Enemy


def test_new_enemy_starts_at_origin():
    assert Enemy().position == (0, 0)


def test_initialize_sets_position():
    e = Enemy()
    e.initialize((100, 100))
    assert e.position == (100, 100)


def test_update_moves_down_by_speed():
    e = Enemy()
    e.initialize((100, 100))
    e.update()
    assert e.position == (100, 100 + Enemy.SPEED)


def test_repeated_updates_accumulate():
    e = Enemy()
    e.initialize((40, 0))
    for _ in range(10):
        e.update()
    assert e.position == (40, 10 * Enemy.SPEED)


def test_render_uses_fourth_cell():
    sheet = pygame.Surface((128, 32))
    sheet.fill((255, 0, 0), pygame.Rect(0, 0, 96, 32))
    sheet.fill((0, 255, 0), pygame.Rect(96, 0, 32, 32))
    target = pygame.Surface((400, 400))
    e = Enemy()
    e.initialize((100, 100))
    e.render(target, sheet)
    assert target.get_at((100, 100))[:3] == (0, 255, 0)
    assert target.get_at((100 + Enemy.SIZE - 1, 100 + Enemy.SIZE - 1))[:3] == (0, 255, 0)
    assert target.get_at((100 + Enemy.SIZE, 100))[:3] == (0, 0, 0)