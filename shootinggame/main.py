"""Entry point: opens the window and runs the game loop."""

import argparse
import sys

import pygame

from shootinggame.frame_timer import FrameTimer
from shootinggame.game import Game
from shootinggame.gamelib import Colors, ExitGame, to_rgba
from shootinggame.player import PadInput
from shootinggame.screen import Screen

SPRITE_SHEET_PATH = "Resources/Textures/ShootingGame.png"
TARGET_FPS = 60

_KEY_BINDINGS = (
    (PadInput.DOWN, (pygame.K_DOWN, pygame.K_KP2)),
    (PadInput.LEFT, (pygame.K_LEFT, pygame.K_KP4)),
    (PadInput.RIGHT, (pygame.K_RIGHT, pygame.K_KP6)),
    (PadInput.UP, (pygame.K_UP, pygame.K_KP8)),
    (PadInput.BUTTON_1, (pygame.K_z,)),
    (PadInput.BUTTON_2, (pygame.K_x,)),
    (PadInput.BUTTON_3, (pygame.K_c,)),
    (PadInput.BUTTON_4, (pygame.K_a,)),
    (PadInput.BUTTON_5, (pygame.K_s,)),
    (PadInput.BUTTON_6, (pygame.K_d,)),
    (PadInput.BUTTON_7, (pygame.K_q,)),
    (PadInput.BUTTON_8, (pygame.K_w,)),
    (PadInput.BUTTON_9, (pygame.K_ESCAPE,)),
    (PadInput.BUTTON_10, (pygame.K_SPACE,)),
)

_fps_font = None


def pad_state_from_keys(pressed):
    """Turn a key table indexed by pygame key codes into pad input bits."""
    state = PadInput(0)
    for bit, keys in _KEY_BINDINGS:
        if any(pressed[key] for key in keys):
            state |= bit
    return state


def draw_frame_rate(surface, x, y, color, fps, font=None):
    """Draw the frame rate at (x, y) and return the area drawn."""
    global _fps_font
    if font is None:
        if _fps_font is None:
            _fps_font = pygame.font.Font(None, 16)
        font = _fps_font
    text = font.render("%3dfps" % fps, True, to_rgba(color))
    return surface.blit(text, (x, y))


def _parse_args(argv):
    parser = argparse.ArgumentParser(prog="shootinggame", description=Game.TITLE)
    parser.add_argument("--windowed", action="store_true", help="run in a window")
    parser.add_argument("--show-fps", action="store_true", help="draw the frame rate")
    parser.add_argument("--sprite-sheet", default=SPRITE_SHEET_PATH,
                        help="path of the sprite sheet image")
    return parser.parse_args(argv)


def _load_sprite_sheet(path):
    try:
        return pygame.image.load(path)
    except (pygame.error, FileNotFoundError):
        return None


def _quit_requested():
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return True
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            return True
    return False


def main(argv=None):
    """Run the game; return 0 on a normal exit and -1 on failure."""
    args = _parse_args(sys.argv[1:] if argv is None else argv)

    pygame.init()
    try:
        flags = 0 if args.windowed else pygame.FULLSCREEN
        try:
            surface = pygame.display.set_mode((Screen.WIDTH, Screen.HEIGHT), flags)
        except pygame.error as exc:
            print(f"cannot open display: {exc}", file=sys.stderr)
            return -1
        pygame.display.set_caption(Game.TITLE)

        frame_timer = FrameTimer(TARGET_FPS)
        game = Game()
        game.initialize(_load_sprite_sheet(args.sprite_sheet))

        background = to_rgba(Colors.BLACK)
        try:
            while not _quit_requested():
                frame_timer.update()
                if frame_timer.is_update_frame:
                    keys = pygame.key.get_pressed()
                    game.update(frame_timer.elapsed_time, pad_state_from_keys(keys))
                game.render(surface)

                if args.show_fps:
                    draw_frame_rate(surface, 10, 10, Colors.WHITE, frame_timer.frame_rate)

                pygame.display.flip()
                surface.fill(background)
                pygame.time.wait(1)
        except ExitGame:
            pass

        game.finalize()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())