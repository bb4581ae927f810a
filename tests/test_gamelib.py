import pytest

from shootinggame.gamelib import (
    Colors,
    ExitGame,
    exit_game,
    output_debug_string,
    to_rgba,
)


def test_color_values_from_source():
    assert to_rgba(Colors.SILVER) == (192, 192, 192, 255)
    assert to_rgba(Colors.NAVY) == (0, 0, 128, 255)
    assert to_rgba(Colors.YELLOW) == (255, 255, 0, 255)


def test_all_colors_are_opaque():
    assert all(to_rgba(color)[3] == 255 for color in Colors)


def test_to_rgba_red():
    assert to_rgba(Colors.RED) == (255, 0, 0, 255)


def test_to_rgba_black_and_white():
    assert to_rgba(Colors.BLACK) == (0, 0, 0, 255)
    assert to_rgba(Colors.WHITE) == (255, 255, 255, 255)


@pytest.mark.parametrize("value", [-1, 0x1_0000_0000])
def test_to_rgba_out_of_range(value):
    with pytest.raises(ValueError):
        to_rgba(value)


def test_exit_game_raises():
    with pytest.raises(ExitGame):
        exit_game()


def test_output_debug_string_returns_and_writes(capsys):
    text = output_debug_string("%s=%s", "fps", 60)
    captured = capsys.readouterr()
    assert text == "fps=60"
    assert captured.err == text


def test_output_debug_string_width_format():
    assert output_debug_string("%3dfps", 7) == "  7fps"


def test_output_debug_string_format_error():
    with pytest.raises(RuntimeError, match="String Formatting Error."):
        output_debug_string("%d", "not a number")