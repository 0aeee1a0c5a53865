import pytest

from pixelplay.fractal_params import (
    ColorMode,
    JuliaParameters,
    background_path,
    kernel_inputs,
)
from pixelplay.fractal_view import Key, JuliaExplorer

VALID = ["0.5", "-0.5", "200", "300", "1", "2"]


def running(interval_ms=5):
    explorer = JuliaExplorer(interval_ms)
    explorer.start(VALID)
    return explorer


def test_starts_in_menu_with_defaults():
    explorer = JuliaExplorer()
    assert explorer.menu is True
    assert explorer.params == JuliaParameters()
    assert explorer.title() == "Julia"
    assert explorer.fields == ["0.3", "-0.01", "1000", "250", "0", "0"]


def test_tick_in_menu_does_not_zoom():
    explorer = JuliaExplorer()
    explorer.tick()
    assert explorer.size == 250


def test_start_with_valid_fields_sets_parameters():
    explorer = running()
    assert explorer.menu is False
    assert explorer.params == JuliaParameters(0.5, -0.5, 200.0, 300.0, 1.0, 2.0)


def test_start_with_invalid_fields_keeps_defaults_but_leaves_menu():
    explorer = JuliaExplorer()
    checks = explorer.start(["5", "0", "10", "10", "0", "0"])
    assert checks[0].valid is False
    assert explorer.menu is False
    assert explorer.params == JuliaParameters()


def test_return_in_menu_starts_with_fields():
    explorer = JuliaExplorer()
    explorer.fields = list(VALID)
    explorer.handle_key(Key.RETURN)
    assert explorer.menu is False
    assert explorer.re == 0.5


def test_tick_running_zooms_and_pause_stops_it():
    explorer = running(interval_ms=2)
    explorer.tick()
    assert explorer.size == 301
    explorer.handle_key(Key.SPACE)
    explorer.tick()
    assert explorer.size == 301
    explorer.handle_key(Key.SPACE)
    assert explorer.pause is False


def test_arrow_keys_are_inverse():
    explorer = running()
    explorer.handle_key(Key.RIGHT)
    assert explorer.x0 > 1
    explorer.handle_key(Key.LEFT)
    assert explorer.x0 == pytest.approx(1.0)
    explorer.handle_key(Key.UP)
    assert explorer.y0 < 2
    explorer.handle_key(Key.DOWN)
    assert explorer.y0 == pytest.approx(2.0)


def test_plus_and_minus_change_size():
    explorer = running()
    explorer.handle_key(Key.PLUS)
    assert explorer.size > 300
    bigger = explorer.size
    explorer.handle_key(Key.MINUS)
    assert explorer.size < bigger


def test_typed_digits_set_size_on_return():
    explorer = running()
    for digit in "125":
        explorer.handle_key(Key.DIGIT_0 + int(digit), digit)
    assert explorer.typed == "125"
    explorer.handle_key(Key.RETURN)
    assert explorer.size == 125.0
    assert explorer.typed == ""


def test_typed_zero_is_rejected():
    explorer = running()
    explorer.handle_key(Key.DIGIT_0, "0")
    explorer.handle_key(Key.RETURN)
    assert explorer.size == 300.0


def test_digits_ignored_in_menu():
    explorer = JuliaExplorer()
    explorer.handle_key(Key.DIGIT_9, "9")
    assert explorer.typed == ""


def test_escape_returns_to_menu_and_resets_mode():
    explorer = running()
    explorer.select_mode(ColorMode.SMOOTH)
    explorer.handle_key(Key.ESCAPE)
    assert explorer.menu is True
    assert explorer.pause is False
    assert explorer.mode is ColorMode.COLORFUL
    assert explorer.fields == VALID


def test_s_requests_photo_only_outside_menu():
    assert JuliaExplorer().handle_key(Key.S) is False
    assert running().handle_key(Key.S) is True


def test_drag_pans_by_pointer_distance():
    explorer = running()
    explorer.press(0, 0)
    explorer.drag(300, 300)
    assert explorer.x0 == pytest.approx(0.0)
    assert explorer.y0 == pytest.approx(1.0)
    assert explorer.mouse == (300, 300)


def test_wheel_zooms_in_and_out():
    explorer = running()
    explorer.wheel(120)
    assert explorer.size > 300
    explorer = running()
    explorer.wheel(-120)
    assert explorer.size < 300


def test_select_mode_changes_background_and_inputs():
    explorer = running()
    explorer.select_mode(ColorMode.BLACK_WHITE)
    assert explorer.background == background_path(ColorMode.BLACK_WHITE)
    assert explorer.inputs(640, 480) == kernel_inputs(
        explorer.params, ColorMode.BLACK_WHITE, 640, 480
    )


def test_interval_must_be_positive():
    with pytest.raises(ValueError):
        JuliaExplorer(0)