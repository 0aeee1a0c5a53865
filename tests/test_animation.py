import random

import pytest

from pixelplay.animation import NoiseAnimation, ZoomView


def test_zoom_view_defaults():
    view = ZoomView()
    assert view.size == 250.0
    assert view.x0 == 0.0
    assert view.y0 == 0.0


def test_zoom_view_zooms_in_each_frame():
    view = ZoomView(size=100.0)
    view.advance()
    assert view.size == pytest.approx(100.0 * 1.004)
    view.advance()
    assert view.size == pytest.approx(100.0 * 1.004 * 1.004)
    assert view.frame == 2


def test_zoom_view_paused_keeps_size():
    view = ZoomView(size=100.0)
    view.paused = True
    view.advance()
    assert view.size == 100.0
    assert view.frame == 1


def test_zoom_view_uniforms():
    view = ZoomView(size=10.0, x0=0.5, y0=-0.25)
    values = view.uniforms(800, 600)
    assert values == {"size": 10.0, "width": 800.0, "height": 600.0, "x0": 0.5, "y0": -0.25}


def test_noise_time_advances():
    anim = NoiseAnimation(random.Random(1))
    assert anim.time == 0.0
    anim.advance()
    assert anim.time == pytest.approx(0.05)
    anim.advance()
    assert anim.time == pytest.approx(0.1)


def test_noise_array_within_bounds():
    anim = NoiseAnimation(random.Random(7))
    anim.advance()
    values = anim.uniforms()["random_array"]
    assert len(values) == 100
    assert all(-0.07 <= v <= 0.07 for v in values)


def test_noise_is_reproducible_with_seed():
    a = NoiseAnimation(random.Random(42))
    b = NoiseAnimation(random.Random(42))
    a.advance()
    b.advance()
    assert a.uniforms() == b.uniforms()


def test_noise_array_changes_between_frames():
    anim = NoiseAnimation(random.Random(3))
    anim.advance()
    first = anim.random_array
    anim.advance()
    assert anim.random_array != first
    assert anim.uniforms()["time"] == pytest.approx(0.1)