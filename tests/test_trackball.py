import math

import numpy as np
import pytest

from glscenes.trackball import TrackBall


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def ball(clock):
    tb = TrackBall(clock=clock)
    tb.resize_viewport(100, 100)
    return tb


def assert_rotation(matrix):
    np.testing.assert_allclose(matrix @ matrix.T, np.identity(4), atol=1e-9)
    assert np.linalg.det(matrix) == pytest.approx(1.0)


def test_project_requires_viewport(clock):
    with pytest.raises(ValueError):
        TrackBall(clock=clock).project((10, 10))


def test_project_centre_is_pole(ball):
    np.testing.assert_allclose(ball.project((50, 50)), [0.0, 0.0, 1.0])


@pytest.mark.parametrize("position", [(0, 0), (10, 30), (70, 55), (100, 50), (99, 1)])
def test_project_lands_on_unit_sphere(ball, position):
    v = ball.project(position)
    assert np.linalg.norm(v) == pytest.approx(1.0)
    assert v[2] >= 0.0


def test_project_outside_circle_has_zero_depth(ball):
    v = ball.project((0, 0))
    assert v[2] == 0.0
    assert v[0] < 0 < v[1]


def test_initial_rotation_is_identity(ball, clock):
    clock.now = 5.0
    np.testing.assert_allclose(ball.rotation(), np.identity(4))


def test_move_without_press_does_nothing(ball, clock):
    clock.now = 1.0
    ball.mouse_move((90, 50))
    assert ball.velocity == 0.0
    np.testing.assert_allclose(ball.rotation(), np.identity(4))


def test_fast_drag_is_clamped(ball, clock):
    ball.mouse_press((50, 50))
    clock.now = 0.001
    ball.mouse_move((90, 50))
    assert ball.velocity == pytest.approx(math.radians(0.72))


def test_slow_drag_rotates_about_vertical_axis(ball, clock):
    ball.mouse_press((50, 50))
    clock.now = 10.0
    ball.mouse_move((90, 50))
    assert 0.0 < ball.velocity < TrackBall.max_velocity
    np.testing.assert_allclose(ball.axis, [0.0, 1.0, 0.0], atol=1e-12)
    assert_rotation(ball.rotation())


def test_rotation_fixed_while_tracking(ball, clock):
    ball.mouse_press((50, 50))
    clock.now = 1.0
    ball.mouse_move((70, 40))
    held = ball.rotation()
    clock.now = 50.0
    np.testing.assert_allclose(ball.rotation(), held)
    assert not np.allclose(held, np.identity(4))


def test_move_to_same_point_keeps_rotation(ball, clock):
    ball.mouse_press((30, 60))
    before = ball.rotation()
    clock.now = 1.0
    ball.mouse_move((30, 60))
    np.testing.assert_allclose(ball.rotation(), before)
    assert ball.velocity == 0.0


def test_spin_continues_after_release(ball, clock):
    ball.mouse_press((50, 50))
    clock.now = 1.0
    ball.mouse_release((80, 50))
    assert not ball.tracking
    at_release = ball.rotation()
    clock.now = 2.0
    later = ball.rotation()
    clock.now = 3.0
    even_later = ball.rotation()
    assert_rotation(later)
    assert not np.allclose(later, at_release)
    # constant angular velocity about a fixed axis
    expected = later @ np.linalg.inv(at_release) @ later
    np.testing.assert_allclose(even_later, expected, atol=1e-9)


def test_press_stops_spin(ball, clock):
    ball.mouse_press((50, 50))
    clock.now = 1.0
    ball.mouse_release((80, 50))
    clock.now = 2.0
    spinning = ball.rotation()
    ball.mouse_press((50, 50))
    assert ball.velocity == 0.0
    clock.now = 10.0
    np.testing.assert_allclose(ball.rotation(), spinning)
    ball.mouse_release((50, 50))
    clock.now = 20.0
    np.testing.assert_allclose(ball.rotation(), spinning)