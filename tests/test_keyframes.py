import math

import pytest

from atomlab.keyframes import (
    KeyframeTrack,
    ease_in_out,
    interpolate_points,
    loop_position,
    ping_pong_fraction,
)


def test_track_interpolates_and_clamps():
    track = KeyframeTrack([0.0, 10.0])
    assert track.at(0.5) == pytest.approx(5.0)
    assert track.at(-1.0) == 0.0
    assert track.at(2.0) == 10.0
    assert track.at(math.nan) == 0.0


def test_track_with_explicit_times():
    track = KeyframeTrack([1, 1, 0, 0, 0], [0.0, 0.4, 0.5, 0.6, 1.0])
    assert track.at(0.2) == 1.0
    assert track.at(0.45) == pytest.approx(0.5)
    assert track.at(0.9) == 0.0
    assert track.initial == 1.0


@pytest.mark.parametrize("values,times", [
    ([0, 1], [0.0]),
    ([0, 1], [0.5, 0.5]),
    ([0, 1], [0.0, 1.5]),
    ([], None),
])
def test_track_rejects_bad_layout(values, times):
    with pytest.raises(ValueError):
        KeyframeTrack(values, times)


def test_loop_position_with_repeat_delay():
    pos = loop_position(1.0, 2.0, 1.0)
    assert pos.fraction == pytest.approx(0.5)
    assert not pos.in_delay
    pos = loop_position(2.5, 2.0, 1.0)
    assert pos.in_delay and pos.fraction == 1.0 and pos.cycle == 0
    pos = loop_position(3.5, 2.0, 1.0)
    assert pos.cycle == 1
    assert pos.fraction == pytest.approx(0.25)


def test_loop_position_guards():
    assert loop_position(-5.0, 2.0).fraction == 0.0
    assert loop_position(math.inf, 2.0).fraction == 0.0
    assert loop_position(1.0, 0.0).fraction == 0.0


def test_ping_pong_and_easing():
    assert ping_pong_fraction(0.5, 1.0) == pytest.approx(0.5)
    assert ping_pong_fraction(1.5, 1.0) == pytest.approx(0.5)
    assert ping_pong_fraction(1.75, 1.0) == pytest.approx(0.25)
    assert ease_in_out(0.0) == pytest.approx(0.0)
    assert ease_in_out(0.5) == pytest.approx(0.5)
    assert ease_in_out(1.0) == pytest.approx(1.0)
    samples = [ease_in_out(u / 10.0) for u in range(11)]
    assert all(b > a for a, b in zip(samples, samples[1:]))


def test_interpolate_points():
    x, y = interpolate_points([(45, 0), (100, -20), (155, 0)], 0.5)
    assert (x, y) == (pytest.approx(100.0), pytest.approx(-20.0))
