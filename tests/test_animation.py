import math

import numpy as np
import pytest

from atomlab import constants as C
from atomlab.animation import (
    derive_atom_motion,
    electron_angles,
    electron_pulse,
    jitter_periods,
    sanitize_temperature,
    shell_period,
    shell_radius,
    speed_modifier,
    vibration_amplitude,
    vibration_offset,
)
from atomlab.catalog import get_catalog


def test_speed_modifier_is_monotone_and_floored():
    temps = np.linspace(0, 6000, 121)
    mods = [speed_modifier(t) for t in temps]
    assert all(b <= a for a, b in zip(mods, mods[1:]))
    assert min(mods) >= C.MIN_SPEED_MODIFIER
    assert speed_modifier(0) == 1.0
    assert speed_modifier(10000) == C.MIN_SPEED_MODIFIER


def test_vibration_amplitude_grows_with_temperature():
    assert vibration_amplitude(0) == pytest.approx(0.5)
    assert vibration_amplitude(1000) == pytest.approx(5.5)
    assert vibration_amplitude(math.nan) == vibration_amplitude(C.DEFAULT_TEMPERATURE)
    assert sanitize_temperature("warm") == C.DEFAULT_TEMPERATURE


def test_electrons_evenly_spaced():
    paused = electron_angles(4, 3.3, 5.0, animated=False)
    assert paused.tolist() == [0.0, 90.0, 180.0, 270.0]
    moving = electron_angles(4, 1.25, 5.0, animated=True)
    assert moving[0] == pytest.approx(90.0)
    assert np.allclose(np.diff(moving), 90.0)
    assert electron_angles(0, 1.0, 5.0, True).size == 0


def test_shell_period_guard():
    assert shell_period(0, 1.0) == 5.0
    assert shell_period(1, 1.0) == 7.0
    assert shell_period(2, 0.5) == pytest.approx(4.5)
    assert shell_period(1, math.nan) == C.FALLBACK_ORBIT_PERIOD
    assert shell_period(1, 0.0) == C.FALLBACK_ORBIT_PERIOD
    # a bad period never produces non-finite angles
    assert np.all(np.isfinite(electron_angles(3, 2.0, math.nan, True)))


def test_shell_radius_scales():
    assert shell_radius(0) == 15.0
    assert shell_radius(2) == 35.0
    assert shell_radius(2, scale=1.5) == pytest.approx(52.5)


def test_jitter_is_stable_per_instance():
    first = jitter_periods("H2O/atom0")
    assert jitter_periods("H2O/atom0") == first
    px, py = first
    assert C.JITTER_X_RANGE[0] <= px <= C.JITTER_X_RANGE[1]
    assert C.JITTER_Y_RANGE[0] <= py <= C.JITTER_Y_RANGE[1]
    assert jitter_periods("H2O/atom1") != first


def test_vibration_offset_bounded_and_zero_when_paused():
    amp = vibration_amplitude(500)
    samples = [vibration_offset(t / 37.0, amp, 0.25, True) for t in range(100)]
    assert max(abs(s) for s in samples) <= amp + 1e-9
    assert vibration_offset(0.1, amp, 0.25, False) == 0.0


def test_electron_pulse_staggered():
    assert electron_pulse(0, 5.0, False) == (C.ELECTRON_RADIUS, 1.0)
    # the second electron has not started pulsing yet
    assert electron_pulse(1, 0.2, True) == (C.ELECTRON_RADIUS, 0.8)
    r, _ = electron_pulse(0, 0.75, True)
    assert r == pytest.approx(C.ELECTRON_PULSE_RADIUS)


def test_paused_motion_is_the_static_snapshot():
    na = get_catalog().get_element_by_id("Na")
    a = derive_atom_motion(na, 900, 1.0, "Na", 0.3, animated=False)
    b = derive_atom_motion(na, 900, 1.0, "Na", 7.9, animated=False)
    assert a == b
    assert (a.dx, a.dy) == (0.0, 0.0)
    assert [o.radius for o in a.orbits] == [15.0, 25.0, 35.0]
    assert [len(o.angles) for o in a.orbits] == [2, 8, 1]
