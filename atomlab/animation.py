"""
Animation parameter derivation for atoms.

Everything here is a pure function of (temperature, shell layout, scale,
presentation time). The only pseudo-random quantity, the vibration jitter
period, is seeded from the rendered instance id so the same instance always
gets the same periods.
"""

from __future__ import annotations
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Sequence, Tuple
import hashlib
import math

import numpy as np

from . import constants as C
from .keyframes import KeyframeTrack, cycle_fraction, ping_pong_fraction


def sanitize_temperature(temperature: Any) -> float:
    """Non-finite or missing temperatures become the neutral default (300 K)."""
    try:
        value = float(temperature)
    except (TypeError, ValueError):
        return C.DEFAULT_TEMPERATURE
    if not math.isfinite(value):
        return C.DEFAULT_TEMPERATURE
    return value


# -----------------------
# Vibration
# -----------------------

def vibration_amplitude(temperature: Any) -> float:
    t = sanitize_temperature(temperature)
    return (t / 1000.0) * C.VIBRATION_PER_KILOKELVIN + C.VIBRATION_BASE


@lru_cache(maxsize=4096)
def jitter_periods(instance_id: str) -> Tuple[float, float]:
    """
    Per-instance vibration periods for the x and y axes.

    The generator is seeded from a hash of the instance id and a fixed salt,
    so repeated evaluation of the same instance never resamples.
    """
    digest = hashlib.sha256(f"{C.JITTER_SALT}:{instance_id}".encode("utf-8")).digest()
    rng = np.random.default_rng(int.from_bytes(digest[:8], "big"))
    px = float(rng.uniform(*C.JITTER_X_RANGE))
    py = float(rng.uniform(*C.JITTER_Y_RANGE))
    return px, py


def vibration_offset(t: float, amplitude: float, period: float, animated: bool) -> float:
    """
    Positional jitter along one axis: -a -> +a -> 0 over `period`, then the
    same path in reverse. Zero when paused.
    """
    if not animated:
        return 0.0
    track = KeyframeTrack([-amplitude, amplitude, 0.0])
    return track.at(ping_pong_fraction(t, period))


# -----------------------
# Orbits
# -----------------------

def speed_modifier(temperature: Any) -> float:
    """Hotter atoms orbit faster; floored so orbits never stop or reverse."""
    t = sanitize_temperature(temperature)
    return max(C.MIN_SPEED_MODIFIER, 1.0 - t / C.ORBIT_SLOWDOWN_SPAN_K)


def shell_period(index: int, modifier: float) -> float:
    """Seconds per revolution for shell `index` (0-based), guarded against bad input."""
    base = C.BASE_ORBIT_PERIOD + index * C.ORBIT_PERIOD_STEP
    period = base * modifier
    if not math.isfinite(period) or period <= 0.0:
        return C.FALLBACK_ORBIT_PERIOD
    return period


def shell_radius(index: int, scale: float = 1.0,
                 base_radius: float = C.BASE_ORBIT_RADIUS,
                 ring_spacing: float = C.RING_SPACING) -> float:
    return base_radius * scale + index * ring_spacing * scale


def electron_angles(count: int, t: float, period: float, animated: bool) -> np.ndarray:
    """
    Angles in degrees of `count` electrons spread evenly around an orbit.
    Animated electrons advance one revolution per `period`.
    """
    if count <= 0:
        return np.zeros(0)
    base = np.arange(count, dtype=float) * (360.0 / count)
    if not animated:
        return base
    if not math.isfinite(period) or period <= 0.0:
        period = C.FALLBACK_ORBIT_PERIOD
    return base + 360.0 * cycle_fraction(t, period)


def electron_pulse(index: int, t: float, animated: bool) -> Tuple[float, float]:
    """(radius, opacity) of electron `index`; each electron starts its pulse 0.5 later."""
    if not animated:
        return C.ELECTRON_RADIUS, 1.0
    radius_track = KeyframeTrack([C.ELECTRON_RADIUS, C.ELECTRON_PULSE_RADIUS, C.ELECTRON_RADIUS])
    opacity_track = KeyframeTrack([0.8, 1.0, 0.8])
    local = t - index * C.ELECTRON_PULSE_DELAY
    if local < 0.0:
        return radius_track.initial, opacity_track.initial
    f = cycle_fraction(local, C.ELECTRON_PULSE_PERIOD)
    return radius_track.at(f), opacity_track.at(f)


# -----------------------
# Bundled per-atom parameters
# -----------------------

@dataclass(frozen=True)
class OrbitState:
    index: int
    level: int
    radius: float
    period: float
    angles: Tuple[float, ...]


@dataclass(frozen=True)
class AtomMotion:
    dx: float
    dy: float
    amplitude: float
    speed_modifier: float
    orbits: Tuple[OrbitState, ...]


def derive_orbits(shells: Sequence[Any], temperature: Any, scale: float,
                  t: float, animated: bool) -> Tuple[OrbitState, ...]:
    modifier = speed_modifier(temperature)
    orbits = []
    for i, shell in enumerate(shells):
        period = shell_period(i, modifier)
        angles = electron_angles(int(shell.count), t, period, animated)
        orbits.append(OrbitState(
            index=i,
            level=int(shell.level),
            radius=shell_radius(i, scale),
            period=period,
            angles=tuple(float(a) for a in angles),
        ))
    return tuple(orbits)


def derive_atom_motion(element, temperature: Any, scale: float, instance_id: str,
                       t: float, animated: bool) -> AtomMotion:
    """
    All time-dependent quantities of one rendered atom.

    Args:
        element: Element whose shells define the orbits.
        temperature: absolute temperature in Kelvin (sanitized here).
        scale: presentation scale; shrinks atoms inside composite scenes.
        instance_id: stable id of this rendered instance, seeds the jitter.
        t: presentation time.
        animated: False collapses every motion to its static state.
    """
    temp = sanitize_temperature(temperature)
    amplitude = vibration_amplitude(temp)
    px, py = jitter_periods(instance_id)
    return AtomMotion(
        dx=vibration_offset(t, amplitude, px, animated),
        dy=vibration_offset(t, amplitude, py, animated),
        amplitude=amplitude,
        speed_modifier=speed_modifier(temp),
        orbits=derive_orbits(element.shells, temp, scale, t, animated),
    )
