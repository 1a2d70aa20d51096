"""
Keyframe interpolation over a looping presentation clock.

A track is a list of values placed at monotonically increasing time fractions
in [0, 1]; evaluation is piecewise linear (numpy.interp). Clock helpers turn an
elapsed time into a cycle fraction for repeating, delayed or ping-pong loops.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple
import math

import numpy as np

from .constants import EPSILON


class KeyframeTrack:
    """
    Piecewise-linear track of values over a unit cycle.

    Args:
        values: keyframe values.
        times: fractions in [0, 1], strictly increasing, same length as values.
            Evenly spaced when omitted.
    """

    def __init__(self, values: Sequence[float], times: Optional[Sequence[float]] = None):
        if len(values) == 0:
            raise ValueError("A keyframe track needs at least one value")
        self.values = np.asarray(values, dtype=float)
        if times is None:
            times = np.linspace(0.0, 1.0, len(values)) if len(values) > 1 else [0.0]
        self.times = np.asarray(times, dtype=float)
        if self.times.shape != self.values.shape:
            raise ValueError("times and values must have the same length")
        if self.times.size and (self.times[0] < 0.0 or self.times[-1] > 1.0):
            raise ValueError("keyframe times must lie in [0, 1]")
        if np.any(np.diff(self.times) <= 0):
            raise ValueError("keyframe times must be strictly increasing")

    def at(self, fraction: float) -> float:
        """Value at a cycle fraction; clamps outside [0, 1]."""
        if not math.isfinite(fraction):
            fraction = 0.0
        return float(np.interp(fraction, self.times, self.values))

    @property
    def initial(self) -> float:
        return float(self.values[0])

    def __repr__(self) -> str:
        return f"<KeyframeTrack values={self.values.tolist()} times={self.times.tolist()}>"


@dataclass(frozen=True)
class LoopPosition:
    fraction: float    # position inside the active part of the cycle, [0, 1)
    cycle: int         # completed cycles
    in_delay: bool     # True while waiting out a repeat delay


def loop_position(t: float, duration: float, repeat_delay: float = 0.0) -> LoopPosition:
    """
    Position of time t in an endlessly repeating animation of `duration`
    followed by `repeat_delay` idle time.
    """
    if not math.isfinite(t) or t < 0.0:
        t = 0.0
    span = duration + max(0.0, repeat_delay)
    if duration <= EPSILON or span <= EPSILON:
        return LoopPosition(fraction=0.0, cycle=0, in_delay=False)
    cycle = int(t // span)
    local = t - cycle * span
    if local >= duration:
        return LoopPosition(fraction=1.0, cycle=cycle, in_delay=True)
    return LoopPosition(fraction=local / duration, cycle=cycle, in_delay=False)


def cycle_fraction(t: float, duration: float) -> float:
    return loop_position(t, duration).fraction


def ping_pong_fraction(t: float, duration: float) -> float:
    """Runs 0 -> 1 over `duration`, then back 1 -> 0, repeating."""
    if not math.isfinite(t) or t < 0.0 or duration <= EPSILON:
        return 0.0
    u = (t % (2.0 * duration)) / duration
    return u if u <= 1.0 else 2.0 - u


def ease_in_out(u: float) -> float:
    """Symmetric sinusoidal ease; strictly increasing on [0, 1]."""
    u = min(1.0, max(0.0, u))
    return 0.5 - 0.5 * math.cos(math.pi * u)


def interpolate_points(points: Sequence[Tuple[float, float]], fraction: float) -> Tuple[float, float]:
    """Piecewise-linear position along evenly spaced waypoints."""
    xs = KeyframeTrack([p[0] for p in points])
    ys = KeyframeTrack([p[1] for p in points])
    return xs.at(fraction), ys.at(fraction)
