from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict, Optional
import logging
import math
import numbers

from . import reaction_scenes  # noqa: F401  registers the bespoke choreographies
from .animation import sanitize_temperature
from .choreography import (
    CHOREOGRAPHIES,
    GENERIC,
    Choreography,
    ChoreographyFrame,
    ChoreographyParams,
    Phase,
)
from .entities import Reaction

logger = logging.getLogger(__name__)


def choreography_for(reaction_id: str) -> Choreography:
    """Registered choreography for a reaction id, or the generic pulsing ring."""
    return CHOREOGRAPHIES.get(reaction_id, GENERIC)


def has_bespoke_choreography(reaction_id: str) -> bool:
    return reaction_id in CHOREOGRAPHIES


def evaluate_reaction(reaction: Reaction,
                      temperature: float,
                      animated: bool,
                      elapsed: float,
                      catalog=None,
                      translate: Optional[Callable[[str], str]] = None) -> ChoreographyFrame:
    """
    Stateless evaluation of a reaction scene `elapsed` time units after its
    animation started.
    """
    params = ChoreographyParams(
        reaction=reaction,
        temperature=sanitize_temperature(temperature),
        animated=bool(animated),
        catalog=catalog,
        translate=translate,
    )
    return choreography_for(reaction.id).evaluate(elapsed, params)


@dataclass
class _ReactionClock:
    origin: Optional[float] = None
    phase: Phase = Phase.REACTANTS
    cycle: int = 0


class Choreographer:
    """
    Runs reaction choreographies against an external presentation clock.

    Keeps one clock per reaction id. Pausing drops the clock, so the paused
    frame is always the initial snapshot and resuming starts a fresh cycle.
    """

    def __init__(self, catalog=None, translate: Optional[Callable[[str], str]] = None):
        self.catalog = catalog
        self.translate = translate
        self._clocks: Dict[str, _ReactionClock] = {}

    def evaluate(self, reaction: Reaction, temperature: float, animated: bool, now: float) -> ChoreographyFrame:
        clock = self._clocks.setdefault(reaction.id, _ReactionClock())
        if not animated:
            if clock.origin is not None:
                logger.debug(f"Choreography '{reaction.id}' paused")
            clock.origin = None
            clock.phase, clock.cycle = Phase.REACTANTS, 0
            return evaluate_reaction(reaction, temperature, False, 0.0, self.catalog, self.translate)

        if not (isinstance(now, numbers.Real) and math.isfinite(now)):
            # bad tick: show the cycle start without touching the clock
            logger.warning(f"Ignoring non-finite presentation time {now!r} for '{reaction.id}'")
            return evaluate_reaction(reaction, temperature, True, 0.0, self.catalog, self.translate)

        if clock.origin is None:
            clock.origin = now
            style = "bespoke" if has_bespoke_choreography(reaction.id) else "generic"
            logger.debug(f"Choreography '{reaction.id}' ({style}) started at t={now:.3f}")
        elapsed = max(0.0, now - clock.origin)
        frame = evaluate_reaction(reaction, temperature, True, elapsed, self.catalog, self.translate)
        if frame.phase != clock.phase or frame.cycle != clock.cycle:
            logger.debug(f"Choreography '{reaction.id}' cycle {frame.cycle}: {clock.phase.value} -> {frame.phase.value}")
            clock.phase, clock.cycle = frame.phase, frame.cycle
        return frame

    def reset(self, reaction_id: Optional[str] = None) -> None:
        if reaction_id is None:
            self._clocks.clear()
        else:
            self._clocks.pop(reaction_id, None)

