"""
Reaction choreographies: scripted, looping, phase-scheduled scenes.

A choreography turns (presentation time, parameters) into a scene plus the
current phase. Bespoke choreographies register themselves by reaction id;
reactions without one get the generic pulsing ring.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional, Type
import logging

from . import constants as C
from .entities import Mechanism, Reaction
from .keyframes import KeyframeTrack, LoopPosition, cycle_fraction, loop_position
from .localization import display_name, safe_translate
from .scene import Circle, Group, Text

logger = logging.getLogger(__name__)


class Phase(str, Enum):
    REACTANTS = "reactants"
    TRANSITION = "transition"
    PRODUCTS = "products"


@dataclass(frozen=True)
class ChoreographyParams:
    reaction: Reaction
    temperature: float = C.DEFAULT_TEMPERATURE
    animated: bool = True
    catalog: Any = None
    translate: Optional[Callable[[str], str]] = None

    def label(self, key: str, fallback: Optional[str] = None) -> str:
        return safe_translate(self.translate, key, fallback)


@dataclass(frozen=True)
class ChoreographyFrame:
    root: Group
    phase: Phase
    fraction: float  # position in the full cycle (including any repeat delay), [0, 1)
    cycle: int


PAUSED_POSITION = LoopPosition(fraction=0.0, cycle=0, in_delay=False)


class Choreography:
    """
    Base class for reaction choreographies.

    Subclasses set the timing attributes and implement build_scene(). The
    phase boundaries are fractions of the full cycle, repeat delay included.
    """

    cycle_duration: float = C.COMBUSTION_CYCLE
    repeat_delay: float = 0.0
    transition_start: float = 0.4
    products_start: float = 0.55

    @property
    def span(self) -> float:
        return self.cycle_duration + self.repeat_delay

    def phase_for(self, fraction: float) -> Phase:
        if fraction < self.transition_start:
            return Phase.REACTANTS
        if fraction < self.products_start:
            return Phase.TRANSITION
        return Phase.PRODUCTS

    def evaluate(self, t: float, params: ChoreographyParams) -> ChoreographyFrame:
        """
        Scene at presentation time t. When params.animated is False the result
        is the paused snapshot: the initial REACTANTS state, independent of t.
        """
        if not params.animated:
            root = self.build_scene(0.0, PAUSED_POSITION, params)
            return ChoreographyFrame(root=root, phase=Phase.REACTANTS, fraction=0.0, cycle=0)
        pos = loop_position(t, self.cycle_duration, self.repeat_delay)
        fraction = cycle_fraction(t, self.span)
        root = self.build_scene(t, pos, params)
        return ChoreographyFrame(root=root, phase=self.phase_for(fraction), fraction=fraction, cycle=pos.cycle)

    def build_scene(self, t: float, pos: LoopPosition, params: ChoreographyParams) -> Group:
        raise NotImplementedError


# -----------------------
# Registry
# -----------------------

CHOREOGRAPHIES: Dict[str, Choreography] = {}


def register_choreography(reaction_id: str):
    """Class decorator: instantiate and register a choreography for a reaction id."""
    def decorator(cls: Type[Choreography]) -> Type[Choreography]:
        if reaction_id in CHOREOGRAPHIES:
            logger.warning(f"Replacing choreography registered for '{reaction_id}'")
        CHOREOGRAPHIES[reaction_id] = cls()
        return cls
    return decorator


# -----------------------
# Generic fallback
# -----------------------

# ring colour per mechanism
GENERIC_STYLES: Dict[Mechanism, str] = {
    Mechanism.TRANSFER: C.ELECTRON_COLOR,
    Mechanism.BREAK_FORM: C.GENERIC_RING_COLOR,
    Mechanism.DECAY: "#10b981",
}


class GenericPulseChoreography(Choreography):
    """A pulsing ring with the reaction name at its centre."""

    cycle_duration = C.GENERIC_PULSE_PERIOD
    transition_start = 0.25
    products_start = 0.75

    scale_track = KeyframeTrack([1.0, 1.1, 1.0])
    opacity_track = KeyframeTrack([0.5, 1.0, 0.5])

    def build_scene(self, t: float, pos: LoopPosition, params: ChoreographyParams) -> Group:
        reaction = params.reaction
        color = GENERIC_STYLES.get(reaction.mechanism, C.GENERIC_RING_COLOR)
        key = reaction.id

        if params.animated:
            scale, opacity = self.scale_track.at(pos.fraction), self.opacity_track.at(pos.fraction)
        else:
            scale, opacity = 1.0, 1.0

        root = Group(key=key, role="scene")
        ring = Group(key=f"{key}/ring", role="ring", scale=scale, opacity=opacity)
        ring.add(Circle(key=f"{key}/ring/path", role="ring-path", r=100.0,
                        stroke=color, stroke_width=2.0))
        root.add(ring)
        root.add(Text(key=f"{key}/name", role="label", text=display_name(reaction, params.translate),
                      font_size=24.0, color="#ffffff", bold=True))
        if params.animated:
            root.add(Text(key=f"{key}/progress", role="label", y=40.0,
                          text=params.label("reaction_progress"), font_size=14.0, color=color))
        return root


GENERIC = GenericPulseChoreography()
