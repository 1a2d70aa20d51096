"""
Thermal classifier: slider level -> absolute temperature -> state of matter.

The slider runs from 0 to 100 and maps linearly onto 0-2000 K. Elements with
authored melting and boiling points use them; everything else uses water-like
thresholds.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional
import math
import numbers

from . import constants as C
from .entities import EntityKind, entity_kind
from .localization import safe_translate


class PhysicalState(str, Enum):
    SOLID = "solid"
    LIQUID = "liquid"
    GAS = "gas"


@dataclass(frozen=True)
class ThermalReading:
    temperature_k: float
    state: PhysicalState


def sanitize_level(level: Any) -> float:
    """Missing, non-numeric and non-finite levels read as 0."""
    if isinstance(level, bool) or not isinstance(level, numbers.Real):
        return 0.0
    level = float(level)
    if not math.isfinite(level):
        return 0.0
    return level


def level_to_kelvin(level: Any) -> float:
    return sanitize_level(level) * C.KELVIN_PER_LEVEL


def _state_between(temperature_k: float, melting: float, boiling: float) -> PhysicalState:
    if temperature_k < melting:
        return PhysicalState.SOLID
    if temperature_k < boiling:
        return PhysicalState.LIQUID
    return PhysicalState.GAS


def state_for_temperature(temperature_k: float, entity: Optional[Any] = None) -> PhysicalState:
    """
    Classify an absolute temperature for an entity.

    Only an element carrying both a melting and a boiling point gets
    element-specific thresholds.
    """
    if entity_kind(entity) == EntityKind.ELEMENT and entity.has_phase_points:
        return _state_between(temperature_k, entity.melting_point, entity.boiling_point)
    return _state_between(temperature_k, C.FREEZING_POINT_K, C.BOILING_POINT_K)


def classify(level: Any, entity: Optional[Any] = None) -> ThermalReading:
    temperature_k = level_to_kelvin(level)
    return ThermalReading(temperature_k=temperature_k, state=state_for_temperature(temperature_k, entity))


def state_label(reading: ThermalReading, translate: Optional[Callable[[str], str]] = None) -> str:
    return safe_translate(translate, reading.state.value)
