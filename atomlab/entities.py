from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Optional, Tuple, Union
import logging

logger = logging.getLogger(__name__)


class EntityKind(str, Enum):
    """Tag carried by every catalog entity; values match the JSON `type` field."""
    ELEMENT = "Element"
    MOLECULE = "Molecule"
    REACTION = "Reaction"


class BondKind(str, Enum):
    SINGLE = "single"
    DOUBLE = "double"
    IONIC = "ionic"


class Mechanism(str, Enum):
    TRANSFER = "transfer"
    BREAK_FORM = "break-form"
    DECAY = "decay"


# -----------------------
# Element
# -----------------------

@dataclass(frozen=True)
class ElectronShell:
    level: int
    count: int


@dataclass(frozen=True)
class Element:
    """
    A chemical element as shown in the lab.

    Shell electron counts are a display simplification and do not have to add
    up to the atomic number.
    """
    kind: ClassVar[EntityKind] = EntityKind.ELEMENT

    id: str
    symbol: str
    name: str
    atomic_number: int
    atomic_mass: float
    category: str
    electron_configuration: str
    shells: Tuple[ElectronShell, ...]
    color: str
    description: str
    electronegativity: Optional[float] = None
    atomic_radius: Optional[float] = None  # picometres
    melting_point: Optional[float] = None  # Kelvin
    boiling_point: Optional[float] = None  # Kelvin

    @property
    def has_phase_points(self) -> bool:
        return self.melting_point is not None and self.boiling_point is not None

    @property
    def shell_electron_total(self) -> int:
        return sum(s.count for s in self.shells)


# -----------------------
# Molecule
# -----------------------

@dataclass(frozen=True)
class AtomPlacement:
    element_id: str
    x: float
    y: float
    scale: Optional[float] = None


@dataclass(frozen=True)
class Bond:
    """Bond between two atom placements, referenced by index."""
    start: int
    end: int
    kind: BondKind = BondKind.SINGLE


@dataclass(frozen=True)
class Molecule:
    kind: ClassVar[EntityKind] = EntityKind.MOLECULE

    id: str
    name: str
    formula: str
    geometry: str
    description: str
    atoms: Tuple[AtomPlacement, ...] = field(default_factory=tuple)
    bonds: Tuple[Bond, ...] = field(default_factory=tuple)

    def bond_in_range(self, bond: Bond) -> bool:
        n = len(self.atoms)
        return 0 <= bond.start < n and 0 <= bond.end < n and bond.start != bond.end


# -----------------------
# Reaction
# -----------------------

@dataclass(frozen=True)
class Reaction:
    kind: ClassVar[EntityKind] = EntityKind.REACTION

    id: str
    name: str
    equation: str
    description: str
    reactants: Tuple[str, ...]
    products: Tuple[str, ...]
    energy_change: str
    mechanism: Mechanism


Entity = Union[Element, Molecule, Reaction]


def entity_kind(entity) -> Optional[EntityKind]:
    """
    Return the kind tag of an entity, or None for anything that is not one of
    the three catalog variants.
    """
    kind = getattr(entity, "kind", None)
    if isinstance(kind, EntityKind):
        return kind
    return None
