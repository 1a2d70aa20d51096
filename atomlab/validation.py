"""
Load-time integrity checks for the static catalog.

Every reference a renderer follows at runtime is checked here once, so that
the scene builders only ever have to cope with the documented fallbacks.
"""

from __future__ import annotations
from typing import Dict, Iterable, List
import logging

from .entities import Element, Entity, Molecule, Reaction, entity_kind

logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """Raised when the catalog data is inconsistent. Carries every problem found."""

    def __init__(self, problems: List[str]):
        self.problems = list(problems)
        summary = "; ".join(self.problems[:5])
        if len(self.problems) > 5:
            summary += f" (+{len(self.problems) - 5} more)"
        super().__init__(f"Invalid catalog: {summary}")


def find_duplicate_ids(entities: Iterable[Entity]) -> List[str]:
    seen: Dict[str, str] = {}
    problems: List[str] = []
    for e in entities:
        kind = entity_kind(e)
        label = kind.value if kind is not None else type(e).__name__
        if e.id in seen:
            problems.append(f"duplicate id '{e.id}' ({seen[e.id]} and {label})")
        else:
            seen[e.id] = label
    return problems


def check_element(element: Element) -> List[str]:
    problems: List[str] = []
    if element.atomic_number <= 0:
        problems.append(f"element '{element.id}': atomic number must be positive")
    levels = [s.level for s in element.shells]
    if levels != sorted(levels) or len(set(levels)) != len(levels):
        problems.append(f"element '{element.id}': shells must be ordered by increasing level")
    if any(s.count < 0 for s in element.shells):
        problems.append(f"element '{element.id}': negative shell electron count")
    return problems


def check_molecule(molecule: Molecule, element_ids: Iterable[str]) -> List[str]:
    known = set(element_ids)
    problems: List[str] = []
    for i, placement in enumerate(molecule.atoms):
        if placement.element_id not in known:
            problems.append(
                f"molecule '{molecule.id}': atom {i} references unknown element '{placement.element_id}'"
            )
    for i, bond in enumerate(molecule.bonds):
        if not molecule.bond_in_range(bond):
            problems.append(
                f"molecule '{molecule.id}': bond {i} ({bond.start}->{bond.end}) is out of range or self-referencing"
            )
    return problems


def check_reaction(reaction: Reaction, known_ids: Iterable[str]) -> List[str]:
    """
    Reactant and product lists are informational. Dangling ids are only
    reported at debug level and never fail validation.
    """
    known = set(known_ids)
    for ref in list(reaction.reactants) + list(reaction.products):
        if ref not in known:
            logger.debug(f"reaction '{reaction.id}' mentions '{ref}' which is not in the catalog")
    return []


def validate_catalog(catalog) -> List[str]:
    """
    Run every integrity check over a catalog.

    Returns
    -------
    List[str]
        Human readable problems; empty when the catalog is consistent.
    """
    entities = catalog.get_all()
    problems = find_duplicate_ids(entities)
    element_ids = [e.id for e in catalog.elements]
    for el in catalog.elements:
        problems.extend(check_element(el))
    for mol in catalog.molecules:
        problems.extend(check_molecule(mol, element_ids))
    all_ids = [e.id for e in entities]
    for rxn in catalog.reactions:
        problems.extend(check_reaction(rxn, all_ids))
    return problems
