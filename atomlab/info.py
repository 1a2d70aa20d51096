"""
Detail sheets for the side panel: one titled section of label/value rows per
entity kind, with missing values shown as "-".
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

from .entities import Element, EntityKind, Molecule, Reaction, entity_kind
from .localization import display_name, safe_translate

MISSING = "-"

Translate = Optional[Callable[[str], str]]


@dataclass(frozen=True)
class InfoSheet:
    kind: str
    title: str
    description: str
    section: str = ""
    rows: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)
    headline: str = ""  # the element symbol or the reaction equation

    def as_dict(self) -> Dict[str, str]:
        return dict(self.rows)


def _fmt(value: Any) -> str:
    if value is None or value == "":
        return MISSING
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _element_rows(el: Element, tr: Callable[[str], str]) -> List[Tuple[str, str]]:
    radius = f"{_fmt(el.atomic_radius)} pm" if el.atomic_radius is not None else MISSING
    return [
        (tr("atomic_number"), _fmt(el.atomic_number)),
        (tr("atomic_mass"), _fmt(el.atomic_mass)),
        (tr("category"), _fmt(el.category)),
        (tr("config"), _fmt(el.electron_configuration)),
        (tr("electronegativity"), _fmt(el.electronegativity)),
        (tr("radius"), radius),
    ]


def _molecule_rows(mol: Molecule, tr: Callable[[str], str]) -> List[Tuple[str, str]]:
    return [
        (tr("formula"), _fmt(mol.formula)),
        (tr("geometry"), _fmt(mol.geometry)),
        (tr("atom_count"), _fmt(len(mol.atoms))),
        (tr("bond_types"), _fmt(", ".join(b.kind.value for b in mol.bonds))),
    ]


def _reaction_rows(rxn: Reaction, tr: Callable[[str], str]) -> List[Tuple[str, str]]:
    return [
        (tr("type"), _fmt(rxn.mechanism.value)),
        (tr("thermodynamics"), _fmt(rxn.energy_change)),
        (tr("reactants"), _fmt(", ".join(rxn.reactants))),
        (tr("products"), _fmt(", ".join(rxn.products))),
    ]


_SECTIONS = {
    EntityKind.ELEMENT: ("atomic_props", _element_rows, lambda e: e.symbol),
    EntityKind.MOLECULE: ("molecular_data", _molecule_rows, lambda m: m.formula),
    EntityKind.REACTION: ("reaction_dynamics", _reaction_rows, lambda r: r.equation),
}


def describe_entity(entity, translate: Translate = None) -> Optional[InfoSheet]:
    """Info sheet for a catalog entity; None for anything that is not one."""
    kind = entity_kind(entity)
    if kind is None:
        return None

    def tr(key: str) -> str:
        return safe_translate(translate, key)

    section_key, rows_for, headline_for = _SECTIONS[kind]
    return InfoSheet(
        kind=kind.value,
        title=display_name(entity, translate),
        description=entity.description,
        section=tr(section_key),
        rows=tuple(rows_for(entity, tr)),
        headline=headline_for(entity),
    )
