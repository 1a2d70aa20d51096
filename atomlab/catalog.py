from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union
import json
import logging

from .entities import (
    AtomPlacement,
    Bond,
    BondKind,
    ElectronShell,
    Element,
    Entity,
    EntityKind,
    Mechanism,
    Molecule,
    Reaction,
    entity_kind,
)
from .validation import CatalogError, validate_catalog

logger = logging.getLogger(__name__)

# Default path to the bundled catalog data
CATALOG_JSON: Path = Path(__file__).parent / "data" / "catalog.json"

_KIND_ORDER = (EntityKind.ELEMENT, EntityKind.MOLECULE, EntityKind.REACTION)


def _index_first(entities: Iterable[Entity]) -> Dict[str, Entity]:
    index: Dict[str, Entity] = {}
    for e in entities:
        index.setdefault(e.id, e)
    return index


class Catalog:
    """
    Immutable registry of elements, molecules and reactions.

    Lookups are dictionary backed and report absence with None; they never
    raise for unknown ids.
    """

    def __init__(self, entities: Iterable[Entity]):
        buckets: Dict[EntityKind, List[Entity]] = {k: [] for k in _KIND_ORDER}
        for e in entities:
            kind = entity_kind(e)
            if kind is None:
                logger.warning(f"Skipping catalog entry of unknown variant: {e!r}")
                continue
            buckets[kind].append(e)

        self.elements: Tuple[Element, ...] = tuple(buckets[EntityKind.ELEMENT])
        self.molecules: Tuple[Molecule, ...] = tuple(buckets[EntityKind.MOLECULE])
        self.reactions: Tuple[Reaction, ...] = tuple(buckets[EntityKind.REACTION])
        self._all: Tuple[Entity, ...] = self.elements + self.molecules + self.reactions

        # the first entry with an id wins in every table
        self._elements_by_id: Dict[str, Element] = _index_first(self.elements)
        self._molecules_by_id: Dict[str, Molecule] = _index_first(self.molecules)
        self._reactions_by_id: Dict[str, Reaction] = _index_first(self.reactions)
        self._by_id: Dict[str, Entity] = _index_first(self._all)

    # -----------------------
    # Query surface
    # -----------------------

    def get_all(self) -> Tuple[Entity, ...]:
        """All entities: elements, then molecules, then reactions, each in authored order."""
        return self._all

    def list_all(self) -> Tuple[Entity, ...]:
        return self.get_all()

    def by_kind(self, kind: EntityKind) -> Tuple[Entity, ...]:
        if kind == EntityKind.ELEMENT:
            return self.elements
        if kind == EntityKind.MOLECULE:
            return self.molecules
        if kind == EntityKind.REACTION:
            return self.reactions
        return ()

    def get_element_by_id(self, entity_id: Any) -> Optional[Element]:
        return self._lookup(self._elements_by_id, entity_id)

    def get_molecule_by_id(self, entity_id: Any) -> Optional[Molecule]:
        return self._lookup(self._molecules_by_id, entity_id)

    def get_reaction_by_id(self, entity_id: Any) -> Optional[Reaction]:
        return self._lookup(self._reactions_by_id, entity_id)

    def get_by_id(self, entity_id: Any) -> Optional[Entity]:
        return self._lookup(self._by_id, entity_id)

    @staticmethod
    def _lookup(table: Dict[str, Any], entity_id: Any):
        if not isinstance(entity_id, str):
            return None
        return table.get(entity_id)

    def __len__(self) -> int:
        return len(self._all)

    def __contains__(self, entity_id: object) -> bool:
        return isinstance(entity_id, str) and entity_id in self._by_id

    def __iter__(self):
        return iter(self._all)

    def __repr__(self) -> str:
        return (
            f"<Catalog elements={len(self.elements)} molecules={len(self.molecules)} "
            f"reactions={len(self.reactions)}>"
        )


# -----------------------
# JSON -> entities
# -----------------------

def _optional_float(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    return float(value)


def _build_element(raw: Dict[str, Any]) -> Element:
    shells = tuple(
        ElectronShell(level=int(s["level"]), count=int(s["count"]))
        for s in raw.get("shells", [])
    )
    return Element(
        id=str(raw["id"]),
        symbol=str(raw["symbol"]),
        name=str(raw["name"]),
        atomic_number=int(raw["atomic_number"]),
        atomic_mass=float(raw["atomic_mass"]),
        category=str(raw.get("category", "unknown")),
        electron_configuration=str(raw.get("electron_configuration", "")),
        shells=shells,
        color=str(raw.get("color", "#808080")),
        description=str(raw.get("description", "")),
        electronegativity=_optional_float(raw.get("electronegativity")),
        atomic_radius=_optional_float(raw.get("atomic_radius")),
        melting_point=_optional_float(raw.get("melting_point")),
        boiling_point=_optional_float(raw.get("boiling_point")),
    )


def _build_molecule(raw: Dict[str, Any]) -> Molecule:
    atoms = tuple(
        AtomPlacement(
            element_id=str(a["element_id"]),
            x=float(a["x"]),
            y=float(a["y"]),
            scale=_optional_float(a.get("scale")),
        )
        for a in raw.get("atoms", [])
    )
    bonds = tuple(
        Bond(start=int(b["from"]), end=int(b["to"]), kind=BondKind(b.get("type", "single")))
        for b in raw.get("bonds", [])
    )
    return Molecule(
        id=str(raw["id"]),
        name=str(raw["name"]),
        formula=str(raw.get("formula", "")),
        geometry=str(raw.get("geometry", "")),
        description=str(raw.get("description", "")),
        atoms=atoms,
        bonds=bonds,
    )


def _build_reaction(raw: Dict[str, Any]) -> Reaction:
    return Reaction(
        id=str(raw["id"]),
        name=str(raw["name"]),
        equation=str(raw.get("equation", "")),
        description=str(raw.get("description", "")),
        reactants=tuple(str(r) for r in raw.get("reactants", [])),
        products=tuple(str(p) for p in raw.get("products", [])),
        energy_change=str(raw.get("energy_change", "")),
        mechanism=Mechanism(raw.get("mechanism", "break-form")),
    )


_BUILDERS = {
    EntityKind.ELEMENT.value: _build_element,
    EntityKind.MOLECULE.value: _build_molecule,
    EntityKind.REACTION.value: _build_reaction,
}


def entities_from_records(records: Iterable[Dict[str, Any]]) -> Tuple[List[Entity], List[str]]:
    """
    Convert raw JSON records into entities.

    Records with an unrecognised `type` are skipped with a warning. Records
    that cannot be converted are reported as problems.
    """
    entities: List[Entity] = []
    problems: List[str] = []
    for i, raw in enumerate(records):
        if not isinstance(raw, dict):
            problems.append(f"record {i} is not an object")
            continue
        builder = _BUILDERS.get(raw.get("type"))
        if builder is None:
            logger.warning(f"Skipping record {raw.get('id', i)!r} with unknown type {raw.get('type')!r}")
            continue
        try:
            entities.append(builder(raw))
        except (KeyError, TypeError, ValueError) as e:
            problems.append(f"record {raw.get('id', i)!r}: {e.__class__.__name__}: {e}")
    return entities, problems


def _records_from_json(raw: Any) -> List[Dict[str, Any]]:
    # Support a sectioned layout or a flat "items" list
    if isinstance(raw, dict) and "items" in raw:
        return list(raw["items"])
    if isinstance(raw, dict):
        records: List[Dict[str, Any]] = []
        for section in ("elements", "molecules", "reactions"):
            records.extend(raw.get(section, []))
        return records
    if isinstance(raw, list):
        return raw
    raise CatalogError([f"unsupported catalog layout: {type(raw).__name__}"])


def build_catalog(entities: Iterable[Entity], validate: bool = True) -> Catalog:
    catalog = Catalog(entities)
    if validate:
        problems = validate_catalog(catalog)
        if problems:
            raise CatalogError(problems)
    return catalog


def load_catalog(path: Union[Path, str, None] = None) -> Catalog:
    """
    Load and validate a catalog JSON file.
    If path is not provided, uses the bundled CATALOG_JSON.

    Raises
    ------
    CatalogError
        When the file holds records that cannot be built or that break a
        cross-reference.
    """
    path = Path(path) if path is not None else CATALOG_JSON
    with open(path, "r", encoding="utf-8") as fh:
        raw = json.load(fh)

    entities, problems = entities_from_records(_records_from_json(raw))
    if problems:
        raise CatalogError(problems)
    catalog = build_catalog(entities)
    logger.info(
        f"Loaded catalog from {path}: {len(catalog.elements)} elements, "
        f"{len(catalog.molecules)} molecules, {len(catalog.reactions)} reactions"
    )
    return catalog


# In-memory cache for the default catalog
_DEFAULT_CATALOG: Optional[Catalog] = None


def get_catalog() -> Catalog:
    """Return the process-wide catalog, loading the bundled data on first use."""
    global _DEFAULT_CATALOG
    if _DEFAULT_CATALOG is None:
        _DEFAULT_CATALOG = load_catalog()
    return _DEFAULT_CATALOG


def get_element_by_id(entity_id: str) -> Optional[Element]:
    return get_catalog().get_element_by_id(entity_id)


def get_molecule_by_id(entity_id: str) -> Optional[Molecule]:
    return get_catalog().get_molecule_by_id(entity_id)


def list_all() -> Tuple[Entity, ...]:
    return get_catalog().list_all()
