import json

import pytest

from atomlab.catalog import Catalog, build_catalog, get_catalog, load_catalog
from atomlab.entities import Element, ElectronShell, EntityKind, Molecule, AtomPlacement, Bond
from atomlab.validation import CatalogError, validate_catalog


def _element(eid="X", number=1, shells=((1, 1),)):
    return Element(
        id=eid, symbol=eid, name=eid, atomic_number=number, atomic_mass=1.0,
        category="test", electron_configuration="", color="#ffffff", description="",
        shells=tuple(ElectronShell(level=l, count=c) for l, c in shells),
    )


def _write(tmp_path, payload):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_bundled_catalog_is_consistent():
    catalog = get_catalog()
    assert validate_catalog(catalog) == []
    assert len(catalog.elements) == 8
    assert len(catalog.molecules) == 8
    assert len(catalog.reactions) == 4
    for mol in catalog.molecules:
        for placement in mol.atoms:
            assert catalog.get_element_by_id(placement.element_id) is not None
        for bond in mol.bonds:
            assert mol.bond_in_range(bond)


def test_listing_order_is_elements_molecules_reactions():
    ids = [e.id for e in get_catalog().get_all()]
    assert ids[0] == "H"
    assert ids.index("Cl") < ids.index("H2O") < ids.index("ionic_bonding")
    kinds = [e.kind for e in get_catalog()]
    assert kinds == sorted(kinds, key=[EntityKind.ELEMENT, EntityKind.MOLECULE, EntityKind.REACTION].index)


def test_lookups_report_absence_with_none():
    catalog = get_catalog()
    assert catalog.get_element_by_id("Xx") is None
    assert catalog.get_element_by_id(None) is None
    assert catalog.get_element_by_id(42) is None
    # ids are kind specific
    assert catalog.get_molecule_by_id("H") is None
    assert catalog.get_reaction_by_id("combustion").kind == EntityKind.REACTION
    assert "NaCl" in catalog
    assert "nope" not in catalog


def test_element_fields_loaded():
    na = get_catalog().get_element_by_id("Na")
    assert na.atomic_number == 11
    assert [s.count for s in na.shells] == [2, 8, 1]
    assert na.melting_point == 370
    assert na.has_phase_points
    assert na.shell_electron_total == 11


def test_unknown_element_reference_rejected(tmp_path):
    path = _write(tmp_path, {"items": [
        {"id": "O", "type": "Element", "symbol": "O", "name": "Oxygen", "atomic_number": 8,
         "atomic_mass": 15.999, "shells": [{"level": 1, "count": 2}]},
        {"id": "OZ", "type": "Molecule", "name": "Broken",
         "atoms": [{"element_id": "O", "x": 0, "y": 0}, {"element_id": "Zz", "x": 10, "y": 0}],
         "bonds": [{"from": 0, "to": 1}]},
    ]})
    with pytest.raises(CatalogError) as err:
        load_catalog(path)
    assert any("Zz" in p for p in err.value.problems)


def test_out_of_range_bond_rejected(tmp_path):
    path = _write(tmp_path, {"items": [
        {"id": "O", "type": "Element", "symbol": "O", "name": "Oxygen", "atomic_number": 8,
         "atomic_mass": 15.999, "shells": []},
        {"id": "O2", "type": "Molecule", "name": "Oxygen",
         "atoms": [{"element_id": "O", "x": 0, "y": 0}, {"element_id": "O", "x": 10, "y": 0}],
         "bonds": [{"from": 0, "to": 2, "type": "double"}]},
    ]})
    with pytest.raises(CatalogError):
        load_catalog(path)


def test_malformed_record_rejected(tmp_path):
    path = _write(tmp_path, [{"id": "H", "type": "Element", "symbol": "H", "name": "Hydrogen"}])
    with pytest.raises(CatalogError) as err:
        load_catalog(path)
    assert "'H'" in err.value.problems[0]


def test_unknown_record_type_is_skipped(tmp_path):
    path = _write(tmp_path, {"elements": [
        {"id": "H", "type": "Element", "symbol": "H", "name": "Hydrogen", "atomic_number": 1,
         "atomic_mass": 1.008, "shells": [{"level": 1, "count": 1}]},
        {"id": "He3", "type": "Isotope"},
    ]})
    catalog = load_catalog(path)
    assert [e.id for e in catalog] == ["H"]


def test_duplicate_ids_and_bad_shells():
    with pytest.raises(CatalogError):
        build_catalog([_element("A"), _element("A")])
    with pytest.raises(CatalogError):
        build_catalog([_element("B", shells=((2, 1), (1, 2)))])
    with pytest.raises(CatalogError):
        build_catalog([_element("C", number=0)])


def test_duplicate_ids_resolve_to_the_first_entry():
    first, second = _element("X"), _element("X", number=2)
    catalog = Catalog([first, second])
    assert catalog.get_element_by_id("X") is first
    assert catalog.get_by_id("X") is first
    assert catalog.get_element_by_id("X") is catalog.get_by_id("X")


def test_catalog_skips_unknown_variants():
    catalog = Catalog([_element("A"), object(), Molecule(id="M", name="M", formula="", geometry="",
                                                         description="", atoms=(AtomPlacement("A", 0, 0),),
                                                         bonds=(Bond(0, 0),))])
    assert len(catalog) == 2
    # self-referencing bond is caught by validation, not by the container
    assert validate_catalog(catalog)
