from atomlab.catalog import get_catalog
from atomlab.entities import Element, ElectronShell
from atomlab.info import MISSING, describe_entity
from atomlab.locales import EN, TRANSLATIONS
from atomlab.localization import display_name, get_translator, safe_translate


def test_translator_fallbacks():
    assert get_translator("FR")("solid") == "Solide"
    assert get_translator("fr")("solid") == "Solide"
    assert get_translator("XX")("solid") == "Solid"
    # partial tables fall back to English, then to the key
    assert "atomic_number" not in TRANSLATIONS["JA"]
    assert get_translator("JA")("atomic_number") == EN["atomic_number"]
    assert get_translator("JA")("no_such_key") == "no_such_key"


def test_safe_translate():
    assert safe_translate(None, "gas") == "gas"
    assert safe_translate(lambda k: "", "gas") == "gas"
    assert safe_translate(lambda k: None, "gas", "Gas") == "Gas"
    assert safe_translate(lambda k: k.upper(), "gas") == "GAS"


def test_display_names():
    water = get_catalog().get_molecule_by_id("H2O")
    assert display_name(water, get_translator("FR")) == "Eau"
    # English has no entry for the id, so the authored name wins
    assert display_name(water, get_translator("EN")) == "Water"
    assert display_name(water, lambda k: k) == "Water"


def test_element_sheet():
    sheet = describe_entity(get_catalog().get_element_by_id("H"), get_translator("EN"))
    rows = sheet.as_dict()
    assert sheet.kind == "Element"
    assert sheet.headline == "H"
    assert rows["Atomic Number"] == "1"
    assert rows["Atomic Radius"] == "53 pm"


def test_missing_values_shown_as_dash():
    el = Element(id="Q", symbol="Q", name="Q", atomic_number=1, atomic_mass=1.0, category="",
                 electron_configuration="", shells=(ElectronShell(1, 1),), color="#fff", description="")
    sheet = describe_entity(el)
    values = sheet.as_dict()
    assert values["electronegativity"] == MISSING
    assert values["radius"] == MISSING
    assert values["category"] == MISSING


def test_molecule_and_reaction_sheets():
    co2 = describe_entity(get_catalog().get_molecule_by_id("CO2"))
    assert co2.as_dict()["atom_count"] == "3"
    assert co2.as_dict()["bond_types"] == "double, double"
    rxn = describe_entity(get_catalog().get_reaction_by_id("combustion"))
    assert rxn.headline == "CH₄ + 2O₂ → CO₂ + 2H₂O"
    assert rxn.as_dict()["thermodynamics"] == "Highly Exothermic"
    assert describe_entity(object()) is None
