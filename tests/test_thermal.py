import math

from atomlab.catalog import get_catalog
from atomlab.entities import Element, ElectronShell
from atomlab.localization import get_translator
from atomlab.thermal import (
    PhysicalState,
    classify,
    level_to_kelvin,
    sanitize_level,
    state_for_temperature,
    state_label,
)


def test_level_maps_linearly_to_kelvin():
    assert level_to_kelvin(0) == 0
    assert level_to_kelvin(25) == 500
    assert level_to_kelvin(100) == 2000


def test_hydrogen_uses_its_own_phase_points():
    h = get_catalog().get_element_by_id("H")
    assert classify(0.5, h).state == PhysicalState.SOLID      # 10 K
    assert state_for_temperature(14.0, h) == PhysicalState.LIQUID
    assert classify(0.85, h).state == PhysicalState.LIQUID    # 17 K
    assert classify(1, h).state == PhysicalState.GAS          # 20 K, boiling point is inclusive
    assert classify(25, h).state == PhysicalState.GAS


def test_gold_stays_solid_until_melting_point():
    au = get_catalog().get_element_by_id("Au")
    assert classify(25, au).state == PhysicalState.SOLID
    assert classify(70, au).state == PhysicalState.LIQUID     # 1400 K
    assert classify(100, au).state == PhysicalState.LIQUID    # 2000 K < 3129 K


def test_molecules_and_reactions_use_water_thresholds():
    water = get_catalog().get_molecule_by_id("H2O")
    assert state_for_temperature(272.9, water) == PhysicalState.SOLID
    assert state_for_temperature(273, water) == PhysicalState.LIQUID
    assert state_for_temperature(372, water) == PhysicalState.LIQUID
    assert state_for_temperature(373, water) == PhysicalState.GAS
    rxn = get_catalog().get_reaction_by_id("combustion")
    assert classify(25, rxn).state == PhysicalState.GAS
    assert classify(15, None).state == PhysicalState.LIQUID


def test_element_with_only_one_phase_point_falls_back():
    el = Element(id="Q", symbol="Q", name="Q", atomic_number=1, atomic_mass=1.0, category="",
                 electron_configuration="", shells=(ElectronShell(1, 1),), color="#fff",
                 description="", melting_point=10.0)
    assert state_for_temperature(100, el) == PhysicalState.SOLID
    assert state_for_temperature(300, el) == PhysicalState.LIQUID


def test_non_finite_levels_read_as_zero():
    assert sanitize_level(math.nan) == 0
    assert sanitize_level(math.inf) == 0
    assert sanitize_level("hot") == 0
    assert sanitize_level(None) == 0
    assert sanitize_level(True) == 0
    reading = classify(math.nan)
    assert reading.temperature_k == 0
    assert reading.state == PhysicalState.SOLID


def test_state_label_is_translated():
    reading = classify(25)
    assert state_label(reading) == "gas"
    assert state_label(reading, get_translator("EN")) == "Gas"
    assert state_label(reading, get_translator("FR")) == "Gaz"
