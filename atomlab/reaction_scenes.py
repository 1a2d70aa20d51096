"""
Bespoke reaction choreographies.

Each draws its own hard-coded atoms and bonds around a local origin; the
catalog is only used to resolve the elements. If any element is missing the
choreography renders an empty scene.
"""

from __future__ import annotations
from typing import Dict, Optional, Sequence
import logging

from . import constants as C
from .atom_scene import build_atom_node, build_bond_lines
from .choreography import Choreography, ChoreographyParams, register_choreography
from .entities import Element
from .keyframes import KeyframeTrack, LoopPosition, cycle_fraction, ease_in_out, interpolate_points
from .scene import Circle, Group, Text, empty_scene

logger = logging.getLogger(__name__)


def resolve_elements(params: ChoreographyParams, ids: Sequence[str]) -> Optional[Dict[str, Element]]:
    """Look up every element a choreography needs, or None if one is missing."""
    catalog = params.catalog
    if catalog is None:
        logger.warning(f"No catalog available for choreography '{params.reaction.id}'")
        return None
    found: Dict[str, Element] = {}
    for element_id in ids:
        el = catalog.get_element_by_id(element_id)
        if el is None:
            logger.warning(f"Choreography '{params.reaction.id}' needs unknown element '{element_id}'; rendering nothing")
            return None
        found[element_id] = el
    return found


class _AtomFactory:
    """Builds atoms that share the choreography's temperature, time and pause state."""

    def __init__(self, prefix: str, t: float, params: ChoreographyParams):
        self.prefix = prefix
        self.t = t
        self.temperature = params.temperature
        self.animated = params.animated

    def __call__(self, name: str, element: Element, x: float, y: float, scale: float = 1.0) -> Group:
        return build_atom_node(element, x=x, y=y, scale=scale, temperature=self.temperature,
                               t=self.t, animated=self.animated, instance_id=f"{self.prefix}/{name}")


# -----------------------
# Methane combustion
# -----------------------

@register_choreography("combustion")
class CombustionChoreography(Choreography):
    """
    CH4 + 2 O2 drift together and shrink, a fireball flashes, then CO2 and
    two H2O grow in and drift outwards.
    """

    cycle_duration = C.COMBUSTION_CYCLE
    transition_start = 0.4
    products_start = 0.55

    reactant_times = [0.0, 0.4, 0.5, 0.6, 1.0]
    reactant_opacity = KeyframeTrack([1, 1, 0, 0, 0], reactant_times)
    reactant_scale = KeyframeTrack([1, 0.8, 0.5, 0, 0], reactant_times)
    reactant_x = KeyframeTrack([0, 50, 0, 0, 0], reactant_times)

    explosion_times = [0.0, 0.45, 0.5, 0.8, 1.0]
    explosion_opacity = KeyframeTrack([0, 0, 1, 0, 0], explosion_times)
    explosion_scale = KeyframeTrack([0, 0, 20, 25, 0], explosion_times)

    product_times = [0.0, 0.5, 0.55, 0.8, 1.0]
    product_opacity = KeyframeTrack([0, 0, 0, 1, 1], product_times)
    product_scale = KeyframeTrack([0, 0, 0.2, 1, 1], product_times)
    product_x = KeyframeTrack([0, 0, 0, 50, 50], product_times)

    label_opacity = KeyframeTrack([0.5, 1.0, 0.5])

    def build_scene(self, t: float, pos: LoopPosition, params: ChoreographyParams) -> Group:
        els = resolve_elements(params, ("C", "H", "O"))
        if els is None:
            return empty_scene(params.reaction.id)
        c, h, o = els["C"], els["H"], els["O"]
        atom = _AtomFactory(params.reaction.id, t, params)
        f = pos.fraction

        if params.animated:
            reactants = Group(key="combustion/reactants", role="reactants",
                              x=self.reactant_x.at(f), scale=self.reactant_scale.at(f),
                              opacity=self.reactant_opacity.at(f))
            explosion = Group(key="combustion/explosion", role="explosion",
                              scale=self.explosion_scale.at(f), opacity=self.explosion_opacity.at(f))
            products = Group(key="combustion/products", role="products",
                             x=self.product_x.at(f), scale=self.product_scale.at(f),
                             opacity=self.product_opacity.at(f))
        else:
            # paused: show the reactants only
            reactants = Group(key="combustion/reactants", role="reactants")
            explosion = Group(key="combustion/explosion", role="explosion", scale=0.0, opacity=0.0)
            products = Group(key="combustion/products", role="products", scale=0.0, opacity=0.0)

        # CH4 on the left, fourth hydrogen drawn flat
        methane = Group(key="combustion/ch4", role="molecule", x=-100.0)
        for i, (hx, hy) in enumerate([(0, -40), (-35, 30), (35, 30), (0, 40)]):
            methane.add(*build_bond_lines(f"combustion/ch4/bond{i}", 0, 0, hx, hy,
                                          color=C.CHOREOGRAPHY_BOND_COLOR))
        methane.add(atom("ch4/C", c, 0, 0, 0.8))
        for i, (hx, hy) in enumerate([(0, -40), (-35, 30), (35, 30), (0, 40)]):
            methane.add(atom(f"ch4/H{i}", h, hx, hy, 0.6))
        reactants.add(methane)

        for name, oy in (("o2a", -120.0), ("o2b", 120.0)):
            oxygen = Group(key=f"combustion/{name}", role="molecule", x=-100.0, y=oy)
            bond = build_bond_lines(f"combustion/{name}/bond", -20, 0, 20, 0,
                                    color=C.CHOREOGRAPHY_BOND_COLOR)[0]
            bond.width = 5.0
            oxygen.add(bond, atom(f"{name}/O0", o, -20, 0, 0.7), atom(f"{name}/O1", o, 20, 0, 0.7))
            reactants.add(oxygen)

        explosion.add(Circle(key="combustion/explosion/disc", role="fireball", r=5.0, fill=C.FIRE_COLOR))

        co2 = Group(key="combustion/co2", role="molecule", x=100.0)
        bond = build_bond_lines("combustion/co2/bond", -40, 0, 40, 0, color=C.CHOREOGRAPHY_BOND_COLOR)[0]
        bond.width = 5.0
        co2.add(bond, atom("co2/C", c, 0, 0, 0.8), atom("co2/O0", o, -40, 0, 0.7), atom("co2/O1", o, 40, 0, 0.7))
        products.add(co2)

        for name, wy in (("h2oa", -100.0), ("h2ob", 100.0)):
            water = Group(key=f"combustion/{name}", role="molecule", x=100.0, y=wy)
            for i, hx in enumerate((-30, 30)):
                water.add(*build_bond_lines(f"combustion/{name}/bond{i}", 0, -10, hx, 20,
                                            color=C.CHOREOGRAPHY_BOND_COLOR))
            water.add(atom(f"{name}/O", o, 0, -10, 0.7),
                      atom(f"{name}/H0", h, -30, 20, 0.6),
                      atom(f"{name}/H1", h, 30, 20, 0.6))
            products.add(water)

        if params.animated:
            text = f"{params.label('reaction_progress')}: {params.label('heat_release')}"
            opacity = self.label_opacity.at(cycle_fraction(t, C.LABEL_PULSE_PERIOD))
        else:
            text = params.label("reaction_paused")
            opacity = 1.0
        label = Text(key="combustion/label", role="label", y=180.0, text=text, font_size=14.0,
                     color=C.COMBUSTION_LABEL_COLOR, opacity=opacity)

        root = Group(key=params.reaction.id, role="scene")
        return root.add(reactants, explosion, products, label)


# -----------------------
# Ionic bonding
# -----------------------

@register_choreography("ionic_bonding")
class IonicBondingChoreography(Choreography):
    """
    Sodium hands its outer electron to chlorine: one marker per cycle travels
    an arc from the donor's outer shell to the acceptor's, fading as it is
    absorbed. Through the repeat delay it rests at the arc end, fully
    transparent, until the next cycle's marker replaces it.
    """

    cycle_duration = C.IONIC_ARC_DURATION
    repeat_delay = C.IONIC_REPEAT_DELAY
    transition_start = 0.25
    products_start = C.IONIC_ARC_DURATION / (C.IONIC_ARC_DURATION + C.IONIC_REPEAT_DELAY)

    arc = ((45.0, 0.0), (100.0, -20.0), (155.0, 0.0))
    marker_opacity = KeyframeTrack([1.0, 0.9, 0.0])
    label_opacity = KeyframeTrack([0.0, 1.0, 0.0])

    def build_scene(self, t: float, pos: LoopPosition, params: ChoreographyParams) -> Group:
        els = resolve_elements(params, ("Na", "Cl"))
        if els is None:
            return empty_scene(params.reaction.id)
        na, cl = els["Na"], els["Cl"]
        atom = _AtomFactory(params.reaction.id, t, params)

        container = Group(key="ionic_bonding/container", role="container", x=-100.0)
        container.add(atom("Na", na, 0, 0))
        acceptor = Group(key="ionic_bonding/acceptor", role="acceptor", x=200.0)
        acceptor.add(atom("Cl", cl, 0, 0))
        container.add(acceptor)

        if params.animated:
            # fraction is 1 during the delay
            u = ease_in_out(pos.fraction)
            mx, my = interpolate_points(self.arc, u)
            container.add(Circle(
                key=f"ionic_bonding/electron{pos.cycle}",
                role="marker",
                x=mx,
                y=my,
                r=5.0,
                fill=C.ELECTRON_COLOR,
                opacity=self.marker_opacity.at(u),
            ))

        if params.animated:
            opacity = self.label_opacity.at(cycle_fraction(t, C.TRANSFER_LABEL_PERIOD))
        else:
            opacity = 0.0
        container.add(Text(
            key="ionic_bonding/label", role="label", x=100.0, y=150.0,
            text=f"{params.label('electron_transfer')}: {na.symbol} → {cl.symbol}",
            font_size=12.0, color=C.ELECTRON_COLOR, opacity=opacity,
        ))

        root = Group(key=params.reaction.id, role="scene")
        return root.add(container)
