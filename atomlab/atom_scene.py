from __future__ import annotations
from typing import Optional
import logging

from . import constants as C
from .animation import derive_atom_motion, electron_pulse
from .entities import BondKind, Element, Molecule
from .scene import Circle, Group, Line, Text

logger = logging.getLogger(__name__)


def build_atom_node(element: Element,
                    x: float = 0.0,
                    y: float = 0.0,
                    scale: float = 1.0,
                    temperature: float = C.DEFAULT_TEMPERATURE,
                    t: float = 0.0,
                    animated: bool = True,
                    instance_id: Optional[str] = None,
                    show_symbol: bool = True) -> Group:
    """
    Build the scene node of one atom: nucleus glow and core, symbol, one
    orbit per electron shell with its electrons.

    Args:
        element (Element): element to draw.
        x, y (float): authored position of the nucleus.
        scale (float): presentation scale, applied to radii and font size.
        temperature (float): Kelvin; drives vibration and orbit speed.
        t (float): presentation time.
        animated (bool): False yields the static snapshot.
        instance_id (str, optional): stable id of this instance. Defaults to
            the element id plus position.

    Returns:
        Group: the atom, translated to its (jittered) position.
    """
    instance_id = instance_id or f"{element.id}@{x:g},{y:g}"
    motion = derive_atom_motion(element, temperature, scale, instance_id, t, animated)

    atom = Group(key=instance_id, role="atom", x=x + motion.dx, y=y + motion.dy)
    atom.add(
        Circle(key=f"{instance_id}/glow", role="nucleus-glow",
               r=C.NUCLEUS_GLOW_RADIUS * scale, fill=element.color, fill_opacity=0.3),
        Circle(key=f"{instance_id}/nucleus", role="nucleus",
               r=C.NUCLEUS_CORE_RADIUS * scale, fill=element.color),
    )
    if show_symbol:
        atom.add(Text(key=f"{instance_id}/symbol", role="symbol", y=2.0, text=element.symbol,
                      font_size=6.0 * scale, color="#000000", bold=True))

    for orbit in motion.orbits:
        orbit_key = f"{instance_id}/orbit{orbit.index}"
        group = Group(key=orbit_key, role="orbit-group")
        group.add(Circle(key=f"{orbit_key}/path", role="orbit", r=orbit.radius,
                         stroke=element.color, stroke_width=1.0,
                         stroke_opacity=C.ORBIT_STROKE_OPACITY))
        for j, angle in enumerate(orbit.angles):
            radius, opacity = electron_pulse(j, t, animated)
            carrier = Group(key=f"{orbit_key}/e{j}", role="electron-carrier", rotation=angle)
            carrier.add(Circle(key=f"{orbit_key}/e{j}/dot", role="electron", x=orbit.radius,
                               r=radius, fill=C.ELECTRON_COLOR, opacity=opacity))
            group.add(carrier)
        atom.add(group)
    return atom


def build_bond_lines(key: str, x1: float, y1: float, x2: float, y2: float,
                     kind: BondKind = BondKind.SINGLE, color: str = C.BOND_COLOR):
    """One line per bond; double bonds get a thin background-coloured spacer on top."""
    width = C.DOUBLE_BOND_WIDTH if kind == BondKind.DOUBLE else C.SINGLE_BOND_WIDTH
    lines = [Line(key=key, role="bond", x1=x1, y1=y1, x2=x2, y2=y2, color=color, width=width)]
    if kind == BondKind.DOUBLE:
        lines.append(Line(key=f"{key}/spacer", role="bond-spacer", x1=x1, y1=y1, x2=x2, y2=y2,
                          color=C.DOUBLE_BOND_SPACER_COLOR, width=C.DOUBLE_BOND_SPACER_WIDTH))
    return lines


def build_molecule_node(molecule: Molecule,
                        catalog,
                        temperature: float = C.DEFAULT_TEMPERATURE,
                        t: float = 0.0,
                        animated: bool = True,
                        instance_id: Optional[str] = None) -> Group:
    """
    Bonds first, then atoms. Bonds with bad indices and atoms that reference an
    unknown element are left out.
    """
    instance_id = instance_id or molecule.id
    group = Group(key=instance_id, role="molecule")

    for i, bond in enumerate(molecule.bonds):
        if not molecule.bond_in_range(bond):
            logger.warning(f"Skipping bond {i} of '{molecule.id}': indices {bond.start}->{bond.end} out of range")
            continue
        a, b = molecule.atoms[bond.start], molecule.atoms[bond.end]
        group.add(*build_bond_lines(f"{instance_id}/bond{i}", a.x, a.y, b.x, b.y, bond.kind))

    for i, placement in enumerate(molecule.atoms):
        element = catalog.get_element_by_id(placement.element_id)
        if element is None:
            logger.warning(f"Skipping atom {i} of '{molecule.id}': unknown element '{placement.element_id}'")
            continue
        group.add(build_atom_node(
            element,
            x=placement.x,
            y=placement.y,
            scale=placement.scale if placement.scale is not None else 1.0,
            temperature=temperature,
            t=t,
            animated=animated,
            instance_id=f"{instance_id}/atom{i}",
        ))
    return group
