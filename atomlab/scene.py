"""
Renderer-agnostic scene description.

A scene is a tree of groups and shape primitives. Groups carry a translation,
uniform scale, rotation and opacity that apply to their children (SVG-style
`translate(x, y) rotate(r) scale(s)`). Every node has a stable key and a role
tag so renderers and tests can pick out nuclei, orbits, electrons, bonds,
markers and labels.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple, Union
import math


@dataclass
class Node:
    key: str
    role: str = ""
    opacity: float = 1.0


@dataclass
class Circle(Node):
    x: float = 0.0
    y: float = 0.0
    r: float = 1.0
    fill: Optional[str] = None
    fill_opacity: float = 1.0
    stroke: Optional[str] = None
    stroke_width: float = 0.0
    stroke_opacity: float = 1.0


@dataclass
class Line(Node):
    x1: float = 0.0
    y1: float = 0.0
    x2: float = 0.0
    y2: float = 0.0
    color: str = "#555555"
    width: float = 1.0


@dataclass
class Text(Node):
    x: float = 0.0
    y: float = 0.0
    text: str = ""
    font_size: float = 12.0
    color: str = "#ffffff"
    anchor: str = "middle"
    bold: bool = False


@dataclass
class Group(Node):
    x: float = 0.0
    y: float = 0.0
    scale: float = 1.0
    rotation: float = 0.0  # degrees
    children: List["Shape"] = field(default_factory=list)

    def add(self, *nodes: "Shape") -> "Group":
        self.children.extend(n for n in nodes if n is not None)
        return self


Shape = Union[Group, Circle, Line, Text]


def empty_scene(key: str = "empty") -> Group:
    return Group(key=key, role="scene")


def iter_nodes(root: Shape) -> Iterator[Shape]:
    """Depth-first walk, parents before children."""
    yield root
    if isinstance(root, Group):
        for child in root.children:
            yield from iter_nodes(child)


def find_nodes(root: Shape, role: str) -> List[Shape]:
    return [n for n in iter_nodes(root) if n.role == role]


def find_node(root: Shape, key: str) -> Optional[Shape]:
    for n in iter_nodes(root):
        if n.key == key:
            return n
    return None


# -----------------------
# World-space flattening
# -----------------------

@dataclass(frozen=True)
class Transform:
    x: float = 0.0
    y: float = 0.0
    scale: float = 1.0
    rotation: float = 0.0  # degrees
    opacity: float = 1.0

    def apply(self, px: float, py: float) -> Tuple[float, float]:
        rad = math.radians(self.rotation)
        c, s = math.cos(rad), math.sin(rad)
        sx, sy = px * self.scale, py * self.scale
        return self.x + c * sx - s * sy, self.y + s * sx + c * sy

    def compose(self, group: Group) -> "Transform":
        gx, gy = self.apply(group.x, group.y)
        return Transform(
            x=gx,
            y=gy,
            scale=self.scale * group.scale,
            rotation=self.rotation + group.rotation,
            opacity=self.opacity * group.opacity,
        )


def flatten(root: Shape, parent: Optional[Transform] = None) -> Iterator[Tuple[Shape, Transform]]:
    """
    Yield every leaf shape with the accumulated transform of its ancestors.
    The node's own opacity is not folded in.
    """
    parent = parent or Transform()
    if isinstance(root, Group):
        inner = parent.compose(root)
        for child in root.children:
            yield from flatten(child, inner)
    else:
        yield root, parent


def effective_opacity(node: Shape, transform: Transform) -> float:
    return node.opacity * transform.opacity
