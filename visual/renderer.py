import logging
from typing import Optional, Tuple

import matplotlib.pyplot as plt
from matplotlib.patches import Circle as CirclePatch

from atomlab.scene import Circle, Group, Line, Text, Transform, effective_opacity, flatten
from visual.colors import VISUAL_BG, VISUAL_STATUS_TEXT, VISUAL_TEXT, to_rgba

logger = logging.getLogger(__name__)

# Scene units visible around the origin
VIEW_EXTENT = 250.0
# Scene units per typographic point at the default figure size
FONT_SCALE = 0.6


def new_figure(figsize: Tuple[float, float] = (6, 6)):
    """Create a figure and a single axes styled for scene rendering."""
    fig = plt.figure(figsize=figsize, facecolor=VISUAL_BG)
    ax = fig.add_subplot(1, 1, 1)
    return fig, ax


def prepare_axes(ax, extent: float = VIEW_EXTENT, title: Optional[str] = None) -> None:
    ax.clear()
    ax.set_xlim(-extent, extent)
    # scene y grows downwards
    ax.set_ylim(extent, -extent)
    ax.set_aspect('equal')
    ax.set_xticks([])
    ax.set_yticks([])
    ax.set_facecolor(VISUAL_BG)
    for spine in ax.spines.values():
        spine.set_visible(False)
    if title:
        ax.set_title(title, fontsize=12, pad=10, color=VISUAL_TEXT)


def _draw_circle(ax, node: Circle, tf: Transform, alpha: float, zorder: float) -> None:
    cx, cy = tf.apply(node.x, node.y)
    radius = node.r * tf.scale
    if radius <= 0:
        return
    face = to_rgba(node.fill, alpha * node.fill_opacity) if node.fill else 'none'
    edge = to_rgba(node.stroke, alpha * node.stroke_opacity) if node.stroke else 'none'
    ax.add_patch(CirclePatch((cx, cy), radius, facecolor=face, edgecolor=edge,
                             linewidth=node.stroke_width if node.stroke else 0.0, zorder=zorder))


def _draw_line(ax, node: Line, tf: Transform, alpha: float, zorder: float) -> None:
    x1, y1 = tf.apply(node.x1, node.y1)
    x2, y2 = tf.apply(node.x2, node.y2)
    width = node.width * tf.scale
    if width <= 0:
        return
    ax.plot([x1, x2], [y1, y2], color=to_rgba(node.color, alpha), linewidth=width,
            solid_capstyle='round', zorder=zorder, antialiased=True)


_ANCHORS = {"start": "left", "middle": "center", "end": "right"}


def _draw_text(ax, node: Text, tf: Transform, alpha: float, zorder: float) -> None:
    x, y = tf.apply(node.x, node.y)
    size = node.font_size * tf.scale * FONT_SCALE
    if size <= 0 or not node.text:
        return
    ax.text(x, y, node.text, ha=_ANCHORS.get(node.anchor, "center"), va='center',
            fontsize=size, color=to_rgba(node.color, alpha),
            fontweight='bold' if node.bold else 'normal', zorder=zorder)


_DRAWERS = {
    Circle: _draw_circle,
    Line: _draw_line,
    Text: _draw_text,
}


def render_scene(root: Group, ax, extent: float = VIEW_EXTENT, title: Optional[str] = None) -> int:
    """
    Draw a scene tree into a matplotlib axes, in tree order. Invisible shapes
    are skipped. A shape that fails to draw is logged and skipped.

    Returns the number of shapes drawn.
    """
    prepare_axes(ax, extent, title)
    drawn = 0
    for order, (node, tf) in enumerate(flatten(root)):
        alpha = effective_opacity(node, tf)
        if alpha <= 0 or tf.scale <= 0:
            continue
        drawer = _DRAWERS.get(type(node))
        if drawer is None:
            logger.warning(f"No drawer for scene node {node.key!r} ({type(node).__name__})")
            continue
        try:
            drawer(ax, node, tf, alpha, 1 + order * 1e-3)
            drawn += 1
        except Exception as e:
            logger.exception(f"Failed to draw scene node {node.key!r}: {e}")
    return drawn


def render_frame(frame, ax, extent: float = VIEW_EXTENT) -> int:
    """Render a LabSession frame: the scene plus the status line underneath."""
    title = frame.entity.name if frame.entity is not None else None
    drawn = render_scene(frame.root, ax, extent, title)
    ax.text(0.5, 0.02, frame.status_text, transform=ax.transAxes, ha='center', va='bottom',
            fontsize=9, color=VISUAL_STATUS_TEXT)
    return drawn
