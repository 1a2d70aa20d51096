from typing import Tuple, Optional

from atomlab import constants as C

# -----------------------------
# Utility functions
# -----------------------------

def hex_to_rgb(hex_color: str) -> Tuple[float, float, float]:
    """
    Convert a hex color string (#RRGGBB, RRGGBB or #RGB) to RGB tuple scaled 0-1.
    """
    hex_color = hex_color.strip().lstrip('#')
    if len(hex_color) == 3:
        hex_color = "".join(ch * 2 for ch in hex_color)
    if len(hex_color) != 6:
        raise ValueError(f"Invalid hex color: {hex_color}")
    r = int(hex_color[0:2], 16) / 255.0
    g = int(hex_color[2:4], 16) / 255.0
    b = int(hex_color[4:6], 16) / 255.0
    return (r, g, b)


def to_rgba(color: Optional[str], alpha: float = 1.0,
            fallback: str = '#888888') -> Tuple[float, float, float, float]:
    """
    Hex color plus opacity as a matplotlib RGBA tuple. Unparseable colors fall
    back to grey.
    """
    try:
        r, g, b = hex_to_rgb(color or fallback)
    except ValueError:
        r, g, b = hex_to_rgb(fallback)
    return (r, g, b, max(0.0, min(1.0, float(alpha))))


# Visual constants
VISUAL_BG = C.SCENE_BG
VISUAL_TEXT = "#ffffff"
VISUAL_STATUS_TEXT = "#a1a1aa"
