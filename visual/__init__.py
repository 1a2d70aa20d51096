from .renderer import render_scene, render_frame, new_figure
from .export_tools import ensure_dir, save_frame_png, export_animation_gif
from .colors import VISUAL_BG, hex_to_rgb, to_rgba

__all__ = [
    "render_scene", "render_frame", "new_figure",
    "ensure_dir", "save_frame_png", "export_animation_gif",
    "VISUAL_BG", "hex_to_rgb", "to_rgba"
]
