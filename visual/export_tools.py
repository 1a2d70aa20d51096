import os
import time
import shutil
import tempfile
import logging
from typing import Optional

import matplotlib.pyplot as plt

logger = logging.getLogger(__name__)

try:
    import imageio
except ImportError:
    imageio = None

from atomlab.lab_session import LabSession
from visual.renderer import new_figure, render_frame

# ────────────────────────────
# Utility: ensure_dir
# ────────────────────────────

def ensure_dir(directory: str):
    """Create directory if it doesn't exist"""
    if directory and not os.path.exists(directory):
        os.makedirs(directory, exist_ok=True)


def now_str() -> str:
    """Return a timestamp string used for filenames."""
    return time.strftime("%Y%m%d_%H%M%S", time.localtime())

# ────────────────────────────
# Frame export
# ────────────────────────────

def save_frame_png(session: LabSession, filename: Optional[str] = None, now: float = 0.0, dpi: int = 150):
    """
    Save the session's frame at presentation time `now` as a PNG.
    """
    if filename is None:
        filename = os.path.join("outputs", f"frame_{now_str()}.png")
    ensure_dir(os.path.dirname(filename))
    fig, ax = new_figure()
    try:
        render_frame(session.evaluate(now), ax)
        fig.savefig(filename, dpi=dpi, facecolor=fig.get_facecolor())
    finally:
        plt.close(fig)
    logger.info(f"Saved frame to {filename}")
    return filename


def _render_frames_to_images(session: LabSession, n_frames: int, fps: int, folder: str, start: float = 0.0):
    """
    Render n_frames at 1/fps spacing and save PNG frames into folder.
    """
    os.makedirs(folder, exist_ok=True)
    fig, ax = new_figure()
    try:
        for i in range(n_frames):
            render_frame(session.evaluate(start + i / float(fps)), ax)
            out_path = os.path.join(folder, f"frame_{i:04d}.png")
            fig.savefig(out_path, dpi=80, facecolor=fig.get_facecolor())
    finally:
        plt.close(fig)
    return n_frames


# -----------------------------
# GIF Export
# -----------------------------

def export_animation_gif(session: LabSession, filename: str, n_frames: int = 48, fps: int = 12, start: float = 0.0):
    """
    Export the selected entity's animation to an animated GIF.
    """
    if imageio is None:
        raise RuntimeError("imageio not installed, cannot export GIF")
    if n_frames <= 0 or fps <= 0:
        raise ValueError("n_frames and fps must be positive")

    ensure_dir(os.path.dirname(filename))
    tmpdir = tempfile.mkdtemp(prefix='atomlab_frames_')
    try:
        n = _render_frames_to_images(session, n_frames, fps, tmpdir, start)
        images = [imageio.imread(os.path.join(tmpdir, f"frame_{i:04d}.png")) for i in range(n)]
        imageio.mimsave(filename, images, fps=fps)
        logger.info(f"Saved GIF to {filename} ({n} frames)")
    finally:
        shutil.rmtree(tmpdir, ignore_errors=True)
    return filename
