"""Render a paused PNG of every catalog entry into outputs/snapshots.

Usage: python scripts/snapshot_all.py [level]
"""
import os
import sys

# Ensure project root is on sys.path when running from scripts/
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import matplotlib
matplotlib.use("Agg")

from atomlab.lab_session import LabSession
from visual.export_tools import ensure_dir, save_frame_png

OUT_DIR = os.path.join("outputs", "snapshots")
ensure_dir(OUT_DIR)

session = LabSession(animated=False)
if len(sys.argv) > 1:
    session.set_level(float(sys.argv[1]))

for entity in session.catalog.get_all():
    session.select(entity.id)
    out = save_frame_png(session, os.path.join(OUT_DIR, f"{entity.kind.value.lower()}_{entity.id}.png"))
    print("Wrote", out)
