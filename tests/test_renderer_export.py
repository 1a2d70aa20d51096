import matplotlib
matplotlib.use("Agg")

import pytest

from atomlab.lab_session import LabSession
from atomlab.scene import Circle, Group
from visual.colors import hex_to_rgb, to_rgba
from visual.export_tools import export_animation_gif, imageio, save_frame_png
from visual.renderer import new_figure, render_frame, render_scene


def test_color_helpers():
    assert hex_to_rgb("#ffffff") == (1.0, 1.0, 1.0)
    assert hex_to_rgb("f00") == (1.0, 0.0, 0.0)
    assert to_rgba("not a colour", 0.5) == (*hex_to_rgb("#888888"), 0.5)
    with pytest.raises(ValueError):
        hex_to_rgb("#12")


def test_to_rgba_clamps_opacity():
    assert to_rgba("#ff0000", 1.7) == (1.0, 0.0, 0.0, 1.0)
    assert to_rgba("#ff0000", -0.2)[3] == 0.0
    assert to_rgba(None, 0.3) == (*hex_to_rgb("#888888"), 0.3)


def test_render_frame_draws_shapes():
    session = LabSession()
    session.select("H2O")
    fig, ax = new_figure()
    drawn = render_frame(session.evaluate(0.5), ax)
    assert drawn > 0
    assert len(ax.patches) > 0
    matplotlib.pyplot.close(fig)


def test_bad_node_is_skipped():
    root = Group(key="root").add(
        Circle(key="bad", r="wide"),
        Circle(key="good", r=5.0, fill="#ffffff"),
        Circle(key="hidden", r=5.0, fill="#ffffff", opacity=0.0),
    )
    fig, ax = new_figure()
    assert render_scene(root, ax) == 1
    matplotlib.pyplot.close(fig)


def test_save_frame_png(tmp_path):
    session = LabSession(animated=False)
    session.select("ionic_bonding")
    out = tmp_path / "frames" / "ionic.png"
    save_frame_png(session, str(out))
    assert out.exists()
    assert out.stat().st_size > 0


def test_export_gif(tmp_path):
    if imageio is None:
        pytest.skip("imageio not installed")
    session = LabSession()
    session.select("combustion")
    out = tmp_path / "combustion.gif"
    export_animation_gif(session, str(out), n_frames=4, fps=4)
    assert out.exists()
    with pytest.raises(ValueError):
        export_animation_gif(session, str(out), n_frames=0)
