from matplotlib.figure import Figure

from lowpoly.geom import Pt
from lowpoly.plot import draw_lowpoly, save_preview
from lowpoly.render import Triangle

PNG_MAGIC = b"\x89PNG\r\n\x1a\n"


def test_draw_sets_svg_like_axes():
    fig = Figure()
    ax = fig.add_subplot(111)
    coll = draw_lowpoly(ax, [Triangle(Pt(0, 0), Pt(10, 0), Pt(0, 10))], ["#2980b9"], 100, 50)
    assert coll is not None
    assert ax.get_xlim() == (0.0, 100.0)
    assert ax.get_ylim() == (50.0, 0.0)


def test_empty_scene(tmp_path):
    path = tmp_path / "empty.png"
    save_preview(str(path), [], [], 40, 30)
    assert path.read_bytes()[:8] == PNG_MAGIC
