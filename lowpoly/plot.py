# lowpoly/plot.py
"""Растрове прев'ю того самого зображення через matplotlib (без pyplot)."""
from __future__ import annotations
from typing import Sequence

from matplotlib.axes import Axes
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.collections import PolyCollection
from matplotlib.figure import Figure

from .errors import OutputError
from .render import Triangle


def draw_lowpoly(
    ax: Axes,
    triangles: Sequence[Triangle],
    colors: Sequence[str],
    width: float,
    height: float,
):
    """Залити трикутники на осях; вісь y перевернута, як у SVG."""
    coll = None
    if triangles:
        polys = [[(t.a.x, t.a.y), (t.b.x, t.b.y), (t.c.x, t.c.y)] for t in triangles]
        coll = PolyCollection(polys, facecolors=list(colors), edgecolors=list(colors), linewidths=0.5)
        ax.add_collection(coll)
    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)
    ax.set_aspect("equal")
    ax.set_axis_off()
    return coll


def save_preview(
    path: str,
    triangles: Sequence[Triangle],
    colors: Sequence[str],
    width: int,
    height: int,
    dpi: int = 100,
) -> None:
    fig = Figure(figsize=(width / dpi, height / dpi), dpi=dpi)
    FigureCanvasAgg(fig)
    ax = fig.add_axes((0, 0, 1, 1))
    draw_lowpoly(ax, triangles, colors, width, height)
    try:
        fig.savefig(path, format="png")
    except OSError as e:
        raise OutputError(path, e) from e
