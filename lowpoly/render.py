# lowpoly/render.py
from __future__ import annotations
import logging
import sys
from dataclasses import dataclass
from typing import List, Optional, Sequence, TextIO

import svgwrite

from .color import Color, blend_ratio, mix_colors
from .delaunay import Triangulation
from .errors import OutputError
from .geom import Pt, centroid

log = logging.getLogger(__name__)


def _fmt(v: float) -> str:
    s = f"{v:.3f}".rstrip("0").rstrip(".")
    return "0" if s == "-0" else s


@dataclass(frozen=True)
class Triangle:
    a: Pt
    b: Pt
    c: Pt

    def center(self) -> Pt:
        return centroid((self.a, self.b, self.c))

    def path_data(self) -> str:
        a, b, c = self.a, self.b, self.c
        return (f"M{_fmt(a.x)},{_fmt(a.y)} L{_fmt(b.x)},{_fmt(b.y)} "
                f"L{_fmt(c.x)},{_fmt(c.y)} Z")


def extract_triangles(triangulation: Triangulation) -> List[Triangle]:
    """Індексні трійки -> трикутники з координатами, у порядку тріангуляції."""
    return [Triangle(*triangulation.coords(t)) for t in triangulation]


def triangle_colors(
    triangles: Sequence[Triangle],
    start: Color,
    end: Color,
    width: float,
    gradient: str = "horizontal",
) -> List[str]:
    """Колір кожного трикутника за положенням його центроїда."""
    return [
        mix_colors(start, end, blend_ratio(t.center(), width, gradient)).to_hex()
        for t in triangles
    ]


def generate_document(
    triangles: Sequence[Triangle],
    colors: Sequence[str],
    width: int,
    height: int,
) -> svgwrite.Drawing:
    """
    SVG-документ width x height з однією групою;
    кожен трикутник — path із однаковими fill і stroke.
    """
    dwg = svgwrite.Drawing(size=(width, height))
    group = dwg.g()
    for tri, color in zip(triangles, colors):
        group.add(dwg.path(d=tri.path_data(), fill=color, stroke=color))
    dwg.add(group)
    log.debug("assembled SVG with %d paths", len(triangles))
    return dwg


def output_result(
    drawing: svgwrite.Drawing,
    file: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Зберегти у file, або (file=None) надрукувати документ у stream / stdout."""
    if file is None:
        out = stream if stream is not None else sys.stdout
        drawing.write(out)
        out.write("\n")
        return
    try:
        drawing.saveas(file)
    except OSError as e:
        raise OutputError(file, e) from e
    log.debug("wrote %s", file)
