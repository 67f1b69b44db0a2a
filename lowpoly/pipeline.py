# lowpoly/pipeline.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np
import svgwrite

from .config import BACKENDS, LowPolyConfig
from .delaunay import InternalTriangulator, Triangulation, Triangulator
from .errors import ConfigError
from .geom import Pt, as_pt, check_finite
from .predicates import orient2d
from .render import Triangle, extract_triangles, generate_document, triangle_colors
from .sampling import generate_points, make_rng

log = logging.getLogger(__name__)


class ScipyTriangulator:
    """
    Делоне через scipy.spatial.Delaunay (Qhull), приведена до того ж контракту:
    дублікати -> лишається менший індекс, трикутники CCW, без нульової площі,
    вироджений вхід -> порожній результат.
    """
    name = "scipy"

    def triangulate(self, points: Sequence) -> Triangulation:
        pts = tuple(as_pt(p) for p in points)
        check_finite(pts)

        first: dict = {}
        for i, p in enumerate(pts):
            first.setdefault(p, i)
        keep = sorted(first.values())
        if len(keep) < 3:
            return Triangulation(pts, ())

        try:
            from scipy.spatial import Delaunay, QhullError
        except ImportError as e:
            raise RuntimeError(
                "backend='scipy', but SciPy is not installed. "
                "Install scipy or use backend='internal'."
            ) from e

        arr = np.array([(pts[i].x, pts[i].y) for i in keep], dtype=float)
        try:
            dela = Delaunay(arr)
        except QhullError:
            # усі точки колінеарні — Qhull не будує симплексів
            log.debug("qhull rejected %d points as degenerate", len(keep))
            return Triangulation(pts, ())

        tris = []
        for simplex in dela.simplices:
            a, b, c = (keep[int(i)] for i in simplex)
            o = orient2d(pts[a], pts[b], pts[c])
            if o == 0:
                continue
            tris.append((a, b, c) if o > 0 else (a, c, b))
        log.debug("scipy triangulated %d points into %d triangles", len(pts), len(tris))
        return Triangulation(pts, tuple(tris))


def get_triangulator(backend: str = "internal") -> Triangulator:
    b = backend.lower()
    if b == "internal":
        return InternalTriangulator()
    if b == "scipy":
        return ScipyTriangulator()
    raise ConfigError(f"unknown backend {backend!r}; choose from {list(BACKENDS)}")


@dataclass
class LowPolyResult:
    points: List[Pt]
    triangulation: Triangulation
    triangles: List[Triangle]
    colors: List[str]
    drawing: svgwrite.Drawing


def generate_lowpoly(
    config: LowPolyConfig,
    rng: Optional[np.random.Generator] = None,
    triangulator: Optional[Triangulator] = None,
) -> LowPolyResult:
    """
    Повний пайплайн:
      - перевіряє конфігурацію (кольори — до будь-якої тріангуляції);
      - семплить точки;
      - тріангулює обраним бекендом;
      - фарбує трикутники і збирає SVG.
    """
    begin, end = config.validate()
    if rng is None:
        rng = make_rng(config.seed)
    if triangulator is None:
        triangulator = get_triangulator(config.backend)
    log.debug("backend: %s", triangulator.name)

    points = generate_points(config.width, config.height, config.points, rng)
    triangulation = triangulator.triangulate(points)
    triangles = extract_triangles(triangulation)
    colors = triangle_colors(triangles, begin, end, config.width, config.gradient)
    drawing = generate_document(triangles, colors, config.width, config.height)
    return LowPolyResult(points, triangulation, triangles, colors, drawing)
