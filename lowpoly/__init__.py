"""
lowpoly — генератор low-poly SVG (Py 3.10+).
Ядро: інкрементальна 2D Делоне (Bowyer–Watson з «привидами») на точних предикатах.
"""

__version__ = "0.1.0"

from lowpoly.geom import Pt, centroid, circumcircle, convex_hull
from lowpoly.predicates import orient2d, incircle
from lowpoly.delaunay import Delaunay2D, InternalTriangulator, Triangulation, Triangulator, triangulate
from lowpoly.color import Color, mix_colors
from lowpoly.config import LowPolyConfig
from lowpoly.errors import ColorError, ConfigError, InvalidPointError, LowPolyError, OutputError
from lowpoly.pipeline import ScipyTriangulator, generate_lowpoly, get_triangulator

__all__ = [
    "Pt", "centroid", "circumcircle", "convex_hull",
    "orient2d", "incircle",
    "Delaunay2D", "InternalTriangulator", "Triangulation", "Triangulator", "triangulate",
    "Color", "mix_colors", "LowPolyConfig",
    "ColorError", "ConfigError", "InvalidPointError", "LowPolyError", "OutputError",
    "ScipyTriangulator", "generate_lowpoly", "get_triangulator",
    "__version__",
]
