import numpy as np
import pytest

from lowpoly.config import LowPolyConfig
from lowpoly.delaunay import Triangulator, triangulate
from lowpoly.errors import ConfigError
from lowpoly.geom import Pt
from lowpoly.pipeline import ScipyTriangulator, get_triangulator

pytest.importorskip("scipy")


def as_sets(tri):
    return {frozenset(t) for t in tri}


def test_get_triangulator():
    assert get_triangulator("internal").name == "internal"
    assert isinstance(get_triangulator("SciPy"), ScipyTriangulator)
    assert isinstance(get_triangulator("scipy"), Triangulator)
    with pytest.raises(ConfigError):
        get_triangulator("voronoi")
    with pytest.raises(ValueError):
        get_triangulator("")


def test_matches_internal_on_points_in_general_position():
    rng = np.random.default_rng(21)
    pts = [Pt(float(x), float(y)) for x, y in zip(rng.uniform(0, 800, 150), rng.uniform(0, 600, 150))]
    ours = triangulate(pts)
    theirs = ScipyTriangulator().triangulate(pts)
    assert as_sets(ours) == as_sets(theirs)
    assert theirs.validate()["bad_orientation"] == []


def test_degenerate_inputs_are_empty():
    t = ScipyTriangulator()
    assert len(t.triangulate([])) == 0
    assert len(t.triangulate([(0, 0), (1, 1)])) == 0
    assert len(t.triangulate([(0, 0), (1, 1), (2, 2), (3, 3)])) == 0
    assert len(t.triangulate([(1, 1)] * 5)) == 0


def test_duplicates_keep_smallest_index():
    pts = [(0, 0), (10, 0), (10, 10), (0, 10), (10, 10), (0, 0)]
    tri = ScipyTriangulator().triangulate(pts)
    assert len(tri) == 2
    assert {i for t in tri for i in t} == {0, 1, 2, 3}
    assert tri.area() == pytest.approx(100.0)


def test_config_accepts_scipy_backend():
    LowPolyConfig(backend="scipy").validate()
