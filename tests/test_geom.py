import math

import pytest

from lowpoly.errors import InvalidPointError
from lowpoly.geom import (
    Pt, as_pt, centroid, check_finite, circumcircle, convex_hull, polygon_area, triangle_area,
)


def test_as_pt_accepts_pairs_and_pts():
    p = Pt(1.0, 2.0)
    assert as_pt(p) is p
    assert as_pt((3, 4)) == Pt(3.0, 4.0)


def test_centroid():
    assert centroid([Pt(0, 0), Pt(3, 0), Pt(0, 3)]) == Pt(1.0, 1.0)
    with pytest.raises(ValueError):
        centroid([])


def test_triangle_area_is_signed():
    assert triangle_area(Pt(0, 0), Pt(4, 0), Pt(0, 2)) == 4.0
    assert triangle_area(Pt(0, 0), Pt(0, 2), Pt(4, 0)) == -4.0


def test_circumcircle():
    center, r = circumcircle(Pt(0, 0), Pt(2, 0), Pt(0, 2))
    assert center == Pt(1.0, 1.0)
    assert r == pytest.approx(math.sqrt(2))
    with pytest.raises(ValueError):
        circumcircle(Pt(0, 0), Pt(1, 1), Pt(2, 2))


def test_convex_hull_skips_interior_collinear_and_duplicates():
    pts = [Pt(0, 0), Pt(10, 0), Pt(10, 10), Pt(0, 10), Pt(5, 5), Pt(5, 0), Pt(0, 0)]
    hull = convex_hull(pts)
    assert sorted(hull) == [0, 1, 2, 3]
    assert polygon_area(pts, hull) == pytest.approx(100.0)


def test_convex_hull_degenerate():
    assert convex_hull([Pt(0, 0), Pt(1, 1)]) == []
    assert convex_hull([Pt(0, 0), Pt(1, 1), Pt(2, 2)]) == []


def test_check_finite_names_index():
    check_finite([Pt(0, 0), Pt(1, 1)])
    with pytest.raises(InvalidPointError) as exc:
        check_finite([Pt(0, 0), Pt(1, float("nan"))])
    assert exc.value.index == 1
    with pytest.raises(ValueError):
        check_finite([Pt(float("inf"), 0)])


def test_hull_area_far_from_origin():
    o = 1e9
    pts = [Pt(o, o), Pt(o + 0.5, o), Pt(o + 0.5, o + 0.5), Pt(o, o + 0.5), Pt(o + 0.25, o + 0.25)]
    hull = convex_hull(pts)
    assert sorted(hull) == [0, 1, 2, 3]
    assert polygon_area(pts, hull) == 0.25
