from lowpoly.geom import Pt
from lowpoly.predicates import incircle, on_open_segment, orient2d


def test_orient2d_signs():
    a, b, c = Pt(0, 0), Pt(1, 0), Pt(0, 1)
    assert orient2d(a, b, c) > 0
    assert orient2d(a, c, b) < 0
    assert orient2d(a, b, Pt(5, 0)) == 0


def test_orient2d_exact_on_nearly_collinear_input():
    a, b = Pt(12.0, 12.0), Pt(24.0, 24.0)
    assert orient2d(a, b, Pt(0.5, 0.5)) == 0
    # на один ulp вище прямої y = x
    assert orient2d(a, b, Pt(0.5, 0.5 + 2.0 ** -53)) > 0
    assert orient2d(a, b, Pt(0.5, 0.5 - 2.0 ** -54)) < 0


def test_incircle_inside_outside_on():
    a, b, c = Pt(0, 0), Pt(1, 0), Pt(1, 1)
    assert incircle(a, b, c, Pt(0.5, 0.5)) > 0
    assert incircle(a, b, c, Pt(2, 2)) < 0
    assert incircle(a, b, c, Pt(0, 1)) == 0


def test_incircle_sign_flips_with_orientation():
    a, b, c = Pt(0, 0), Pt(1, 0), Pt(1, 1)
    assert incircle(a, c, b, Pt(0.5, 0.5)) < 0


def test_incircle_cocircular_large_coordinates():
    # квадрат далеко від початку координат: float-фільтр не вирішує, рахує Fraction
    off = 1e6
    a, b, c, d = Pt(off, off), Pt(off + 3, off), Pt(off + 3, off + 3), Pt(off, off + 3)
    assert incircle(a, b, c, d) == 0


def test_on_open_segment():
    a, b = Pt(0, 0), Pt(4, 0)
    assert on_open_segment(a, b, Pt(2, 0))
    assert not on_open_segment(a, b, Pt(5, 0))
    assert not on_open_segment(a, b, Pt(-1, 0))
    assert not on_open_segment(a, b, Pt(4, 0))
