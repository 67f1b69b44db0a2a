import pytest

from lowpoly.errors import ConfigError
from lowpoly.sampling import DEFAULT_POINTS, generate_points, make_rng


def test_reproducible_with_seed():
    a = generate_points(800, 600, 50, make_rng(1))
    b = generate_points(800, 600, 50, make_rng(1))
    c = generate_points(800, 600, 50, make_rng(2))
    assert a == b
    assert a != c


def test_points_inside_canvas():
    pts = generate_points(800, 600, 500, make_rng(4))
    assert len(pts) == 500
    assert all(0.0 <= p.x < 800 and 0.0 <= p.y < 600 for p in pts)


def test_default_count_and_fresh_rng():
    assert len(generate_points(10, 10)) == DEFAULT_POINTS
    assert generate_points(10, 10, 0, make_rng(0)) == []


@pytest.mark.parametrize("w,h,n", [(0, 10, 5), (10, -1, 5), (10, 10, -1)])
def test_invalid_arguments(w, h, n):
    with pytest.raises(ConfigError):
        generate_points(w, h, n, make_rng(0))
