import pytest

from lowpoly.color import Color
from lowpoly.config import LowPolyConfig
from lowpoly.errors import ColorError, ConfigError


def test_defaults_follow_cli():
    c = LowPolyConfig()
    assert (c.width, c.height, c.points) == (800, 600, 100)
    assert c.validate() == (Color.from_hex("#2980b9"), Color(255, 255, 255))


@pytest.mark.parametrize("kwargs", [
    {"width": 0},
    {"height": -5},
    {"points": -1},
    {"backend": "qhull"},
    {"gradient": "radial"},
])
def test_invalid_values(kwargs):
    with pytest.raises(ConfigError):
        LowPolyConfig(**kwargs).validate()


def test_bad_colors():
    with pytest.raises(ColorError):
        LowPolyConfig(color_begin="blue").validate()
    with pytest.raises(ColorError):
        LowPolyConfig(color_end="#fff").validate()
