import pytest

from lowpoly.color import Color, blend_ratio, mix_colors
from lowpoly.errors import ColorError, ConfigError
from lowpoly.geom import Pt
from lowpoly.render import Triangle, triangle_colors

BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)


def test_from_hex_and_back():
    c = Color.from_hex("#2980B9")
    assert c == Color(0x29, 0x80, 0xB9)
    assert c.to_hex() == "#2980b9"


@pytest.mark.parametrize("bad", ["2980b9", "#2980b", "#2980b99", "#gg0000", "#+f0000", "# f0000", "", "##12345"])
def test_malformed_hex_rejected(bad):
    with pytest.raises(ColorError) as exc:
        Color.from_hex(bad)
    assert repr(bad) in str(exc.value)


def test_color_error_is_config_error():
    with pytest.raises(ConfigError):
        Color.from_hex("red")


def test_mix_endpoints_and_middle():
    assert mix_colors(BLACK, WHITE, 0.0) == BLACK
    assert mix_colors(BLACK, WHITE, 1.0) == WHITE
    assert mix_colors(BLACK, WHITE, 0.5).to_hex() == "#7f7f7f"


def test_mix_channels_saturate():
    assert mix_colors(BLACK, WHITE, -0.3) == BLACK
    assert mix_colors(BLACK, WHITE, 1.7) == WHITE


def test_mix_extrapolates_before_saturating():
    grey, dark = Color.from_hex("#808080"), Color.from_hex("#404040")
    # діагональний градієнт у правому нижньому куті 800x600 дає ratio 1.375
    ratio = blend_ratio(Pt(800, 600), 800, "diagonal")
    assert ratio == 1.375
    assert mix_colors(grey, dark, ratio).to_hex() == "#282828"
    assert mix_colors(dark, grey, -0.25).to_hex() == "#303030"


def test_blend_ratio_gradients():
    assert blend_ratio(Pt(400, 200), 800) == 0.5
    assert blend_ratio(Pt(400, 200), 800, "diagonal") == 0.625
    with pytest.raises(ConfigError):
        blend_ratio(Pt(0, 0), 800, "radial")


def test_triangle_colors_follow_centroid_x():
    tris = [
        Triangle(Pt(-10, 0), Pt(10, 0), Pt(0, 30)),
        Triangle(Pt(300, 0), Pt(500, 0), Pt(400, 300)),
        Triangle(Pt(790, 0), Pt(810, 0), Pt(800, 30)),
    ]
    got = [Color.from_hex(h) for h in triangle_colors(tris, BLACK, WHITE, 800)]
    for color, expected in zip(got, (0x00, 0x7F, 0xFF)):
        for ch in (color.r, color.g, color.b):
            assert abs(ch - expected) <= 1
