# lowpoly/color.py
from __future__ import annotations
from dataclasses import dataclass
from string import hexdigits
from typing import Callable, Dict

from .errors import ColorError, ConfigError
from .geom import Pt


@dataclass(frozen=True)
class Color:
    r: int
    g: int
    b: int

    @classmethod
    def from_hex(cls, code: str) -> "Color":
        """'#RRGGBB' (будь-який регістр) -> Color; інакше ColorError."""
        if not isinstance(code, str) or len(code) != 7 or not code.startswith("#"):
            raise ColorError(code)
        digits = code[1:]
        if any(ch not in hexdigits for ch in digits):
            raise ColorError(code)
        return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


def mix_colors(start: Color, end: Color, ratio: float) -> Color:
    """
    Лінійна інтерполяція по каналах, дробова частина відкидається.
    ratio поза [0, 1] екстраполює канал, результат насичується до 0..255.
    """
    def ch(s: int, e: int) -> int:
        return max(0, min(255, int(s * (1.0 - ratio) + e * ratio)))
    return Color(ch(start.r, end.r), ch(start.g, end.g), ch(start.b, end.b))


def horizontal_ratio(center: Pt, width: float) -> float:
    return center.x / width


def diagonal_ratio(center: Pt, width: float) -> float:
    # градієнт під кутом: зсув по y враховується з вагою 1/2
    return (center.x + center.y / 2.0) / width


GRADIENTS: Dict[str, Callable[[Pt, float], float]] = {
    "horizontal": horizontal_ratio,
    "diagonal": diagonal_ratio,
}


def blend_ratio(center: Pt, width: float, gradient: str = "horizontal") -> float:
    try:
        fn = GRADIENTS[gradient]
    except KeyError:
        raise ConfigError(f"unknown gradient {gradient!r}; choose from {sorted(GRADIENTS)}") from None
    return fn(center, width)
