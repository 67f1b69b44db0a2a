# lowpoly/config.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

from .color import GRADIENTS, Color
from .errors import ConfigError
from .sampling import DEFAULT_POINTS

BACKENDS = ("internal", "scipy")


@dataclass(frozen=True)
class LowPolyConfig:
    """Параметри генерації; значення за замовчуванням — як у CLI."""
    width: int = 800
    height: int = 600
    color_begin: str = "#2980b9"
    color_end: str = "#ffffff"
    points: int = DEFAULT_POINTS
    seed: Optional[int] = None
    backend: str = "internal"
    gradient: str = "horizontal"
    file: Optional[str] = None
    preview: Optional[str] = None

    def validate(self) -> Tuple[Color, Color]:
        """
        Перевірити все до того, як почнеться семплінг / тріангуляція.
        Повертає розібрані кольори (початковий, кінцевий).
        """
        if self.width <= 0 or self.height <= 0:
            raise ConfigError(f"canvas size must be positive, got {self.width}x{self.height}")
        if self.points < 0:
            raise ConfigError(f"point count must be non-negative, got {self.points}")
        if self.backend not in BACKENDS:
            raise ConfigError(f"unknown backend {self.backend!r}; choose from {list(BACKENDS)}")
        if self.gradient not in GRADIENTS:
            raise ConfigError(f"unknown gradient {self.gradient!r}; choose from {sorted(GRADIENTS)}")
        return Color.from_hex(self.color_begin), Color.from_hex(self.color_end)
