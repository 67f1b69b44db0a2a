# lowpoly/sampling.py
from __future__ import annotations
import logging
from typing import List, Optional

import numpy as np

from .errors import ConfigError
from .geom import Pt

log = logging.getLogger(__name__)

DEFAULT_POINTS = 100


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Генератор для семплінгу; seed=None -> свіжа ентропія ОС."""
    return np.random.default_rng(seed)


def generate_points(
    width: float,
    height: float,
    count: int = DEFAULT_POINTS,
    rng: Optional[np.random.Generator] = None,
) -> List[Pt]:
    """
    count точок, рівномірно розподілених у [0, width) x [0, height).
    Генератор передається явно, тож результат відтворюваний для заданого seed.
    """
    if width <= 0 or height <= 0:
        raise ConfigError(f"canvas size must be positive, got {width}x{height}")
    if count < 0:
        raise ConfigError(f"point count must be non-negative, got {count}")
    if rng is None:
        rng = make_rng()
    xs = rng.uniform(0.0, width, count)
    ys = rng.uniform(0.0, height, count)
    log.debug("sampled %d points in %sx%s", count, width, height)
    return [Pt(float(x), float(y)) for x, y in zip(xs, ys)]
