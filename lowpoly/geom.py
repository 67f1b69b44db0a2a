# lowpoly/geom.py
from __future__ import annotations
from dataclasses import dataclass
from math import isfinite, sqrt
from typing import Iterable, List, Optional, Sequence, Tuple

from .errors import InvalidPointError

@dataclass(frozen=True)
class Pt:
    x: float
    y: float
    def __iter__(self):
        yield self.x; yield self.y

def as_pt(p) -> Pt:
    """Pt або будь-яка пара (x, y) -> Pt."""
    if isinstance(p, Pt):
        return p
    x, y = p
    return Pt(float(x), float(y))

def sub(a: Pt, b: Pt) -> Pt:
    return Pt(a.x - b.x, a.y - b.y)

def cross(a: Pt, b: Pt) -> float:
    """Скалярний (z-компонента) векторний добуток у 2D."""
    return a.x*b.y - a.y*b.x

def centroid(points: Iterable[Pt]) -> Pt:
    xs = ys = 0.0
    n = 0
    for p in points:
        xs += p.x; ys += p.y; n += 1
    if n == 0:
        raise ValueError("empty set")
    inv = 1.0 / n
    return Pt(xs*inv, ys*inv)

def triangle_area(a: Pt, b: Pt, c: Pt) -> float:
    """Знакова площа трикутника (>0 для CCW у системі з віссю y догори)."""
    return 0.5 * cross(sub(b, a), sub(c, a))

def circumcircle(a: Pt, b: Pt, c: Pt) -> Tuple[Pt, float]:
    """
    Центр і радіус описаного кола.
    Для колінеарних точок кола не існує -> ValueError.
    """
    bx, by = b.x - a.x, b.y - a.y
    cx, cy = c.x - a.x, c.y - a.y
    d = 2.0 * (bx*cy - by*cx)
    if d == 0.0:
        raise ValueError("collinear points have no circumcircle")
    bl = bx*bx + by*by
    cl = cx*cx + cy*cy
    ux = (cy*bl - by*cl) / d
    uy = (bx*cl - cx*bl) / d
    return Pt(a.x + ux, a.y + uy), sqrt(ux*ux + uy*uy)

def check_finite(points: Sequence[Pt]) -> None:
    """NaN / inf у координатах -> InvalidPointError з індексом точки."""
    for i, p in enumerate(points):
        if not (isfinite(p.x) and isfinite(p.y)):
            raise InvalidPointError(i, p)

def convex_hull(points: Sequence[Pt]) -> List[int]:
    """
    Опукла оболонка (монотонний ланцюг Ендрю), індекси у points, CCW,
    без колінеарних вершин. Для < 3 неколінеарних точок повертає [].
    Незалежна від тріангуляції — використовується для перевірок покриття.
    """
    order = sorted(range(len(points)), key=lambda i: (points[i].x, points[i].y, i))
    uniq: List[int] = []
    last: Optional[Pt] = None
    for i in order:
        if last is not None and points[i] == last:
            continue
        uniq.append(i); last = points[i]
    if len(uniq) < 3:
        return []

    from .predicates import orient2d  # predicates імпортує geom

    def turn(o: int, a: int, b: int) -> float:
        return orient2d(points[o], points[a], points[b])

    lower: List[int] = []
    for i in uniq:
        while len(lower) >= 2 and turn(lower[-2], lower[-1], i) <= 0:
            lower.pop()
        lower.append(i)
    upper: List[int] = []
    for i in reversed(uniq):
        while len(upper) >= 2 and turn(upper[-2], upper[-1], i) <= 0:
            upper.pop()
        upper.append(i)
    hull = lower[:-1] + upper[:-1]
    return hull if len(hull) >= 3 else []

def polygon_area(points: Sequence[Pt], loop: Sequence[int]) -> float:
    """
    Площа многокутника за формулою шнурка (loop — індекси вершин).
    Координати зсуваються до першої вершини, щоб не втрачати точність далеко від нуля.
    """
    n = len(loop)
    if n == 0:
        return 0.0
    o = points[loop[0]]
    s = 0.0
    for k in range(n):
        p = sub(points[loop[k]], o)
        q = sub(points[loop[(k + 1) % n]], o)
        s += p.x*q.y - q.x*p.y
    return 0.5 * s
