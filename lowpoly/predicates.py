# lowpoly/predicates.py
"""
Геометричні предикати orient2d / incircle.

Спершу рахуємо у float і перевіряємо похибку (оцінки Shewchuk'а);
якщо |det| не перевищує межу похибки — перераховуємо точно у Fraction.
Отже знак завжди правильний, а «точно на колі» — це саме 0.
"""
from __future__ import annotations
from fractions import Fraction

from .geom import Pt

_EPSILON = 2.0 ** -53
CCW_ERRBOUND = (3.0 + 16.0 * _EPSILON) * _EPSILON
ICC_ERRBOUND = (10.0 + 96.0 * _EPSILON) * _EPSILON


def _sign(v) -> float:
    return float((v > 0) - (v < 0))


def orient2d(a: Pt, b: Pt, c: Pt) -> float:
    """
    >0 якщо a, b, c йдуть проти годинникової стрілки (c ліворуч від a->b),
    <0 якщо за годинниковою, 0 якщо колінеарні.
    """
    detleft = (a.x - c.x) * (b.y - c.y)
    detright = (a.y - c.y) * (b.x - c.x)
    det = detleft - detright
    detsum = abs(detleft) + abs(detright)
    if abs(det) > CCW_ERRBOUND * detsum:
        return det
    return _sign(_orient2d_exact(a, b, c))


def _orient2d_exact(a: Pt, b: Pt, c: Pt) -> Fraction:
    ax, ay = Fraction(a.x), Fraction(a.y)
    bx, by = Fraction(b.x), Fraction(b.y)
    cx, cy = Fraction(c.x), Fraction(c.y)
    return (ax - cx) * (by - cy) - (ay - cy) * (bx - cx)


def incircle(a: Pt, b: Pt, c: Pt, d: Pt) -> float:
    """
    Знак тесту «чи лежить d всередині кола через a, b, c?» для CCW (a, b, c):
      >0  всередині,
      <0  зовні,
       0  точно на колі.
    Для CW трійки знак протилежний.
    """
    adx, ady = a.x - d.x, a.y - d.y
    bdx, bdy = b.x - d.x, b.y - d.y
    cdx, cdy = c.x - d.x, c.y - d.y

    bdxcdy = bdx * cdy; cdxbdy = cdx * bdy
    alift = adx * adx + ady * ady
    cdxady = cdx * ady; adxcdy = adx * cdy
    blift = bdx * bdx + bdy * bdy
    adxbdy = adx * bdy; bdxady = bdx * ady
    clift = cdx * cdx + cdy * cdy

    det = (alift * (bdxcdy - cdxbdy)
           + blift * (cdxady - adxcdy)
           + clift * (adxbdy - bdxady))
    permanent = ((abs(bdxcdy) + abs(cdxbdy)) * alift
                 + (abs(cdxady) + abs(adxcdy)) * blift
                 + (abs(adxbdy) + abs(bdxady)) * clift)
    if abs(det) > ICC_ERRBOUND * permanent:
        return det
    return _sign(_incircle_exact(a, b, c, d))


def _incircle_exact(a: Pt, b: Pt, c: Pt, d: Pt) -> Fraction:
    dx, dy = Fraction(d.x), Fraction(d.y)
    adx, ady = Fraction(a.x) - dx, Fraction(a.y) - dy
    bdx, bdy = Fraction(b.x) - dx, Fraction(b.y) - dy
    cdx, cdy = Fraction(c.x) - dx, Fraction(c.y) - dy
    alift = adx * adx + ady * ady
    blift = bdx * bdx + bdy * bdy
    clift = cdx * cdx + cdy * cdy
    return (alift * (bdx * cdy - cdx * bdy)
            + blift * (cdx * ady - adx * cdy)
            + clift * (adx * bdy - bdx * ady))


def on_open_segment(a: Pt, b: Pt, p: Pt) -> bool:
    """Для колінеарних a, b, p: чи лежить p строго між a та b."""
    return ((p.x - a.x) * (b.x - a.x) + (p.y - a.y) * (b.y - a.y) > 0.0
            and (p.x - b.x) * (a.x - b.x) + (p.y - b.y) * (a.y - b.y) > 0.0)
