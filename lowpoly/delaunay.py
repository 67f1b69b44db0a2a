# lowpoly/delaunay.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Protocol, Sequence, Set, Tuple, runtime_checkable

from .geom import Pt, as_pt, check_finite, triangle_area
from .predicates import incircle, on_open_segment, orient2d

log = logging.getLogger(__name__)

GHOST = -1                      # вершина «на нескінченності»
Edge = Tuple[int, int]          # орієнтоване ребро (u, v)
UEdge = Tuple[int, int]         # неорієнтоване ребро (min(u,v), max(u,v))
Tri = Tuple[int, int, int]


@dataclass(frozen=True)
class Triangulation:
    """
    Результат тріангуляції.
    points: точки у вхідному порядку (індекси трикутників посилаються саме на них).
    triangles: трійки індексів, усі CCW (orient2d > 0, вісь y догори).
    """
    points: Tuple[Pt, ...]
    triangles: Tuple[Tri, ...]

    def __len__(self) -> int:
        return len(self.triangles)

    def __iter__(self) -> Iterator[Tri]:
        return iter(self.triangles)

    def coords(self, t: Tri) -> Tuple[Pt, Pt, Pt]:
        a, b, c = t
        return self.points[a], self.points[b], self.points[c]

    def edges(self) -> Set[UEdge]:
        out: Set[UEdge] = set()
        for a, b, c in self.triangles:
            for u, v in ((a, b), (b, c), (c, a)):
                out.add((min(u, v), max(u, v)))
        return out

    def hull(self) -> List[int]:
        """
        Межа тріангуляції як цикл вершин (CCW), починаючи з найменшої вершини.
        Ребро межі — орієнтоване ребро, зворотного до якого немає.
        """
        directed = {(u, v) for a, b, c in self.triangles for u, v in ((a, b), (b, c), (c, a))}
        nxt: Dict[int, int] = {u: v for (u, v) in directed if (v, u) not in directed}
        if not nxt:
            return []
        start = min(nxt, key=lambda i: (self.points[i].x, self.points[i].y, i))
        loop = [start]
        cur = nxt[start]
        while cur != start:
            loop.append(cur)
            cur = nxt[cur]
        return loop

    def area(self) -> float:
        return sum(triangle_area(*self.coords(t)) for t in self.triangles)

    def validate(self) -> dict:
        """
        Перевірка коректності:
          - усі трикутники строго CCW;
          - кожне орієнтоване ребро належить не більше ніж одному трикутнику
            (інакше трикутники перекриваються);
          - кожне внутрішнє ребро локально Делоне (протилежна вершина сусіда
            не лежить строго всередині описаного кола).
        Повертає словник з діагностикою (порожні списки = все ок).
        """
        P = self.points
        bad_orientation: List[int] = []
        bad_edges: List[Tuple[Edge, int]] = []
        non_delaunay: List[Tuple[int, int]] = []

        owner: Dict[Edge, int] = {}
        count: Dict[Edge, int] = {}
        for ti, (a, b, c) in enumerate(self.triangles):
            if orient2d(P[a], P[b], P[c]) <= 0:
                bad_orientation.append(ti)
            for e in ((a, b), (b, c), (c, a)):
                owner[e] = ti
                count[e] = count.get(e, 0) + 1
        bad_edges = [(e, k) for e, k in count.items() if k != 1]

        for ti, (a, b, c) in enumerate(self.triangles):
            for u, v in ((a, b), (b, c), (c, a)):
                nb = owner.get((v, u))
                if nb is None or nb < ti:
                    continue
                x = next(w for w in self.triangles[nb] if w != u and w != v)
                if incircle(P[a], P[b], P[c], P[x]) > 0:
                    non_delaunay.append((ti, nb))

        return {
            "triangles": len(self.triangles),
            "vertices": len({i for t in self.triangles for i in t}),
            "bad_orientation": bad_orientation,
            "bad_edges": bad_edges,
            "non_delaunay": non_delaunay,
        }


@dataclass
class _Tri:
    """
    Трикутник робочої структури.
    v: CCW-індекси; для «привида» v = (a, b, GHOST), де a->b — ребро оболонки,
       а зовнішність лежить ліворуч від a->b.
    """
    v: Tri
    alive: bool = True

    def edges(self) -> Tuple[Edge, Edge, Edge]:
        a, b, c = self.v
        return (a, b), (b, c), (c, a)

    @property
    def ghost(self) -> bool:
        return self.v[2] == GHOST


class Delaunay2D:
    """
    Інкрементальна 2D Делоне (Bowyer–Watson) з «привидами» замість супер-трикутника.

    Оболонка закрита трикутниками з вершиною на нескінченності, тож точка поза
    поточною оболонкою просто «бачить» привидів і розширює оболонку.
    Порядок вставки детермінований: лексикографічно за (x, y, індекс),
    дублікати координат пропускаються (лишається менший індекс).
    """

    def __init__(self, points: Sequence[Pt]):
        self.P: Sequence[Pt] = points
        self.tris: List[_Tri] = []
        self.edge2tri: Dict[Edge, int] = {}  # кожне орієнтоване ребро -> єдиний живий трикутник
        self._last: Optional[int] = None     # останній створений справжній трикутник, старт для walk
        self._alive = 0

    # ---------------- Публічний API ----------------
    def build(self) -> None:
        order = self._insertion_order()
        rest = self._build_seed(order)
        if rest is None:
            log.debug("no triangle: %d distinct points, all collinear or too few", len(order))
            return
        for pi in rest:
            self.insert(pi)

    def triangles(self) -> List[Tri]:
        """Живі справжні трикутники ненульової площі, у порядку створення."""
        out: List[Tri] = []
        for t in self.tris:
            if not t.alive or t.ghost:
                continue
            a, b, c = t.v
            if orient2d(self.P[a], self.P[b], self.P[c]) > 0:
                out.append(t.v)
        return out

    def insert(self, p_idx: int) -> None:
        """
        Вставити точку p_idx:
          1) знайти трикутник у конфлікті (walk),
          2) зібрати cavity обходом сусідів,
          3) знести cavity,
          4) з'єднати межу cavity з p_idx.
        """
        seed = self._locate(p_idx)

        cavity: Set[int] = {seed}
        rejected: Set[int] = set()
        boundary: List[Edge] = []
        stack = [seed]
        while stack:
            tid = stack.pop()
            for u, v in self.tris[tid].edges():
                nb = self.edge2tri[(v, u)]
                if nb in cavity:
                    continue
                if nb not in rejected and self._conflicts(nb, p_idx):
                    cavity.add(nb)
                    stack.append(nb)
                else:
                    rejected.add(nb)
                    boundary.append((u, v))

        for tid in cavity:
            self._remove_tri(tid)

        for u, v in boundary:
            tid = self._add_tri(u, v, p_idx)
            if not self.tris[tid].ghost:
                self._last = tid

    # ---------------- Внутрішні методи ----------------
    def _insertion_order(self) -> List[int]:
        P = self.P
        # індекс розрізняє лише точки з однаковими координатами; співкругові
        # точки впорядковує (x, y), і на колі лишається конфігурація раніших
        order = sorted(range(len(P)), key=lambda i: (P[i].x, P[i].y, i))
        uniq: List[int] = []
        for i in order:
            if uniq and P[uniq[-1]] == P[i]:
                continue  # дублікат: лишаємо менший індекс
            uniq.append(i)
        return uniq

    def _build_seed(self, order: List[int]) -> Optional[List[int]]:
        """
        Стартовий трикутник: перші дві різні точки + перша неколінеарна з ними.
        Повертає решту точок для вставки або None, якщо трикутника немає.
        """
        if len(order) < 3:
            return None
        P = self.P
        a, b = order[0], order[1]
        k = next((k for k in range(2, len(order))
                  if orient2d(P[a], P[b], P[order[k]]) != 0), None)
        if k is None:
            return None
        c = order[k]
        if orient2d(P[a], P[b], P[c]) < 0:
            b, c = c, b
        self._last = self._add_tri(a, b, c)
        for u, v in ((a, b), (b, c), (c, a)):
            self._add_tri(v, u, GHOST)
        return order[2:k] + order[k + 1:]

    def _add_tri(self, a: int, b: int, c: int) -> int:
        """Створити трикутник (привида — з GHOST на третьому місці) і зареєструвати ребра."""
        if a == GHOST:
            a, b, c = b, c, a
        elif b == GHOST:
            a, b, c = c, a, b
        tid = len(self.tris)
        t = _Tri((a, b, c))
        self.tris.append(t)
        self._alive += 1
        for e in t.edges():
            self.edge2tri[e] = tid
        return tid

    def _remove_tri(self, tid: int) -> None:
        t = self.tris[tid]
        t.alive = False
        self._alive -= 1
        for e in t.edges():
            if self.edge2tri.get(e) == tid:
                del self.edge2tri[e]

    def _conflicts(self, tid: int, p_idx: int) -> bool:
        """
        Чи «бачить» p_idx трикутник tid:
          справжній — p строго всередині описаного кола;
          привид (a, b, G) — p строго зовні ребра a->b або на відкритому відрізку ab.
        Точка на колі не в конфлікті, тож перемагають раніші за порядком вставки.
        """
        a, b, c = self.tris[tid].v
        p = self.P[p_idx]
        if c == GHOST:
            o = orient2d(self.P[a], self.P[b], p)
            if o > 0:
                return True
            return o == 0 and on_open_segment(self.P[a], self.P[b], p)
        return incircle(self.P[a], self.P[b], self.P[c], p) > 0

    def _locate(self, p_idx: int) -> int:
        """
        Walk по видимості від останнього створеного трикутника.
        Повертає трикутник, що містить p (або привида, якщо p поза оболонкою).
        """
        p = self.P[p_idx]
        tid = self._last
        for _ in range(self._alive + 1):
            t = self.tris[tid]
            for u, v in t.edges():
                if orient2d(self.P[u], self.P[v], p) < 0:
                    tid = self.edge2tri[(v, u)]
                    break
            else:
                return tid
            if self.tris[tid].ghost:
                return tid
        # walk зациклився (не повинно траплятися для Делоне) — повний перебір
        log.debug("visibility walk did not terminate for point %d, scanning", p_idx)
        for tid, t in enumerate(self.tris):
            if t.alive and self._conflicts(tid, p_idx):
                return tid
        raise RuntimeError(f"no conflicting triangle for point {p_idx}")


def triangulate(points: Sequence) -> Triangulation:
    """
    Делоне-тріангуляція набору 2D точок (Pt або пари (x, y)).

    < 3 різних точок або всі колінеарні -> порожній результат.
    NaN / inf у координатах -> InvalidPointError.
    """
    pts = tuple(as_pt(p) for p in points)
    check_finite(pts)
    builder = Delaunay2D(pts)
    builder.build()
    tris = tuple(builder.triangles())
    log.debug("triangulated %d points into %d triangles", len(pts), len(tris))
    return Triangulation(pts, tris)


@runtime_checkable
class Triangulator(Protocol):
    """Будь-який алгоритм тріангуляції з тим самим контрактом, що й triangulate()."""
    name: str

    def triangulate(self, points: Sequence) -> Triangulation: ...


class InternalTriangulator:
    name = "internal"

    def triangulate(self, points: Sequence) -> Triangulation:
        return triangulate(points)
