# examples/demo_delaunay.py
from lowpoly.delaunay import triangulate

if __name__ == "__main__":
    # квадрат + внутрішні точки + дублікат
    raw = [
        (0, 0), (10, 0), (10, 10), (0, 10),
        (5, 5), (2, 8), (8, 3), (5, 5),
    ]
    tri = triangulate(raw)

    print("triangles:", len(tri))
    print("hull:", tri.hull())
    print("area:", tri.area())

    report = tri.validate()
    print("VALIDATION:", report)
