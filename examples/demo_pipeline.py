# examples/demo_pipeline.py
from lowpoly.pipeline import get_triangulator
from lowpoly.sampling import generate_points, make_rng

if __name__ == "__main__":
    pts = generate_points(800, 600, 200, make_rng(7))

    for backend in ("internal", "scipy"):  # однаковий контракт, різні алгоритми
        tri = get_triangulator(backend).triangulate(pts)
        print(f"{backend:>8}: triangles={len(tri)} hull={len(tri.hull())} area={tri.area():.1f}")
