# examples/main.py
from __future__ import annotations

from lowpoly.config import LowPolyConfig
from lowpoly.pipeline import generate_lowpoly
from lowpoly.plot import save_preview
from lowpoly.render import output_result


def main():
    # --- 1) Параметри ---
    # Можеш змінити розміри / кольори / seed
    config = LowPolyConfig(
        width=800,
        height=600,
        color_begin="#2980b9",
        color_end="#ffffff",
        points=150,
        seed=42,
    )

    # --- 2) Пайплайн: точки + Делоне + кольори + SVG ---
    result = generate_lowpoly(config)

    print(f"Точок:        {len(result.points)}")
    print(f"Трикутників:  {len(result.triangulation)}")
    print(f"Оболонка:     {len(result.triangulation.hull())} вершин")

    # --- 3) Валідація тріангуляції ---
    report = result.triangulation.validate()
    print("VALIDATION:", report)

    # --- 4) lowpoly.svg ---
    output_result(result.drawing, "lowpoly.svg")
    print("lowpoly.svg записано.")

    # --- 5) lowpoly.png — растрове прев'ю ---
    save_preview("lowpoly.png", result.triangles, result.colors, config.width, config.height)
    print("lowpoly.png записано (прев'ю через matplotlib).")


if __name__ == "__main__":
    main()
