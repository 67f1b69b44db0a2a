# examples/gui.py
from __future__ import annotations

import tkinter as tk
from tkinter import ttk, messagebox, filedialog

from lowpoly.config import LowPolyConfig
from lowpoly.errors import LowPolyError
from lowpoly.pipeline import generate_lowpoly
from lowpoly.plot import draw_lowpoly
from lowpoly.render import output_result

import matplotlib
matplotlib.use("TkAgg")
from matplotlib.figure import Figure
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg


def parse_int(text: str, name: str, minimum: int) -> int:
    """
    Ціле число з поля вводу, не менше minimum.
    Порожнє або нечислове значення -> ValueError з назвою поля.
    """
    try:
        value = int(text.strip())
    except ValueError:
        raise ValueError(f"{name}: очікується ціле число, отримано '{text}'")
    if value < minimum:
        raise ValueError(f"{name}: значення має бути не менше {minimum}")
    return value


class LowPolyApp(tk.Tk):
    def __init__(self):
        super().__init__()
        self.title("Low-poly generator")
        self.geometry("800x700")

        # сюди покладемо Figure/Canvas
        self.fig = None
        self.ax = None
        self.canvas = None
        self.result = None

        self._build_widgets()

    def _build_widgets(self):
        main = ttk.Frame(self, padding=10)
        main.pack(fill="both", expand=True)

        # --- Параметри ---
        params = ttk.LabelFrame(main, text="Параметри")
        params.pack(fill="x", pady=5)

        self.entries = {}
        fields = [
            ("width", "Ширина:", "800"),
            ("height", "Висота:", "600"),
            ("points", "Кількість точок:", "100"),
            ("seed", "Seed (порожньо = випадковий):", ""),
            ("color_begin", "Колір початку:", "#2980b9"),
            ("color_end", "Колір кінця:", "#ffffff"),
        ]
        for row, (key, label, default) in enumerate(fields):
            ttk.Label(params, text=label).grid(row=row, column=0, sticky="w", padx=5, pady=2)
            entry = ttk.Entry(params, width=12)
            entry.insert(0, default)
            entry.grid(row=row, column=1, sticky="w", padx=5, pady=2)
            self.entries[key] = entry

        # --- Бекенд ---
        self.backend = tk.StringVar(value="internal")
        backend_frame = ttk.LabelFrame(main, text="Алгоритм тріангуляції")
        backend_frame.pack(fill="x", pady=5)
        for col, (value, text) in enumerate([("internal", "Власний Bowyer–Watson"), ("scipy", "SciPy (Qhull)")]):
            ttk.Radiobutton(backend_frame, text=text, variable=self.backend, value=value).grid(
                row=0, column=col, sticky="w", padx=5, pady=2
            )

        # --- Кнопки ---
        buttons = ttk.Frame(main)
        buttons.pack(fill="x", pady=10)
        ttk.Button(buttons, text="Згенерувати", command=self.run_pipeline).pack(side="left", expand=True, fill="x")
        ttk.Button(buttons, text="Зберегти SVG…", command=self.save_svg).pack(side="left", expand=True, fill="x")

        # --- Результати ---
        result_frame = ttk.LabelFrame(main, text="Результати")
        result_frame.pack(fill="x", pady=5)

        self.triangles_var = tk.StringVar(value="—")
        self.hull_var = tk.StringVar(value="—")
        self.valid_var = tk.StringVar(value="—")

        ttk.Label(result_frame, text="Трикутників:").grid(row=0, column=0, sticky="w", padx=5, pady=2)
        ttk.Label(result_frame, textvariable=self.triangles_var).grid(row=0, column=1, sticky="w", padx=5, pady=2)

        ttk.Label(result_frame, text="Вершин оболонки:").grid(row=1, column=0, sticky="w", padx=5, pady=2)
        ttk.Label(result_frame, textvariable=self.hull_var).grid(row=1, column=1, sticky="w", padx=5, pady=2)

        ttk.Label(result_frame, text="Валідація:").grid(row=2, column=0, sticky="w", padx=5, pady=2)
        ttk.Label(result_frame, textvariable=self.valid_var).grid(row=2, column=1, sticky="w", padx=5, pady=2)

        # --- Фрейм для прев'ю ---
        plot_frame = ttk.LabelFrame(main, text="Прев'ю")
        plot_frame.pack(fill="both", expand=True, pady=5)

        self.fig = Figure(figsize=(4, 3))
        self.ax = self.fig.add_axes((0, 0, 1, 1))
        self.canvas = FigureCanvasTkAgg(self.fig, master=plot_frame)
        self.canvas.draw()
        self.canvas.get_tk_widget().pack(fill="both", expand=True)

    def _read_config(self) -> LowPolyConfig:
        seed_text = self.entries["seed"].get().strip()
        return LowPolyConfig(
            width=parse_int(self.entries["width"].get(), "Ширина", 1),
            height=parse_int(self.entries["height"].get(), "Висота", 1),
            points=parse_int(self.entries["points"].get(), "Кількість точок", 0),
            seed=parse_int(seed_text, "Seed", 0) if seed_text else None,
            color_begin=self.entries["color_begin"].get().strip(),
            color_end=self.entries["color_end"].get().strip(),
            backend=self.backend.get(),
        )

    def update_plot(self, config: LowPolyConfig):
        """Перемалювати прев'ю для поточного результату."""
        self.ax.clear()
        draw_lowpoly(self.ax, self.result.triangles, self.result.colors, config.width, config.height)
        if not self.result.triangles:
            self.ax.set_title("Немає трикутників")
        self.canvas.draw()

    def run_pipeline(self):
        try:
            config = self._read_config()
            self.result = generate_lowpoly(config)
        except (ValueError, LowPolyError) as e:
            messagebox.showerror("Помилка", str(e))
            return

        self.update_plot(config)

        # --- Оновлюємо поля ---
        tri = self.result.triangulation
        report = tri.validate()
        self.triangles_var.set(str(len(tri)))
        self.hull_var.set(str(len(tri.hull())))
        if report["bad_orientation"] or report["bad_edges"] or report["non_delaunay"]:
            self.valid_var.set("Є проблеми (див. консоль)")
        else:
            self.valid_var.set("OK")
        print("VALIDATION:", report)

    def save_svg(self):
        if self.result is None:
            messagebox.showinfo("Немає зображення", "Спершу згенеруйте зображення.")
            return
        path = filedialog.asksaveasfilename(defaultextension=".svg", filetypes=[("SVG", "*.svg")])
        if not path:
            return
        try:
            output_result(self.result.drawing, path)
        except LowPolyError as e:
            messagebox.showerror("Помилка запису", str(e))
            return
        messagebox.showinfo("Готово", f"Записано {path}")


if __name__ == "__main__":
    app = LowPolyApp()
    app.mainloop()
