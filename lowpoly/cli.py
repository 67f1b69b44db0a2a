# lowpoly/cli.py
from __future__ import annotations
import argparse
import logging
from typing import List, Optional

from .color import GRADIENTS
from .config import BACKENDS, LowPolyConfig
from .errors import ConfigError, OutputError
from .pipeline import generate_lowpoly
from .plot import save_preview
from .render import output_result
from .sampling import DEFAULT_POINTS

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_OUTPUT = 1
EXIT_CONFIG = 2


def build_parser() -> argparse.ArgumentParser:
    defaults = LowPolyConfig()
    p = argparse.ArgumentParser(
        prog="lowpoly",
        description="Generate a low-poly SVG from a Delaunay triangulation of random points.",
    )
    p.add_argument("--width", type=int, default=defaults.width)
    p.add_argument("--height", type=int, default=defaults.height)
    p.add_argument("-b", "--color-be", default=defaults.color_begin,
                   help="gradient start color, #RRGGBB (default: %(default)s)")
    p.add_argument("-e", "--color-ed", default=defaults.color_end,
                   help="gradient end color, #RRGGBB (default: %(default)s)")
    p.add_argument("-f", "--file", default=None,
                   help="write the SVG here instead of stdout")
    p.add_argument("-n", "--points", type=int, default=DEFAULT_POINTS,
                   help="number of random points (default: %(default)s)")
    p.add_argument("--seed", type=int, default=None,
                   help="seed for reproducible point sampling")
    p.add_argument("--backend", choices=BACKENDS, default=defaults.backend)
    p.add_argument("--gradient", choices=sorted(GRADIENTS), default=defaults.gradient)
    p.add_argument("--preview", default=None, metavar="PNG",
                   help="also save a raster preview via matplotlib")
    p.add_argument("-v", "--verbose", action="store_true")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = LowPolyConfig(
        width=args.width,
        height=args.height,
        color_begin=args.color_be,
        color_end=args.color_ed,
        points=args.points,
        seed=args.seed,
        backend=args.backend,
        gradient=args.gradient,
        file=args.file,
        preview=args.preview,
    )

    try:
        result = generate_lowpoly(config)
    except ConfigError as e:
        log.error("%s", e)
        return EXIT_CONFIG

    try:
        output_result(result.drawing, config.file)
        if config.preview:
            save_preview(config.preview, result.triangles, result.colors, config.width, config.height)
    except OutputError as e:
        log.error("%s", e)
        return EXIT_OUTPUT
    return EXIT_OK
