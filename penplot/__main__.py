"""CLI entry point for the penplot parts.

Usage:
    python -m penplot --list                  Output JSON registry of all parts
    python -m penplot --render [--stl]        Build SCAD (and STL) files
    python -m penplot --render --part cap-spacer --fn 128
    python -m penplot --plot points.txt -o plot.gcode
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from .config import check_facet_count
from .errors import ConfigurationError
from .export import export_stl
from .gcode import Printer, read_points
from .logging_config import setup_logging
from .registry import NON_PRINTABLE, get_registry, list_parts

logger = logging.getLogger("penplot")


def render_all(build_dir="build", parts=None, fn=None, stl=False):
    """Render registered parts to SCAD files; returns the written paths."""
    if fn is not None:
        check_facet_count(fn)
    build_dir = Path(build_dir)
    build_dir.mkdir(parents=True, exist_ok=True)

    registry = get_registry()
    names = parts or sorted(registry)
    unknown = [name for name in names if name not in registry]
    if unknown:
        raise ConfigurationError(f"Unknown part(s): {', '.join(unknown)}")

    written = []
    for name in names:
        factory, ptype = registry[name]
        try:
            shape = factory() if fn is None else factory(fn=fn)
            scad_path = build_dir / f"{name}.scad"
            model = shape.build()
            scad_path.write_text(model.dumps())
            logger.info("Rendered: %s", scad_path)
            written.append(scad_path)
            if stl and ptype not in NON_PRINTABLE:
                written.append(export_stl(model, scad_path.with_suffix(".stl")))
        except Exception:
            logger.error("Failed to render %s", name)
            raise
    return written


def plot(points_path, out_path):
    printer = Printer()
    printer.draw_points(read_points(points_path))
    return printer.save(out_path)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Pen plotter parts and G-code")
    parser.add_argument("--list", action="store_true", help="List all parts as JSON")
    parser.add_argument("--render", action="store_true", help="Render parts to SCAD")
    parser.add_argument(
        "--part", action="append", dest="parts", metavar="NAME",
        help="Render only this part (repeatable)",
    )
    parser.add_argument("--out", default="build", help="Output directory for --render")
    parser.add_argument("--fn", type=int, default=None, help="Facet count override")
    parser.add_argument("--stl", action="store_true", help="Also export STL")
    parser.add_argument("--plot", metavar="POINTS", help="Points file to plot as G-code")
    parser.add_argument("-o", "--output", default="plot.gcode", help="G-code output path")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    if args.list:
        parts = list_parts()
        print(json.dumps(parts, indent=2))
    elif args.render:
        render_all(args.out, parts=args.parts, fn=args.fn, stl=args.stl)
    elif args.plot:
        plot(args.plot, args.output)
    else:
        parser.print_help()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
