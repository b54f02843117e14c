"""CLI entry point for blogstyle."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any

from . import __version__
from .config import OUT_DIR
from .errors import TokenError


def app(argv: list[str] | None = None) -> None:
    """Console script entrypoint."""
    raise SystemExit(main(argv))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="blogstyle",
        description="Design tokens and stylesheet for a static blog.",
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"blogstyle {__version__}",
    )

    sub = parser.add_subparsers(dest="cmd", required=True)

    p_css = sub.add_parser("css", help="Write style.css and tokens.json")
    p_css.add_argument("--out", "-o", type=Path, default=OUT_DIR, help="Output directory")
    p_css.add_argument("--theme", "-t", default="auto", help="light, dark or auto")
    p_css.add_argument("--minify", action="store_true", help="Write style.min.css")

    p_scale = sub.add_parser("scale", help="Print the type scale")
    p_scale.add_argument("--start", type=int, default=-2, help="First step")
    p_scale.add_argument("--stop", type=int, default=4, help="Last step (inclusive)")

    p_lookup = sub.add_parser("lookup", help="Resolve a token label")
    p_lookup.add_argument("table", choices=["weight", "family", "z-index"])
    p_lookup.add_argument("label")

    args = parser.parse_args(argv)

    if args.cmd == "css":
        return _cmd_css(args)
    if args.cmd == "scale":
        return _cmd_scale(args)
    if args.cmd == "lookup":
        return _cmd_lookup(args)

    parser.print_help()
    return 2


def _cmd_css(args: Any) -> int:
    from .site.export import export_assets

    try:
        result = export_assets(args.out, mode=args.theme, minified=bool(args.minify))
    except (TokenError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("✓ Stylesheet written")
    print(f"  Output: {result.output_dir}")
    print(f"  Stylesheet: {result.stylesheet.name}")
    print(f"  Manifest: {result.manifest.name}")
    print(f"  Size: {result.total_bytes / 1024:.1f} KB")

    if result.warnings:
        print(f"\nWarnings ({len(result.warnings)}):")
        for w in result.warnings:
            print(f"  - {w}")
    return 0


def _cmd_scale(args: Any) -> int:
    from .tokens.scale import scale_table

    try:
        lines = [
            f"{r.step:>4}  {r.font_size_css:>10}  {r.line_height_css:>11}"
            for r in scale_table(args.start, args.stop)
        ]
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print(f"{'step':>4}  {'font-size':>10}  {'line-height':>11}")
    for line in lines:
        print(line)
    return 0


def _cmd_lookup(args: Any) -> int:
    from .tokens.lookups import family_of, weight_of, z_index_of

    resolve = {"weight": weight_of, "family": family_of, "z-index": z_index_of}[args.table]
    try:
        value = resolve(args.label)
    except TokenError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(value)
    return 0


if __name__ == "__main__":
    app()
