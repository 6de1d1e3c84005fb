# Copyright (c) 2026 Webswatch
# SPDX-License-Identifier: MIT

"""
Command-line interface.

    webswatch palette photo.jpg -o palette.png -k 6 --font Bold.ttf
    webswatch mix "#6432c8" "#0000ff" --ratio 0.5
    webswatch adjust "#6432c8" --dr 50 --dg 30 --db -100

The label font defaults to the ``WEBSWATCH_FONT`` environment variable.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

from webswatch.color.rgb import RGBColor
from webswatch.errors import InvalidArgumentError
from webswatch.palette import QuantizeMethod, RenderConfig, make_palette

logger = logging.getLogger("webswatch")

FONT_ENV_VAR = "WEBSWATCH_FONT"


def setup_logging(verbosity: int = 0) -> None:
    level = [logging.WARNING, logging.INFO, logging.DEBUG][min(verbosity, 2)]
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="webswatch", description="Colors and palette swatches for web images")
    p.add_argument("-v", "--verbose", action="count", default=0, help="Increase verbosity (-v, -vv).")

    sub = p.add_subparsers(dest="cmd", required=True)

    pp = sub.add_parser("palette", help="Extract a palette from an image and render it as a PNG.")
    pp.add_argument("image", type=Path, help="Source image file.")
    pp.add_argument("-o", "--out", type=Path, required=True, help="Output PNG path.")
    pp.add_argument("-k", "--colors", type=int, default=6, help="Number of colors (default: 6).")
    pp.add_argument("--method", choices=[m.value for m in QuantizeMethod],
                    default=QuantizeMethod.MEDIAN_CUT.value, help="Quantization backend.")
    pp.add_argument("--font", type=Path, default=os.environ.get(FONT_ENV_VAR),
                    help=f"TrueType font for labels (default: ${FONT_ENV_VAR}).")
    pp.add_argument("--max-pixels", type=int, default=0, help="Downsample to about this many pixels (0 = off).")
    pp.set_defaults(func=cmd_palette)

    mp = sub.add_parser("mix", help="Blend two hex colors.")
    mp.add_argument("first", help="Start color, e.g. '#6432c8'.")
    mp.add_argument("second", help="End color.")
    mp.add_argument("--ratio", type=float, default=0.5, help="Blend ratio in [0, 1] (default: 0.5).")
    mp.set_defaults(func=cmd_mix)

    ap = sub.add_parser("adjust", help="Add per-channel deltas to a hex color.")
    ap.add_argument("color", help="Hex color, e.g. '#6432c8'.")
    ap.add_argument("--dr", type=int, default=0, help="Red delta.")
    ap.add_argument("--dg", type=int, default=0, help="Green delta.")
    ap.add_argument("--db", type=int, default=0, help="Blue delta.")
    ap.set_defaults(func=cmd_adjust)

    return p


# =============== Commands ===============
def cmd_palette(args: argparse.Namespace) -> int:
    config = RenderConfig(font_path=args.font)
    result = make_palette(
        args.image,
        args.out,
        k=args.colors,
        method=QuantizeMethod(args.method),
        max_pixels=args.max_pixels,
        config=config,
    )
    if result.is_err():
        print(f"error: {result.error}", file=sys.stderr)
        return 1

    for r, g, b in result.value:
        print(RGBColor(r, g, b).to_hex())
    logger.info("Palette saved to %s", args.out)
    return 0


def cmd_mix(args: argparse.Namespace) -> int:
    first = _parse_color(args.first)
    second = _parse_color(args.second)
    print(first.mix_with(second, args.ratio).to_hex())
    return 0


def cmd_adjust(args: argparse.Namespace) -> int:
    color = _parse_color(args.color)
    print(color.increase_all(args.dr, args.dg, args.db).to_hex())
    return 0


def _parse_color(text: str) -> RGBColor:
    color = RGBColor.from_hex(text)
    if color is None:
        raise InvalidArgumentError(f"not a hex color: {text!r}")
    return color


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)
    try:
        return args.func(args)
    except InvalidArgumentError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
