"""Command-line entry point: query max-chroma colors and render previews.

Usage:
    huedial color 42.79
    huedial strip --output strip.png --width 720 --height 48
    huedial dial --output dial.png --size 512
"""

import argparse
import logging
import sys
from pathlib import Path

from huedial import defaults
from huedial.colorspace import (
    find_max_chroma_color,
    find_max_chroma_jzazbz,
    linear_to_display_p3,
)
from huedial.dial_image import render_hue_dial, render_hue_strip

logger = logging.getLogger(__name__)


def _cmd_color(args: argparse.Namespace) -> int:
    rgb = find_max_chroma_color(args.hue, steps=args.steps)
    jab = find_max_chroma_jzazbz(args.hue, steps=args.steps)
    encoded = [float(linear_to_display_p3(min(max(c, 0.0), 1.0))) for c in rgb]

    print(f"hue          {args.hue:.4f}")
    print("jzazbz       " + " ".join(f"{v:.6f}" for v in jab))
    print("linear p3    " + " ".join(f"{v:.6f}" for v in rgb))
    print("encoded p3   " + " ".join(f"{v:.6f}" for v in encoded))
    return 0


def _cmd_strip(args: argparse.Namespace) -> int:
    image = render_hue_strip(args.width, args.height)
    image.save(args.output)
    logger.info("Wrote %s (%dx%d)", args.output, args.width, args.height)
    return 0


def _cmd_dial(args: argparse.Namespace) -> int:
    image = render_hue_dial(args.size, args.ring)
    image.save(args.output)
    logger.info("Wrote %s (%dpx)", args.output, args.size)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="huedial",
        description="Max-chroma Display P3 colors around the Jzazbz hue wheel.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    color = sub.add_parser("color", help="Print the max-chroma color at a hue")
    color.add_argument("hue", type=float, help="Hue in degrees")
    color.add_argument(
        "--steps",
        type=int,
        default=defaults.DEFAULT_BISECTION_STEPS,
        help=f"Bisection iterations (default: {defaults.DEFAULT_BISECTION_STEPS})",
    )
    color.set_defaults(func=_cmd_color)

    strip = sub.add_parser("strip", help="Render a horizontal hue strip PNG")
    strip.add_argument("--output", type=Path, default=Path("hue_strip.png"))
    strip.add_argument("--width", type=int, default=defaults.DEFAULT_STRIP_SIZE[0])
    strip.add_argument("--height", type=int, default=defaults.DEFAULT_STRIP_SIZE[1])
    strip.set_defaults(func=_cmd_strip)

    dial = sub.add_parser("dial", help="Render a hue ring PNG")
    dial.add_argument("--output", type=Path, default=Path("hue_dial.png"))
    dial.add_argument("--size", type=int, default=defaults.DEFAULT_DIAL_SIZE)
    dial.add_argument(
        "--ring",
        type=float,
        default=defaults.DEFAULT_DIAL_RING_FRACTION,
        help="Ring width as a fraction of the radius",
    )
    dial.set_defaults(func=_cmd_dial)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return args.func(args)
    except ValueError as exc:
        logger.error("%s", exc)
        return 2


if __name__ == "__main__":
    sys.exit(main())
