import argparse
import re
import sys
from dataclasses import replace
from pathlib import Path

from .animation import AnimationSpec
from .api import render_png, render_svg
from .config import Config, load_config
from .corners import format_corners, parse_corners
from .renderers import list_formats

_SIZE_RE = re.compile(r"^\s*(\d+)\s*[xX×]\s*(\d+)\s*$")


def _parse_size(text: str) -> tuple[int, int]:
    """Parse ``WIDTHxHEIGHT`` into a pair of positive integers."""
    m = _SIZE_RE.match(text)
    if not m or int(m.group(1)) <= 0 or int(m.group(2)) <= 0:
        raise argparse.ArgumentTypeError(f"invalid size {text!r}; expected WIDTHxHEIGHT, e.g. 200x120")
    return int(m.group(1)), int(m.group(2))


def _parse_corners_arg(text: str) -> str:
    try:
        return format_corners(parse_corners(text))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def _parse_animation_arg(text: str) -> AnimationSpec:
    try:
        return AnimationSpec.parse(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def _apply_overrides(config: Config, args: argparse.Namespace) -> Config:
    """Return *config* with any command-line overrides applied."""
    top = {}
    if args.size is not None:
        top["width"], top["height"] = args.size
    if args.corners is not None:
        top["corners"] = args.corners
    if args.radius is not None:
        top["radius"] = args.radius
    if args.fill is not None:
        top["fill"] = args.fill

    border = config.border
    if args.border_color is not None:
        border = replace(border, color=args.border_color)
    if args.border_width is not None:
        border = replace(border, width=args.border_width)

    animation = config.animation
    if args.animation is not None:
        spec = args.animation
        animation = replace(animation, curve=spec.curve.value, duration=spec.duration,
                            bounce=spec.bounce)

    return replace(config, border=border, animation=animation, **top)


def main() -> None:
    """CLI entry point: parse arguments, render one frame, and write it to disk."""
    formats = list_formats()
    parser = argparse.ArgumentParser(
        prog="cornercraft",
        description="Render a rectangle with selectively rounded corners to PNG or SVG",
    )
    parser.add_argument(
        "output",
        type=Path,
        help=f"Output file; format taken from the suffix ({', '.join(formats)})",
    )
    parser.add_argument(
        "-c", "--config", type=Path, default=None, help="Path to config.yaml (optional)"
    )
    parser.add_argument("--size", type=_parse_size, default=None, help="Canvas size as WIDTHxHEIGHT")
    parser.add_argument(
        "--corners",
        type=_parse_corners_arg,
        default=None,
        help="Corners to round, e.g. 'top-left,bottom-right', 'all' or 'none'",
    )
    parser.add_argument("--radius", type=float, default=None, help="Corner radius in pixels")
    parser.add_argument("--fill", default=None, help="Fill colour when no --content image is given")
    parser.add_argument("--content", type=Path, default=None, help="Image to clip (PNG output only)")
    parser.add_argument("--border-color", default=None, help="Border stroke colour")
    parser.add_argument("--border-width", type=float, default=None, help="Border stroke width")
    parser.add_argument(
        "--animation",
        type=_parse_animation_arg,
        default=None,
        help="Radius animation as curve[:duration[:bounce]], e.g. linear:1.0 or spring:0.6:0.2",
    )
    parser.add_argument(
        "--from-radius",
        type=float,
        default=None,
        help="Render a frame of the transition from this radius to --radius",
    )
    parser.add_argument(
        "--at",
        type=float,
        default=None,
        help="Seconds into the transition started by --from-radius (default: 0)",
    )

    args = parser.parse_args()

    fmt = args.output.suffix.lower().lstrip(".")
    if fmt not in formats:
        print(f"Error: unsupported output format '{args.output.suffix}' (choices: {', '.join(formats)})",
              file=sys.stderr)
        sys.exit(1)

    if args.config is not None and not args.config.exists():
        print(f"Error: '{args.config}' not found.", file=sys.stderr)
        sys.exit(1)

    try:
        config = _apply_overrides(load_config(args.config), args)
        if fmt == "png":
            args.output.write_bytes(
                render_png(config, content=args.content, from_radius=args.from_radius, at=args.at)
            )
        else:
            if args.content is not None:
                print("Warning: --content is ignored for SVG output.", file=sys.stderr)
            args.output.write_text(
                render_svg(config, from_radius=args.from_radius, at=args.at), encoding="utf-8"
            )
    except Exception as exc:
        print(f"Rendering failed: {exc}", file=sys.stderr)
        sys.exit(1)

    print(f"Written → {args.output}")


if __name__ == "__main__":
    main()
