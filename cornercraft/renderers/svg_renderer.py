"""
Vector host producing SVG markup.

Content is an SVG fragment string.  Clipping wraps it in a group that
references a ``<clipPath>``; the border is a separate unfilled path placed
after the group so it is never clipped.
"""
from __future__ import annotations

import html
import itertools
from typing import Optional

from ..animation import AnimationSpec, InterpolationScheduler
from ..config import RenderConfig
from ..geometry import ClosedPath
from ..modifier import Color, color_channels, is_transparent

_SVG_NS = "http://www.w3.org/2000/svg"


def svg_color(color: Color) -> str:
    if is_transparent(color):
        return "none"
    if isinstance(color, str):
        return html.escape(color.strip(), quote=True)
    channels = color_channels(color)
    if len(channels) == 3:
        r, g, b = channels
        return f"rgb({r},{g},{b})"
    r, g, b, a = channels
    return f"rgba({r},{g},{b},{a / 255:.3g})"


class SvgHost:
    """Render host producing SVG fragments."""

    name = "svg"

    def __init__(
        self,
        config: Optional[RenderConfig] = None,
        scheduler: Optional[InterpolationScheduler] = None,
    ):
        self.config = config or RenderConfig()
        self.scheduler = scheduler or InterpolationScheduler()
        self._ids = itertools.count(1)

    def clip(self, content: str, path: ClosedPath) -> str:
        if path.is_empty:
            return ""
        clip_id = f"cornercraft-clip-{next(self._ids)}"
        return (
            f'<clipPath id="{clip_id}"><path d="{path.to_svg()}"/></clipPath>'
            f'<g clip-path="url(#{clip_id})">{content}</g>'
        )

    def stroke(self, content: str, path: ClosedPath, color: Color, width: float) -> str:
        if path.is_empty or not (width > 0) or is_transparent(color):
            return content
        return (
            f'{content}<path d="{path.to_svg()}" fill="none" '
            f'stroke="{svg_color(color)}" stroke-width="{width:g}" stroke-linejoin="round"/>'
        )

    def interpolate(self, key: str, value: float, spec: AnimationSpec) -> float:
        return self.scheduler.interpolate(key, value, spec)

    def document(self, body: str, width: float, height: float, *, pad: float = 0) -> str:
        """Wrap *body* in a standalone ``<svg>`` whose view box has *pad* room on every side."""
        background = ""
        if self.config.background:
            background = (
                f'<rect x="{-pad:g}" y="{-pad:g}" width="{width + 2 * pad:g}" '
                f'height="{height + 2 * pad:g}" fill="{svg_color(self.config.background)}"/>'
            )
        return (
            f'<svg xmlns="{_SVG_NS}" width="{width + 2 * pad:g}" height="{height + 2 * pad:g}" '
            f'viewBox="{-pad:g} {-pad:g} {width + 2 * pad:g} {height + 2 * pad:g}">'
            f"{background}{body}</svg>"
        )


def solid_content(width: float, height: float, fill: Color) -> str:
    return f'<rect x="0" y="0" width="{width:g}" height="{height:g}" fill="{svg_color(fill)}"/>'
