"""
Raster host backed by PIL.

Content is a ``PIL.Image``.  Clipping multiplies the image's alpha by a
mask of the path; strokes are drawn on a transparent overlay and
composited on top.  Both are drawn at ``supersample`` times the output
resolution and downsampled for anti-aliasing.
"""
from __future__ import annotations

import io
import math
from typing import Optional

from PIL import Image, ImageChops, ImageColor, ImageDraw

from ..animation import AnimationSpec, InterpolationScheduler
from ..config import RenderConfig
from ..geometry import ClosedPath
from ..modifier import Color, color_channels, is_transparent


def to_rgba(color: Color) -> tuple[int, int, int, int]:
    """Normalise a colour name, hex string or RGB(A) tuple to an RGBA tuple."""
    if is_transparent(color):
        return (0, 0, 0, 0)
    if isinstance(color, str):
        return ImageColor.getcolor(color.strip(), "RGBA")
    channels = color_channels(color)
    if len(channels) == 3:
        return (*channels, 255)
    return channels


def solid_content(width: int, height: int, fill: Color) -> Image.Image:
    """Return a *width* × *height* RGBA image filled with *fill*."""
    return Image.new("RGBA", (max(int(width), 0), max(int(height), 0)), to_rgba(fill))


def to_png(img: Image.Image) -> bytes:
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


def flatten(img: Image.Image, background: str) -> Image.Image:
    """Composite *img* over an opaque *background*; empty background keeps transparency."""
    if not background:
        return img
    canvas = Image.new("RGBA", img.size, to_rgba(background))
    return Image.alpha_composite(canvas, img.convert("RGBA"))


class PillowHost:
    """Render host producing RGBA ``PIL.Image`` objects."""

    name = "png"

    def __init__(
        self,
        config: Optional[RenderConfig] = None,
        scheduler: Optional[InterpolationScheduler] = None,
    ):
        self.config = config or RenderConfig()
        self.scheduler = scheduler or InterpolationScheduler()

    @property
    def _scale(self) -> int:
        return max(1, int(self.config.supersample))

    def _downsample(self, img: Image.Image, size: tuple[int, int]) -> Image.Image:
        if img.size == size:
            return img
        return img.resize(size, Image.LANCZOS)

    def mask(self, path: ClosedPath, size: tuple[int, int]) -> Image.Image:
        """Return an ``L`` mask of *size* that is 255 inside *path*."""
        s = self._scale
        big = Image.new("L", (size[0] * s, size[1] * s), 0)
        if not path.is_empty:
            pts = path.scaled(s).points(self.config.arc_steps)
            if len(pts) >= 3:
                ImageDraw.Draw(big).polygon(pts, fill=255)
        return self._downsample(big, size)

    def clip(self, content: Image.Image, path: ClosedPath) -> Image.Image:
        rgba = content.convert("RGBA")
        alpha = ImageChops.multiply(rgba.getchannel("A"), self.mask(path, rgba.size))
        rgba.putalpha(alpha)
        return rgba

    def stroke(self, content: Image.Image, path: ClosedPath, color: Color,
               width: float) -> Image.Image:
        """Draw *path* centred on its outline, growing the canvas so the outer half fits."""
        if path.is_empty or not (width > 0) or is_transparent(color):
            return content

        pad = math.ceil(width / 2)
        canvas = Image.new("RGBA", (content.width + 2 * pad, content.height + 2 * pad), (0, 0, 0, 0))
        canvas.paste(content.convert("RGBA"), (pad, pad))

        s = self._scale
        overlay = Image.new("RGBA", (canvas.width * s, canvas.height * s), (0, 0, 0, 0))
        pts = path.translated(pad, pad).scaled(s).points(self.config.arc_steps)
        # Repeat the first edge so the closing vertex gets a joint too
        ImageDraw.Draw(overlay).line(
            pts + pts[:2],
            fill=to_rgba(color),
            width=max(1, round(width * s)),
            joint="curve",
        )
        return Image.alpha_composite(canvas, self._downsample(overlay, canvas.size))

    def interpolate(self, key: str, value: float, spec: AnimationSpec) -> float:
        return self.scheduler.interpolate(key, value, spec)
