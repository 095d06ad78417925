"""
Compose clip-to-shape, border stroke and radius animation into one value.

``decorate`` never draws anything itself.  It returns a ``DecoratedContent``
that a host renderer turns into output through three capabilities: clip a
subtree to a path, stroke a path, and interpolate a scalar field.
"""
from __future__ import annotations

import warnings
from dataclasses import dataclass, field
from typing import Any, Optional, Protocol, Union

from .animation import AnimationSpec, Curve
from .corners import Corner
from .geometry import ClosedPath, Rect
from .shape import CornerShape

Color = Union[str, tuple[int, ...]]

TRANSPARENT: tuple[int, int, int, int] = (0, 0, 0, 0)

RADIUS_KEY = "corner_radius"


class RenderHost(Protocol):
    """Services a rendering backend provides to ``DecoratedContent.render``."""

    def clip(self, content: Any, path: ClosedPath) -> Any: ...

    def stroke(self, content: Any, path: ClosedPath, color: Color, width: float) -> Any: ...

    def interpolate(self, key: str, value: float, spec: AnimationSpec) -> float: ...


def color_channels(color: tuple[int, ...]) -> tuple[int, ...]:
    """Return an RGB(A) tuple unchanged after checking its shape and range."""
    channels = tuple(color)
    if len(channels) not in (3, 4) or not all(
        isinstance(c, int) and 0 <= c <= 255 for c in channels
    ):
        raise ValueError(
            f"Invalid colour: {color!r}. Expected (r, g, b) or (r, g, b, a) with 0-255 ints"
        )
    return channels


def is_transparent(color: Optional[Color]) -> bool:
    if color is None:
        return True
    if isinstance(color, str):
        return color.strip().lower() in ("", "none", "transparent")
    channels = color_channels(color)
    return len(channels) == 4 and channels[3] == 0


@dataclass(frozen=True)
class Border:
    color: Color = TRANSPARENT
    width: float = 0.0

    @property
    def visible(self) -> bool:
        return self.width > 0 and not is_transparent(self.color)


@dataclass(frozen=True)
class DecoratedContent:
    """Content clipped to a corner shape and outlined with a border."""

    content: Any
    shape: CornerShape
    border: Border = field(default_factory=Border)
    animation: AnimationSpec = field(default_factory=AnimationSpec.none)
    key: str = RADIUS_KEY

    @property
    def animated(self) -> bool:
        return self.animation.curve is not Curve.NONE

    def path(self, rect: Rect, radius: Optional[float] = None) -> ClosedPath:
        """Outline shared by the clip and the border, optionally at another *radius*."""
        shape = self.shape if radius is None else self.shape.with_animatable_data(radius)
        return shape.path(rect)

    def render(self, host: RenderHost, rect: Rect) -> Any:
        """Render through *host*: clip first, then stroke the same path on top."""
        radius = host.interpolate(self.key, self.shape.radius, self.animation)
        path = self.path(rect, radius)
        clipped = host.clip(self.content, path)
        return host.stroke(clipped, path, self.border.color, self.border.width)


def decorate(
    content: Any,
    corners: Corner,
    radius: float,
    border_color: Optional[Color] = None,
    border_width: float = 0,
    animation: Optional[AnimationSpec] = None,
    *,
    key: Optional[str] = None,
) -> DecoratedContent:
    """Wrap *content* so it renders clipped to *corners* rounded by *radius*.

    Args:
        content: Host-specific visual subtree (a PIL image, an SVG fragment, ...).
        corners: Corners to round; the rest stay sharp.
        radius: Requested corner radius, clamped per corner at render time.
        border_color: Stroke colour; ``None`` means fully transparent.
        border_width: Stroke width; 0 draws nothing.
        animation: How radius changes between renders are interpolated.
            ``None`` or ``AnimationSpec.none()`` applies them immediately.
        key: Name of the radius field in the host's scheduler.  Required when
            *animation* animates, since views sharing a host need distinct
            fields; unanimated views fall back to ``RADIUS_KEY``.

    Raises:
        ValueError: If *animation* animates and no *key* is given, or if
            *border_color* is a malformed tuple.
    """
    animation = animation or AnimationSpec.none()
    if animation.animates and key is None:
        raise ValueError(
            "Animated decorations need a key naming their radius field, "
            "e.g. decorate(..., key='avatar')"
        )
    if border_color is not None and not isinstance(border_color, str):
        border_color = color_channels(border_color)
    if border_width > 0 and border_color is None:
        warnings.warn(
            f"border_width={border_width} given without border_color; "
            "the border will be transparent.",
            stacklevel=2,
        )
    return DecoratedContent(
        content=content,
        shape=CornerShape(corners, radius),
        border=Border(TRANSPARENT if border_color is None else border_color,
                      max(border_width, 0)),
        animation=animation,
        key=RADIUS_KEY if key is None else key,
    )
