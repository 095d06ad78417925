"""
Closed-path geometry for rectangles with selectively rounded corners.

Coordinates are y-down (screen space).  Arc angles are in degrees and grow
clockwise: 0° points along +x, 90° along +y.  Every path produced here is a
single clockwise contour that starts just after the top-left corner.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

from .corners import Corner

Point = tuple[float, float]


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle supplied by the host layout."""

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def of_size(cls, width: float, height: float) -> Rect:
        return cls(0.0, 0.0, width, height)

    @property
    def is_empty(self) -> bool:
        return not (self.width > 0 and self.height > 0)


@dataclass(frozen=True)
class MoveTo:
    point: Point


@dataclass(frozen=True)
class LineTo:
    point: Point


@dataclass(frozen=True)
class ArcTo:
    """A circular arc from the current point to *end*, sweeping clockwise."""

    center: Point
    radius: float
    start_angle: float
    end_angle: float
    end: Point

    @property
    def sweep(self) -> float:
        return self.end_angle - self.start_angle


@dataclass(frozen=True)
class Close:
    pass


Segment = Union[MoveTo, LineTo, ArcTo, Close]


@dataclass(frozen=True)
class ClosedPath:
    """One closed contour made of line and arc segments."""

    segments: tuple[Segment, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.segments

    @property
    def start(self) -> Point | None:
        if self.is_empty:
            return None
        return self.segments[0].point

    @property
    def end_point(self) -> Point | None:
        """Point reached after ``Close`` (the start of the contour)."""
        if self.is_empty:
            return None
        current = self.start
        for seg in self.segments:
            if isinstance(seg, (MoveTo, LineTo)):
                current = seg.point
            elif isinstance(seg, ArcTo):
                current = seg.end
            elif isinstance(seg, Close):
                current = self.start
        return current

    @property
    def arcs(self) -> list[ArcTo]:
        return [seg for seg in self.segments if isinstance(seg, ArcTo)]

    def translated(self, dx: float, dy: float) -> ClosedPath:
        def move(p: Point) -> Point:
            return (p[0] + dx, p[1] + dy)

        out: list[Segment] = []
        for seg in self.segments:
            if isinstance(seg, MoveTo):
                out.append(MoveTo(move(seg.point)))
            elif isinstance(seg, LineTo):
                out.append(LineTo(move(seg.point)))
            elif isinstance(seg, ArcTo):
                out.append(ArcTo(move(seg.center), seg.radius, seg.start_angle,
                                 seg.end_angle, move(seg.end)))
            else:
                out.append(seg)
        return ClosedPath(tuple(out))

    def scaled(self, factor: float) -> ClosedPath:
        def mul(p: Point) -> Point:
            return (p[0] * factor, p[1] * factor)

        out: list[Segment] = []
        for seg in self.segments:
            if isinstance(seg, MoveTo):
                out.append(MoveTo(mul(seg.point)))
            elif isinstance(seg, LineTo):
                out.append(LineTo(mul(seg.point)))
            elif isinstance(seg, ArcTo):
                out.append(ArcTo(mul(seg.center), seg.radius * factor, seg.start_angle,
                                 seg.end_angle, mul(seg.end)))
            else:
                out.append(seg)
        return ClosedPath(tuple(out))

    def points(self, arc_steps: int = 16) -> list[Point]:
        """Flatten the contour into polygon vertices (closing vertex not repeated).

        Each arc is approximated by *arc_steps* chords; the chord end points
        lie exactly on the arc and the last one is the arc's exact end point.
        """
        steps = max(1, int(arc_steps))
        pts: list[Point] = []
        for seg in self.segments:
            if isinstance(seg, (MoveTo, LineTo)):
                pts.append(seg.point)
            elif isinstance(seg, ArcTo):
                cx, cy = seg.center
                for i in range(1, steps):
                    theta = math.radians(seg.start_angle + seg.sweep * i / steps)
                    pts.append((cx + seg.radius * math.cos(theta),
                                cy + seg.radius * math.sin(theta)))
                pts.append(seg.end)
        if len(pts) > 1 and pts[-1] == pts[0]:
            pts.pop()
        return pts

    def to_svg(self, precision: int = 3) -> str:
        """Return SVG path data (``d`` attribute) for this contour."""

        def fmt(v: float) -> str:
            text = f"{v:.{precision}f}"
            if "." in text:
                text = text.rstrip("0").rstrip(".")
            return "0" if text == "-0" else text

        parts: list[str] = []
        for seg in self.segments:
            if isinstance(seg, MoveTo):
                parts.append(f"M {fmt(seg.point[0])} {fmt(seg.point[1])}")
            elif isinstance(seg, LineTo):
                parts.append(f"L {fmt(seg.point[0])} {fmt(seg.point[1])}")
            elif isinstance(seg, ArcTo):
                r = fmt(seg.radius)
                # large-arc 0, sweep 1: quarter arcs drawn clockwise in y-down space
                parts.append(f"A {r} {r} 0 0 1 {fmt(seg.end[0])} {fmt(seg.end[1])}")
            else:
                parts.append("Z")
        return " ".join(parts)


def effective_radius(rect: Rect, corners: Corner, corner: Corner, radius: float) -> float:
    """Radius actually used at *corner*: clamped to half the shorter side, 0 if unselected."""
    if not (radius > 0) or corner not in corners:
        return 0.0
    width = max(rect.width, 0.0)
    height = max(rect.height, 0.0)
    return min(radius, width / 2, height / 2)


class _PathWriter:
    """Accumulates segments, dropping zero-length lines."""

    def __init__(self, start: Point):
        self._start = start
        self._current = start
        self._segments: list[Segment] = [MoveTo(start)]

    def line_to(self, point: Point) -> None:
        if point != self._current:
            self._segments.append(LineTo(point))
            self._current = point

    def arc(self, center: Point, radius: float, start_angle: float, end: Point) -> None:
        if radius <= 0:
            return
        self._segments.append(ArcTo(center, radius, start_angle, start_angle + 90.0, end))
        self._current = end

    def close(self) -> ClosedPath:
        # The edge back to the start is implied by Close.
        if len(self._segments) > 1 and self._current == self._start \
                and isinstance(self._segments[-1], LineTo):
            self._segments.pop()
        self._segments.append(Close())
        return ClosedPath(tuple(self._segments))


def build_rounded_path(rect: Rect, corners: Corner, radius: float) -> ClosedPath:
    """Build the outline of *rect* with each corner in *corners* rounded by *radius*.

    Corners outside *corners* stay sharp.  The radius is clamped per corner to
    half the shorter side so opposite arcs touch but never overlap.  Empty
    rectangles give an empty path; non-positive radii give the plain
    rectangle, identical to :func:`rect_path`.
    """
    if rect.is_empty:
        return ClosedPath()

    x, y, w, h = rect.x, rect.y, rect.width, rect.height
    right, bottom = x + w, y + h
    tl = effective_radius(rect, corners, Corner.TOP_LEFT, radius)
    tr = effective_radius(rect, corners, Corner.TOP_RIGHT, radius)
    br = effective_radius(rect, corners, Corner.BOTTOM_RIGHT, radius)
    bl = effective_radius(rect, corners, Corner.BOTTOM_LEFT, radius)

    path = _PathWriter((x + tl, y))
    path.line_to((right - tr, y))
    path.arc((right - tr, y + tr), tr, 270.0, (right, y + tr))
    path.line_to((right, bottom - br))
    path.arc((right - br, bottom - br), br, 0.0, (right - br, bottom))
    path.line_to((x + bl, bottom))
    path.arc((x + bl, bottom - bl), bl, 90.0, (x, bottom - bl))
    path.line_to((x, y + tl))
    path.arc((x + tl, y + tl), tl, 180.0, (x + tl, y))
    return path.close()


def rect_path(rect: Rect) -> ClosedPath:
    """Plain rectangle contour with four sharp corners."""
    if rect.is_empty:
        return ClosedPath()
    x, y = rect.x, rect.y
    right, bottom = x + rect.width, y + rect.height
    return ClosedPath((
        MoveTo((x, y)),
        LineTo((right, y)),
        LineTo((right, bottom)),
        LineTo((x, bottom)),
        Close(),
    ))
