"""Rounded-corner shape whose radius is its only animatable field."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import ClassVar

from .corners import Corner
from .geometry import ClosedPath, Rect, build_rounded_path


@dataclass(frozen=True)
class CornerShape:
    """A rectangle outline with *corners* rounded by *radius*.

    ``corners`` changes discretely between renders; ``radius`` is exposed
    through ``animatable_data`` so a scheduler can drive it frame by frame.
    The path is rebuilt on every call to :meth:`path`.
    """

    corners: Corner
    radius: float

    animatable_fields: ClassVar[tuple[str, ...]] = ("radius",)

    @property
    def animatable_data(self) -> float:
        return self.radius

    def with_animatable_data(self, value: float) -> CornerShape:
        return replace(self, radius=value)

    def interpolate(self, target: CornerShape, fraction: float) -> CornerShape:
        """Shape *fraction* of the way to *target*; corners jump straight to the target's."""
        radius = self.radius + (target.radius - self.radius) * fraction
        return CornerShape(target.corners, radius)

    def path(self, rect: Rect) -> ClosedPath:
        return build_rounded_path(rect, self.corners, self.radius)
