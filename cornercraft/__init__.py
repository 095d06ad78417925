from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .animation import AnimationSpec, Curve, InterpolationScheduler, Transition
from .api import render_png, render_svg, sample_radius, supported_formats
from .config import AnimationConfig, BorderConfig, Config, RenderConfig
from .corners import Corner, parse_corners
from .geometry import ClosedPath, Rect, build_rounded_path, rect_path
from .modifier import Border, DecoratedContent, RenderHost, decorate
from .shape import CornerShape

try:
    __version__ = version("cornercraft")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "AnimationConfig",
    "AnimationSpec",
    "Border",
    "BorderConfig",
    "ClosedPath",
    "Config",
    "Corner",
    "CornerShape",
    "Curve",
    "DecoratedContent",
    "InterpolationScheduler",
    "Rect",
    "RenderConfig",
    "RenderHost",
    "Transition",
    "build_rounded_path",
    "decorate",
    "parse_corners",
    "rect_path",
    "render_png",
    "render_svg",
    "sample_radius",
    "supported_formats",
]
