"""
Rendering hosts that turn a ``DecoratedContent`` into concrete output.
"""
from __future__ import annotations

from typing import Optional, Union

from ..animation import InterpolationScheduler
from ..config import RenderConfig
from .pil_renderer import PillowHost
from .svg_renderer import SvgHost


_RENDERERS: dict[str, type[Union[PillowHost, SvgHost]]] = {
    "png": PillowHost,
    "svg": SvgHost,
}


def get_renderer(
    fmt: str,
    config: Optional[RenderConfig] = None,
    scheduler: Optional[InterpolationScheduler] = None,
) -> Union[PillowHost, SvgHost]:
    """Get the rendering host for the output format *fmt*."""
    if fmt not in _RENDERERS:
        raise ValueError(
            f"Unknown format: {fmt}. Supported: {list(_RENDERERS.keys())}"
        )
    return _RENDERERS[fmt](config, scheduler)


def list_formats() -> list[str]:
    """Return list of supported output formats."""
    return list(_RENDERERS.keys())


__all__ = ["PillowHost", "SvgHost", "get_renderer", "list_formats"]
