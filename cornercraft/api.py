"""Programmatic API for rendering a single rounded-rectangle frame."""
from __future__ import annotations

import warnings
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional, Union

from PIL import Image

from .animation import InterpolationScheduler
from .config import Config, load_config, load_config_from_dict
from .geometry import Rect
from .modifier import RADIUS_KEY, DecoratedContent, decorate
from .renderers import list_formats
from .renderers.pil_renderer import PillowHost, flatten, to_png
from .renderers.pil_renderer import solid_content as solid_image
from .renderers.svg_renderer import SvgHost
from .renderers.svg_renderer import solid_content as solid_fragment

ConfigLike = Union[Config, Mapping[str, Any], str, Path, None]


class _FrameClock:
    """Clock pinned to a chosen instant, for rendering one frame of a transition."""

    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


def render_png(
    config: ConfigLike = None,
    *,
    content: Union[Image.Image, str, Path, None] = None,
    from_radius: Optional[float] = None,
    at: Optional[float] = None,
) -> bytes:
    """Render the configured shape as PNG bytes.

    Args:
        config: ``None``, a ``Config``, a dict using the ``config.yaml``
            schema, or a path to a YAML config file.
        content: Image to clip.  Defaults to a solid ``config.fill`` image.
        from_radius: Radius the shape is animating from.  With *at*, the
            frame shows the radius *at* seconds into the transition towards
            ``config.radius``.
        at: Seconds since the transition started.
    """
    cfg = _resolve_config(config)
    image = _resolve_image(content, cfg)
    host = PillowHost(cfg.render, _scheduler_for(cfg, from_radius, at))
    out = _decorate(cfg, image).render(host, Rect.of_size(cfg.width, cfg.height))
    return to_png(flatten(out, cfg.render.background))


def render_svg(
    config: ConfigLike = None,
    *,
    content: Optional[str] = None,
    from_radius: Optional[float] = None,
    at: Optional[float] = None,
) -> str:
    """Render the configured shape as a standalone SVG document.

    *content* is an SVG fragment laid out in a ``width`` × ``height`` box;
    it defaults to a rectangle filled with ``config.fill``.
    """
    cfg = _resolve_config(config)
    fragment = content if content is not None else solid_fragment(cfg.width, cfg.height, cfg.fill)
    host = SvgHost(cfg.render, _scheduler_for(cfg, from_radius, at))
    decorated = _decorate(cfg, fragment)
    body = decorated.render(host, Rect.of_size(cfg.width, cfg.height))
    pad = decorated.border.width / 2 if decorated.border.visible else 0
    return host.document(body, cfg.width, cfg.height, pad=pad)


def sample_radius(config: ConfigLike, from_radius: float, at: float) -> float:
    """Radius *at* seconds into a transition from *from_radius* to ``config.radius``."""
    cfg = _resolve_config(config)
    return _scheduler_for(cfg, from_radius, at).value(RADIUS_KEY)


def supported_formats() -> list[str]:
    """Return supported output formats."""
    return list_formats()


def _decorate(cfg: Config, content: Any) -> DecoratedContent:
    return decorate(
        content,
        cfg.corner_set(),
        cfg.radius,
        border_color=cfg.border.color or None,
        border_width=cfg.border.width if cfg.border.color else 0,
        animation=cfg.animation.to_spec(),
        key=RADIUS_KEY,
    )


def _scheduler_for(
    cfg: Config, from_radius: Optional[float], at: Optional[float]
) -> InterpolationScheduler:
    """Scheduler whose radius field is *at* seconds into a transition from *from_radius*."""
    clock = _FrameClock(0.0)
    scheduler = InterpolationScheduler(clock=clock)
    if from_radius is not None:
        spec = cfg.animation.to_spec()
        scheduler.interpolate(RADIUS_KEY, from_radius, spec)
        scheduler.interpolate(RADIUS_KEY, cfg.radius, spec)
        clock.now = at or 0.0
    return scheduler


def _resolve_config(config: ConfigLike) -> Config:
    if config is None:
        return Config()
    if isinstance(config, Config):
        return config
    if isinstance(config, Mapping):
        return load_config_from_dict(config)
    if isinstance(config, (str, Path)):
        path = Path(config)
        if not path.exists():
            raise FileNotFoundError(f"config file '{path}' not found.")
        return load_config(path)
    raise TypeError(
        "config must be None, Config, dict-like mapping, or a config file path."
    )


def _resolve_image(content: Union[Image.Image, str, Path, None], cfg: Config) -> Image.Image:
    if cfg.width <= 0 or cfg.height <= 0:
        raise ValueError(
            f"width and height must be positive to render an image, got {cfg.width}x{cfg.height}"
        )
    if content is None:
        return solid_image(cfg.width, cfg.height, cfg.fill)
    if isinstance(content, (str, Path)):
        path = Path(content)
        if not path.exists():
            raise FileNotFoundError(f"content image '{path}' not found.")
        with Image.open(path) as img:
            content = img.convert("RGBA")
    if not isinstance(content, Image.Image):
        raise TypeError("content must be None, a PIL image, or an image file path.")

    size = (int(cfg.width), int(cfg.height))
    if content.size != size:
        warnings.warn(
            f"Content image is {content.width}x{content.height}, "
            f"resizing to {size[0]}x{size[1]}.",
            stacklevel=3,
        )
        content = content.resize(size, Image.LANCZOS)
    return content
