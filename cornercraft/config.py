from __future__ import annotations

import yaml
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from .animation import AnimationSpec
from .corners import Corner, parse_corners


@dataclass
class BorderConfig:
    """Stroke drawn along the clip outline."""

    color: str = ""  # empty = transparent
    width: float = 0  # stroke width in pixels (0 = no border)


@dataclass
class AnimationConfig:
    """How radius changes are interpolated between renders."""

    curve: str = "none"  # none, linear, ease_in, ease_out, ease_in_out, spring
    duration: Optional[float] = None  # seconds; None = curve default
    bounce: float = 0.0  # spring only

    def to_spec(self) -> AnimationSpec:
        return AnimationSpec.from_name(self.curve, self.duration, self.bounce)


@dataclass
class RenderConfig:
    """Rasterisation settings for the PNG and SVG renderers."""

    supersample: int = 4  # anti-aliasing factor for masks and strokes
    arc_steps: int = 16  # polyline chords per quarter arc
    background: str = ""  # canvas colour behind the clipped shape; empty = transparent


@dataclass
class Config:
    """Top-level configuration for one rounded rectangle."""

    width: int = 200
    height: int = 120
    radius: float = 16
    corners: str = "all"
    fill: str = "#4a90d9"  # content colour when no content image is given
    border: BorderConfig = field(default_factory=BorderConfig)
    animation: AnimationConfig = field(default_factory=AnimationConfig)
    render: RenderConfig = field(default_factory=RenderConfig)

    def corner_set(self) -> Corner:
        return parse_corners(self.corners)


def _section(data: Mapping[str, Any], name: str, cls: type) -> Any:
    section = data.get(name) or {}
    if not isinstance(section, Mapping):
        raise TypeError(f"'{name}' must be a mapping, got {type(section).__name__}")
    return cls(**{k: v for k, v in section.items() if k in cls.__dataclass_fields__})


def load_config_from_dict(data: Mapping[str, Any]) -> Config:
    """Build a Config from a mapping using the same schema as ``config.yaml``.

    Unknown keys are ignored.  ``corners`` may be a string or a list of names.
    """
    top_fields = {
        k: v
        for k, v in data.items()
        if k in Config.__dataclass_fields__ and k not in ("border", "animation", "render")
    }
    corners = top_fields.get("corners", "all")
    if corners is None:
        top_fields["corners"] = "none"
    elif isinstance(corners, (list, tuple)):
        top_fields["corners"] = ", ".join(str(c) for c in corners)

    config = Config(
        **top_fields,
        border=_section(data, "border", BorderConfig),
        animation=_section(data, "animation", AnimationConfig),
        render=_section(data, "render", RenderConfig),
    )
    # Fail early on bad names rather than at render time
    config.corner_set()
    config.animation.to_spec()
    return config


def load_config(path: Optional[Path]) -> Config:
    """Load configuration from a YAML file, returning defaults if *path* is None or missing."""
    if path is None or not path.exists():
        return Config()

    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, Mapping):
        raise TypeError(f"Config file '{path}' must contain a mapping at the top level")
    return load_config_from_dict(data)
