"""
Shared pytest fixtures and configuration for cornercraft tests.

This module provides:
- Configuration fixtures (default, minimal, animated)
- A controllable clock and scheduler for animation tests
- A recording render host that logs the capabilities it is asked for
- Temporary config files
"""
from __future__ import annotations

import pytest
from typing import Any


# ==============================================================================
# Global pytest configuration
# ==============================================================================

def pytest_configure(config):
    """Global pytest configuration - runs once at test session start."""
    import warnings
    warnings.filterwarnings('ignore', category=DeprecationWarning)
    warnings.filterwarnings('ignore', category=PendingDeprecationWarning)


# ==============================================================================
# Configuration fixtures
# ==============================================================================

@pytest.fixture
def default_config():
    """Return default configuration."""
    from cornercraft.config import Config
    return Config()


@pytest.fixture
def minimal_config():
    """Return small, fast-to-render configuration."""
    from cornercraft.config import Config, RenderConfig
    return Config(
        width=40,
        height=30,
        radius=8,
        corners="all",
        fill="#ff0000",
        render=RenderConfig(supersample=1, arc_steps=8, background=""),
    )


@pytest.fixture
def animated_config():
    """Return configuration animating the radius linearly over one second."""
    from cornercraft.config import AnimationConfig, Config, RenderConfig
    return Config(
        width=100,
        height=60,
        radius=30,
        corners="all",
        animation=AnimationConfig(curve="linear", duration=1.0),
        render=RenderConfig(supersample=1, arc_steps=8),
    )


# ==============================================================================
# Animation fixtures
# ==============================================================================

class FakeClock:
    """Manually advanced clock for deterministic scheduler tests."""

    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    """Return a manually advanced clock starting at t=0."""
    return FakeClock()


@pytest.fixture
def scheduler(clock):
    """Return an InterpolationScheduler driven by the fake clock."""
    from cornercraft.animation import InterpolationScheduler
    return InterpolationScheduler(clock=clock)


# ==============================================================================
# Host fixtures
# ==============================================================================

class RecordingHost:
    """Render host that records each capability call instead of drawing."""

    def __init__(self, scheduler):
        self.scheduler = scheduler
        self.calls: list[tuple[str, Any]] = []

    def clip(self, content, path):
        self.calls.append(("clip", path))
        return ("clipped", content)

    def stroke(self, content, path, color, width):
        self.calls.append(("stroke", (path, color, width)))
        return ("stroked", content)

    def interpolate(self, key, value, spec):
        self.calls.append(("interpolate", (key, value, spec)))
        return self.scheduler.interpolate(key, value, spec)


@pytest.fixture
def recording_host(scheduler):
    """Return a host that records clip/stroke/interpolate calls."""
    return RecordingHost(scheduler)


# ==============================================================================
# Temporary file fixtures
# ==============================================================================

@pytest.fixture
def temp_config(tmp_path):
    """Write minimal config to temporary file and return path."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        "width: 50\nheight: 40\nradius: 10\ncorners: top-left, bottom-right\n"
        "render:\n  supersample: 1\n"
    )
    return config_path
