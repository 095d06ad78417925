"""
Animation timing for the corner radius.

``AnimationSpec`` only describes *how* a radius change should be
interpolated.  ``InterpolationScheduler`` is the host-side piece that keeps
in-flight transitions and answers "what is the radius right now?".
"""
from __future__ import annotations

import enum
import math
import re
import time
from dataclasses import dataclass
from typing import Callable, Optional


class Curve(enum.Enum):
    NONE = "none"
    EASE_IN_OUT = "ease_in_out"
    SPRING = "spring"
    LINEAR = "linear"
    EASE_IN = "ease_in"
    EASE_OUT = "ease_out"


_DEFAULT_DURATION = 0.3
_DEFAULT_SPRING_DURATION = 0.6

# A spring counts as settled once its decay envelope is below this fraction.
_SPRING_SETTLE_TOLERANCE = 1e-4
_MAX_BOUNCE = 0.99

# Cubic Bézier control points (x1, y1, x2, y2) for the eased curves.
_BEZIER_POINTS: dict[Curve, tuple[float, float, float, float]] = {
    Curve.EASE_IN: (0.42, 0.0, 1.0, 1.0),
    Curve.EASE_OUT: (0.0, 0.0, 0.58, 1.0),
    Curve.EASE_IN_OUT: (0.42, 0.0, 0.58, 1.0),
}

_CAMEL_RE = re.compile(r"(?<=[a-z])(?=[A-Z])")


@dataclass(frozen=True)
class AnimationSpec:
    """Timing curve and parameters for interpolating a radius change."""

    curve: Curve = Curve.NONE
    duration: float = 0.0
    bounce: float = 0.0

    def __post_init__(self):
        if not isinstance(self.curve, Curve):
            raise TypeError(f"curve must be a Curve, got {type(self.curve).__name__}")
        if not (self.duration >= 0) or math.isinf(self.duration):
            raise ValueError(f"Animation duration must be a finite number >= 0, got {self.duration}")
        if math.isnan(self.bounce):
            raise ValueError("Animation bounce must be a number")

    # -- constructors ----------------------------------------------------

    @classmethod
    def none(cls) -> AnimationSpec:
        return cls(Curve.NONE)

    @classmethod
    def ease_in_out(cls, duration: float = _DEFAULT_DURATION) -> AnimationSpec:
        return cls(Curve.EASE_IN_OUT, duration)

    @classmethod
    def spring(cls, duration: float = _DEFAULT_SPRING_DURATION, bounce: float = 0.0) -> AnimationSpec:
        return cls(Curve.SPRING, duration, bounce)

    @classmethod
    def linear(cls, duration: float = _DEFAULT_DURATION) -> AnimationSpec:
        return cls(Curve.LINEAR, duration)

    @classmethod
    def ease_in(cls, duration: float = _DEFAULT_DURATION) -> AnimationSpec:
        return cls(Curve.EASE_IN, duration)

    @classmethod
    def ease_out(cls, duration: float = _DEFAULT_DURATION) -> AnimationSpec:
        return cls(Curve.EASE_OUT, duration)

    @classmethod
    def from_name(cls, name: str, duration: Optional[float] = None,
                  bounce: Optional[float] = None) -> AnimationSpec:
        """Build a spec from a curve name; omitted parameters take the curve's defaults."""
        key = _CAMEL_RE.sub("_", name.strip()).replace("-", "_").lower()
        try:
            curve = Curve(key)
        except ValueError:
            allowed = ", ".join(c.value for c in Curve)
            raise ValueError(f"Unknown animation curve: {name!r}. Supported: {allowed}") from None
        if curve is Curve.NONE:
            return cls.none()
        if duration is None:
            duration = _DEFAULT_SPRING_DURATION if curve is Curve.SPRING else _DEFAULT_DURATION
        return cls(curve, float(duration), float(bounce or 0.0) if curve is Curve.SPRING else 0.0)

    @classmethod
    def parse(cls, text: str) -> AnimationSpec:
        """Parse ``"curve[:duration[:bounce]]"``, e.g. ``"linear:1.0"`` or ``"spring:0.6:0.2"``."""
        name, *params = text.split(":")
        if len(params) > 2:
            raise ValueError(f"Invalid animation spec: {text!r}")
        try:
            values = [float(p) for p in params]
        except ValueError:
            raise ValueError(f"Invalid animation spec: {text!r}") from None
        return cls.from_name(name, *values)

    # -- timing ----------------------------------------------------------

    @property
    def animates(self) -> bool:
        return self.curve is not Curve.NONE and self.duration > 0

    @property
    def settle_time(self) -> float:
        """Seconds after which a transition under this spec has reached its target."""
        if not self.animates:
            return 0.0
        if self.curve is Curve.SPRING:
            zeta = _spring_damping(self.bounce)
            omega = 2 * math.pi / self.duration
            return -math.log(_SPRING_SETTLE_TOLERANCE) / (zeta * omega)
        return self.duration

    def progress(self, elapsed: float) -> float:
        """Fraction of the way from start to target after *elapsed* seconds.

        Eased curves stay within [0, 1]; springs may overshoot 1 while bouncing.
        """
        if not self.animates or elapsed >= self.settle_time:
            return 1.0
        if elapsed <= 0:
            return 0.0
        if self.curve is Curve.SPRING:
            return _spring_step(elapsed, self.duration, self.bounce)
        t = elapsed / self.duration
        if self.curve is Curve.LINEAR:
            return t
        return _cubic_bezier(t, *_BEZIER_POINTS[self.curve])


def _cubic_bezier(x: float, x1: float, y1: float, x2: float, y2: float) -> float:
    """Evaluate a CSS-style cubic-bezier timing function at *x*."""

    def sample(a1: float, a2: float, s: float) -> float:
        return ((1 - 3 * a2 + 3 * a1) * s + (3 * a2 - 6 * a1)) * s * s + 3 * a1 * s

    def slope(a1: float, a2: float, s: float) -> float:
        return 3 * (1 - 3 * a2 + 3 * a1) * s * s + 2 * (3 * a2 - 6 * a1) * s + 3 * a1

    s = x
    for _ in range(8):
        err = sample(x1, x2, s) - x
        if abs(err) < 1e-7:
            return sample(y1, y2, s)
        d = slope(x1, x2, s)
        if abs(d) < 1e-6:
            break
        s -= err / d

    lo, hi = 0.0, 1.0
    s = x
    while hi - lo > 1e-7:
        if sample(x1, x2, s) < x:
            lo = s
        else:
            hi = s
        s = (lo + hi) / 2
    return sample(y1, y2, s)


def _spring_damping(bounce: float) -> float:
    return 1.0 - min(max(bounce, 0.0), _MAX_BOUNCE)


def _spring_step(t: float, response: float, bounce: float) -> float:
    """Unit step response of a damped spring with period *response*."""
    zeta = _spring_damping(bounce)
    omega = 2 * math.pi / response
    if zeta >= 1.0:
        return 1.0 - math.exp(-omega * t) * (1.0 + omega * t)
    omega_d = omega * math.sqrt(1.0 - zeta * zeta)
    decay = math.exp(-zeta * omega * t)
    return 1.0 - decay * (math.cos(omega_d * t) + zeta * omega / omega_d * math.sin(omega_d * t))


@dataclass(frozen=True)
class Transition:
    """One radius transition in flight."""

    start_value: float
    end_value: float
    start_time: float
    spec: AnimationSpec = AnimationSpec()

    @classmethod
    def settled(cls, value: float, now: float) -> Transition:
        return cls(value, value, now)

    def finished(self, now: float) -> bool:
        return now - self.start_time >= self.spec.settle_time

    def value_at(self, now: float) -> float:
        if self.finished(now):
            return self.end_value
        fraction = self.spec.progress(now - self.start_time)
        return self.start_value + (self.end_value - self.start_value) * fraction


class InterpolationScheduler:
    """Host-side store of animatable scalar fields and their transitions.

    A new target requested mid-transition restarts from the value current at
    that instant; nothing is queued.  Not thread-safe: drive it from the
    render loop that owns it.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._targets: dict[str, float] = {}
        self._transitions: dict[str, Transition] = {}

    def _now(self, now: Optional[float]) -> float:
        return self._clock() if now is None else now

    def interpolate(self, key: str, target: float, spec: AnimationSpec,
                    now: Optional[float] = None) -> float:
        """Declare *target* as the wanted value of *key* and return its current value."""
        now = self._now(now)
        if key not in self._targets:
            self._targets[key] = target
            self._transitions[key] = Transition.settled(target, now)
            return target

        if target != self._targets[key]:
            current = self._transitions[key].value_at(now)
            self._targets[key] = target
            if spec.animates:
                self._transitions[key] = Transition(current, target, now, spec)
            else:
                self._transitions[key] = Transition.settled(target, now)
        return self._transitions[key].value_at(now)

    def value(self, key: str, now: Optional[float] = None) -> float:
        if key not in self._transitions:
            raise KeyError(f"No animatable field registered as {key!r}")
        return self._transitions[key].value_at(self._now(now))

    def target(self, key: str) -> float:
        return self._targets[key]

    def is_animating(self, key: str, now: Optional[float] = None) -> bool:
        transition = self._transitions.get(key)
        if transition is None:
            return False
        return not transition.finished(self._now(now))

    def reset(self, key: Optional[str] = None) -> None:
        if key is None:
            self._targets.clear()
            self._transitions.clear()
        else:
            self._targets.pop(key, None)
            self._transitions.pop(key, None)

    def __contains__(self, key: str) -> bool:
        return key in self._targets
