"""Unit tests for animation specs, timing curves and the interpolation scheduler."""
import math

import pytest

from cornercraft.animation import AnimationSpec, Curve, InterpolationScheduler, Transition
from cornercraft.corners import Corner
from cornercraft.geometry import Rect, build_rounded_path


class TestAnimationSpecConstructors:
    """Named constructors carry the documented defaults."""

    def test_none(self):
        spec = AnimationSpec.none()
        assert spec.curve is Curve.NONE
        assert not spec.animates

    @pytest.mark.parametrize("factory,curve", [
        (AnimationSpec.ease_in_out, Curve.EASE_IN_OUT),
        (AnimationSpec.linear, Curve.LINEAR),
        (AnimationSpec.ease_in, Curve.EASE_IN),
        (AnimationSpec.ease_out, Curve.EASE_OUT),
    ])
    def test_eased_defaults(self, factory, curve):
        spec = factory()
        assert spec.curve is curve
        assert spec.duration == 0.3
        assert spec.animates

    def test_spring_defaults(self):
        spec = AnimationSpec.spring()
        assert spec.curve is Curve.SPRING
        assert spec.duration == 0.6
        assert spec.bounce == 0.0

    def test_negative_duration_rejected(self):
        with pytest.raises(ValueError):
            AnimationSpec.linear(-1)

    def test_nan_duration_rejected(self):
        with pytest.raises(ValueError):
            AnimationSpec.linear(float("nan"))

    def test_zero_duration_does_not_animate(self):
        assert not AnimationSpec.linear(0).animates


class TestAnimationSpecParsing:
    def test_parse_linear(self):
        assert AnimationSpec.parse("linear:1.0") == AnimationSpec.linear(1.0)

    def test_parse_spring_with_bounce(self):
        assert AnimationSpec.parse("spring:0.5:0.25") == AnimationSpec.spring(0.5, 0.25)

    def test_parse_name_only_uses_defaults(self):
        assert AnimationSpec.parse("ease-in-out") == AnimationSpec.ease_in_out()
        assert AnimationSpec.parse("spring") == AnimationSpec.spring()

    def test_parse_camel_case(self):
        assert AnimationSpec.parse("easeOut:2") == AnimationSpec.ease_out(2)

    def test_parse_none(self):
        assert AnimationSpec.parse("none") == AnimationSpec.none()

    def test_parse_unknown_curve(self):
        with pytest.raises(ValueError, match="Unknown animation curve"):
            AnimationSpec.parse("bouncy:1")

    def test_parse_bad_number(self):
        with pytest.raises(ValueError, match="Invalid animation spec"):
            AnimationSpec.parse("linear:fast")

    def test_bounce_ignored_for_eased_curves(self):
        assert AnimationSpec.from_name("linear", 1.0, 0.5).bounce == 0.0


class TestProgress:
    def test_linear_midpoint(self):
        assert AnimationSpec.linear(1.0).progress(0.5) == pytest.approx(0.5)

    @pytest.mark.parametrize("spec", [
        AnimationSpec.linear(1.0),
        AnimationSpec.ease_in(1.0),
        AnimationSpec.ease_out(1.0),
        AnimationSpec.ease_in_out(1.0),
        AnimationSpec.spring(1.0),
    ])
    def test_endpoints(self, spec):
        assert spec.progress(0) == 0.0
        assert spec.progress(spec.settle_time) == 1.0
        assert spec.progress(spec.settle_time + 10) == 1.0

    @pytest.mark.parametrize("spec", [
        AnimationSpec.ease_in(1.0),
        AnimationSpec.ease_out(1.0),
        AnimationSpec.ease_in_out(1.0),
    ])
    def test_eased_curves_are_monotonic(self, spec):
        samples = [spec.progress(i / 50) for i in range(51)]
        assert all(b >= a - 1e-9 for a, b in zip(samples, samples[1:]))
        assert all(0.0 <= s <= 1.0 for s in samples)

    def test_ease_in_starts_slow(self):
        assert AnimationSpec.ease_in(1.0).progress(0.25) < 0.25

    def test_ease_out_starts_fast(self):
        assert AnimationSpec.ease_out(1.0).progress(0.25) > 0.25

    def test_ease_in_out_is_symmetric(self):
        spec = AnimationSpec.ease_in_out(1.0)
        assert spec.progress(0.5) == pytest.approx(0.5, abs=1e-6)
        assert spec.progress(0.2) == pytest.approx(1 - spec.progress(0.8), abs=1e-6)

    def test_critically_damped_spring_does_not_overshoot(self):
        spec = AnimationSpec.spring(0.5, bounce=0.0)
        samples = [spec.progress(i / 100) for i in range(0, 151)]
        assert max(samples) <= 1.0 + 1e-9

    def test_bouncy_spring_overshoots(self):
        spec = AnimationSpec.spring(0.5, bounce=0.5)
        samples = [spec.progress(i / 100) for i in range(0, 150)]
        assert max(samples) > 1.0

    def test_critically_damped_settle_time(self):
        # ln(1e4) / (2 * pi / 0.4)
        assert AnimationSpec.spring(0.4).settle_time == pytest.approx(0.58637, abs=1e-4)

    def test_bouncier_springs_settle_later(self):
        times = [AnimationSpec.spring(0.6, bounce=b).settle_time for b in (0.0, 0.5, 0.9)]
        assert times == sorted(times)
        assert times[0] < times[-1]

    @pytest.mark.parametrize("bounce", [0.0, 0.5, 0.9])
    def test_spring_reaches_target_smoothly(self, bounce):
        spec = AnimationSpec.spring(0.6, bounce=bounce)
        just_before = spec.progress(spec.settle_time - 1e-6)
        assert just_before == pytest.approx(1.0, abs=2e-3)
        assert spec.progress(spec.settle_time) == 1.0

    @pytest.mark.parametrize("bounce", [1.0, 5.0])
    def test_full_bounce_still_settles(self, bounce):
        spec = AnimationSpec.spring(0.6, bounce=bounce)
        assert math.isfinite(spec.settle_time)
        assert spec.progress(spec.settle_time - 1e-6) == pytest.approx(1.0, abs=2e-3)

    def test_none_is_immediate(self):
        assert AnimationSpec.none().progress(0) == 1.0


class TestTransition:
    def test_value_at_midpoint(self):
        t = Transition(0, 30, 10.0, AnimationSpec.linear(1.0))
        assert t.value_at(10.5) == pytest.approx(15)

    def test_finished_returns_exact_target(self):
        t = Transition(0, 30, 0.0, AnimationSpec.ease_in_out(1.0))
        assert t.finished(1.0)
        assert t.value_at(5.0) == 30

    def test_settled(self):
        t = Transition.settled(12, 3.0)
        assert t.finished(3.0)
        assert t.value_at(3.0) == 12


class TestInterpolationScheduler:
    """Host-side interpolation of the radius field."""

    def test_first_value_is_registered_without_animation(self, scheduler):
        assert scheduler.interpolate("radius", 10, AnimationSpec.linear(1.0)) == 10
        assert not scheduler.is_animating("radius")

    def test_linear_transition_sampled_at_half(self, scheduler, clock):
        """Radius 0 → 30 under linear(1.0) is 15 at t=0.5 and arcs follow."""
        spec = AnimationSpec.linear(1.0)
        scheduler.interpolate("radius", 0, spec)
        assert scheduler.interpolate("radius", 30, spec) == 0

        clock.advance(0.5)
        radius = scheduler.value("radius")
        assert radius == pytest.approx(15)

        path = build_rounded_path(Rect(0, 0, 100, 100), Corner.ALL, radius)
        assert all(arc.radius == pytest.approx(15) for arc in path.arcs)

        clock.advance(0.5)
        assert scheduler.value("radius") == 30
        assert not scheduler.is_animating("radius")

    def test_none_spec_snaps(self, scheduler):
        scheduler.interpolate("radius", 0, AnimationSpec.none())
        assert scheduler.interpolate("radius", 25, AnimationSpec.none()) == 25

    def test_same_target_keeps_transition(self, scheduler, clock):
        spec = AnimationSpec.linear(1.0)
        scheduler.interpolate("radius", 0, spec)
        scheduler.interpolate("radius", 10, spec)
        clock.advance(0.25)
        assert scheduler.interpolate("radius", 10, spec) == pytest.approx(2.5)
        clock.advance(0.25)
        assert scheduler.interpolate("radius", 10, spec) == pytest.approx(5)

    def test_new_target_restarts_from_current_value(self, scheduler, clock):
        spec = AnimationSpec.linear(1.0)
        scheduler.interpolate("radius", 0, spec)
        scheduler.interpolate("radius", 40, spec)
        clock.advance(0.5)  # at 20
        assert scheduler.interpolate("radius", 0, spec) == pytest.approx(20)
        clock.advance(0.5)
        assert scheduler.value("radius") == pytest.approx(10)
        clock.advance(0.5)
        assert scheduler.value("radius") == 0

    def test_snap_supersedes_running_transition(self, scheduler, clock):
        scheduler.interpolate("radius", 0, AnimationSpec.linear(1.0))
        scheduler.interpolate("radius", 40, AnimationSpec.linear(1.0))
        clock.advance(0.3)
        assert scheduler.interpolate("radius", 5, AnimationSpec.none()) == 5
        assert not scheduler.is_animating("radius")

    def test_explicit_now(self, scheduler):
        spec = AnimationSpec.linear(2.0)
        scheduler.interpolate("r", 0, spec, now=100.0)
        scheduler.interpolate("r", 10, spec, now=100.0)
        assert scheduler.value("r", now=101.0) == pytest.approx(5)

    def test_keys_are_independent(self, scheduler, clock):
        spec = AnimationSpec.linear(1.0)
        scheduler.interpolate("a", 0, spec)
        scheduler.interpolate("b", 100, spec)
        scheduler.interpolate("a", 10, spec)
        clock.advance(0.5)
        assert scheduler.value("a") == pytest.approx(5)
        assert scheduler.value("b") == 100

    def test_unknown_key_raises(self, scheduler):
        with pytest.raises(KeyError):
            scheduler.value("missing")

    def test_reset(self, scheduler):
        scheduler.interpolate("a", 1, AnimationSpec.none())
        scheduler.interpolate("b", 2, AnimationSpec.none())
        scheduler.reset("a")
        assert "a" not in scheduler
        assert "b" in scheduler
        scheduler.reset()
        assert "b" not in scheduler

    def test_spring_overshoot_is_safe_for_geometry(self, scheduler, clock):
        """Out-of-range interpolated radii still give valid paths."""
        spec = AnimationSpec.spring(0.4, bounce=0.8)
        scheduler.interpolate("radius", 50, spec)
        scheduler.interpolate("radius", 0, spec)
        rect = Rect(0, 0, 40, 20)
        for _ in range(60):
            clock.advance(0.02)
            radius = scheduler.value("radius")
            assert math.isfinite(radius)
            path = build_rounded_path(rect, Corner.ALL, radius)
            assert path.end_point == path.start
            assert all(0 < arc.radius <= 10 for arc in path.arcs)
