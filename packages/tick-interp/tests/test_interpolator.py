"""Tests for ValueInterpolator value, target, range and update operations."""
import math

import pytest

from tick_interp import (
    Damped,
    InterpState,
    RateMode,
    UnknownShapingError,
    ValueInterpolator,
)


def _linear(value=0.0, rate=2.0, **kwargs):
    return ValueInterpolator(
        value, shaping="linear", rate_mode=RateMode.DURATION, rate=rate, **kwargs
    )


class TestConstruction:
    """Test initial state."""

    def test_initial_state_is_settled(self):
        """A new interpolator should rest on its initial value."""
        interp = ValueInterpolator(3.0)
        assert interp.value == 3.0
        assert interp.range == (3.0, 3.0)
        assert interp.time == 0.0
        assert interp.state is InterpState.SETTLED
        assert interp.is_settled

    def test_initial_value_is_clamped(self):
        """The initial value should be clamped to the bounds."""
        interp = ValueInterpolator(15.0, minimum=0.0, maximum=10.0)
        assert interp.value == 10.0
        assert interp.range == (10.0, 10.0)

    def test_defaults(self):
        """No arguments should give 0, a 1.0 duration and no bounds."""
        interp = ValueInterpolator()
        assert interp.value == 0.0
        assert interp.rate == 1.0
        assert interp.rate_mode is RateMode.DURATION
        assert interp.limits == (None, None)

    def test_shaping_by_name(self):
        """A shaping name should be resolved through the registry."""
        interp = ValueInterpolator(shaping="damped")
        assert isinstance(interp.shaping, Damped)

    def test_shaping_callable(self):
        """A shaping callable should be used as given."""
        def fn(t, b, c, d):
            return b + c

        interp = ValueInterpolator(shaping=fn)
        assert interp.shaping is fn

    def test_unknown_shaping_name(self):
        """An unregistered name should raise UnknownShapingError."""
        with pytest.raises(UnknownShapingError):
            ValueInterpolator(shaping="elastic")

    def test_repr_mentions_value(self):
        """repr() should include the current value."""
        assert "value=1.5" in repr(ValueInterpolator(1.5))


class TestSetValue:
    """Test immediate value assignment."""

    def test_absolute(self):
        """set_value should replace the value."""
        interp = ValueInterpolator(1.0)
        interp.set_value(7.0)
        assert interp.value == 7.0

    def test_relative(self):
        """A relative set_value should add to the value."""
        interp = ValueInterpolator(1.0)
        interp.set_value(2.5, relative=True)
        assert interp.value == 3.5

    def test_relative_matches_absolute(self):
        """set_value(x); set_value(d, relative) == set_value(x + d)."""
        for x, delta in [(0.0, 4.0), (3.0, -8.0), (9.0, 5.0)]:
            a = ValueInterpolator(minimum=-2.0, maximum=10.0)
            a.set_value(x)
            a.set_value(delta, relative=True)
            b = ValueInterpolator(minimum=-2.0, maximum=10.0)
            b.set_value(x + delta)
            assert a.value == b.value

    def test_cancels_motion(self):
        """set_value mid-motion should settle on the new value."""
        interp = _linear()
        interp.set_target(10.0)
        interp.update(0.5)
        interp.set_value(4.0)
        assert interp.range == (4.0, 4.0)
        assert interp.time == 0.0
        assert interp.is_settled

    def test_relative_uses_current_not_end(self):
        """Relative set_value adds to the in-flight value."""
        interp = _linear()
        interp.set_target(10.0)
        interp.update(1.0)
        interp.set_value(1.0, relative=True)
        assert interp.value == 6.0


class TestSetTarget:
    """Test motion declaration."""

    def test_starts_motion(self):
        """set_target should start a motion from the current value."""
        interp = _linear(1.0)
        interp.set_target(9.0)
        assert interp.range == (1.0, 9.0)
        assert interp.value == 1.0
        assert interp.time == 0.0
        assert interp.state is InterpState.MOVING

    def test_relative_adds_to_previous_end(self):
        """A relative target should add to the previous end, not the value."""
        interp = _linear()
        interp.set_target(10.0)
        interp.update(1.0)
        interp.set_target(5.0, relative=True)
        assert interp.range == (5.0, 15.0)

    def test_retarget_restarts_from_current(self):
        """Retargeting mid-motion should restart from the in-flight value."""
        interp = _linear()
        interp.set_target(10.0)
        interp.update(1.0)
        interp.set_target(0.0)
        assert interp.range == (5.0, 0.0)
        assert interp.time == 0.0

    def test_target_equal_to_current_is_moving_until_update(self):
        """Targeting the current value should settle on the next update."""
        interp = _linear(4.0)
        interp.set_target(4.0)
        assert interp.state is InterpState.MOVING
        interp.update(0.1)
        assert interp.state is InterpState.SETTLED
        assert interp.value == 4.0
        assert interp.time == 0.0

    def test_duration_override_applies_to_one_motion(self):
        """A per-call duration should not replace the stored rate."""
        interp = _linear(rate=2.0)
        interp.set_target(10.0, duration=4.0)
        assert interp.duration == 4.0
        interp.update(1.0)
        assert interp.value == 2.5
        interp.set_target(0.0)
        assert interp.duration == 2.0

    def test_negative_duration_override(self):
        """A negative duration should be rejected before anything changes."""
        interp = _linear()
        with pytest.raises(ValueError):
            interp.set_target(10.0, duration=-1.0)
        assert interp.is_settled

    def test_nan_duration_override(self):
        """A NaN duration should be rejected before anything changes."""
        interp = _linear()
        with pytest.raises(ValueError):
            interp.set_target(10.0, duration=math.nan)
        assert interp.is_settled
        assert interp.range == (0.0, 0.0)


class TestRateModes:
    """Test duration derivation from the rate."""

    def test_duration_mode_ignores_distance(self):
        """In DURATION mode every motion should take the rate."""
        interp = ValueInterpolator(0.0, rate_mode=RateMode.DURATION, rate=3.0)
        interp.set_target(1.0)
        assert interp.duration == 3.0
        interp.set_target(1000.0)
        assert interp.duration == 3.0

    def test_speed_mode_uses_distance(self):
        """In SPEED mode the duration should be distance over rate."""
        interp = ValueInterpolator(2.0, rate_mode=RateMode.SPEED, rate=4.0)
        interp.set_target(10.0)
        assert interp.duration == 2.0

    def test_speed_mode_downward(self):
        """SPEED duration should use the absolute distance."""
        interp = ValueInterpolator(10.0, rate_mode=RateMode.SPEED, rate=5.0)
        interp.set_target(0.0)
        assert interp.duration == 2.0

    def test_speed_mode_uses_clamped_end(self):
        """The SPEED duration should be measured to the clamped end."""
        interp = ValueInterpolator(
            0.0, maximum=10.0, rate_mode=RateMode.SPEED, rate=5.0
        )
        interp.set_target(100.0)
        assert interp.duration == 2.0

    def test_speed_mode_reaches_target(self):
        """A SPEED motion should cover rate units per time unit."""
        interp = ValueInterpolator(
            0.0, shaping="linear", rate_mode=RateMode.SPEED, rate=4.0
        )
        interp.set_target(8.0)
        interp.update(1.0)
        assert interp.value == 4.0
        interp.update(1.0)
        assert interp.value == 8.0


class TestSetRange:
    """Test jump-then-move."""

    def test_snaps_to_origin_and_moves(self):
        """Scenario C: at 50, set_range(10, 2) snaps to 2 then moves to 10."""
        interp = _linear(50.0)
        interp.set_range(10.0, 2.0)
        assert interp.value == 2.0
        assert interp.range == (2.0, 10.0)
        interp.update(1.0)
        assert interp.value == 6.0
        interp.update(1.0)
        assert interp.value == 10.0

    def test_origin_is_clamped(self):
        """Both origin and target should be clamped to the bounds."""
        interp = _linear(5.0, minimum=0.0, maximum=10.0)
        interp.set_range(8.0, -20.0)
        assert interp.value == 0.0
        assert interp.range == (0.0, 8.0)

    def test_origin_absolute_target_relative(self):
        """Origin replaces the value; a relative target adds to the old end."""
        interp = _linear()
        interp.set_target(10.0)
        interp.set_range(5.0, 100.0, relative=True)
        assert interp.value == 100.0
        assert interp.range == (100.0, 15.0)

    def test_speed_duration_measured_from_origin(self):
        """The SPEED duration should be measured from the new origin."""
        interp = ValueInterpolator(50.0, rate_mode=RateMode.SPEED, rate=2.0)
        interp.set_range(10.0, 2.0)
        assert interp.duration == 4.0

    def test_negative_duration_leaves_value_untouched(self):
        """A rejected duration should not move the value to the origin."""
        interp = _linear(50.0)
        with pytest.raises(ValueError):
            interp.set_range(10.0, 2.0, duration=-0.5)
        assert interp.value == 50.0

    def test_nan_duration_leaves_value_untouched(self):
        """A NaN duration should not move the value to the origin."""
        interp = _linear(50.0)
        with pytest.raises(ValueError):
            interp.set_range(10.0, 2.0, duration=math.nan)
        assert interp.value == 50.0
        assert interp.is_settled


class TestUpdate:
    """Test time advancement and settling."""

    def test_scenario_linear_halfway_and_settle(self):
        """Scenario A: linear 0 -> 10 over 2.0."""
        interp = _linear(0.0, rate=2.0)
        interp.set_target(10.0)
        interp.update(1.0)
        assert interp.value == pytest.approx(5.0)
        assert interp.time == 1.0
        interp.update(1.0)
        assert interp.value == pytest.approx(10.0)
        assert interp.time == 2.0
        interp.update(1.0)
        assert interp.value == 10.0
        assert interp.time == 0.0
        assert interp.is_settled

    def test_settling_is_idempotent(self):
        """Updates after settling should leave the state unchanged."""
        interp = _linear()
        interp.set_target(10.0)
        for _ in range(3):
            interp.update(1.0)
        for _ in range(5):
            interp.update(0.25)
            assert interp.value == 10.0
            assert interp.time == 0.0
            assert interp.range == (10.0, 10.0)

    def test_settle_snaps_float_drift(self):
        """A value within tolerance of the end is snapped onto it exactly."""

        def near(t, b, c, d):
            return b + c - 5e-5

        interp = ValueInterpolator(0.0, shaping=near, rate=1.0)
        interp.set_target(1.0)
        interp.update(0.5)
        assert interp.value == pytest.approx(1.0 - 5e-5)
        assert not interp.is_settled
        interp.update(0.5)
        assert interp.value == 1.0
        assert interp.time == 0.0

    def test_overshooting_step_does_not_leave_end(self):
        """A step past the duration lands on the end value."""
        interp = _linear(rate=1.0)
        interp.set_target(3.0)
        interp.update(0.7)
        interp.update(0.7)
        assert interp.value == 3.0

    def test_update_while_settled_is_noop(self):
        """Updating a settled interpolator should change nothing."""
        interp = ValueInterpolator(2.0)
        interp.update(1.0)
        assert interp.value == 2.0
        assert interp.time == 0.0

    def test_zero_dt(self):
        """A zero step should not advance the motion."""
        interp = _linear()
        interp.set_target(10.0)
        interp.update(0.0)
        assert interp.value == 0.0
        assert interp.time == 0.0
        assert not interp.is_settled

    def test_negative_dt_rejected(self):
        """A negative step should raise ValueError."""
        interp = _linear()
        interp.set_target(10.0)
        with pytest.raises(ValueError):
            interp.update(-0.1)

    def test_shaping_receives_range_and_duration(self):
        """The shaping should be called with (elapsed, start, change, duration)."""
        calls = []

        def record(t, b, c, d):
            calls.append((t, b, c, d))
            return b + c * (t / d)

        interp = ValueInterpolator(1.0, shaping=record, rate=4.0)
        interp.set_target(9.0)
        interp.update(1.0)
        interp.update(1.0)
        assert calls == [(1.0, 1.0, 8.0, 4.0), (2.0, 1.0, 8.0, 4.0)]

    def test_shaping_output_is_not_clamped(self):
        """Values produced during motion may overshoot the bounds."""

        def overshoot(t, b, c, d):
            return b + c * 1.5 if t < d else b + c

        interp = ValueInterpolator(0.0, maximum=10.0, shaping=overshoot, rate=2.0)
        interp.set_target(10.0)
        interp.update(1.0)
        assert interp.value == 15.0
        interp.update(1.0)
        assert interp.value == 10.0

    def test_zero_duration_arrives_in_one_update(self):
        """A zero duration should arrive on the first update."""
        interp = _linear(rate=0.0)
        interp.set_target(10.0)
        interp.update(0.016)
        assert interp.value == 10.0
        interp.update(0.016)
        assert interp.is_settled


class TestDampedInterpolation:
    """Test ValueInterpolator driven by the damped strategy."""

    def test_damped_settles_on_target(self):
        """A damped motion should settle exactly on its end."""
        interp = ValueInterpolator(0.0, shaping="damped", rate=0.2)
        interp.set_target(10.0)
        for _ in range(600):
            interp.update(1 / 60)
        assert interp.value == 10.0
        assert interp.is_settled
        assert interp.time == 0.0

    def test_retarget_resets_velocity(self):
        """Starting a new motion should zero the spring velocity."""
        damped = Damped()
        interp = ValueInterpolator(0.0, shaping=damped, rate=0.3)
        interp.set_target(10.0)
        for _ in range(10):
            interp.update(1 / 60)
        assert damped.velocity > 0.0
        interp.set_target(0.0)
        assert damped.velocity == 0.0

    def test_set_value_resets_strategy(self):
        """set_value should reset a stateful shaping."""
        damped = Damped()
        interp = ValueInterpolator(0.0, shaping=damped, rate=0.3)
        interp.set_target(10.0)
        interp.update(1 / 60)
        interp.set_value(3.0)
        assert damped.velocity == 0.0

    def test_damped_starts_from_range_origin(self):
        """A damped set_range should start from the new origin."""
        interp = ValueInterpolator(50.0, shaping="damped", rate=0.3)
        interp.set_range(10.0, 2.0)
        interp.update(1 / 60)
        assert 2.0 < interp.value < 10.0
