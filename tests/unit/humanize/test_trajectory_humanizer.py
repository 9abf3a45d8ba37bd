"""Tests for TrajectoryHumanizer."""

from __future__ import annotations

import pytest

from autoreplay.core.config.models import HumanizeConfig
from autoreplay.core.diagnostics import RecordingSink
from autoreplay.core.humanize.constraints import closest_point_on_segment
from autoreplay.core.humanize.humanizer import (
    LEAD_KNOT_MS,
    TrajectoryHumanizer,
    collapse_knots,
    humanize_actions,
)
from autoreplay.core.models.actions import ActionSample, Hand, SampleOrigin
from autoreplay.core.models.geometry import PLAYFIELD_WIDTH, Vector2

PRIMARY = Hand.PRIMARY.buttons


def _sample(time, x=100.0, y=100.0, buttons=frozenset(), origin=SampleOrigin.HIT):
    return ActionSample(time=time, position=Vector2(x=x, y=y), buttons=buttons, origin=origin)


def _interpolated(samples):
    return [s for s in samples if s.origin is SampleOrigin.INTERPOLATED]


class TestCollapseKnots:
    def test_last_sample_at_a_time_wins(self) -> None:
        samples = [_sample(0.0, 10.0), _sample(100.0, 20.0), _sample(100.0, 30.0)]
        times, xs, _ = collapse_knots(samples)

        assert times == [-LEAD_KNOT_MS, 0.0, 100.0, 1100.0, 2100.0]
        assert xs == [10.0, 10.0, 30.0, 30.0, 30.0]


class TestResampling:
    def test_fills_gap_at_step(self) -> None:
        samples = [_sample(0.0), _sample(1000.0, 200.0, 100.0)]
        result = humanize_actions(samples)
        interpolated = _interpolated(result)

        assert len(interpolated) == 39
        assert [s.time for s in interpolated] == pytest.approx([25.0 * i for i in range(1, 40)])
        assert result[0] is samples[0]
        assert result[-1] is samples[-1]

    def test_interpolated_carry_previous_buttons(self) -> None:
        samples = [
            _sample(0.0, buttons=PRIMARY),
            _sample(500.0, 150.0, 100.0, origin=SampleOrigin.RELEASE),
        ]
        result = humanize_actions(samples, HumanizeConfig(coerce_taps=False))
        assert all(s.buttons == PRIMARY for s in _interpolated(result))

    def test_flat_axis_stays_flat(self) -> None:
        samples = [_sample(0.0, 100.0, 100.0), _sample(1000.0, 300.0, 100.0)]
        result = humanize_actions(samples, HumanizeConfig(coerce_taps=False))
        assert all(s.position.y == pytest.approx(100.0) for s in result)

    def test_times_non_decreasing(self) -> None:
        samples = [_sample(0.0), _sample(400.0, 300.0), _sample(900.0, 50.0, 300.0)]
        times = [s.time for s in humanize_actions(samples)]
        assert times == sorted(times)

    def test_empty(self) -> None:
        assert humanize_actions([]) == []

    def test_single_sample(self) -> None:
        sample = _sample(0.0)
        assert humanize_actions([sample]) == [sample]


class TestJumpGuard:
    def test_dense_pair_suspends_interpolation(self) -> None:
        samples = [_sample(t) for t in (0.0, 1000.0, 1010.0, 2000.0, 3000.0, 4000.0)]
        sink = RecordingSink()
        result = TrajectoryHumanizer(sink=sink).humanize(samples)

        interpolated = _interpolated(result)
        assert all(s.time > 2000.0 for s in interpolated)
        assert len(interpolated) == 78
        assert sink.named("humanize.done")[0].fields["guarded_gaps"] == 3

    def test_dense_input_unchanged(self) -> None:
        samples = [_sample(10.0 * i, 100.0 + i, 100.0) for i in range(20)]
        assert humanize_actions(samples) == samples

    def test_single_dense_gap_unchanged(self) -> None:
        samples = [_sample(0.0), _sample(50.0, 120.0, 100.0)]
        assert humanize_actions(samples) == samples

    def test_dense_first_gap_then_wide_gap(self) -> None:
        samples = [_sample(0.0), _sample(50.0, 120.0), _sample(1050.0, 300.0)]
        sink = RecordingSink()
        result = TrajectoryHumanizer(sink=sink).humanize(samples)

        assert not [s for s in _interpolated(result) if s.time < 50.0]
        assert sink.named("humanize.done")[0].fields["guarded_gaps"] >= 1

    def test_threshold_never_below_step(self) -> None:
        # Gaps of 40ms are below the 50ms step, so nothing is resampled
        config = HumanizeConfig(step_ms=50.0, jump_threshold=0.0)
        samples = [_sample(40.0 * i) for i in range(5)]
        assert humanize_actions(samples, config) == samples


class TestConstraints:
    def test_tap_coercion_near_hits(self) -> None:
        samples = [_sample(0.0, 100.0, 100.0), _sample(1000.0, 400.0, 300.0)]
        config = HumanizeConfig(coerce_holds=False, coerce_radius=10.0, coerce_window_ms=60.0)
        result = humanize_actions(samples, config)

        for sample in _interpolated(result):
            if sample.time <= 60.0:
                assert sample.position.distance_to(samples[0].position) <= 10.0 + 1e-9
            if sample.time >= 940.0:
                assert sample.position.distance_to(samples[1].position) <= 10.0 + 1e-9

    def test_hold_coercion_follows_segment(self) -> None:
        head = _sample(1000.0, 100.0, 100.0, buttons=PRIMARY, origin=SampleOrigin.HIT)
        tail = _sample(2000.0, 400.0, 300.0, buttons=PRIMARY, origin=SampleOrigin.HOLD)
        samples = [
            _sample(0.0, 256.0, 384.0, origin=SampleOrigin.ANCHOR),
            head,
            tail,
            _sample(3000.0, 400.0, 300.0, origin=SampleOrigin.RELEASE),
        ]
        config = HumanizeConfig(coerce_taps=False, coerce_radius=5.0)
        result = humanize_actions(samples, config)

        during_hold = [s for s in _interpolated(result) if 1000.0 < s.time < 2000.0]
        assert during_hold
        for sample in during_hold:
            nearest = closest_point_on_segment(sample.position, head.position, tail.position)
            assert sample.position.distance_to(nearest) <= 5.0 + 1e-9

    def test_bounce_keeps_inside_playfield(self) -> None:
        xs = [0.0, PLAYFIELD_WIDTH, 0.0, PLAYFIELD_WIDTH, 0.0, PLAYFIELD_WIDTH]
        samples = [_sample(300.0 * i, x, 0.0) for i, x in enumerate(xs)]
        config = HumanizeConfig(coerce_taps=False, coerce_holds=False)
        result = humanize_actions(samples, config)

        for sample in result:
            assert 0.0 <= sample.position.x <= PLAYFIELD_WIDTH
            assert 0.0 <= sample.position.y <= 384.0
