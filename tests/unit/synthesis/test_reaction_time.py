"""Tests for reaction time resolution."""

from __future__ import annotations

import pytest

from autoreplay.core.models.elements import SpinZoneElement
from autoreplay.core.synthesis.reaction import (
    DEFAULT_PREEMPT_MS,
    preempt_from_approach_rate,
    resolve_reaction_time,
)
from tests.factories import make_hold, make_tap


class TestPreemptFromApproachRate:
    @pytest.mark.parametrize(
        ("approach_rate", "expected"),
        [(0.0, 1800.0), (2.5, 1500.0), (5.0, 1200.0), (9.0, 600.0), (10.0, 450.0)],
    )
    def test_piecewise_linear(self, approach_rate: float, expected: float) -> None:
        assert preempt_from_approach_rate(approach_rate) == pytest.approx(expected)


class TestResolveReactionTime:
    def test_absolute_value_passes_through(self) -> None:
        assert resolve_reaction_time(40.0, [make_tap(0.0, preempt=600.0)]) == 40.0

    def test_zero(self) -> None:
        assert resolve_reaction_time(0.0, []) == 0.0

    def test_fraction_of_element_preempt(self) -> None:
        elements = [make_tap(0.0, preempt=600.0), make_tap(100.0, preempt=900.0)]
        assert resolve_reaction_time(-0.1, elements) == pytest.approx(60.0)

    def test_spin_preempt_ignored(self) -> None:
        elements = [
            SpinZoneElement(start_time=0.0, end_time=100.0, preempt=300.0),
            make_hold(200.0, 400.0, preempt=800.0),
        ]
        assert resolve_reaction_time(-0.05, elements) == pytest.approx(40.0)

    def test_fallback_preempt(self) -> None:
        assert resolve_reaction_time(-0.1, [make_tap(0.0)]) == pytest.approx(
            0.1 * DEFAULT_PREEMPT_MS
        )
        assert resolve_reaction_time(-0.1, [make_tap(0.0)], fallback_preempt=450.0) == pytest.approx(
            45.0
        )
