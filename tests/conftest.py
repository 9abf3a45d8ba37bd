"""Shared pytest fixtures for autoreplay tests."""

from __future__ import annotations

import pytest

from autoreplay.core.config.models import FollowConfig, GeneratorConfig
from autoreplay.core.models.elements import Element
from tests.factories import make_hold, make_tap

# ============================================================================
# Scenario Fixtures
# ============================================================================


@pytest.fixture
def tap_then_hold() -> list[Element]:
    """Tap at 1000ms, then a hold path 2000-3000ms with ticks at 2300/2700."""
    return [
        make_tap(1000.0, 100.0, 100.0),
        make_hold(2000.0, 3000.0, ticks=(2300.0, 2700.0)),
    ]


# ============================================================================
# Config Fixtures
# ============================================================================


@pytest.fixture
def stiff_config() -> GeneratorConfig:
    """Config without path following, so only real checkpoints appear."""
    return GeneratorConfig(name="test", follow=FollowConfig(enabled=False))
