"""Tests for autoplay presets."""

from __future__ import annotations

import pytest

from autoreplay.core.config.presets import Preset, config_for_preset, preset_from_name
from autoreplay.core.errors import UnknownPresetError


class TestConfigForPreset:
    @pytest.mark.parametrize("preset", list(Preset))
    def test_every_preset_resolves(self, preset: Preset) -> None:
        assert config_for_preset(preset).name == preset.value

    def test_default(self) -> None:
        config = config_for_preset()
        assert config.follow.enabled
        assert not config.humanize.enabled
        assert config.reaction_time == 0.0

    def test_stiff_disables_follow(self) -> None:
        assert not config_for_preset(Preset.STIFF).follow.enabled

    def test_playful_humanizes_without_coercion(self) -> None:
        humanize = config_for_preset(Preset.PLAYFUL).humanize
        assert humanize.enabled
        assert humanize.bounce
        assert not humanize.coerce_taps
        assert not humanize.coerce_holds

    def test_playerlike_reacts(self) -> None:
        config = config_for_preset(Preset.PLAYERLIKE)
        assert config.reaction_time == pytest.approx(-0.1)
        assert config.humanize.enabled

    def test_rule_breaker(self) -> None:
        config = config_for_preset(Preset.RULE_BREAKER)
        assert config.reaction_time == pytest.approx(-0.05)
        assert not config.follow.enabled
        assert not config.humanize.bounce
        assert not config.humanize.coerce_holds


class TestPresetFromName:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("default", Preset.DEFAULT),
            ("STIFF", Preset.STIFF),
            ("Player-like", Preset.PLAYERLIKE),
            ("rule_breaker", Preset.RULE_BREAKER),
            ("  Rule breaker ", Preset.RULE_BREAKER),
        ],
    )
    def test_resolves(self, name: str, expected: Preset) -> None:
        assert preset_from_name(name) is expected

    def test_unknown(self) -> None:
        with pytest.raises(UnknownPresetError, match="'tryhard'"):
            preset_from_name("tryhard")

    def test_description(self) -> None:
        assert Preset.PLAYERLIKE.description == "Player-like"
