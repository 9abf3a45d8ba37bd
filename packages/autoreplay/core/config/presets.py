"""Autoplay presets: the thin mapping from a named preset to a config bundle."""

from __future__ import annotations

from enum import Enum

from autoreplay.core.config.models import (
    FollowConfig,
    GeneratorConfig,
    HumanizeConfig,
)
from autoreplay.core.errors import UnknownPresetError


class Preset(str, Enum):
    """Named autoplay behaviours."""

    DEFAULT = "default"
    STIFF = "stiff"
    PLAYFUL = "playful"
    PLAYERLIKE = "playerlike"
    RULE_BREAKER = "rule_breaker"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS: dict[Preset, str] = {
    Preset.DEFAULT: "Default",
    Preset.STIFF: "Stiff",
    Preset.PLAYFUL: "Playful",
    Preset.PLAYERLIKE: "Player-like",
    Preset.RULE_BREAKER: "Rule breaker",
}


def config_for_preset(preset: Preset = Preset.DEFAULT) -> GeneratorConfig:
    """Return the configuration bundle for a preset."""
    match preset:
        case Preset.DEFAULT:
            return GeneratorConfig(name=preset.value)
        case Preset.STIFF:
            # Raw event timing, no following: used to inspect the timeline
            return GeneratorConfig(
                name=preset.value,
                follow=FollowConfig(enabled=False),
            )
        case Preset.PLAYFUL:
            return GeneratorConfig(
                name=preset.value,
                humanize=HumanizeConfig(
                    enabled=True,
                    bounce=True,
                    coerce_taps=False,
                    coerce_holds=False,
                ),
            )
        case Preset.PLAYERLIKE:
            return GeneratorConfig(
                name=preset.value,
                reaction_time=-0.1,
                humanize=HumanizeConfig(enabled=True, bounce=True),
            )
        case Preset.RULE_BREAKER:
            return GeneratorConfig(
                name=preset.value,
                reaction_time=-0.05,
                follow=FollowConfig(enabled=False),
                humanize=HumanizeConfig(enabled=True, bounce=False, coerce_holds=False),
            )


def preset_from_name(name: str) -> Preset:
    """Resolve a preset by value, member name or description (case-insensitive).

    Raises:
        UnknownPresetError: If nothing matches.
    """
    wanted = name.strip().lower()
    for preset in Preset:
        if wanted in (preset.value, preset.name.lower(), preset.description.lower()):
            return preset
    raise UnknownPresetError(name)
