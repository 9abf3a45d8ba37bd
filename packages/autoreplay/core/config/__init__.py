"""Configuration management for AutoReplay."""

from autoreplay.core.config.loader import detect_format, load_config, load_generator_config
from autoreplay.core.config.models import (
    FollowConfig,
    GeneratorConfig,
    HumanizeConfig,
    OrderingPolicy,
    ReleaseConfig,
    SpinConfig,
)
from autoreplay.core.config.presets import Preset, config_for_preset, preset_from_name

__all__ = [
    # Loaders
    "detect_format",
    "load_config",
    "load_generator_config",
    # Models
    "FollowConfig",
    "GeneratorConfig",
    "HumanizeConfig",
    "OrderingPolicy",
    "ReleaseConfig",
    "SpinConfig",
    # Presets
    "Preset",
    "config_for_preset",
    "preset_from_name",
]
