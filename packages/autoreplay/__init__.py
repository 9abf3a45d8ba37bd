"""AutoReplay: synthesize automated play-throughs from beatmap elements."""

from autoreplay.core.config.presets import Preset, config_for_preset
from autoreplay.core.pipeline import ReplayPipeline, generate_actions

__version__ = "0.1.0"

__all__ = [
    "Preset",
    "ReplayPipeline",
    "config_for_preset",
    "generate_actions",
]
