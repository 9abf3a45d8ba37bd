"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from autoreplay.core.config.models import GeneratorConfig
from autoreplay.core.config.presets import Preset, config_for_preset, preset_from_name

logger = logging.getLogger(__name__)


def detect_format(file_path: Path | str) -> str:
    """Detect config file format from extension.

    Args:
        file_path: Path to config file

    Returns:
        Format string: "json" or "yaml"

    Raises:
        ValueError: If format cannot be determined

    Example:
        >>> detect_format("preset.json")
        'json'
        >>> detect_format("preset.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()

    if suffix == ".json":
        return "json"
    elif suffix in [".yaml", ".yml"]:
        return "yaml"
    else:
        raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: str | Path) -> dict[str, Any]:
    """Load and return a raw configuration dictionary.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Raw configuration dictionary

    Raises:
        FileNotFoundError: If config file does not exist
        ValueError: If format is not supported or file content is invalid
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    fmt = detect_format(path)

    if fmt == "json":
        try:
            with path.open("r", encoding="utf-8") as f:
                content = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
    else:
        try:
            with path.open("r", encoding="utf-8") as f:
                # safe_load returns None for empty files
                content = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(content, dict):
        raise ValueError(f"Config root must be a mapping in {path}")
    return content


def _merge(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_generator_config(
    path: str | Path,
    preset: Preset | None = None,
) -> GeneratorConfig:
    """Load and validate a generator configuration file.

    File values are layered over the preset's bundle. A ``preset`` key in
    the file selects the base preset when no preset argument is given.

    Args:
        path: Path to config file (.json, .yaml, or .yml)
        preset: Base preset. Defaults to the file's ``preset`` key, then DEFAULT.

    Returns:
        Validated GeneratorConfig

    Raises:
        FileNotFoundError: If config file does not exist
        ValueError: If the file cannot be parsed
        UnknownPresetError: If the file names an unknown preset
        ValidationError: If the merged config is invalid
    """
    raw = load_config(path)
    preset_name = raw.pop("preset", None)
    if preset is None:
        preset = preset_from_name(preset_name) if preset_name else Preset.DEFAULT

    base = config_for_preset(preset).model_dump()
    config = GeneratorConfig.model_validate(_merge(base, raw))
    logger.debug(f"Loaded generator config {config.name!r} from {path} (base preset {preset.name})")
    return config
