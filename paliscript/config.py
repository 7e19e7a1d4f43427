"""Settings loading."""

import copy
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from paliscript.models import EngineConfig


ROOT_DIR = Path(__file__).parent
DEFAULT_SETTINGS_PATH = ROOT_DIR / "etc" / "settings.yaml"


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _read_yaml(path: Path) -> dict[str, Any]:
    with path.open(encoding="utf-8") as f:
        try:
            result = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid settings file {path}: {e}") from e
    if not isinstance(result, dict):
        raise ValueError(f"Settings file must contain a mapping: {path}")
    return result


def load_settings(path: Path | None = None) -> dict[str, Any]:
    """
    Load settings.yaml.

    Args:
        path: Optional settings file; its values override the packaged defaults

    Returns:
        Settings dictionary with "logging", "conversion" and "batch" sections

    Raises:
        FileNotFoundError: If an explicit path does not exist
        ValueError: If a settings file is not a YAML mapping
    """
    settings = _read_yaml(DEFAULT_SETTINGS_PATH)

    if path is not None:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Settings file not found: {path}")
        settings = _merge(settings, _read_yaml(path))

    return settings


def engine_config(settings: dict[str, Any]) -> EngineConfig:
    """Build the engine configuration from the conversion settings."""
    conversion = settings.get("conversion", {})
    return EngineConfig(pali_only_thai_forms=bool(conversion.get("pali_only_thai_forms", False)))
