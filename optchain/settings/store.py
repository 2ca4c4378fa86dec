"""
Settings file loader and helpers.

Provides typed access to the optchain settings YAML file. When no file is
configured the bundled template supplies the defaults.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError


SETTINGS_TEMPLATE = Path(__file__).parent / "settings.template.yaml"


class SettingsEntry(BaseModel):
    """Single general settings entry."""

    value: Any
    description: str | None = None


class SettingsFile(BaseModel):
    """Root schema for settings.yaml content."""

    settings: Dict[str, SettingsEntry] = Field(default_factory=dict)


def _resolve_settings_path() -> Path:
    """Determine the active settings file path, falling back to the template."""
    from optchain.settings import get_app_settings

    configured = get_app_settings().settings_path
    return configured if configured is not None else SETTINGS_TEMPLATE


@lru_cache(maxsize=1)
def load_settings() -> SettingsFile:
    """
    Load the settings file with caching.

    Returns:
        SettingsFile model for general settings.

    Raises:
        FileNotFoundError: If a configured settings file does not exist
        ValueError: If the file is not valid YAML or does not match the schema
    """
    settings_file = _resolve_settings_path()

    with open(settings_file, "r", encoding="utf-8") as handle:
        try:
            raw_data = yaml.safe_load(handle) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid settings file {settings_file}: {exc}") from exc

    if not isinstance(raw_data, dict):
        raise ValueError(f"Invalid settings file {settings_file}: expected a mapping at top level")

    if raw_data.get("settings") is None:
        raw_data["settings"] = {}

    try:
        return SettingsFile.model_validate(raw_data)
    except ValidationError as exc:
        raise ValueError(f"Invalid settings file {settings_file}: {exc}") from exc


def refresh_settings_cache() -> None:
    """Clear the settings cache so future calls reload from disk."""
    load_settings.cache_clear()  # type: ignore[attr-defined]


def get_general_settings() -> Dict[str, SettingsEntry]:
    """Get general settings section."""
    return load_settings().settings


def get_setting_value(name: str, default: Optional[Any] = None) -> Any:
    """Return the value of a general setting, or ``default`` when it is absent."""
    entry = get_general_settings().get(name)
    if entry is None or entry.value is None:
        return default
    return entry.value
