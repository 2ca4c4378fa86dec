"""
Package settings.

Provides a single typed interface for environment-driven settings plus
helpers that combine them with the settings file.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from optchain import constants
from optchain.options.policy import AuditPolicy
from optchain.settings.store import get_setting_value, refresh_settings_cache


class SettingsError(Exception):
    """Raised when package settings are invalid or unavailable."""


class AppSettings(BaseSettings):
    """
    Settings loaded from environment variables.

    Environment values take precedence over the settings file.
    """

    model_config = SettingsConfigDict(env_file=None, extra="ignore", case_sensitive=True)

    settings_path: Optional[Path] = Field(default=None, alias=constants.SETTINGS_PATH_ENV)
    default_policy: Optional[str] = Field(default=None, alias=constants.DEFAULT_POLICY_ENV)

    @field_validator("settings_path", mode="before")
    @classmethod
    def _expand_settings_path(cls, value):
        """Expand user paths to absolute Path instances."""
        if value in (None, ""):
            return None
        if isinstance(value, Path):
            return value.expanduser()
        return Path(value).expanduser()

    @field_validator("default_policy", mode="before")
    @classmethod
    def _blank_policy_is_unset(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


@lru_cache(maxsize=1)
def get_app_settings() -> AppSettings:
    """
    Load settings from environment variables.
    """
    return AppSettings()


def refresh_app_settings_cache() -> None:
    """Clear cached settings so future calls reload from environment and disk."""
    get_app_settings.cache_clear()  # type: ignore[attr-defined]
    refresh_settings_cache()


def _read_setting(name: str, default):
    try:
        return get_setting_value(name, default)
    except (OSError, ValueError) as exc:
        raise SettingsError(str(exc)) from exc


def get_default_policy() -> AuditPolicy:
    """Return the configured default audit policy, falling back to ``error``."""
    raw = get_app_settings().default_policy
    if raw is None:
        raw = _read_setting(constants.SETTING_DEFAULT_POLICY, constants.FALLBACK_POLICY)
    try:
        return AuditPolicy.parse(raw)
    except ValueError as exc:
        raise SettingsError(str(exc)) from exc


def get_flag_unresolved_extensions() -> bool:
    """Return whether final audits report extension keys nobody resolved."""
    value = _read_setting(
        constants.SETTING_FLAG_UNRESOLVED_EXTENSIONS,
        constants.FALLBACK_FLAG_UNRESOLVED_EXTENSIONS,
    )
    if not isinstance(value, bool):
        raise SettingsError(
            f"Setting '{constants.SETTING_FLAG_UNRESOLVED_EXTENSIONS}' must be true or false, got {value!r}"
        )
    return value


def get_logging_flags() -> tuple[bool, bool]:
    """Return ``(logfire_enabled, console_enabled)`` from the settings file."""
    logfire_enabled = bool(_read_setting(constants.SETTING_LOGFIRE, False))
    console_enabled = bool(_read_setting(constants.SETTING_LOG_CONSOLE, False))
    return logfire_enabled, console_enabled
