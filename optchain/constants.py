"""
Core package constants.

Only place true invariants here (env var names, setting keys, fallbacks).
Deployment-specific values belong in the settings file; use the helpers in
optchain.settings rather than reading the environment directly.
"""

from __future__ import annotations


# Environment variables read by AppSettings
SETTINGS_PATH_ENV = "OPTCHAIN_SETTINGS_PATH"
DEFAULT_POLICY_ENV = "OPTCHAIN_DEFAULT_POLICY"

# General settings keys (settings.yaml -> settings section)
SETTING_DEFAULT_POLICY = "default_policy"
SETTING_FLAG_UNRESOLVED_EXTENSIONS = "flag_unresolved_extensions"
SETTING_LOGFIRE = "logfire"
SETTING_LOG_CONSOLE = "log_console"

# Fallbacks when neither environment nor settings file provide a value
FALLBACK_POLICY = "error"
FALLBACK_FLAG_UNRESOLVED_EXTENSIONS = False
