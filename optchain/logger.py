"""Unified logger providing technical instrumentation for optchain modules."""

from __future__ import annotations

import hashlib
import logging
import os
from contextlib import contextmanager
from typing import Any, Optional, Tuple

import logfire

from optchain.settings import SettingsError, get_logging_flags


_logfire_config_state: Optional[Tuple[bool, bool, Optional[str]]] = None
_logger_internal = logging.getLogger(__name__)


def _token_fingerprint(token: Optional[str]) -> Optional[str]:
    """Create a stable fingerprint for secret comparison without storing raw values."""
    if not token:
        return None
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


def refresh_logfire_configuration(force: bool = False) -> None:
    """
    Reconfigure the global Logfire client based on current settings.

    Args:
        force: When True, always reapply configuration even if nothing changed.
    """
    global _logfire_config_state

    try:
        enabled, console = get_logging_flags()
    except SettingsError as exc:
        _logger_internal.error("Failed to read logging settings, defaulting to disabled: %s", exc)
        enabled, console = False, False

    fingerprint = _token_fingerprint(os.environ.get("LOGFIRE_TOKEN"))
    desired_state = (enabled, console, fingerprint)

    if not force and _logfire_config_state == desired_state:
        return

    send_option: str | bool = "if-token-present" if enabled else False

    logfire.configure(
        send_to_logfire=send_option,
        console=None if console else False,
        scrubbing=False,
    )

    _logfire_config_state = desired_state


class UnifiedLogger:
    """Unified logger providing structured instrumentation through Logfire."""

    def __init__(self, tag: str):
        """
        Initialize unified logger for a module or component.

        Args:
            tag: Module or component identifier
        """
        self.tag = tag
        self._logfire_instance = None  # Lazy initialization

    @property
    def _logfire(self):
        """Lazy-loaded Logfire instance."""
        if self._logfire_instance is None:
            self._logfire_instance = self._setup_logfire()
        return self._logfire_instance

    def _setup_logfire(self):
        """Set up the Logfire client on first use."""
        refresh_logfire_configuration()
        return logfire

    # Technical Instrumentation Methods

    def info(self, message: str, **extra: Any) -> None:
        """Technical info logging."""
        self._logfire.info(message, tag=self.tag, **extra)

    def warning(self, message: str, **extra: Any) -> None:
        """Technical warning logging."""
        self._logfire.warning(message, tag=self.tag, **extra)

    def error(self, message: str, **extra: Any) -> None:
        """Technical error logging."""
        self._logfire.error(message, tag=self.tag, **extra)

    def debug(self, message: str, **extra: Any) -> None:
        """Technical debug logging."""
        self._logfire.debug(message, tag=self.tag, **extra)

    @contextmanager
    def span(self, operation: str, **span_data: Any):
        """
        Manual instrumentation span for a unit of work.

        Usage:
            with logger.span("option_scope", declared=["a", "b"]):
                # work done with the options
                pass
        """
        with self._logfire.span(f"{self.tag}:{operation}", **span_data):
            yield

    def trace(self, func_name_template: Optional[str] = None):
        """
        Decorator for function instrumentation with sensible defaults.

        Args:
            func_name_template: Optional template for span name (e.g., "Building {policy=}")

        Usage:
            @logger.trace()  # Full instrumentation with function name
            def build(entries, policy): pass
        """
        def decorator(func):
            span_name = func_name_template or f"{self.tag}:{func.__name__}"
            return self._logfire.instrument(
                span_name,
                extract_args=True,
            )(func)
        return decorator
