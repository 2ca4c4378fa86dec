"""
Pytest configuration and fixtures
"""
import sys
from pathlib import Path

import pytest

# Add project root to path for imports
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from optchain import constants
from optchain.settings import refresh_app_settings_cache


class RecordingLogger:
    """Stand-in for a module UnifiedLogger that keeps emitted records."""

    def __init__(self):
        self.records = []

    def _record(self, level, message, **extra):
        self.records.append((level, message, extra))

    def info(self, message, **extra):
        self._record("info", message, **extra)

    def warning(self, message, **extra):
        self._record("warning", message, **extra)

    def error(self, message, **extra):
        self._record("error", message, **extra)

    def debug(self, message, **extra):
        self._record("debug", message, **extra)

    def of_level(self, level):
        return [record for record in self.records if record[0] == level]


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Run every test against the bundled settings template and a clean environment."""
    monkeypatch.delenv(constants.SETTINGS_PATH_ENV, raising=False)
    monkeypatch.delenv(constants.DEFAULT_POLICY_ENV, raising=False)
    monkeypatch.delenv("LOGFIRE_TOKEN", raising=False)
    refresh_app_settings_cache()
    yield
    refresh_app_settings_cache()


@pytest.fixture
def auditor_log(monkeypatch):
    """Capture diagnostics emitted by the usage auditor."""
    from optchain.options import auditor

    recorder = RecordingLogger()
    monkeypatch.setattr(auditor, "logger", recorder)
    return recorder


@pytest.fixture
def settings_file(tmp_path, monkeypatch):
    """Write a settings YAML file and point the environment at it."""

    def _write(content: str) -> Path:
        path = tmp_path / "settings.yaml"
        path.write_text(content, encoding="utf-8")
        monkeypatch.setenv(constants.SETTINGS_PATH_ENV, str(path))
        refresh_app_settings_cache()
        return path

    return _write


@pytest.fixture
def logfire_spans(capfire, monkeypatch):
    """Route module loggers straight to the capfire-configured logfire client."""
    import logfire

    from optchain.options import auditor, binder, scope

    for module in (auditor, binder, scope):
        monkeypatch.setattr(module.logger, "_logfire_instance", logfire)

    def _spans():
        return capfire.exporter.exported_spans_as_dict()

    return _spans
