# -*- coding: utf-8 -*-
"""Location: ./tests/unit/juju_bundle/test_config.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: juju-bundle contributors

Test the configuration module.
"""

# Standard
import logging
from pathlib import Path

# Third-Party
from pydantic import ValidationError
import pytest

# First-Party
from juju_bundle.config import get_settings, Settings
from juju_bundle.logging_config import configure_logging


def test_defaults():
    """Defaults delegate to juju with quiet logging."""
    s = Settings(_env_file=None)
    assert s.delegate == "juju"
    assert s.log_level == "WARNING"
    assert s.debug is False


def test_env_overrides(monkeypatch):
    """JUJU_BUNDLE_* environment variables override defaults."""
    monkeypatch.setenv("JUJU_BUNDLE_DELEGATE", "/snap/bin/juju")
    monkeypatch.setenv("JUJU_BUNDLE_LOG_LEVEL", "debug")
    monkeypatch.setenv("JUJU_BUNDLE_DEBUG", "true")

    s = Settings(_env_file=None)
    assert s.delegate == "/snap/bin/juju"
    assert s.log_level == "DEBUG"
    assert s.debug is True


def test_env_file(tmp_path: Path):
    """Settings are read from a .env file."""
    env_file = tmp_path / ".env"
    env_file.write_text("JUJU_BUNDLE_DELEGATE=juju-3.4\nUNRELATED=1\n")

    s = Settings(_env_file=str(env_file))
    assert s.delegate == "juju-3.4"


def test_invalid_log_level():
    """Unknown log levels are rejected."""
    with pytest.raises(ValidationError):
        Settings(_env_file=None, log_level="chatty")


def test_get_settings_is_cached():
    """get_settings returns a single cached instance."""
    assert get_settings() is get_settings()


class TestConfigureLogging:
    """Test configure_logging function."""

    def test_level(self):
        """The package logger gets the requested level."""
        configure_logging("ERROR", force=True)
        assert logging.getLogger("juju_bundle").level == logging.ERROR

    def test_verbose_wins(self):
        """verbose forces DEBUG."""
        configure_logging("ERROR", verbose=True, force=True)
        assert logging.getLogger("juju_bundle").level == logging.DEBUG

    def test_single_handler(self):
        """Repeated calls do not stack handlers."""
        configure_logging("INFO", force=True)
        configure_logging("INFO")
        configure_logging("INFO", force=True)
        assert len(logging.getLogger("juju_bundle").handlers) == 1

    def test_child_loggers_emit(self, capsys):
        """Module loggers write to stderr through the package handler."""
        configure_logging("DEBUG", force=True)
        logging.getLogger("juju_bundle.delegate").debug("spawning juju")
        assert "spawning juju" in capsys.readouterr().err
