# -*- coding: utf-8 -*-
"""Location: ./tests/unit/juju_bundle/conftest.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: juju-bundle contributors

Shared fixtures for juju-bundle unit tests.
"""

# Standard
import os

# Third-Party
import pytest

# First-Party
from juju_bundle.config import get_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Run every test with default settings and no stray .env file."""
    for var in list(os.environ):
        if var.startswith("JUJU_BUNDLE_"):
            monkeypatch.delenv(var)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
