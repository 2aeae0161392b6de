# -*- coding: utf-8 -*-
"""Location: ./juju_bundle/__init__.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: juju-bundle contributors

juju-bundle: a Juju plugin that forwards bundle subcommands to the ``juju`` CLI.
"""

__version__ = "0.5.0"
__all__ = ["__version__"]
