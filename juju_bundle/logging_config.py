# -*- coding: utf-8 -*-
"""Location: ./juju_bundle/logging_config.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: juju-bundle contributors

Logging setup for the juju-bundle console script.

Log records go to stderr so they never mix with the delegate's stdout.
"""

# Standard
import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "WARNING", verbose: bool = False, force: bool = False) -> None:
    """Configure the ``juju_bundle`` logger hierarchy.

    Args:
        level: Base logging level name
        verbose: Force DEBUG regardless of *level*
        force: Replace handlers installed by an earlier call

    Examples:
        >>> configure_logging("INFO", force=True)
        >>> logging.getLogger("juju_bundle").level == logging.INFO
        True
        >>> configure_logging("INFO", verbose=True, force=True)
        >>> logging.getLogger("juju_bundle").level == logging.DEBUG
        True
    """
    resolved = logging.DEBUG if verbose else getattr(logging, level.upper(), logging.WARNING)
    logger = logging.getLogger("juju_bundle")

    if force:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    logger.setLevel(resolved)
