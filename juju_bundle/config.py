# -*- coding: utf-8 -*-
"""Location: ./juju_bundle/config.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: juju-bundle contributors

juju-bundle configuration settings.
Settings are loaded from ``JUJU_BUNDLE_*`` environment variables (or a ``.env``
file) with sensible defaults.
"""

# Standard
from functools import lru_cache

# Third-Party
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings for the plugin.

    Examples:
        >>> Settings(_env_file=None).delegate
        'juju'
        >>> Settings(_env_file=None, log_level="debug").log_level
        'DEBUG'
    """

    model_config = SettingsConfigDict(env_prefix="JUJU_BUNDLE_", env_file=".env", extra="ignore")

    # Delegate
    delegate: str = Field("juju", description="Delegate executable name or path")

    # Logging
    log_level: str = Field("WARNING", description="Python logging level")

    # Re-raise unexpected exceptions instead of exiting 1
    debug: bool = False

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the log level name

        Args:
            v: Level name in any case

        Returns:
            Upper-cased level name

        Raises:
            ValueError: If the level is not a standard logging level
        """
        level = v.upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"Invalid log level: {v}")
        return level


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings: A cached instance of the Settings class.

    Examples:
        >>> settings = get_settings()
        >>> isinstance(settings, Settings)
        True
        >>> settings is get_settings()
        True
    """
    return Settings()
