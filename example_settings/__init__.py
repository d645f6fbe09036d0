"""
Example shared library with embedded default settings.

Ships appsettings.json and appsettings.Development.json as package data.
Applications call use_shared_settings() on their builder; their own
appsettings files then override these defaults key by key.
"""

from typing import Optional

from core.config.builder import ConfigurationBuilder
from core.config.embedded import add_shared_settings as _add_shared_settings
from core.resources import ResourceLoader

OWNER_ID = __name__


def add_shared_settings(
    sources: list,
    environment_name: str,
    optional: bool = False,
    loader: Optional[ResourceLoader] = None,
) -> list:
    """Add this library's embedded appsettings to an ordered source list."""
    return _add_shared_settings(sources, OWNER_ID, environment_name, optional, loader)


def use_shared_settings(
    builder: ConfigurationBuilder,
    optional: bool = False,
    loader: Optional[ResourceLoader] = None,
) -> ConfigurationBuilder:
    """Add this library's embedded appsettings for the builder's environment."""
    add_shared_settings(builder.sources, builder.environment_name, optional, loader)
    return builder
