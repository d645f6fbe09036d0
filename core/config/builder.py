"""Configuration builder - collects ordered sources and merges them."""

import copy
import os
from pathlib import Path
from typing import Any, Optional

from core.config import embedded
from core.config.merger import deep_merge, lookup
from core.config.sources import (
    ConfigurationProvider,
    ConfigurationSource,
    EnvironmentVariablesSource,
    JsonFileSource,
    MemorySource,
    YamlFileSource,
)
from core.resources import ResourceLoader
from core.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_ENVIRONMENT = "Production"
ENVIRONMENT_VARIABLE = "APP_ENVIRONMENT"
ENVIRONMENT_PREFIX = "APP_"


class ConfigurationRoot:
    """
    Read-only view over the merged data of every provider.

    Keys are ':'-separated paths and are matched case-insensitively:
        config["Example:Value1"]
        config.get("logging:level", "Info")
    """

    def __init__(self, providers: list[ConfigurationProvider]):
        self.providers = providers
        self._data: dict = {}
        for provider in providers:
            self._data = deep_merge(self._data, provider.data)

    def __getitem__(self, key: str) -> Any:
        return lookup(self._data, key)

    def __contains__(self, key: str) -> bool:
        try:
            lookup(self._data, key)
        except KeyError:
            return False
        return True

    def get(self, key: str, default: Any = None) -> Any:
        try:
            return lookup(self._data, key)
        except KeyError:
            return default

    def get_section(self, key: str) -> dict:
        """Sub-tree under `key`; empty if missing or not a section."""
        value = self.get(key)
        return value if isinstance(value, dict) else {}

    def as_dict(self) -> dict:
        return copy.deepcopy(self._data)


class ConfigurationBuilder:
    """
    Holds the ordered list of configuration sources.

    Load order (later wins). A typical application:
        1. appsettings.json
        2. appsettings.{environment}.json
        3. APP_* environment variables

    Usage:
        builder = ConfigurationBuilder.create_default(content_root=".")
        builder.add_shared_settings("mylib")
        config = builder.build()
    """

    def __init__(
        self,
        environment_name: str = DEFAULT_ENVIRONMENT,
        content_root: Optional[Path] = None,
    ):
        self.environment_name = environment_name
        self.content_root = Path(content_root) if content_root else Path.cwd()
        self.sources: list[ConfigurationSource] = []

    @classmethod
    def create_default(
        cls,
        content_root: Optional[Path] = None,
        environment_name: Optional[str] = None,
    ) -> "ConfigurationBuilder":
        """Builder with the standard application sources already added."""
        environment_name = (
            environment_name
            or os.environ.get(ENVIRONMENT_VARIABLE)
            or DEFAULT_ENVIRONMENT
        )
        builder = cls(environment_name=environment_name, content_root=content_root)
        builder.add_json_file("appsettings.json", optional=True)
        builder.add_json_file(f"appsettings.{environment_name}.json", optional=True)
        builder.add_environment_variables(ENVIRONMENT_PREFIX)
        logger.info(
            f"Created default builder for environment '{environment_name}' "
            f"in {builder.content_root}"
        )
        return builder

    def _resolve(self, path) -> Path:
        path = Path(path)
        return path if path.is_absolute() else self.content_root / path

    def add(self, source: ConfigurationSource) -> "ConfigurationBuilder":
        self.sources.append(source)
        return self

    def add_json_file(self, path, optional: bool = False) -> "ConfigurationBuilder":
        return self.add(JsonFileSource(self._resolve(path), optional))

    def add_yaml_file(self, path, optional: bool = False) -> "ConfigurationBuilder":
        return self.add(YamlFileSource(self._resolve(path), optional))

    def add_environment_variables(self, prefix: str = "") -> "ConfigurationBuilder":
        return self.add(EnvironmentVariablesSource(prefix))

    def add_in_memory(self, data: dict) -> "ConfigurationBuilder":
        return self.add(MemorySource(data))

    def find_embedded_source(self, owner_id: str, resource_name: str) -> Optional[int]:
        return embedded.find_embedded_source(self.sources, owner_id, resource_name)

    def find_standard_source(self, name_filter: Optional[str] = None) -> Optional[int]:
        return embedded.find_standard_source(self.sources, name_filter)

    def add_embedded_json_file(
        self,
        owner_id: str,
        resource_name: str,
        optional: bool = False,
        loader: Optional[ResourceLoader] = None,
    ) -> "ConfigurationBuilder":
        embedded.add_embedded_json_file(
            self.sources, owner_id, resource_name, optional, loader
        )
        return self

    def add_embedded_json_file_at_index(
        self,
        owner_id: str,
        resource_name: str,
        index: int,
        optional: bool = False,
        loader: Optional[ResourceLoader] = None,
    ) -> "ConfigurationBuilder":
        embedded.add_embedded_json_file_at_index(
            self.sources, owner_id, resource_name, index, optional, loader
        )
        return self

    def add_shared_settings(
        self,
        owner_id: str,
        environment_name: Optional[str] = None,
        optional: bool = False,
        loader: Optional[ResourceLoader] = None,
    ) -> "ConfigurationBuilder":
        """Add `owner_id`'s embedded appsettings for this builder's environment."""
        embedded.add_shared_settings(
            self.sources,
            owner_id,
            environment_name or self.environment_name,
            optional,
            loader,
        )
        return self

    def build(self) -> ConfigurationRoot:
        """Build every source in order and merge the results."""
        providers = [source.build() for source in self.sources]
        logger.info(f"Built configuration from {len(providers)} sources")
        return ConfigurationRoot(providers)
