"""Configuration sources and the providers they build into."""

import json
import os
from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
from typing import Callable, Optional

import yaml

from core.config.exceptions import (
    ConfigNotFoundError,
    ConfigParseError,
    ResourceNotFoundError,
)
from core.resources import ResourceLoader, create_loader
from core.utils.logging import get_logger

logger = get_logger(__name__)


class SourceKind(Enum):
    """Kinds of configuration source. FILE sources are the 'standard' ones."""

    FILE = "file"
    EMBEDDED = "embedded"
    ENVIRONMENT = "environment"
    MEMORY = "memory"


class ConfigurationProvider:
    """Key/value data contributed by one source."""

    def __init__(self, data: Optional[dict] = None, name: str = "empty"):
        self.data = data or {}
        self.name = name

    def __repr__(self) -> str:
        return f"ConfigurationProvider(name={self.name!r}, keys={len(self.data)})"


class ConfigurationSource(ABC):
    """
    Abstract base class for an entry of the ordered source list.

    Subclasses set `kind` and implement build(). Position in the list
    decides precedence: later sources override earlier ones.
    """

    kind: SourceKind

    @abstractmethod
    def build(self) -> ConfigurationProvider:
        """Load the source's data."""
        pass

    @abstractmethod
    def describe(self) -> str:
        """Short human readable label."""
        pass


class FileSource(ConfigurationSource):
    """A configuration file on disk."""

    kind = SourceKind.FILE

    def __init__(self, path, optional: bool = False):
        self.path = str(path)
        self.optional = optional

    @abstractmethod
    def _parse(self, stream) -> object:
        pass

    def build(self) -> ConfigurationProvider:
        path = Path(self.path)
        if not path.exists():
            if self.optional:
                logger.debug(f"Optional config file not found: {path}")
                return ConfigurationProvider(name=self.describe())
            raise ConfigNotFoundError(f"Config file not found: {path}")

        with open(path, "rb") as f:
            data = self._parse(f)

        logger.debug(f"Loaded config: {path}")
        return ConfigurationProvider(_require_mapping(data, self.path), self.describe())

    def describe(self) -> str:
        return f"file:{self.path}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={self.path!r}, optional={self.optional})"


class JsonFileSource(FileSource):
    """A JSON file such as appsettings.json."""

    def _parse(self, stream) -> object:
        try:
            return json.load(stream)
        except json.JSONDecodeError as e:
            raise ConfigParseError(f"Invalid JSON in {self.path}: {e}")


class YamlFileSource(FileSource):
    """A YAML file."""

    def _parse(self, stream) -> object:
        try:
            return yaml.safe_load(stream) or {}
        except yaml.YAMLError as e:
            raise ConfigParseError(f"Invalid YAML in {self.path}: {e}")


class EmbeddedJsonSource(ConfigurationSource):
    """
    JSON settings shipped inside a package.

    Identity is the (owner_id, resource_name) pair. The byte stream is
    resolved when the source is built, through `loader`; without one the
    package data backend is used.
    """

    kind = SourceKind.EMBEDDED

    def __init__(
        self,
        owner_id: str,
        resource_name: str,
        optional: bool = False,
        loader: Optional[ResourceLoader] = None,
    ):
        self.owner_id = owner_id
        self.resource_name = resource_name
        self.optional = optional
        self.loader = loader

    def is_same_resource(self, other: ConfigurationSource) -> bool:
        """True if `other` is an embedded source for the same resource."""
        return (
            other.kind is SourceKind.EMBEDDED
            and other.owner_id == self.owner_id
            and other.resource_name == self.resource_name
        )

    def _open(self):
        loader = self.loader or create_loader("package")
        try:
            return loader(self.owner_id, self.resource_name)
        except FileNotFoundError:
            if not self.optional:
                raise ResourceNotFoundError(self.owner_id, self.resource_name)
            return None

    def build(self) -> ConfigurationProvider:
        stream = self._open()

        if stream is None:
            if not self.optional:
                raise ResourceNotFoundError(self.owner_id, self.resource_name)
            logger.debug(f"Optional embedded resource not found: {self.resource_name}")
            return ConfigurationProvider(name=self.describe())

        with stream:
            try:
                data = json.load(stream)
            except json.JSONDecodeError as e:
                raise ConfigParseError(
                    f"Invalid JSON in embedded resource {self.resource_name}: {e}"
                )

        logger.debug(f"Loaded embedded resource: {self.resource_name}")
        return ConfigurationProvider(
            _require_mapping(data, self.resource_name), self.describe()
        )

    def describe(self) -> str:
        return f"embedded:{self.owner_id}/{self.resource_name}"

    def __repr__(self) -> str:
        return (
            f"EmbeddedJsonSource(owner_id={self.owner_id!r}, "
            f"resource_name={self.resource_name!r}, optional={self.optional})"
        )


class EnvironmentVariablesSource(ConfigurationSource):
    """
    Environment variables, optionally filtered by prefix.

    The prefix is stripped and '__' separates sections:
        APP_Example__Value1=x -> {"Example": {"Value1": "x"}}
    """

    kind = SourceKind.ENVIRONMENT

    def __init__(self, prefix: str = "", environ: Optional[Callable[[], dict]] = None):
        self.prefix = prefix
        self._environ = environ or (lambda: dict(os.environ))

    def build(self) -> ConfigurationProvider:
        data: dict = {}
        for name, value in self._environ().items():
            if not name.upper().startswith(self.prefix.upper()):
                continue
            path = [part for part in name[len(self.prefix):].split("__") if part]
            if not path:
                continue
            node = data
            for part in path[:-1]:
                child = node.get(part)
                if not isinstance(child, dict):
                    child = node[part] = {}
                node = child
            node[path[-1]] = value
        return ConfigurationProvider(data, self.describe())

    def describe(self) -> str:
        return f"env:{self.prefix}*"

    def __repr__(self) -> str:
        return f"EnvironmentVariablesSource(prefix={self.prefix!r})"


class MemorySource(ConfigurationSource):
    """In-memory settings."""

    kind = SourceKind.MEMORY

    def __init__(self, data: Optional[dict] = None):
        self.data = data or {}

    def build(self) -> ConfigurationProvider:
        return ConfigurationProvider(dict(self.data), self.describe())

    def describe(self) -> str:
        return "memory"

    def __repr__(self) -> str:
        return f"MemorySource(keys={len(self.data)})"


def _require_mapping(data: object, origin: str) -> dict:
    if not isinstance(data, dict):
        raise ConfigParseError(f"Top level of {origin} must be an object")
    return data
