"""Configuration-related exceptions."""


class ConfigError(Exception):
    """Base exception for config errors."""

    pass


class ConfigNotFoundError(ConfigError):
    """Raised when a required config file doesn't exist."""

    pass


class ConfigParseError(ConfigError):
    """Raised when a config file or resource has invalid JSON/YAML."""

    pass


class ResourceNotFoundError(ConfigNotFoundError):
    """Raised when a required embedded resource can't be located."""

    def __init__(self, owner_id: str, resource_name: str):
        self.owner_id = owner_id
        self.resource_name = resource_name
        super().__init__(
            f"Embedded resource '{resource_name}' not found for owner '{owner_id}'"
        )
