"""Custom exceptions for resource backends."""


class ResourceBackendError(Exception):
    """Raised when there's an issue with the resource backend itself."""

    pass
