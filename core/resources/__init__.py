"""Resource lookup for embedded configuration files."""

# Public API
from core.resources.base import ResourceBackend
from core.resources.exceptions import ResourceBackendError
from core.resources.loader import ResourceLoader, create_loader
from core.resources.registry import available_backends, get_backend, register_backend

__all__ = [
    "ResourceBackend",
    "ResourceBackendError",
    "ResourceLoader",
    "available_backends",
    "create_loader",
    "get_backend",
    "register_backend",
]
