"""Builds resource loaders from registered backends."""

from typing import BinaryIO, Callable, Optional

# Import backends to trigger registration
from core.resources import directory_backend, memory_backend, package_backend  # noqa: F401
from core.resources.exceptions import ResourceBackendError
from core.resources.registry import get_backend
from core.utils.logging import get_logger

logger = get_logger(__name__)

ResourceLoader = Callable[[str, str], Optional[BinaryIO]]


def create_loader(backend: str = "package", **backend_config) -> ResourceLoader:
    """
    Create a resource loader using the backend registry.

    Usage:
        loader = create_loader("directory", root="/opt/app/resources")
        stream = loader("mylib", "mylib.appsettings.json")
    """
    try:
        backend_cls = get_backend(backend)
        instance = backend_cls(**backend_config)
    except KeyError as e:
        raise ResourceBackendError(str(e))
    except TypeError as e:
        # Missing required argument (e.g., directory backend needs root)
        raise ResourceBackendError(f"Backend '{backend}' config error: {e}")

    logger.debug(f"Created resource loader with backend: {backend}")
    return instance
