"""Resource backend registry."""

from core.resources.base import ResourceBackend

BACKENDS: dict[str, type] = {}


def register_backend(name: str):
    """
    Class decorator that makes a ResourceBackend available by name.

    Re-registering the same class is harmless (module reloads); claiming a
    name already taken by another class is an error.

    Usage:
        @register_backend("package")
        class PackageResourceBackend(ResourceBackend):
            ...

    Raises:
        TypeError: If the decorated class is not a ResourceBackend
        ValueError: If the name belongs to another backend
    """

    def decorator(cls):
        if not (isinstance(cls, type) and issubclass(cls, ResourceBackend)):
            raise TypeError(f"{cls!r} is not a ResourceBackend subclass")
        registered = BACKENDS.get(name)
        if registered is not None and registered.__qualname__ != cls.__qualname__:
            raise ValueError(
                f"Resource backend '{name}' is already registered to {registered.__name__}"
            )
        BACKENDS[name] = cls
        return cls

    return decorator


def available_backends() -> list[str]:
    """Registered backend names, sorted."""
    return sorted(BACKENDS)


def get_backend(name: str):
    """
    Get backend class by name (package, directory, memory).

    Raises:
        KeyError: If backend not registered
    """
    try:
        return BACKENDS[name]
    except KeyError:
        available = ", ".join(available_backends()) or "none"
        raise KeyError(f"Unknown resource backend: '{name}'. Available: {available}") from None
