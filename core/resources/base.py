"""Abstract base class for resource backends."""

from abc import ABC, abstractmethod
from typing import BinaryIO, Optional


class ResourceBackend(ABC):
    """
    Abstract base class that all resource backends must implement.

    A backend answers "give me the bytes of resource X shipped by owner Y".
    Instances are callable so they can be passed anywhere a loader
    function ``(owner_id, resource_name) -> Optional[BinaryIO]`` is expected:
    - Package data (importlib.resources)
    - A directory on disk
    - An in-memory mapping (tests, generated settings)
    """

    @abstractmethod
    def open_resource(self, owner_id: str, resource_name: str) -> Optional[BinaryIO]:
        """
        Open a resource as a binary stream.

        Args:
            owner_id: Identifier of the package that ships the resource
            resource_name: Full resource name (e.g. "mylib.appsettings.json")

        Returns:
            An open binary stream, or None if the resource doesn't exist.
            Callers own the stream and must close it.
        """
        pass

    def __call__(self, owner_id: str, resource_name: str) -> Optional[BinaryIO]:
        return self.open_resource(owner_id, resource_name)
