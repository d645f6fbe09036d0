"""Package data resource backend."""

from importlib import resources
from typing import BinaryIO, Optional

from core.resources.base import ResourceBackend
from core.resources.registry import register_backend
from core.utils.logging import get_logger

logger = get_logger(__name__)


@register_backend("package")
class PackageResourceBackend(ResourceBackend):
    """
    Reads resources bundled as package data of an importable package.

    The owner id is the package's import name. Resource names carry the
    owner as a dotted prefix, the remainder is the file name inside the
    package:

        ("mylib", "mylib.appsettings.json") -> mylib/appsettings.json
        ("mylib", "defaults.json")          -> mylib/defaults.json
    """

    @staticmethod
    def relative_name(owner_id: str, resource_name: str) -> str:
        """Strip the '<owner_id>.' prefix from a resource name."""
        prefix = f"{owner_id}."
        if resource_name.startswith(prefix):
            return resource_name[len(prefix):]
        return resource_name

    def open_resource(self, owner_id: str, resource_name: str) -> Optional[BinaryIO]:
        try:
            package = resources.files(owner_id)
        except ModuleNotFoundError:
            logger.debug(f"Package '{owner_id}' is not importable")
            return None
        except TypeError:
            # Python < 3.11 refuses plain modules
            logger.debug(f"'{owner_id}' is a module, not a package")
            return None

        resource = package.joinpath(self.relative_name(owner_id, resource_name))
        if not resource.is_file():
            logger.debug(f"No package resource '{resource_name}' in '{owner_id}'")
            return None

        return resource.open("rb")
