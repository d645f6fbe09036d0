"""Directory resource backend."""

from pathlib import Path
from typing import BinaryIO, Optional

from core.resources.base import ResourceBackend
from core.resources.registry import register_backend
from core.utils.logging import get_logger

logger = get_logger(__name__)


@register_backend("directory")
class DirectoryResourceBackend(ResourceBackend):
    """
    Reads resources from files in a directory, named by full resource name.

    Useful for unpacked deployments:
        root/mylib.appsettings.json
        root/mylib.appsettings.Development.json
    """

    def __init__(self, root: str):
        """
        Args:
            root: Directory holding the resource files
        """
        self.root = Path(root)

    def open_resource(self, owner_id: str, resource_name: str) -> Optional[BinaryIO]:
        path = self.root / resource_name
        if not path.is_file():
            logger.debug(f"Resource file not found: {path}")
            return None
        return open(path, "rb")
