"""In-memory resource backend."""

import io
from typing import BinaryIO, Optional

from core.resources.base import ResourceBackend
from core.resources.registry import register_backend


@register_backend("memory")
class MemoryResourceBackend(ResourceBackend):
    """
    Serves resources from a mapping keyed by (owner_id, resource_name).

    Example:
        MemoryResourceBackend({("mylib", "mylib.appsettings.json"): b"{}"})
    """

    def __init__(self, resources: Optional[dict] = None):
        self.resources: dict = dict(resources or {})

    def add(self, owner_id: str, resource_name: str, content) -> None:
        """Register a resource; str content is UTF-8 encoded."""
        if isinstance(content, str):
            content = content.encode("utf-8")
        self.resources[(owner_id, resource_name)] = content

    def open_resource(self, owner_id: str, resource_name: str) -> Optional[BinaryIO]:
        content = self.resources.get((owner_id, resource_name))
        if content is None:
            return None
        return io.BytesIO(content)
