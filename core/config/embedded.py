"""
Ordered source list operations for embedded JSON settings.

A shared library ships default settings as package resources. These
helpers place the library's embedded sources at chosen positions of an
application's source list so that the application's own files, which sit
later in the list, override the library defaults.

Resource naming:
    <owner_id>.appsettings.json
    <owner_id>.appsettings.<environment_name>.json
"""

from typing import Optional

from core.config.merger import move_item
from core.config.sources import EmbeddedJsonSource, SourceKind
from core.resources import ResourceLoader
from core.utils.logging import get_logger

logger = get_logger(__name__)

BASE_FALLBACK_INDEX = 0
ENVIRONMENT_FALLBACK_INDEX = 1


def shared_resource_names(owner_id: str, environment_name: str) -> tuple[str, str]:
    """Names of the base and environment specific embedded settings."""
    return (
        f"{owner_id}.appsettings.json",
        f"{owner_id}.appsettings.{environment_name}.json",
    )


def find_embedded_source(
    sources: list, owner_id: str, resource_name: str
) -> Optional[int]:
    """
    Find the index of the embedded source for (owner_id, resource_name).

    Returns:
        Index of the first match, or None
    """
    for index, source in enumerate(sources):
        if (
            source.kind is SourceKind.EMBEDDED
            and source.owner_id == owner_id
            and source.resource_name == resource_name
        ):
            return index
    return None


def find_standard_source(sources: list, name_filter: Optional[str] = None) -> Optional[int]:
    """
    Find the index of the first file source, such as appsettings.json.

    Args:
        sources: Ordered source list
        name_filter: Optional text the file path must contain, ignoring
            case (e.g. an environment name to find appsettings.Development.json)

    Returns:
        Index of the first match, or None
    """
    folded = name_filter.casefold() if name_filter else None
    for index, source in enumerate(sources):
        if source.kind is not SourceKind.FILE:
            continue
        if folded is None or (source.path and folded in source.path.casefold()):
            return index
    return None


def has_embedded_source(sources: list, source: EmbeddedJsonSource) -> bool:
    """True if an embedded source for the same resource is already present."""
    return any(source.is_same_resource(existing) for existing in sources)


def add_embedded_json_file(
    sources: list,
    owner_id: str,
    resource_name: str,
    optional: bool = False,
    loader: Optional[ResourceLoader] = None,
) -> list:
    """
    Append an embedded JSON source unless one for the same resource exists.

    Returns:
        The same list, for chaining
    """
    source = EmbeddedJsonSource(owner_id, resource_name, optional, loader)
    if has_embedded_source(sources, source):
        logger.debug(f"Embedded source already present: {resource_name}")
        return sources

    sources.append(source)
    logger.info(f"Added embedded source {resource_name} at index {len(sources) - 1}")
    return sources


def add_embedded_json_file_at_index(
    sources: list,
    owner_id: str,
    resource_name: str,
    index: int,
    optional: bool = False,
    loader: Optional[ResourceLoader] = None,
) -> list:
    """
    Insert an embedded JSON source at `index`, or move it there if present.

    `index` is an insertion point: the source ends up immediately before
    the entry that occupied `index`, so everything from that entry on
    overrides it. A present source is moved without disturbing the
    relative order of the other entries.

    Args:
        sources: Ordered source list (mutated in place)
        owner_id: Package that ships the resource
        resource_name: Resource name
        index: 0 <= index <= len(sources) for a new source,
            0 <= index < len(sources) to move a present one
        optional: Whether a missing resource is tolerated at build time
        loader: Resource loader for a newly created source

    Returns:
        The same list, for chaining

    Raises:
        IndexError: If index is out of range; the list is left unchanged
    """
    current = find_embedded_source(sources, owner_id, resource_name)

    if current is None:
        if not 0 <= index <= len(sources):
            raise IndexError(f"index {index} is out of range for {len(sources)} sources")
        sources.insert(index, EmbeddedJsonSource(owner_id, resource_name, optional, loader))
        logger.info(f"Inserted embedded source {resource_name} at index {index}")
    elif not 0 <= index < len(sources):
        raise IndexError(f"index {index} is out of range for {len(sources)} sources")
    elif current != index:
        # Removing the entry shifts everything after it one position earlier.
        target = index - 1 if current < index else index
        if target != current:
            move_item(sources, current, target)
            logger.info(f"Moved embedded source {resource_name} from {current} to {target}")

    return sources


def add_shared_settings(
    sources: list,
    owner_id: str,
    environment_name: str,
    optional: bool = False,
    loader: Optional[ResourceLoader] = None,
) -> list:
    """
    Add a library's embedded appsettings so the application can override them.

    The base resource goes right before the application's first file
    source (appsettings.json), the environment resource right before the
    first file source whose path mentions the environment
    (appsettings.<env>.json). Without such files the base lands at 0 and
    the environment resource at 1. Safe to call repeatedly.

    Returns:
        The same list, for chaining
    """
    base_name, environment_resource = shared_resource_names(owner_id, environment_name)

    index = find_standard_source(sources)
    add_embedded_json_file_at_index(
        sources,
        owner_id,
        base_name,
        BASE_FALLBACK_INDEX if index is None else index,
        optional,
        loader,
    )

    # The base resource is present now, so the fallback is always in range.
    index = find_standard_source(sources, environment_name)
    add_embedded_json_file_at_index(
        sources,
        owner_id,
        environment_resource,
        ENVIRONMENT_FALLBACK_INDEX if index is None else index,
        optional,
        loader,
    )

    return sources
