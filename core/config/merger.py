"""Precedence merge of configuration data and ordered-list moves."""

from typing import Any, Optional


def _find_key(mapping: dict, key: str) -> Optional[str]:
    """Return the key of `mapping` equal to `key` ignoring case, if any."""
    if key in mapping:
        return key
    folded = key.casefold()
    for existing in mapping:
        if existing.casefold() == folded:
            return existing
    return None


def deep_merge(base: dict, override: dict) -> dict:
    """
    Deep merge two dictionaries. Override wins on conflicts.

    Keys are matched case-insensitively; the casing first seen in `base`
    is kept. Lists and scalars are replaced wholesale.

    Args:
        base: Lower precedence configuration
        override: Configuration to merge on top

    Returns:
        New merged dictionary

    Example:
        base = {"Logging": {"Level": "Info", "Console": True}}
        override = {"logging": {"level": "Debug"}}
        result = {"Logging": {"Level": "Debug", "Console": True}}
    """
    result = base.copy()

    for key, value in override.items():
        existing = _find_key(result, key)
        if existing is None:
            result[key] = value
        elif isinstance(result[existing], dict) and isinstance(value, dict):
            result[existing] = deep_merge(result[existing], value)
        else:
            result[existing] = value

    return result


def lookup(data: Any, key: str) -> Any:
    """
    Resolve a ':'-separated key path in nested data.

    Segments match dict keys case-insensitively; numeric segments index
    into lists.

    Raises:
        KeyError: If any segment is missing
    """
    node = data
    for segment in key.split(":"):
        if isinstance(node, dict):
            existing = _find_key(node, segment)
            if existing is None:
                raise KeyError(key)
            node = node[existing]
        elif isinstance(node, list) and segment.isdigit() and int(segment) < len(node):
            node = node[int(segment)]
        else:
            raise KeyError(key)
    return node


def move_item(items: list, old_index: int, new_index: int) -> None:
    """
    Move one item of a list without disturbing the order of the others.

    The moved item ends up at `new_index`:
        move_item([A, B, C, D], 0, 3) -> [B, C, D, A]
        move_item([A, B, C, D], 3, 0) -> [D, A, B, C]

    Raises:
        IndexError: If either index is outside the list
    """
    if not 0 <= old_index < len(items):
        raise IndexError(f"old_index {old_index} is out of range")
    if not 0 <= new_index < len(items):
        raise IndexError(f"new_index {new_index} is out of range")

    if old_index == new_index:
        return

    item = items.pop(old_index)
    items.insert(new_index, item)
