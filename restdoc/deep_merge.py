"""Logic for layering user settings over the defaults."""

from collections.abc import Iterable
from typing import Any

# Lists under these keys extend the defaults instead of replacing them
ADDITIVE_KEYS = frozenset({"inherit_tags"})


def _union(first: Iterable[Any], second: Iterable[Any]) -> list[Any]:
    """Concatenate two lists, keeping the first occurrence of each value."""
    seen: dict[Any, None] = dict.fromkeys(first)
    seen.update(dict.fromkeys(second))
    return list(seen)


def deep_merge(
    base: dict[str, Any],
    update: dict[str, Any],
    additive: frozenset[str] = ADDITIVE_KEYS,
) -> dict[str, Any]:
    """Return `base` with `update` layered on top.

    Nested mappings merge key by key. Lists named in `additive` are unioned
    in order; every other value in `update` replaces the one in `base`.
    """
    merged = dict(base)
    for key, value in update.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value, additive)
        elif key in additive and isinstance(current, list) and isinstance(value, list):
            merged[key] = _union(current, value)
        else:
            merged[key] = value
    return merged
