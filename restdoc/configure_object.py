"""Logic for applying a property mapping to an object."""

from collections.abc import Mapping
from typing import Any


def configure_object(instance: Any, mapping: Mapping[str, Any]) -> Any:
    """Set each mapping entry as an attribute of the instance."""
    for key, value in mapping.items():
        setattr(instance, key, value)
    return instance
