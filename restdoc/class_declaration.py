"""Declaration view over a Python class."""

import inspect
from collections.abc import Mapping, Sequence
from typing import Any

from restdoc.configure_object import configure_object
from restdoc.errors import InvalidConfigError


class ClassDeclaration:
    """Exposes a class's name, abstractness, primary base and own docstring."""

    def __init__(self, cls: type) -> None:
        """Initialize the view; raises InvalidConfigError for non-classes."""
        if not inspect.isclass(cls):
            msg = f"Expected a class, got {cls!r}"
            raise InvalidConfigError(msg)
        self.cls = cls

    def name(self) -> str:
        """Return the module-qualified class name."""
        return f"{self.cls.__module__}.{self.cls.__qualname__}"

    def is_abstract(self) -> bool:
        """Return whether the class still has abstract methods."""
        return inspect.isabstract(self.cls)

    def parent(self) -> "ClassDeclaration | None":
        """Return a view of the primary base class, skipping `object`."""
        bases = self.cls.__bases__
        if not bases or bases[0] is object:
            return None
        return ClassDeclaration(bases[0])

    def documentation_comment(self) -> str | None:
        """Return the docstring defined on this class itself."""
        doc = self.cls.__dict__.get("__doc__")
        return doc if isinstance(doc, str) else None

    def instantiate(self, args: Sequence[Any]) -> Any:
        """Call the class with positional arguments."""
        return self.cls(*args)

    def configure(self, instance: Any, mapping: Mapping[str, Any]) -> Any:
        """Apply property values to an instance."""
        return configure_object(instance, mapping)

    def __eq__(self, other: object) -> bool:
        """Views are equal when they wrap the same class."""
        return isinstance(other, ClassDeclaration) and other.cls is self.cls

    def __hash__(self) -> int:
        """Hash by the wrapped class."""
        return hash(self.cls)

    def __repr__(self) -> str:
        """Return a debug representation."""
        return f"ClassDeclaration({self.name()})"
