"""Declaration view over a method defined on a Python class."""

import inspect
from collections.abc import Mapping, Sequence
from typing import Any

from restdoc.configure_object import configure_object
from restdoc.errors import InvalidConfigError


def _unwrap(member: Any) -> Any:
    """Return the underlying function of a descriptor-wrapped member."""
    if isinstance(member, (staticmethod, classmethod)):
        return member.__func__
    if isinstance(member, property):
        return member.fget
    return member


class MethodDeclaration:
    """Exposes one method; its parent is the overridden method in the MRO."""

    def __init__(self, owner: type, method_name: str) -> None:
        """Initialize the view; the method must be defined on `owner` itself."""
        if not inspect.isclass(owner):
            msg = f"Expected a class, got {owner!r}"
            raise InvalidConfigError(msg)
        if method_name not in owner.__dict__:
            msg = f"{owner.__qualname__} does not define '{method_name}'"
            raise InvalidConfigError(msg)
        self.owner = owner
        self.method_name = method_name
        self.function = _unwrap(owner.__dict__[method_name])

    def name(self) -> str:
        """Return the module-qualified method name."""
        return f"{self.owner.__module__}.{self.owner.__qualname__}.{self.method_name}"

    def is_abstract(self) -> bool:
        """Return whether the method is declared abstract."""
        return bool(getattr(self.function, "__isabstractmethod__", False))

    def parent(self) -> "MethodDeclaration | None":
        """Return the nearest definition further along the owner's MRO."""
        for base in self.owner.__mro__[1:]:
            if base is object:
                break
            if self.method_name in base.__dict__:
                return MethodDeclaration(base, self.method_name)
        return None

    def documentation_comment(self) -> str | None:
        """Return the method's own docstring."""
        doc = getattr(self.function, "__doc__", None)
        return doc if isinstance(doc, str) else None

    def instantiate(self, args: Sequence[Any]) -> Any:
        """Instantiate the owner class."""
        return self.owner(*args)

    def configure(self, instance: Any, mapping: Mapping[str, Any]) -> Any:
        """Apply property values to an owner instance."""
        return configure_object(instance, mapping)

    def __eq__(self, other: object) -> bool:
        """Views are equal when they wrap the same owner and method name."""
        return (
            isinstance(other, MethodDeclaration)
            and other.owner is self.owner
            and other.method_name == self.method_name
        )

    def __hash__(self) -> int:
        """Hash by owner and method name."""
        return hash((self.owner, self.method_name))

    def __repr__(self) -> str:
        """Return a debug representation."""
        return f"MethodDeclaration({self.name()})"
