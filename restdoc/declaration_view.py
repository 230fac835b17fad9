"""Protocol describing the reflection facts a declaration must expose."""

from collections.abc import Mapping, Sequence
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class DeclarationView(Protocol):
    """A reflected class or method carrying a documentation comment."""

    def name(self) -> str:
        """Return the fully qualified identifier."""
        ...

    def is_abstract(self) -> bool:
        """Return whether the declaration is abstract."""
        ...

    def parent(self) -> "DeclarationView | None":
        """Return the parent declaration, if any."""
        ...

    def documentation_comment(self) -> str | None:
        """Return the raw documentation comment text, if any."""
        ...

    def instantiate(self, args: Sequence[Any]) -> Any:
        """Create an instance of the reflected type."""
        ...

    def configure(self, instance: Any, mapping: Mapping[str, Any]) -> Any:
        """Apply property values to an instance and return it."""
        ...
