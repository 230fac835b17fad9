"""Data model for a generic documentation tag."""

from dataclasses import dataclass

TAG_PREFIX = "restdoc-"


@dataclass
class Tag:
    """A classified tag whose value is its raw content."""

    name: str
    content: str

    def __post_init__(self) -> None:
        """Normalize surrounding whitespace of the raw content."""
        self.content = self.content.strip()

    @property
    def description(self) -> str:
        """Return the free text carried by the tag."""
        return self.content

    @property
    def suffix(self) -> str:
        """Return the tag name without the reserved prefix."""
        if self.name.startswith(TAG_PREFIX):
            return self.name[len(TAG_PREFIX) :]
        return self.name
