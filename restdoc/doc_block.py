"""Data models for a parsed documentation comment."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RawTag:
    """An unclassified `@name content` pair in comment order."""

    name: str
    content: str


@dataclass
class DocBlock:
    """Represents the descriptions and tags of one documentation comment."""

    short_description: str = ""
    long_description: str = ""
    tags: list[RawTag] = field(default_factory=list)

    def tags_by_name(self, name: str) -> list[RawTag]:
        """Return every tag with exactly this name, in comment order."""
        return [t for t in self.tags if t.name == name]

    def has_tag(self, name: str) -> bool:
        """Return whether at least one tag has this name."""
        return any(t.name == name for t in self.tags)
