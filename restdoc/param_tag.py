"""Tag model for `[type] [$variable] [description]` style content."""

from dataclasses import dataclass, field

from restdoc.tag import Tag


@dataclass
class ParamTag(Tag):
    """A tag describing a typed, named parameter such as a model field."""

    type_name: str = field(default="", init=False)
    variable_name: str = field(default="", init=False)
    text: str = field(default="", init=False)

    def __post_init__(self) -> None:
        """Split the content into type, variable name and description."""
        super().__post_init__()
        parts = self.content.split(None, 2)

        # Leading token is the type unless it already names a variable
        if parts and not parts[0].startswith("$"):
            self.type_name = parts.pop(0)
        else:
            parts = self.content.split(None, 1)

        if parts and parts[0].startswith("$"):
            self.variable_name = parts.pop(0)[1:]

        self.text = " ".join(parts).strip()

    @property
    def description(self) -> str:
        """Return the description following the type and variable name."""
        return self.text
