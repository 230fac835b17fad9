"""Tag model for query parameters accepted by an endpoint."""

import re
from dataclasses import dataclass, field

from restdoc.tag import Tag

REQUIRED_MARKER = "required"


@dataclass
class QueryTag(Tag):
    """Describes one query parameter: `name[=default] [required] description`."""

    variable_name: str = field(default="", init=False)
    default_value: str | None = field(default=None, init=False)
    is_required: bool = field(default=False, init=False)
    text: str = field(default="", init=False)

    def __post_init__(self) -> None:
        """Parse name, default value, required marker and description."""
        super().__post_init__()
        parts = re.split(r"\s+", self.content, maxsplit=1) if self.content else []
        if not parts:
            return

        name, sep, default = parts[0].partition("=")
        self.variable_name = name.lstrip("$")
        if sep:
            self.default_value = default

        rest = parts[1] if len(parts) > 1 else ""
        words = re.split(r"\s+", rest, maxsplit=1) if rest else []
        if words and words[0].lower() == REQUIRED_MARKER:
            self.is_required = True
            rest = words[1] if len(words) > 1 else ""
        self.text = rest.strip()

    @property
    def description(self) -> str:
        """Return the human readable description of the parameter."""
        return self.text
