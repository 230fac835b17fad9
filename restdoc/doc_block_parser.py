"""Logic for splitting documentation comments into descriptions and tags."""

import inspect
import re

from restdoc.doc_block import DocBlock, RawTag

INLINE_INHERIT_RE = re.compile(r"\{@inheritdoc\}", re.IGNORECASE)
# Any tag may open a line; after other text only restdoc tags and the
# inherit directive count, so prose like "@staticmethod" stays text.
TAG_START_RE = re.compile(
    r"^[ \t]*@([A-Za-z_][\w-]*)|(?<=\s)@(restdoc-[\w-]+|inheritdoc)(?![\w-])",
    re.MULTILINE,
)
GUTTER_RE = re.compile(r"^\s*\*(?!/) ?")

INHERIT_TAG = "inheritdoc"


class DocBlockParser:
    """Parses `/** ... */` comments and plain docstrings into a DocBlock."""

    def parse(self, text: str) -> DocBlock:
        """Parse raw comment text."""
        body = self._strip_comment(text)

        inline_inherit = bool(INLINE_INHERIT_RE.search(body))
        body = INLINE_INHERIT_RE.sub("", body)

        matches = list(TAG_START_RE.finditer(body))
        summary = body[: matches[0].start()] if matches else body

        tags = []
        for i, match in enumerate(matches):
            end = matches[i + 1].start() if i + 1 < len(matches) else len(body)
            content = body[match.end() : end].strip()
            name = match.group(1) or match.group(2)
            tags.append(RawTag(name=name, content=content))
        if inline_inherit:
            tags.append(RawTag(name=INHERIT_TAG, content=""))

        short, long = self._split_summary(summary)
        return DocBlock(short_description=short, long_description=long, tags=tags)

    def _strip_comment(self, text: str) -> str:
        """Remove comment delimiters and gutters, then dedent."""
        stripped = text.strip()
        if not stripped.startswith("/**"):
            return inspect.cleandoc(stripped)

        stripped = stripped[3:]
        if stripped.endswith("*/"):
            stripped = stripped[:-2]
        lines = [GUTTER_RE.sub("", line) for line in stripped.splitlines()]
        return inspect.cleandoc("\n".join(lines))

    def _split_summary(self, summary: str) -> tuple[str, str]:
        """Split the text before the first tag into short and long descriptions.

        The short description ends at the first blank line or at the first
        line ending with a period.
        """
        lines = summary.strip().splitlines()
        short_lines: list[str] = []
        i = 0
        while i < len(lines):
            line = lines[i].strip()
            i += 1
            if not line:
                if short_lines:
                    break
                continue
            short_lines.append(line)
            if line.endswith("."):
                break

        short = "\n".join(short_lines)
        long = "\n".join(lines[i:]).strip()
        return short, long
