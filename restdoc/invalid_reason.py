"""Kinds of documentation problems surfaced through the validity state."""

from enum import Enum


class InvalidReason(str, Enum):
    """Why an annotated declaration ended up invalid."""

    MISSING_DOCUMENTATION = "missing_documentation"
    IGNORED_BY_DIRECTIVE = "ignored_by_directive"
    ABSTRACT_DECLARATION = "abstract_declaration"
    PROCESSING_FAILURE = "processing_failure"
