"""Core model resolving the custom tags, descriptions and parent of a declaration."""

import copy
import inspect
import logging
import threading
from collections.abc import Mapping
from typing import Any

from restdoc.class_declaration import ClassDeclaration
from restdoc.declaration_view import DeclarationView
from restdoc.deep_merge import deep_merge
from restdoc.doc_block import DocBlock
from restdoc.doc_block_parser import DocBlockParser
from restdoc.errors import InvalidConfigError, UnknownAttributeError
from restdoc.invalid_reason import InvalidReason
from restdoc.load_config import DEFAULT_CONFIG
from restdoc.method_declaration import MethodDeclaration
from restdoc.tag import TAG_PREFIX, Tag
from restdoc.tag_handler_registry import TagHandlerRegistry, default_registry

logger = logging.getLogger(__name__)

SHORT_DESCRIPTION = "shortDescription"
LONG_DESCRIPTION = "longDescription"
DESCRIPTION_KEYS = (SHORT_DESCRIPTION, LONG_DESCRIPTION)

IGNORE_KEY = "ignore"
LABEL_KEY = "label"

_UNRESOLVED: Any = object()


class AnnotatedDeclaration:
    """Wraps one declaration and exposes the facts found in its doc comment.

    Construction parses the comment once, classifies every ``@restdoc-*`` tag
    through the tag handler registry and settles the validity state. A
    declaration is invalid when it has no comment, carries an ignore tag, is
    abstract, or :meth:`process` raised; the reason is kept in ``error``
    instead of being raised.

    Descriptions and the parent are resolved lazily and memoized. When the
    comment carries an inherit directive, empty descriptions are taken from
    the parent chain.
    """

    def __init__(
        self,
        declaration: DeclarationView,
        object_config: Mapping[str, Any] | None = None,
        *,
        parser: DocBlockParser | None = None,
        registry: TagHandlerRegistry | None = None,
        settings: dict[str, Any] | None = None,
        _lineage: tuple[DeclarationView, ...] = (),
    ) -> None:
        """Initialize and validate the declaration."""
        if not isinstance(declaration, DeclarationView):
            msg = f"Declaration must provide the reflection operations: {declaration!r}"
            raise InvalidConfigError(msg)

        self.declaration = declaration
        self.object_config = dict(object_config) if object_config else None
        self.parser = parser or DocBlockParser()
        self.settings = deep_merge(copy.deepcopy(DEFAULT_CONFIG), settings or {})

        if registry is None and self.settings["tag_handlers"]:
            # Configured handlers stay out of the process-wide registry
            registry = TagHandlerRegistry()
        self.registry = registry or default_registry
        self.registry.initialize_defaults()
        self.registry.register_from_config(self.settings)

        self.is_valid = True
        self.error: str | None = None
        self.invalid_reason: InvalidReason | None = None
        self.is_inherited = False
        self.doc_block: DocBlock | None = None
        self.tag_groups: dict[str, list[Tag]] = {}
        self.labels: set[str] = set()

        self._descriptions: dict[str, Any] = dict.fromkeys(
            DESCRIPTION_KEYS, _UNRESOLVED
        )
        self._parent: Any = _UNRESOLVED
        self._lineage = _lineage
        self._lock = threading.RLock()

        self._init()

    @classmethod
    def from_class(
        cls, target: type, object_config: Mapping[str, Any] | None = None, **kwargs: Any
    ) -> "AnnotatedDeclaration":
        """Create an annotated declaration for a Python class."""
        return cls(ClassDeclaration(target), object_config, **kwargs)

    @classmethod
    def from_method(
        cls, owner: type, method_name: str, **kwargs: Any
    ) -> "AnnotatedDeclaration":
        """Create an annotated declaration for a method defined on `owner`."""
        return cls(MethodDeclaration(owner, method_name), **kwargs)

    def _init(self) -> None:
        """Run the validation steps, stopping at the first failure."""
        name = self.declaration.name()

        text = self.declaration.documentation_comment()
        if not text or not text.strip():
            self._invalidate(
                InvalidReason.MISSING_DOCUMENTATION, f"{name}: does not have docBlock"
            )
            return

        self.doc_block = self.parser.parse(text)
        inherit_tags = self.settings["inherit_tags"]
        self.is_inherited = any(self.doc_block.has_tag(t) for t in inherit_tags)

        if not self.process_tags(self.doc_block):
            self._invalidate(
                InvalidReason.IGNORED_BY_DIRECTIVE, f"{name}: ignore due tag"
            )
            return

        if self.declaration.is_abstract():
            self._invalidate(InvalidReason.ABSTRACT_DECLARATION, f"{name}: isAbstract")
            return

        try:
            self.process()
        except Exception as e:
            message = str(e) or type(e).__name__
            logger.warning("Processing failed for %s: %s", name, message)
            self._invalidate(InvalidReason.PROCESSING_FAILURE, message)

    def _invalidate(self, reason: InvalidReason, message: str) -> None:
        """Record why the declaration is invalid."""
        self.is_valid = False
        self.invalid_reason = reason
        self.error = message
        logger.debug("Invalid declaration (%s): %s", reason.value, message)

    def process(self) -> None:
        """Hook for subclasses to validate or derive further state.

        Raising any exception marks the declaration invalid with the
        exception message as ``error``.
        """

    def process_tags(self, doc_block: DocBlock) -> bool:
        """Classify the custom tags of a doc block into groups.

        Returns False when the block carries an ignore tag. Groups are filled
        before the check so ignored declarations keep them.
        """
        for raw in doc_block.tags:
            if not raw.name.startswith(TAG_PREFIX):
                continue
            key = raw.name[len(TAG_PREFIX) :]
            tag = self.registry.create_tag(raw.name, raw.content)
            self.tag_groups.setdefault(key, []).append(tag)

        for tag in self.get_tag_group(LABEL_KEY):
            self.labels.add(tag.content)

        return IGNORE_KEY not in self.tag_groups

    @property
    def tag_keys(self) -> list[str]:
        """Return the custom tag keys present, in first-seen order."""
        return list(self.tag_groups)

    def get_tag_group(self, key: str) -> list[Tag]:
        """Return the tags classified under a key; absent keys give []."""
        return self.tag_groups.get(key, [])

    def has_label(self, value: str) -> bool:
        """Return whether a label tag with this value is attached."""
        return value in self.labels

    def get_description(self, kind: str) -> str:
        """Return the resolved short or long description."""
        if kind not in self._descriptions:
            raise UnknownAttributeError(self.declaration.name(), kind)

        with self._lock:
            value = self._descriptions[kind]
            if value is _UNRESOLVED:
                value = self._own_description(kind)
                if not value and self.is_inherited:
                    parent = self.parent
                    if parent is not None:
                        value = parent.get_description(kind)
                self._descriptions[kind] = value
        return value

    def _own_description(self, kind: str) -> str:
        """Return the description written on this declaration itself."""
        if self.doc_block is None:
            return ""
        if kind == SHORT_DESCRIPTION:
            return self.doc_block.short_description
        return self.doc_block.long_description

    @property
    def short_description(self) -> str:
        """Return the resolved short description."""
        return self.get_description(SHORT_DESCRIPTION)

    @property
    def long_description(self) -> str:
        """Return the resolved long description."""
        return self.get_description(LONG_DESCRIPTION)

    @property
    def parent(self) -> "AnnotatedDeclaration | None":
        """Return the annotated parent declaration, resolved once."""
        with self._lock:
            if self._parent is _UNRESOLVED:
                self._parent = self._resolve_parent()
            return self._parent

    def _resolve_parent(self) -> "AnnotatedDeclaration | None":
        """Build the parent wrapper, guarding against runaway chains."""
        view = self.declaration.parent()
        if view is None:
            return None

        lineage = (*self._lineage, self.declaration)
        max_depth = self.settings["max_parent_depth"]
        if len(lineage) > max_depth:
            logger.warning(
                "Parent chain of %s exceeds %d levels; stopping",
                lineage[0].name(),
                max_depth,
            )
            return None

        # Views compare by the reflected object, so same-named classes differ
        if any(view is seen or view == seen for seen in lineage):
            logger.warning("Cyclic parent chain detected at %s", view.name())
            return None

        return type(self)(
            view,
            parser=self.parser,
            registry=self.registry,
            settings=self.settings,
            _lineage=lineage,
        )

    def materialize(self, *args: Any, config: Mapping[str, Any] | None = None) -> Any:
        """Instantiate the reflected type and apply the object config."""
        instance = self.declaration.instantiate(args)
        mapping = config if config is not None else self.object_config
        if mapping:
            instance = self.declaration.configure(instance, mapping)
        return instance

    def get_attribute(self, name: str) -> Any:
        """Read a tag group, a description or a public model attribute."""
        if name in self.tag_groups:
            return self.tag_groups[name]
        if name in self._descriptions:
            return self.get_description(name)
        if self._has_model_attribute(name):
            return getattr(self, name)
        raise UnknownAttributeError(self.declaration.name(), name)

    def has_attribute(self, name: str) -> bool:
        """Return whether :meth:`get_attribute` would find the name."""
        return (
            name in self.tag_groups
            or name in self._descriptions
            or self._has_model_attribute(name)
        )

    def _has_model_attribute(self, name: str) -> bool:
        """Check for a public attribute without running properties."""
        if name.startswith("_"):
            return False
        try:
            inspect.getattr_static(self, name)
        except AttributeError:
            return False
        return True

    def __repr__(self) -> str:
        """Return a debug representation."""
        state = "valid" if self.is_valid else f"invalid: {self.error}"
        return f"AnnotatedDeclaration({self.declaration.name()}, {state})"
