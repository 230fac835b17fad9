"""Registry mapping custom tag suffixes to the handlers that classify them."""

import logging
import threading
from collections.abc import Callable
from typing import Any

from restdoc.errors import InvalidConfigError
from restdoc.param_tag import ParamTag
from restdoc.query_tag import QueryTag
from restdoc.tag import TAG_PREFIX, Tag

logger = logging.getLogger(__name__)

TagHandler = Callable[[str, str], Tag]

HANDLER_KINDS: dict[str, TagHandler] = {
    "generic": Tag,
    "param": ParamTag,
    "query": QueryTag,
}

DEFAULT_HANDLERS: dict[str, TagHandler] = {
    "query": QueryTag,
    "field": ParamTag,
    "field-use-as": ParamTag,
    "link": ParamTag,
    "label": Tag,
}


class TagHandlerRegistry:
    """Holds the suffix -> handler mapping used to classify custom tags.

    Handlers are callables taking the full tag name and the raw content and
    returning a :class:`Tag`. Suffixes without a registered handler fall back
    to the generic :class:`Tag`.
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._handlers: dict[str, TagHandler] = {}
        self._initialized = False
        self._lock = threading.Lock()

    @property
    def is_initialized(self) -> bool:
        """Return whether the default handlers have been registered."""
        return self._initialized

    def register(self, suffix: str, handler: TagHandler) -> None:
        """Register a handler for a suffix; re-registering replaces it."""
        current = self._handlers.get(suffix)
        if current is handler:
            return
        if current is not None:
            logger.debug(
                "Replacing handler for '%s': %r -> %r", suffix, current, handler
            )
        self._handlers[suffix] = handler

    def initialize_defaults(self) -> None:
        """Register the built-in handlers once; later calls are no-ops."""
        if self._initialized:
            return
        with self._lock:
            if self._initialized:
                return
            for suffix, handler in DEFAULT_HANDLERS.items():
                self.register(suffix, handler)
            self._initialized = True
            logger.debug("Registered %d default tag handlers", len(DEFAULT_HANDLERS))

    def register_from_config(self, config: dict[str, Any]) -> None:
        """Register the `tag_handlers` section of a settings dict."""
        for suffix, kind in (config.get("tag_handlers") or {}).items():
            handler = HANDLER_KINDS.get(str(kind))
            if handler is None:
                msg = f"Unknown tag handler kind '{kind}' for suffix '{suffix}'"
                raise InvalidConfigError(msg)
            self.register(str(suffix), handler)

    def handler_for(self, suffix: str) -> TagHandler:
        """Return the handler registered for a suffix, or the generic one."""
        return self._handlers.get(suffix, Tag)

    def create_tag(self, name: str, content: str) -> Tag:
        """Classify one tag by its full name."""
        suffix = name[len(TAG_PREFIX) :] if name.startswith(TAG_PREFIX) else name
        return self.handler_for(suffix)(name, content)

    def __contains__(self, suffix: object) -> bool:
        """Return whether a handler is registered for the suffix."""
        return suffix in self._handlers


default_registry = TagHandlerRegistry()
