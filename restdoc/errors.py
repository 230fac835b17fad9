"""Exception types raised for contract violations and processing failures."""


class RestDocError(Exception):
    """Base class for all restdoc errors."""


class InvalidConfigError(RestDocError):
    """Raised when a declaration or settings value cannot be used."""


class UnknownAttributeError(RestDocError, AttributeError):
    """Raised when an attribute name resolves to nothing."""

    def __init__(self, owner: str, name: str) -> None:
        """Initialize with the owning declaration name and the missing attribute."""
        super().__init__(f"{owner}: unknown attribute '{name}'")
        self.owner = owner
        self.name = name


class ProcessingError(RestDocError):
    """Raised by processing hooks to mark a declaration as invalid."""
