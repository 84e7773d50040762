"""Explorer exceptions."""


class ExplorerError(Exception):
    """Base exception for explorer errors."""


class InvalidQueryError(ExplorerError, ValueError):
    """Raised when a query cannot be sent, e.g. no target index is set."""


class MalformedResponseError(ExplorerError):
    """Raised when a search response lacks the expected ``hits`` structure."""


class ConfigurationError(ExplorerError):
    """Raised when client or settings configuration is invalid."""
