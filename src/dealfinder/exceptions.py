"""Domain exceptions raised by services and caught by exception handlers.

Handlers in main.py translate them into HTTP responses. Errors raised while
serving /deals keep that endpoint's {"deals": [], "message": "..."} shape;
everything else uses the standard {"error": {"code", "message"}} envelope.
"""


class DomainError(Exception):
    """Base class for all domain exceptions."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidParameterError(DomainError):
    """Raised when a /deals query parameter fails validation."""

    def __init__(self, param: str | None, message: str) -> None:
        self.param = param
        super().__init__(message)


class RankingError(DomainError):
    """Raised when filtering or sorting the catalog fails unexpectedly."""

    def __init__(self) -> None:
        super().__init__("An unexpected error occurred while processing your request")


class CatalogError(DomainError):
    """Raised when the deal catalog cannot be loaded."""
