# core/exceptions.py

class DomainError(Exception):
    """Base class for domain-level errors. ``code`` is a stable machine-readable key."""
    def __init__(self, message: str, *, code: str | None = None):
        super().__init__(message)
        self.code = code or self.__class__.__name__


class ValidationError(DomainError):
    """Raised for malformed input: period selectors, obligation schedules, amounts."""


class NotFoundError(DomainError):
    """Raised when an obligation or other record does not exist."""


class AggregationUnavailableError(DomainError):
    """
    Raised when ledger or obligation reads fail mid-aggregation. No partial
    figures are returned; ``operation`` names the read that failed.
    """
    def __init__(self, message: str, *, code: str | None = None, operation: str | None = None):
        super().__init__(message, code=code or "AGGREGATION_UNAVAILABLE")
        self.operation = operation


class DataSourceError(DomainError):
    """
    Raised by repository implementations whose backing store cannot be read.
    Non-SQL backends raise this instead of their own transport errors.
    """
