class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when request input is invalid."""


class SourceError(DomainError):
    """Raised when one of the upstream sources cannot be read."""
