"""Domain exceptions for pubs app."""

from apps.core.exceptions import DomainError, ErrorKind


class PubsServiceError(DomainError):
    """Base exception for all pubs service errors."""
    pass


class PubNotFoundError(PubsServiceError):
    """Pub does not exist."""
    kind = ErrorKind.NOT_FOUND
