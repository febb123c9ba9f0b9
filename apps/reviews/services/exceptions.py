"""Domain exceptions for reviews app."""

from apps.core.exceptions import DomainError, ErrorKind


class ReviewsServiceError(DomainError):
    """Base exception for all reviews service errors."""
    pass


class ReviewNotFoundError(ReviewsServiceError):
    """Review does not exist, or does not belong to the requester."""
    kind = ErrorKind.NOT_FOUND


class InvalidRateError(ReviewsServiceError):
    """Rate must be between 0 and 5."""
    kind = ErrorKind.VALIDATION


class InvalidContentError(ReviewsServiceError):
    """Content is blank or outside the allowed length."""
    kind = ErrorKind.VALIDATION


class AlreadyLikedError(ReviewsServiceError):
    """User already liked this review."""
    kind = ErrorKind.CONFLICT


class NotLikedError(ReviewsServiceError):
    """User has no like on this review to remove."""
    kind = ErrorKind.NOT_FOUND
