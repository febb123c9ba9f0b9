"""
Shared error taxonomy and the REST exception handler.

Every service layer raises subclasses of ``DomainError``. Each subclass
declares an ``ErrorKind``; the kind alone decides the HTTP status, so
views never translate service errors by hand.

Exception Hierarchy:
    DomainError (base)
    ├── AccountsServiceError   (apps.accounts.services.exceptions)
    ├── PubsServiceError       (apps.pubs.services.exceptions)
    └── ReviewsServiceError    (apps.reviews.services.exceptions)

Response body for domain errors:
    {"error": "<human readable message>", "code": "NOT_FOUND"}
"""

import enum
import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_default_exception_handler

logger = logging.getLogger(__name__)


class ErrorKind(str, enum.Enum):
    NOT_FOUND = 'NOT_FOUND'
    CONFLICT = 'CONFLICT'
    FORBIDDEN = 'FORBIDDEN'
    VALIDATION = 'VALIDATION'
    UNAUTHORIZED = 'UNAUTHORIZED'


KIND_TO_STATUS = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
}


class DomainError(Exception):
    """
    Base exception for all service errors.

    Subclasses override ``kind``; the message is passed as the first
    argument and returned to the client unchanged.
    """

    kind = ErrorKind.VALIDATION

    @property
    def message(self) -> str:
        return str(self)


def error_response(kind: ErrorKind, message: str) -> Response:
    """Build the common error payload for a domain error kind."""
    return Response(
        {'error': message, 'code': kind.value},
        status=KIND_TO_STATUS[kind],
    )


def api_exception_handler(exc, context):
    """
    DRF exception handler.

    Domain errors are mapped by kind. Anything else goes to DRF's default
    handler, which keeps serializer field errors in their usual shape.
    """
    if isinstance(exc, DomainError):
        view = context.get('view')
        logger.info(
            "%s in %s: %s",
            exc.kind.value,
            view.__class__.__name__ if view else 'unknown view',
            exc.message,
        )
        return error_response(exc.kind, exc.message)

    return drf_default_exception_handler(exc, context)
