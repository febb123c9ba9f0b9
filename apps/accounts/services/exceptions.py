"""Domain-specific exceptions for accounts services."""

from apps.core.exceptions import DomainError, ErrorKind


class AccountsServiceError(DomainError):
    """Base exception for accounts services."""
    pass


class DuplicateUsernameError(AccountsServiceError):
    """Raised when the username is already taken."""
    kind = ErrorKind.CONFLICT


class DuplicateEmailError(AccountsServiceError):
    """Raised when the email is already registered."""
    kind = ErrorKind.CONFLICT


class InvalidCredentialsError(AccountsServiceError):
    """Raised when authentication credentials are invalid."""
    kind = ErrorKind.UNAUTHORIZED


class InactiveAccountError(AccountsServiceError):
    """Raised when account is deactivated."""
    kind = ErrorKind.FORBIDDEN


class UserNotFoundError(AccountsServiceError):
    """Raised when user does not exist."""
    kind = ErrorKind.NOT_FOUND
