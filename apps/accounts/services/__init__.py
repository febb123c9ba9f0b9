"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    DuplicateUsernameError,
    DuplicateEmailError,
    InvalidCredentialsError,
    InactiveAccountError,
    UserNotFoundError,
)
from .user_registration import register_user
from .user_authentication import authenticate_user, issue_tokens

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'DuplicateUsernameError',
    'DuplicateEmailError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    'UserNotFoundError',
    # Services
    'register_user',
    'authenticate_user',
    'issue_tokens',
]
