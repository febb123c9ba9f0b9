"""User registration service."""

import logging

from django.db import transaction, IntegrityError
from django.contrib.auth import get_user_model

from .exceptions import DuplicateUsernameError, DuplicateEmailError

User = get_user_model()

logger = logging.getLogger(__name__)


@transaction.atomic
def register_user(
    *,
    username: str,
    password: str,
    name: str,
    surname: str,
    email: str,
) -> User:
    """
    Register a new user.

    Username is checked before email, so a request duplicating both
    reports the username.

    Args:
        username: Login name, must be unique
        password: Raw password (will be hashed)
        name: First name
        surname: Last name
        email: Email address, must be unique

    Returns:
        Created User instance

    Raises:
        DuplicateUsernameError: If username is taken
        DuplicateEmailError: If email is already registered
    """
    if User.objects.filter(username=username).exists():
        raise DuplicateUsernameError("Username already exists")

    if User.objects.filter(email__iexact=email).exists():
        raise DuplicateEmailError("Email already exists")

    try:
        # Savepoint so a concurrent duplicate doesn't poison the outer transaction
        with transaction.atomic():
            user = User.objects.create_user(
                username=username,
                email=email,
                password=password,
                name=name,
                surname=surname,
            )
    except IntegrityError:
        if User.objects.filter(username=username).exists():
            raise DuplicateUsernameError("Username already exists")
        raise DuplicateEmailError("Email already exists")

    logger.info("Registered user %s (%s)", user.username, user.id)
    return user
