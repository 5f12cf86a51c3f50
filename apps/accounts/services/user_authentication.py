"""Username/password login."""

import logging

from django.db import transaction
from django.contrib.auth import get_user_model
from django.utils import timezone

from .exceptions import InvalidCredentialsError, InactiveAccountError

User = get_user_model()

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid username or password"


@transaction.atomic
def authenticate_user(*, username: str, password: str) -> User:
    """
    Check a username/password pair and stamp ``last_login``.

    Usernames are unique ignoring case, so the lookup ignores case too.
    Unknown usernames and wrong passwords give the same error.

    Raises:
        InvalidCredentialsError: If the pair doesn't match an account
        InactiveAccountError: If the account is deactivated
    """
    user = (
        User.objects
        .select_for_update()
        .filter(username__iexact=username.strip())
        .first()
    )

    if user is None or not user.check_password(password):
        logger.warning("Failed login for username %r", username)
        raise InvalidCredentialsError(INVALID_CREDENTIALS_MESSAGE)

    if not user.is_active:
        raise InactiveAccountError("Account is deactivated")

    user.last_login = timezone.now()
    user.save(update_fields=['last_login'])

    logger.info("User %s logged in as %s", user.username, user.role)
    return user
