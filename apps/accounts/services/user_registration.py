"""User registration service."""

import logging

from django.db import transaction, IntegrityError
from django.contrib.auth import get_user_model

from ..models import Role
from .exceptions import RoleNotAllowedError, UserRegistrationError

User = get_user_model()

logger = logging.getLogger(__name__)

SELF_ASSIGNABLE_ROLES = (Role.EDITOR, Role.VIEWER)


@transaction.atomic
def register_user(
    *,
    username: str,
    email: str,
    password: str,
    first_name: str = "",
    last_name: str = "",
    role: str = Role.EDITOR
) -> User:
    """
    Register a new user.

    Args:
        username: Unique login name
        email: User's email address
        password: User's password (will be hashed)
        first_name: Optional first name
        last_name: Optional last name
        role: Requested role, editor or viewer

    Returns:
        Created User instance

    Raises:
        RoleNotAllowedError: If the role is not self-assignable
        UserRegistrationError: If the username or email is taken
    """
    if role not in SELF_ASSIGNABLE_ROLES:
        raise RoleNotAllowedError(f"Role '{role}' cannot be selected at registration")

    if User.objects.filter(username__iexact=username).exists():
        raise UserRegistrationError("Username already taken")

    if User.objects.filter(email__iexact=email).exists():
        raise UserRegistrationError("Email already registered")

    try:
        user = User.objects.create_user(
            username=username,
            email=email,
            password=password,
            first_name=first_name,
            last_name=last_name,
            role=role,
        )
    except IntegrityError as e:
        raise UserRegistrationError(f"Registration failed: {str(e)}")

    logger.info("Registered user %s with role %s", user.username, user.role)
    return user
