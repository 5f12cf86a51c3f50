"""
Administration services.

User management and the unscoped, cross-owner view of every whiskey record.
Nothing here checks capabilities: callers must already have verified
``manage:users`` (see ``apps.accounts.permissions.CanManageUsers``).
"""

import logging
from typing import Optional

from django.contrib.auth import get_user_model
from django.db import transaction
from django.db.models import Count, QuerySet

from apps.accounts.models import Role
from apps.whiskeys.models import Whiskey
from .exceptions import (
    DuplicateEmailError,
    InvalidRoleError,
    SelfModificationError,
    UserNotFoundError,
)

User = get_user_model()

logger = logging.getLogger(__name__)


def _get_user(user_id) -> User:
    try:
        return User.objects.get(id=user_id)
    except User.DoesNotExist:
        raise UserNotFoundError("User not found")


def list_users() -> QuerySet:
    """All users, newest first, annotated with ``whiskey_count``."""
    return (
        User.objects
        .annotate(whiskey_count=Count('whiskeys'))
        .order_by('-created_at', 'username')
    )


def list_all_whiskeys(*, owner_id=None) -> QuerySet[Whiskey]:
    """
    Every whiskey record with its owner joined.

    Args:
        owner_id: Only records created by this user

    Returns:
        QuerySet ordered by owner username, then newest first
    """
    queryset = Whiskey.objects.select_related('created_by')

    if owner_id:
        queryset = queryset.filter(created_by_id=owner_id)

    return queryset.order_by('created_by__username', '-created_at', 'id')


@transaction.atomic
def update_user(
    *,
    user_id,
    email: Optional[str] = None,
    first_name: Optional[str] = None,
    last_name: Optional[str] = None
) -> User:
    """
    Update another user's contact details.

    Raises:
        UserNotFoundError: If the user doesn't exist
        DuplicateEmailError: If the email belongs to a different account
    """
    user = _get_user(user_id)

    if email is not None:
        email = User.objects.normalize_email(email)
        taken = (
            User.objects
            .filter(email__iexact=email)
            .exclude(id=user.id)
            .exists()
        )
        if taken:
            raise DuplicateEmailError("Email already in use")
        user.email = email

    if first_name is not None:
        user.first_name = first_name
    if last_name is not None:
        user.last_name = last_name

    user.save()
    logger.info("User %s updated by an administrator", user.username)
    return user


@transaction.atomic
def change_user_role(*, acting_user: User, user_id, role: str) -> User:
    """
    Assign a role to a user.

    Raises:
        InvalidRoleError: If the role is unknown
        UserNotFoundError: If the user doesn't exist
        SelfModificationError: If an admin tries to demote themselves
    """
    if role not in Role.values:
        raise InvalidRoleError(f"Invalid role \"{role}\"")

    user = _get_user(user_id)

    if user.id == acting_user.id and role != Role.ADMIN:
        raise SelfModificationError("You cannot change your own role")

    previous = user.role
    user.role = role
    user.save(update_fields=['role'])

    logger.info(
        "Role of %s changed from %s to %s by %s",
        user.username, previous, role, acting_user.username
    )
    return user


@transaction.atomic
def delete_user(*, acting_user: User, user_id) -> str:
    """
    Delete a user account together with its whiskey collection.

    Returns:
        Username of the deleted account

    Raises:
        UserNotFoundError: If the user doesn't exist
        SelfModificationError: If an admin tries to delete themselves
    """
    user = _get_user(user_id)

    if user.id == acting_user.id:
        raise SelfModificationError("You cannot delete your own account")

    username = user.username
    user.delete()

    logger.info("User %s deleted by %s", username, acting_user.username)
    return username
