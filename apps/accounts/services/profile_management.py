"""Profile management service."""

from django.db import transaction
from django.contrib.auth import get_user_model
from typing import Optional

from .exceptions import PasswordConfirmationError, DuplicateEmailError

User = get_user_model()


@transaction.atomic
def update_profile(
    *,
    user: User,
    email: Optional[str] = None,
    first_name: Optional[str] = None,
    last_name: Optional[str] = None,
    current_password: Optional[str] = None,
    new_password: Optional[str] = None
) -> User:
    """
    Update the acting user's own profile.

    Changing the password requires the current password.

    Raises:
        DuplicateEmailError: If the new email belongs to another account
        PasswordConfirmationError: If current_password is wrong or missing
    """
    update_fields = []

    if email is not None and email != user.email:
        if User.objects.filter(email__iexact=email).exclude(id=user.id).exists():
            raise DuplicateEmailError("Email already in use")
        user.email = email
        update_fields.append('email')

    if first_name is not None:
        user.first_name = first_name
        update_fields.append('first_name')

    if last_name is not None:
        user.last_name = last_name
        update_fields.append('last_name')

    if new_password:
        if not current_password or not user.check_password(current_password):
            raise PasswordConfirmationError("Current password is incorrect")
        user.set_password(new_password)
        update_fields.append('password')

    if update_fields:
        user.save(update_fields=update_fields)

    return user
