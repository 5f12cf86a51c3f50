"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    UserRegistrationError,
    RoleNotAllowedError,
    InvalidCredentialsError,
    InactiveAccountError,
    PasswordConfirmationError,
    DuplicateEmailError,
)
from .user_registration import register_user
from .user_authentication import authenticate_user
from .profile_management import update_profile

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'UserRegistrationError',
    'RoleNotAllowedError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    'PasswordConfirmationError',
    'DuplicateEmailError',
    # Services
    'register_user',
    'authenticate_user',
    'update_profile',
]
