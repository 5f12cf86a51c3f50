"""Errors raised by the accounts services; views map them to HTTP codes."""


class AccountsServiceError(Exception):
    """Base exception for accounts services."""
    pass


class UserRegistrationError(AccountsServiceError):
    """Username or email already taken, or the account could not be saved."""
    pass


class RoleNotAllowedError(UserRegistrationError):
    """A role that only an administrator may grant was requested at sign-up."""
    pass


class InvalidCredentialsError(AccountsServiceError):
    pass


class InactiveAccountError(AccountsServiceError):
    pass


class PasswordConfirmationError(AccountsServiceError):
    """The current password given with a password change is wrong."""
    pass


class DuplicateEmailError(AccountsServiceError):
    pass
