"""Domain exceptions for the administration app."""


class AdministrationServiceError(Exception):
    """Base exception for administration services."""
    pass


class UserNotFoundError(AdministrationServiceError):
    """Raised when the target user does not exist."""
    pass


class SelfModificationError(AdministrationServiceError):
    """Raised when an admin tries to delete or demote their own account."""
    pass


class InvalidRoleError(AdministrationServiceError):
    """Raised when a role name is not one of the known roles."""
    pass


class DuplicateEmailError(AdministrationServiceError):
    """Raised when an email address is already used by another account."""
    pass
