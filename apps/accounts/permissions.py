"""
Capability-based permission classes.

Every role maps to a fixed set of capabilities (see
``apps.accounts.models.ROLE_CAPABILITIES``). Views declare which capability
each action needs and ``HasCapability`` checks it against the acting user.

Usage:
    class WhiskeyViewSet(viewsets.ViewSet):
        permission_classes = [IsAuthenticated, HasCapability]
        required_capabilities = {
            'list': Capability.READ_WHISKEY,
            'create': Capability.CREATE_WHISKEY,
        }

    @api_view(['GET'])
    @permission_classes([IsAuthenticated, CanManageUsers])
    def list_users(request):
        ...
"""
from rest_framework.permissions import BasePermission

from .models import Capability


class HasCapability(BasePermission):
    """
    Require the capability that the view maps to the current action.

    Looks up ``view.required_capabilities[view.action]``, falling back to
    ``view.required_capability`` for function-based views. Actions with no
    mapped capability are denied.
    """

    message = 'You do not have permission to perform this action.'

    def has_permission(self, request, view):
        user = request.user
        if not user or not user.is_authenticated:
            return False

        capability = None
        action = getattr(view, 'action', None)
        mapping = getattr(view, 'required_capabilities', None)
        if mapping and action:
            capability = mapping.get(action)
        if capability is None:
            capability = getattr(view, 'required_capability', None)
        if capability is None:
            return False

        return user.has_capability(capability)


class CanManageUsers(BasePermission):
    """Only roles with the ``manage:users`` capability (admins)."""

    message = 'Admin access required.'

    def has_permission(self, request, view):
        user = request.user
        return bool(
            user and user.is_authenticated
            and user.has_capability(Capability.MANAGE_USERS)
        )


class CanReadWhiskeys(BasePermission):
    """Read access to the acting user's own collection."""

    message = 'You do not have permission to view whiskeys.'

    def has_permission(self, request, view):
        user = request.user
        return bool(
            user and user.is_authenticated
            and user.has_capability(Capability.READ_WHISKEY)
        )
