from rest_framework import serializers, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema
from apps.accounts.permissions import CanManageUsers
from .serializers import (
    AdminUserSerializer,
    AdminUserUpdateSerializer,
    AdminWhiskeyFilterSerializer,
    AdminWhiskeySerializer,
    RoleUpdateSerializer,
)
from .services import (
    change_user_role,
    delete_user,
    list_all_whiskeys,
    list_users as list_users_service,
    update_user,
)
from .exceptions import (
    DuplicateEmailError,
    InvalidRoleError,
    SelfModificationError,
    UserNotFoundError,
)


# Response serializers for API documentation
class UserListResponseSerializer(serializers.Serializer):
    users = AdminUserSerializer(many=True)


class UserResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    user = AdminUserSerializer()


class AdminWhiskeyListResponseSerializer(serializers.Serializer):
    whiskeys = AdminWhiskeySerializer(many=True)


class MessageResponseSerializer(serializers.Serializer):
    message = serializers.CharField()


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


@extend_schema(
    responses={200: UserListResponseSerializer},
    description="List every user with role and collection size.",
    tags=['admin'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, CanManageUsers])
def list_users(request):
    """List all users - thin HTTP handler."""
    users = list_users_service()
    return Response({'users': AdminUserSerializer(users, many=True).data})


@extend_schema(
    methods=['PUT', 'PATCH'],
    request=AdminUserUpdateSerializer,
    responses={
        200: UserResponseSerializer,
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Update a user's email and name.",
    tags=['admin'],
)
@extend_schema(
    methods=['DELETE'],
    responses={
        200: MessageResponseSerializer,
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Delete a user and their whole collection. Admins cannot delete themselves.",
    tags=['admin'],
)
@api_view(['PUT', 'PATCH', 'DELETE'])
@permission_classes([IsAuthenticated, CanManageUsers])
def user_detail(request, user_id):
    """Update or delete a user - thin HTTP handler."""
    if request.method == 'DELETE':
        try:
            delete_user(acting_user=request.user, user_id=user_id)
        except UserNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except SelfModificationError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response({'message': 'User deleted successfully'})

    serializer = AdminUserUpdateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        user = update_user(user_id=user_id, **serializer.validated_data)
    except UserNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except DuplicateEmailError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response({
        'message': 'User updated successfully',
        'user': AdminUserSerializer(user).data,
    })


@extend_schema(
    request=RoleUpdateSerializer,
    responses={
        200: UserResponseSerializer,
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Change a user's role. Admins cannot demote themselves.",
    tags=['admin'],
)
@api_view(['PUT'])
@permission_classes([IsAuthenticated, CanManageUsers])
def update_user_role(request, user_id):
    """Change a user's role - thin HTTP handler."""
    serializer = RoleUpdateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        user = change_user_role(
            acting_user=request.user,
            user_id=user_id,
            role=serializer.validated_data['role'],
        )
    except UserNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except (InvalidRoleError, SelfModificationError) as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response({
        'message': 'User role updated successfully',
        'user': AdminUserSerializer(user).data,
    })


@extend_schema(
    parameters=[AdminWhiskeyFilterSerializer],
    responses={200: AdminWhiskeyListResponseSerializer},
    description="List every whiskey record across all users, with owner details.",
    tags=['admin'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, CanManageUsers])
def list_whiskeys(request):
    """List all whiskeys with owners - thin HTTP handler."""
    query_serializer = AdminWhiskeyFilterSerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)

    whiskeys = list_all_whiskeys(owner_id=query_serializer.validated_data.get('owner'))
    return Response({'whiskeys': AdminWhiskeySerializer(whiskeys, many=True).data})
