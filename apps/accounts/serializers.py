from rest_framework import serializers
from django.contrib.auth.password_validation import validate_password
from .models import User, Role


class UserSerializer(serializers.ModelSerializer):
    """Basic user serializer for profile display."""

    capabilities = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = [
            'id',
            'username',
            'email',
            'first_name',
            'last_name',
            'role',
            'capabilities',
            'created_at',
            'last_login',
        ]
        read_only_fields = fields

    def get_capabilities(self, obj) -> list[str]:
        return sorted(obj.capabilities)


class UserRegistrationSerializer(serializers.Serializer):
    """Serializer for user registration."""

    username = serializers.RegexField(
        regex=r'^[\w.@+-]+$',
        max_length=50,
        min_length=3,
        required=True,
    )
    email = serializers.EmailField(required=True)
    password = serializers.CharField(
        write_only=True,
        required=True,
        validators=[validate_password],
        style={'input_type': 'password'}
    )
    password_confirm = serializers.CharField(
        write_only=True,
        required=True,
        style={'input_type': 'password'}
    )
    first_name = serializers.CharField(max_length=100, required=False, allow_blank=True)
    last_name = serializers.CharField(max_length=100, required=False, allow_blank=True)
    role = serializers.ChoiceField(
        choices=[Role.EDITOR, Role.VIEWER],
        required=False,
        default=Role.EDITOR,
    )

    def validate(self, attrs):
        """Validate password confirmation."""
        if attrs['password'] != attrs['password_confirm']:
            raise serializers.ValidationError({
                'password_confirm': 'Passwords do not match'
            })
        return attrs


class UserLoginSerializer(serializers.Serializer):
    """Serializer for user login."""

    username = serializers.CharField(required=True)
    password = serializers.CharField(
        required=True,
        write_only=True,
        style={'input_type': 'password'}
    )


class ProfileUpdateSerializer(serializers.Serializer):
    """Serializer for updating the current user's profile."""

    email = serializers.EmailField(required=False)
    first_name = serializers.CharField(max_length=100, required=False, allow_blank=True)
    last_name = serializers.CharField(max_length=100, required=False, allow_blank=True)
    current_password = serializers.CharField(
        required=False,
        write_only=True,
        style={'input_type': 'password'}
    )
    new_password = serializers.CharField(
        required=False,
        write_only=True,
        validators=[validate_password],
        style={'input_type': 'password'}
    )

    def validate(self, attrs):
        if attrs.get('new_password') and not attrs.get('current_password'):
            raise serializers.ValidationError({
                'current_password': 'Current password is required to set a new password'
            })
        return attrs

