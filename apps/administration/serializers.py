from rest_framework import serializers
from apps.accounts.models import User, Role
from apps.whiskeys.serializers import WhiskeySerializer


class AdminUserSerializer(serializers.ModelSerializer):
    """User row in the admin panel."""

    whiskey_count = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = [
            'id',
            'username',
            'email',
            'first_name',
            'last_name',
            'role',
            'is_active',
            'whiskey_count',
            'created_at',
            'last_login',
        ]
        read_only_fields = fields

    def get_whiskey_count(self, obj) -> int:
        count = getattr(obj, 'whiskey_count', None)
        if count is None:
            count = obj.whiskeys.count()
        return count


class AdminUserUpdateSerializer(serializers.Serializer):
    email = serializers.EmailField(required=False)
    first_name = serializers.CharField(max_length=100, required=False, allow_blank=True)
    last_name = serializers.CharField(max_length=100, required=False, allow_blank=True)


class RoleUpdateSerializer(serializers.Serializer):
    role = serializers.ChoiceField(
        choices=Role.choices,
        error_messages={'invalid_choice': 'Invalid role "{input}"'},
    )


class AdminWhiskeySerializer(WhiskeySerializer):
    """Whiskey record with its owner's identity."""

    owner_username = serializers.CharField(source='created_by.username', read_only=True)
    owner_email = serializers.EmailField(source='created_by.email', read_only=True)
    owner_role = serializers.CharField(source='created_by.role', read_only=True)

    class Meta(WhiskeySerializer.Meta):
        fields = WhiskeySerializer.Meta.fields + ['owner_username', 'owner_email', 'owner_role']
        read_only_fields = fields


class AdminWhiskeyFilterSerializer(serializers.Serializer):
    owner = serializers.UUIDField(required=False)
