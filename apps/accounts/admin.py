from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.db.models import Count
from django.utils.html import format_html
from .models import User, Role


ROLE_BADGE_COLORS = {
    Role.ADMIN: ('#B85C5C', 'white'),
    Role.EDITOR: ('#5B9BD5', 'white'),
    Role.VIEWER: ('#ccc', '#666'),
}


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """
    Admin interface for User model.

    Provides:
    - User listing with role and collection size
    - Filtering by role and status
    - Search by username, email and name
    - Bulk role changes and activation toggles
    """

    list_display = [
        'username',
        'email',
        'role_badge',
        'is_active_badge',
        'whiskey_count',
        'created_at',
        'last_login',
    ]

    list_filter = [
        'role',
        'is_active',
        'is_staff',
        'created_at',
    ]

    search_fields = [
        'username',
        'email',
        'first_name',
        'last_name',
    ]

    ordering = ['username']
    date_hierarchy = 'created_at'

    fieldsets = (
        ('Basic Information', {
            'fields': ('username', 'email', 'first_name', 'last_name', 'password')
        }),
        ('Role', {
            'fields': ('role',),
        }),
        ('Permissions', {
            'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions'),
            'classes': ('collapse',),
        }),
        ('Timestamps', {
            'fields': ('created_at', 'last_login'),
            'classes': ('collapse',),
        }),
    )

    add_fieldsets = (
        ('Create User', {
            'classes': ('wide',),
            'fields': ('username', 'email', 'role', 'password1', 'password2'),
        }),
    )

    readonly_fields = [
        'created_at',
        'last_login',
    ]

    filter_horizontal = ['groups', 'user_permissions']

    def role_badge(self, obj):
        """Display role as colored badge."""
        background, color = ROLE_BADGE_COLORS.get(obj.role, ('#ccc', '#666'))
        return format_html(
            '<span style="background: {}; color: {}; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            background, color, obj.get_role_display()
        )
    role_badge.short_description = 'Role'
    role_badge.admin_order_field = 'role'

    def is_active_badge(self, obj):
        """Display active status as colored badge."""
        if obj.is_active:
            return format_html(
                '<span style="background: #6B8E5E; color: white; padding: 3px 8px; '
                'border-radius: 10px; font-size: 11px;">Active</span>'
            )
        return format_html(
            '<span style="background: #B85C5C; color: white; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">Inactive</span>'
        )
    is_active_badge.short_description = 'Status'
    is_active_badge.admin_order_field = 'is_active'

    def whiskey_count(self, obj):
        return obj.whiskey_count
    whiskey_count.short_description = 'Whiskeys'
    whiskey_count.admin_order_field = 'whiskey_count'

    actions = [
        'activate_users',
        'deactivate_users',
        'make_editors',
        'make_viewers',
    ]

    @admin.action(description='Activate selected users')
    def activate_users(self, request, queryset):
        count = queryset.update(is_active=True)
        self.message_user(request, f'Activated {count} user(s).')

    @admin.action(description='Deactivate selected users')
    def deactivate_users(self, request, queryset):
        """Deactivate selected users (excludes superusers for safety)."""
        safe_queryset = queryset.filter(is_superuser=False)
        count = safe_queryset.update(is_active=False)
        skipped = queryset.count() - count
        msg = f'Deactivated {count} user(s).'
        if skipped:
            msg += f' Skipped {skipped} superuser(s) for safety.'
        self.message_user(request, msg)

    @admin.action(description='Set role to editor')
    def make_editors(self, request, queryset):
        count = queryset.exclude(id=request.user.id).update(role=Role.EDITOR)
        self.message_user(request, f'Updated {count} user(s) to editor.')

    @admin.action(description='Set role to viewer')
    def make_viewers(self, request, queryset):
        count = queryset.exclude(id=request.user.id).update(role=Role.VIEWER)
        self.message_user(request, f'Updated {count} user(s) to viewer.')

    def get_queryset(self, request):
        qs = super().get_queryset(request)
        return qs.annotate(whiskey_count=Count('whiskeys'))
