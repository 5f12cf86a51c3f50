from django.contrib.auth.models import AbstractBaseUser, BaseUserManager, PermissionsMixin
from django.db import models
import uuid


class Role(models.TextChoices):
    ADMIN = 'admin', 'Admin'
    EDITOR = 'editor', 'Editor'
    VIEWER = 'viewer', 'Viewer'


class Capability:
    """Named capabilities checked by the API permission layer."""

    READ_WHISKEY = 'read:whiskey'
    CREATE_WHISKEY = 'create:whiskey'
    UPDATE_WHISKEY = 'update:whiskey'
    DELETE_WHISKEY = 'delete:whiskey'
    MANAGE_USERS = 'manage:users'


ROLE_CAPABILITIES = {
    Role.VIEWER: frozenset([
        Capability.READ_WHISKEY,
    ]),
    Role.EDITOR: frozenset([
        Capability.READ_WHISKEY,
        Capability.CREATE_WHISKEY,
        Capability.UPDATE_WHISKEY,
        Capability.DELETE_WHISKEY,
    ]),
    Role.ADMIN: frozenset([
        Capability.READ_WHISKEY,
        Capability.CREATE_WHISKEY,
        Capability.UPDATE_WHISKEY,
        Capability.DELETE_WHISKEY,
        Capability.MANAGE_USERS,
    ]),
}


class UserManager(BaseUserManager):
    """Custom user manager for username-based authentication."""

    def create_user(self, username, email, password=None, **extra_fields):
        if not username:
            raise ValueError('Username is required')
        if not email:
            raise ValueError('Email is required')

        email = self.normalize_email(email)
        user = self.model(username=username, email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, username, email, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('role', Role.ADMIN)

        if extra_fields.get('is_staff') is not True:
            raise ValueError('Superuser must have is_staff=True')
        if extra_fields.get('is_superuser') is not True:
            raise ValueError('Superuser must have is_superuser=True')

        return self.create_user(username, email, password, **extra_fields)


class User(AbstractBaseUser, PermissionsMixin):
    """Collection owner with a role that grants API capabilities."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    username = models.CharField(max_length=50, unique=True)
    email = models.EmailField(unique=True, max_length=255)
    first_name = models.CharField(max_length=100, blank=True)
    last_name = models.CharField(max_length=100, blank=True)
    role = models.CharField(max_length=20, choices=Role.choices, default=Role.EDITOR)

    # Permissions
    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    last_login = models.DateTimeField(null=True, blank=True)

    objects = UserManager()

    USERNAME_FIELD = 'username'
    REQUIRED_FIELDS = ['email']

    class Meta:
        db_table = 'users'
        indexes = [
            models.Index(fields=['role'], name='users_role_idx'),
            models.Index(fields=['created_at'], name='users_created_at_idx'),
        ]
        ordering = ['username']

    def __str__(self):
        return self.username

    @property
    def is_admin(self):
        return self.role == Role.ADMIN

    @property
    def capabilities(self):
        return ROLE_CAPABILITIES.get(self.role, frozenset())

    def has_capability(self, capability):
        return capability in self.capabilities

    def get_full_name(self):
        """Return first and last name, or the username when both are blank."""
        full_name = f"{self.first_name} {self.last_name}".strip()
        return full_name or self.username
