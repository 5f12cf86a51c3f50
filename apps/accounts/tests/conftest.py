import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, Role


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    """Create and return a test user (editor)."""
    return User.objects.create_user(
        username='testuser',
        email='testuser@example.com',
        password='TestPass123!',
        first_name='Test',
        last_name='User',
    )


@pytest.fixture
def viewer(db):
    """Create and return a read-only user."""
    return User.objects.create_user(
        username='viewer',
        email='viewer@example.com',
        password='TestPass123!',
        role=Role.VIEWER,
    )


@pytest.fixture
def user_inactive(db):
    """Create and return an inactive user."""
    return User.objects.create_user(
        username='inactive',
        email='inactive@example.com',
        password='TestPass123!',
        is_active=False,
    )


@pytest.fixture
def other_user(db):
    """Create and return another test user."""
    return User.objects.create_user(
        username='otheruser',
        email='otheruser@example.com',
        password='OtherPass123!',
    )


@pytest.fixture
def authenticated_client(api_client, user):
    """Return an authenticated API client using JWT."""
    refresh = RefreshToken.for_user(user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client
