import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, Role
from apps.whiskeys.models import Whiskey, WhiskeyType


def _client_for(user):
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


# =============================================================================
# Users
# =============================================================================

@pytest.fixture
def admin_user(db):
    return User.objects.create_user(
        username='admin',
        email='admin@example.com',
        password='TestPass123!',
        role=Role.ADMIN,
    )


@pytest.fixture
def editor(db):
    return User.objects.create_user(
        username='alice',
        email='alice@example.com',
        password='TestPass123!',
        first_name='Alice',
        role=Role.EDITOR,
    )


@pytest.fixture
def viewer(db):
    return User.objects.create_user(
        username='victor',
        email='victor@example.com',
        password='TestPass123!',
        role=Role.VIEWER,
    )


@pytest.fixture
def admin_client(admin_user):
    return _client_for(admin_user)


@pytest.fixture
def editor_client(editor):
    return _client_for(editor)


@pytest.fixture
def viewer_client(viewer):
    return _client_for(viewer)


# =============================================================================
# Whiskeys
# =============================================================================

@pytest.fixture
def editor_whiskeys(editor):
    """Two records in alice's collection."""
    return [
        Whiskey.objects.create(
            created_by=editor,
            name='Eagle Rare 10',
            type=WhiskeyType.BOURBON,
            distillery='Buffalo Trace',
        ),
        Whiskey.objects.create(
            created_by=editor,
            name='Redbreast 12',
            type=WhiskeyType.IRISH,
            distillery='Midleton',
        ),
    ]


@pytest.fixture
def viewer_whiskey(viewer):
    return Whiskey.objects.create(
        created_by=viewer,
        name='Hibiki Harmony',
        type=WhiskeyType.JAPANESE,
        distillery='Suntory',
    )
