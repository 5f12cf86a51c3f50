import pytest
from decimal import Decimal
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
def editor(db):
    return User.objects.create_user(
        username='alice',
        email='alice@example.com',
        password='TestPass123!',
        role=Role.EDITOR,
    )


@pytest.fixture
def other_editor(db):
    return User.objects.create_user(
        username='bob',
        email='bob@example.com',
        password='TestPass123!',
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
def override_user(db):
    """User whose zero quantities are stored as one."""
    return User.objects.create_user(
        username='guntharp',
        email='guntharp@example.com',
        password='TestPass123!',
        role=Role.EDITOR,
    )


@pytest.fixture
def editor_client(editor):
    return _client_for(editor)


@pytest.fixture
def other_editor_client(other_editor):
    return _client_for(other_editor)


@pytest.fixture
def viewer_client(viewer):
    return _client_for(viewer)


# =============================================================================
# Whiskeys
# =============================================================================

@pytest.fixture
def bourbon(editor):
    return Whiskey.objects.create(
        created_by=editor,
        name='Eagle Rare 10',
        type=WhiskeyType.BOURBON,
        distillery='Buffalo Trace',
        region='Kentucky',
        country='USA',
        age=10,
        abv=Decimal('45.00'),
        msrp=Decimal('39.99'),
        rating=Decimal('8.50'),
        tasting_notes='Toffee, orange peel, oak',
    )


@pytest.fixture
def scotch(editor):
    return Whiskey.objects.create(
        created_by=editor,
        name='Ardbeg 10',
        type=WhiskeyType.SCOTCH,
        distillery='Ardbeg',
        region='Islay',
        country='Scotland',
        abv=Decimal('46.00'),
        rating=Decimal('9.00'),
        nose_notes='Smoky, peaty, lemon',
    )


@pytest.fixture
def foreign_whiskey(other_editor):
    """A record owned by someone other than ``editor``."""
    return Whiskey.objects.create(
        created_by=other_editor,
        name='Blanton\'s Original',
        type=WhiskeyType.BOURBON,
        distillery='Buffalo Trace',
    )
