import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, Role
from apps.whiskeys.models import Whiskey, WhiskeyType


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


# =============================================================================
# Users
# =============================================================================

@pytest.fixture
def analytics_user(db):
    """Create the main analytics test user."""
    return User.objects.create_user(
        username='collector',
        email='collector@example.com',
        password='TestPass123!',
        role=Role.VIEWER,
    )


@pytest.fixture
def other_collector(db):
    """Create a user whose records must never show up in analytics_user's stats."""
    return User.objects.create_user(
        username='neighbour',
        email='neighbour@example.com',
        password='TestPass123!',
        role=Role.EDITOR,
    )


@pytest.fixture
def analytics_user_client(analytics_user):
    """Return authenticated client for analytics_user."""
    client = APIClient()
    refresh = RefreshToken.for_user(analytics_user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


# =============================================================================
# Collection
# =============================================================================

@pytest.fixture
def analytics_collection(analytics_user):
    """
    Four records for analytics_user:

    - Eagle Rare 10: bourbon, 2 bottles, msrp 40, paid 35, rated 8.5, opened
    - Weller 12: bourbon, 1 bottle, msrp 50, paid 120, market 150, gain 100, rated 9.0
    - Lagavulin 16: scotch, 1 bottle, no prices, rated 9.5, opened
    - Mystery Cask: other, 3 bottles, blank country, unrated
    """
    return [
        Whiskey.objects.create(
            created_by=analytics_user,
            name='Eagle Rare 10',
            type=WhiskeyType.BOURBON,
            distillery='Buffalo Trace',
            country='USA',
            quantity=2,
            msrp=Decimal('40.00'),
            purchase_price=Decimal('35.00'),
            rating=Decimal('8.50'),
            is_opened=True,
        ),
        Whiskey.objects.create(
            created_by=analytics_user,
            name='Weller 12',
            type=WhiskeyType.BOURBON,
            distillery='Buffalo Trace',
            country='USA',
            quantity=1,
            msrp=Decimal('50.00'),
            purchase_price=Decimal('120.00'),
            current_market_value=Decimal('150.00'),
            value_gain_loss=Decimal('100.00'),
            rating=Decimal('9.00'),
        ),
        Whiskey.objects.create(
            created_by=analytics_user,
            name='Lagavulin 16',
            type=WhiskeyType.SCOTCH,
            distillery='Lagavulin',
            country='Scotland',
            quantity=1,
            rating=Decimal('9.50'),
            is_opened=True,
        ),
        Whiskey.objects.create(
            created_by=analytics_user,
            name='Mystery Cask',
            type=WhiskeyType.OTHER,
            distillery='Unknown Distillers',
            quantity=3,
        ),
    ]


@pytest.fixture
def foreign_collection(other_collector):
    """Records owned by someone else."""
    return [
        Whiskey.objects.create(
            created_by=other_collector,
            name='Pappy Van Winkle 23',
            type=WhiskeyType.BOURBON,
            distillery='Stitzel-Weller',
            quantity=5,
            msrp=Decimal('300.00'),
            rating=Decimal('10.00'),
        ),
    ]
