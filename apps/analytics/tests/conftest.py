import pytest
from datetime import date, datetime
from decimal import Decimal
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.analytics.models import GroupPerformance, MonthlyPerformance
from apps.investments.models import Investment
from apps.ledger.models import Transaction, TransactionType


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def analytics_user(db):
    """Create and return the member viewing the dashboard."""
    return User.objects.create_user(
        username='johndoe',
        email='john.doe@example.com',
        password='TestPass123!',
        first_name='John',
        last_name='Doe',
    )


@pytest.fixture
def analytics_member(db):
    """Create and return another member."""
    return User.objects.create_user(
        username='janesmith',
        email='jane.smith@example.com',
        password='TestPass123!',
        first_name='Jane',
        last_name='Smith',
    )


@pytest.fixture
def analytics_user_client(api_client, analytics_user):
    """Return API client authenticated as analytics_user."""
    refresh = RefreshToken.for_user(analytics_user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def analytics_transactions(db, analytics_user):
    """Seven transactions so the dashboard has to cut the list."""
    records = []
    for day in range(1, 7):
        records.append(Transaction.objects.create(
            member=analytics_user,
            amount=Decimal('100.00'),
            type=TransactionType.CONTRIBUTION,
            date=timezone.make_aware(datetime(2023, 6, day)),
        ))
    records.append(Transaction.objects.create(
        member=analytics_user,
        amount=Decimal('125.50'),
        type=TransactionType.DIVIDEND,
        date=timezone.make_aware(datetime(2023, 6, 20)),
    ))
    return records


@pytest.fixture
def analytics_snapshots(db):
    """An older and a newer group performance snapshot."""
    older = GroupPerformance.objects.create(
        total_members=40,
        total_assets=Decimal('200000.00'),
        active_investments=10,
        ytd_returns=Decimal('6.10'),
        date=timezone.make_aware(datetime(2023, 5, 1)),
    )
    newer = GroupPerformance.objects.create(
        total_members=48,
        total_assets=Decimal('245890.00'),
        active_investments=12,
        ytd_returns=Decimal('8.20'),
        date=timezone.make_aware(datetime(2023, 6, 1)),
    )
    return older, newer


@pytest.fixture
def analytics_months(db):
    """Eight months spanning a year boundary."""
    months = [
        (2022, 11, '2.10'), (2022, 12, '3.00'),
        (2023, 1, '4.20'), (2023, 2, '3.80'), (2023, 3, '5.10'),
        (2023, 4, '6.20'), (2023, 5, '7.00'), (2023, 6, '8.40'),
    ]
    return [
        MonthlyPerformance.objects.create(year=y, month=m, return_percentage=Decimal(r))
        for y, m, r in months
    ]


@pytest.fixture
def analytics_active_investment(db, analytics_user):
    return Investment.objects.create(
        name='Real Estate Fund',
        total_amount=Decimal('120000.00'),
        return_rate=Decimal('7.50'),
        start_date=date(2023, 1, 15),
        active=True,
        proposed_by=analytics_user,
    )
