import pytest
from datetime import datetime
from decimal import Decimal
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.ledger.models import Transaction, TransactionType


def aware(year, month, day):
    return timezone.make_aware(datetime(year, month, day, 12, 0))


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def member(db):
    """Create and return the member owning the ledger."""
    return User.objects.create_user(
        username='johndoe',
        email='john.doe@example.com',
        password='TestPass123!',
        first_name='John',
        last_name='Doe',
    )


@pytest.fixture
def other_member(db):
    """Create and return another member."""
    return User.objects.create_user(
        username='janedoe',
        email='jane.doe@example.com',
        password='TestPass123!',
        first_name='Jane',
        last_name='Doe',
    )


@pytest.fixture
def authenticated_client(api_client, member):
    """Return API client authenticated as member."""
    refresh = RefreshToken.for_user(member)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def ledger(db, member):
    """Mixed history across two years for member."""
    rows = [
        (Decimal('500.00'), TransactionType.CONTRIBUTION, aware(2023, 6, 1), 'Bank Transfer'),
        (Decimal('125.50'), TransactionType.DIVIDEND, aware(2023, 5, 15), 'Direct Deposit'),
        (Decimal('500.00'), TransactionType.CONTRIBUTION, aware(2023, 5, 1), 'Bank Transfer'),
        (Decimal('300.00'), TransactionType.CONTRIBUTION, aware(2022, 11, 3), 'Cash'),
        (Decimal('200.00'), TransactionType.WITHDRAWAL, aware(2023, 6, 10), 'Bank Transfer'),
        (Decimal('10.00'), TransactionType.FEE, aware(2023, 6, 11), ''),
    ]
    return [
        Transaction.objects.create(
            member=member,
            amount=amount,
            type=kind,
            date=when,
            payment_method=method,
        )
        for amount, kind, when, method in rows
    ]


@pytest.fixture
def treasurer(db):
    """Create and return a staff member."""
    return User.objects.create_user(
        username='treasurer',
        email='treasurer@example.com',
        password='TestPass123!',
        first_name='Tess',
        last_name='Treasurer',
        is_staff=True,
    )


@pytest.fixture
def treasurer_client(treasurer):
    """Return API client authenticated as the treasurer."""
    client = APIClient()
    refresh = RefreshToken.for_user(treasurer)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client
