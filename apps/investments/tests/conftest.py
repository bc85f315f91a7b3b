import pytest
from datetime import date
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.investments.models import Investment


def make_member(username, **extra):
    """Create an active member with a predictable email."""
    return User.objects.create_user(
        username=username,
        email=f'{username}@example.com',
        password='TestPass123!',
        first_name=username.capitalize(),
        last_name='Member',
        **extra
    )


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def proposer(db):
    """Create and return the member proposing investments."""
    return make_member('proposer')


@pytest.fixture
def voter(db):
    """Create and return a second active member."""
    return make_member('voter')


@pytest.fixture
def inactive_member(db):
    """Create and return a member that is not eligible to vote."""
    return make_member('inactive', is_active=False)


@pytest.fixture
def staff_user(db):
    """Create and return a staff member."""
    return make_member('treasurer', is_staff=True)


@pytest.fixture
def ten_members(db):
    """Exactly ten eligible members, the first being the proposer."""
    return [make_member(f'member{i}') for i in range(10)]


@pytest.fixture
def investment(db, proposer):
    """Create a pending investment."""
    return Investment.objects.create(
        name='Real Estate Fund',
        description='Residential property fund',
        total_amount=Decimal('120000.00'),
        return_rate=Decimal('7.50'),
        start_date=date(2023, 1, 15),
        proposed_by=proposer,
    )


@pytest.fixture
def active_investment(db, proposer):
    """Create an investment that has already been activated."""
    return Investment.objects.create(
        name='Tech Startup Portfolio',
        total_amount=Decimal('50000.00'),
        return_rate=Decimal('12.00'),
        start_date=date(2023, 3, 1),
        active=True,
        proposed_by=proposer,
    )


@pytest.fixture
def authenticated_client(api_client, proposer):
    """Return API client authenticated as the proposer."""
    refresh = RefreshToken.for_user(proposer)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def voter_client(voter):
    """Return a separate API client authenticated as the voter."""
    client = APIClient()
    refresh = RefreshToken.for_user(voter)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def staff_client(staff_user):
    """Return API client authenticated as a staff member."""
    client = APIClient()
    refresh = RefreshToken.for_user(staff_user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client
