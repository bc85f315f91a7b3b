import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    """Create and return a test member."""
    return User.objects.create_user(
        username='testuser',
        email='testuser@example.com',
        password='TestPass123!',
        first_name='Test',
        last_name='User',
    )


@pytest.fixture
def user_inactive(db):
    """Create and return a deactivated member."""
    return User.objects.create_user(
        username='inactive',
        email='inactive@example.com',
        password='TestPass123!',
        first_name='Inactive',
        last_name='User',
        is_active=False,
    )


@pytest.fixture
def other_user(db):
    """Create and return another test member."""
    return User.objects.create_user(
        username='otheruser',
        email='otheruser@example.com',
        password='OtherPass123!',
        first_name='Other',
        last_name='Member',
    )


@pytest.fixture
def authenticated_client(api_client, user):
    """Return an authenticated API client using JWT."""
    refresh = RefreshToken.for_user(user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client
