import pytest
from django.urls import reverse
from rest_framework import status


@pytest.mark.django_db
class TestDashboard:
    """Tests for GET /api/dashboard/"""

    def test_dashboard(self, analytics_user_client, analytics_user, analytics_transactions,
                       analytics_snapshots, analytics_months):
        response = analytics_user_client.get(reverse('analytics:dashboard'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['user']['id'] == str(analytics_user.id)
        assert response.data['financials']['balance'] == '725.50'
        assert response.data['financials']['total_contributions'] == '600.00'
        assert response.data['financials']['total_earnings'] == '125.50'
        assert len(response.data['transactions']) == 5
        assert response.data['group_performance']['total_members'] == 48
        assert [m['month_name'] for m in response.data['monthly_performance']] == [
            'Jun', 'May', 'Apr', 'Mar', 'Feb', 'Jan',
        ]

    def test_dashboard_new_member(self, analytics_user_client):
        response = analytics_user_client.get(reverse('analytics:dashboard'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['financials']['balance'] == '0.00'
        assert response.data['transactions'] == []
        assert response.data['group_performance'] is None
        assert response.data['monthly_performance'] == []

    def test_dashboard_unauthenticated(self, api_client):
        response = api_client.get(reverse('analytics:dashboard'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestGroupPerformance:
    """Tests for GET /api/group-performance/"""

    def test_latest_snapshot(self, analytics_user_client, analytics_snapshots):
        response = analytics_user_client.get(reverse('analytics:group-performance'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['total_assets'] == '245890.00'
        assert response.data['ytd_returns'] == '8.20'

    def test_no_snapshot(self, analytics_user_client):
        response = analytics_user_client.get(reverse('analytics:group-performance'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data is None


@pytest.mark.django_db
class TestMonthlyPerformance:
    """Tests for GET /api/monthly-performance/"""

    def test_default_six_months(self, analytics_user_client, analytics_months):
        response = analytics_user_client.get(reverse('analytics:monthly-performance'))

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 6
        assert response.data[0]['return_percentage'] == '8.40'

    def test_custom_limit(self, analytics_user_client, analytics_months):
        response = analytics_user_client.get(reverse('analytics:monthly-performance'), {'limit': 8})

        assert len(response.data) == 8
        assert response.data[-1]['year'] == 2022

    @pytest.mark.parametrize('limit', ['0', '500', 'abc'])
    def test_invalid_limit(self, analytics_user_client, limit):
        response = analytics_user_client.get(reverse('analytics:monthly-performance'), {'limit': limit})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
