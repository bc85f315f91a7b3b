import pytest
from uuid import uuid4
from unittest.mock import patch
from django.db import DatabaseError
from django.urls import reverse
from rest_framework import status

from apps.investments.models import Investment, InvestmentVote
from apps.investments.services.exceptions import VoteStorageError


# =============================================================================
# Investment List / Create / Retrieve Tests
# =============================================================================

@pytest.mark.django_db
class TestInvestmentList:
    """Tests for GET /api/investments/"""

    def test_list_investments(self, authenticated_client, investment, active_investment):
        response = authenticated_client.get(reverse('investments:investment-list'))

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 2

    def test_list_only_active(self, authenticated_client, investment, active_investment):
        response = authenticated_client.get(reverse('investments:investment-list'), {'active': 'true'})

        assert response.status_code == status.HTTP_200_OK
        assert [i['id'] for i in response.data] == [str(active_investment.id)]
        assert response.data[0]['status'] == 'active'

    def test_list_only_pending(self, authenticated_client, investment, active_investment):
        response = authenticated_client.get(reverse('investments:investment-list'), {'active': 'false'})

        assert [i['id'] for i in response.data] == [str(investment.id)]

    def test_list_unauthenticated(self, api_client, investment):
        response = api_client.get(reverse('investments:investment-list'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestInvestmentCreate:
    """Tests for POST /api/investments/"""

    def test_create_investment(self, authenticated_client, proposer):
        data = {
            'name': 'Government Bonds',
            'total_amount': '75000.00',
            'return_rate': '4.10',
            'start_date': '2023-02-01',
        }
        response = authenticated_client.post(reverse('investments:investment-list'), data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['active'] is False
        assert response.data['status'] == 'pending'
        assert response.data['proposed_by']['id'] == str(proposer.id)

    def test_create_ignores_active_flag(self, authenticated_client):
        data = {
            'name': 'Sneaky Fund',
            'total_amount': '1000.00',
            'return_rate': '3.00',
            'start_date': '2023-02-01',
            'active': True,
        }
        response = authenticated_client.post(reverse('investments:investment-list'), data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert Investment.objects.get(id=response.data['id']).active is False

    def test_create_rejects_end_before_start(self, authenticated_client):
        data = {
            'name': 'Backwards Fund',
            'total_amount': '1000.00',
            'return_rate': '3.00',
            'start_date': '2023-06-01',
            'end_date': '2023-01-01',
        }
        response = authenticated_client.post(reverse('investments:investment-list'), data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'end_date' in response.data

    def test_create_rejects_return_rate_over_100(self, authenticated_client):
        data = {
            'name': 'Too Good Fund',
            'total_amount': '1000.00',
            'return_rate': '150.00',
            'start_date': '2023-06-01',
        }
        response = authenticated_client.post(reverse('investments:investment-list'), data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.django_db
class TestInvestmentRetrieve:
    """Tests for GET /api/investments/{id}/"""

    def test_retrieve(self, authenticated_client, investment):
        url = reverse('investments:investment-detail', args=[investment.id])
        response = authenticated_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['name'] == 'Real Estate Fund'

    def test_retrieve_not_found(self, authenticated_client):
        url = reverse('investments:investment-detail', args=[uuid4()])
        response = authenticated_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert 'error' in response.data


# =============================================================================
# Voting Tests
# =============================================================================

@pytest.mark.django_db
class TestVote:
    """Tests for POST /api/investments/{id}/vote/"""

    def test_vote(self, voter_client, investment, voter):
        url = reverse('investments:investment-vote', args=[investment.id])
        response = voter_client.post(url, {'approve': True}, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['approve'] is True
        assert response.data['voter']['id'] == str(voter.id)
        assert response.data['investment'] == str(investment.id)

    def test_vote_again_overwrites(self, voter_client, investment, voter):
        url = reverse('investments:investment-vote', args=[investment.id])
        voter_client.post(url, {'approve': True}, format='json')
        response = voter_client.post(url, {'approve': False}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert InvestmentVote.objects.filter(investment=investment, voter=voter).count() == 1
        assert InvestmentVote.objects.get(investment=investment, voter=voter).approve is False

    @pytest.mark.parametrize('payload', [{'approve': 'yes'}, {'approve': 1}, {'approve': None}, {}])
    def test_vote_requires_boolean(self, voter_client, investment, payload):
        url = reverse('investments:investment-vote', args=[investment.id])
        response = voter_client.post(url, payload, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert not InvestmentVote.objects.exists()

    def test_vote_unknown_investment(self, voter_client):
        url = reverse('investments:investment-vote', args=[uuid4()])
        response = voter_client.post(url, {'approve': True}, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_vote_storage_failure(self, voter_client, investment):
        url = reverse('investments:investment-vote', args=[investment.id])
        with patch(
            'apps.investments.views.cast_vote',
            side_effect=VoteStorageError('Could not record vote'),
        ):
            response = voter_client.post(url, {'approve': True}, format='json')

        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
        assert response.data == {'error': 'Could not record vote'}

    def test_deciding_vote_activates(self, authenticated_client, voter_client, investment):
        url = reverse('investments:investment-vote', args=[investment.id])
        authenticated_client.post(url, {'approve': True}, format='json')
        voter_client.post(url, {'approve': True}, format='json')

        investment.refresh_from_db()
        assert investment.active is True

    def test_vote_unauthenticated(self, api_client, investment):
        url = reverse('investments:investment-vote', args=[investment.id])
        response = api_client.post(url, {'approve': True}, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestVoteReads:
    """Tests for the votes, my-vote and summary endpoints."""

    def test_votes(self, authenticated_client, voter_client, investment):
        voter_client.post(
            reverse('investments:investment-vote', args=[investment.id]),
            {'approve': False},
            format='json',
        )
        response = authenticated_client.get(reverse('investments:investment-votes', args=[investment.id]))

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 1
        assert response.data[0]['approve'] is False

    def test_my_vote_none(self, authenticated_client, investment):
        response = authenticated_client.get(reverse('investments:investment-my-vote', args=[investment.id]))

        assert response.status_code == status.HTTP_200_OK
        assert response.data is None

    def test_my_vote(self, voter_client, investment):
        voter_client.post(
            reverse('investments:investment-vote', args=[investment.id]),
            {'approve': True},
            format='json',
        )
        response = voter_client.get(reverse('investments:investment-my-vote', args=[investment.id]))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['approve'] is True

    def test_summary(self, authenticated_client, voter, investment):
        response = authenticated_client.get(reverse('investments:investment-summary', args=[investment.id]))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['eligible_members'] == 2
        assert response.data['required_approvals'] == 2
        assert response.data['votes_cast'] == 0
        assert response.data['active'] is False

    def test_summary_storage_failure(self, authenticated_client, investment):
        with patch(
            'apps.investments.services.activation.count_eligible_members',
            side_effect=DatabaseError('timeout'),
        ):
            response = authenticated_client.get(
                reverse('investments:investment-summary', args=[investment.id])
            )

        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
        assert 'error' in response.data


@pytest.mark.django_db
class TestEvaluate:
    """Tests for POST /api/investments/{id}/evaluate/"""

    def test_evaluate_requires_staff(self, authenticated_client, investment):
        response = authenticated_client.post(reverse('investments:investment-evaluate', args=[investment.id]))

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_evaluate_activates_when_quorum_reached(self, staff_client, proposer, staff_user, investment):
        # Votes written directly, as if the post-vote check had failed
        for member in (proposer, staff_user):
            InvestmentVote.objects.create(investment=investment, voter=member, approve=True)

        response = staff_client.post(reverse('investments:investment-evaluate', args=[investment.id]))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['activated'] is True
        assert response.data['investment']['active'] is True

        response = staff_client.post(reverse('investments:investment-evaluate', args=[investment.id]))
        assert response.data['activated'] is False

    def test_evaluate_unknown_investment(self, staff_client):
        response = staff_client.post(reverse('investments:investment-evaluate', args=[uuid4()]))

        assert response.status_code == status.HTTP_404_NOT_FOUND
