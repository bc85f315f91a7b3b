import pytest
from decimal import Decimal
from io import StringIO
from uuid import uuid4
from django.core.management import call_command
from django.core.management.base import CommandError

from apps.accounts.models import User
from apps.analytics.models import GroupPerformance, MonthlyPerformance
from apps.investments.models import Investment, InvestmentVote
from apps.ledger.services import get_member_balance


@pytest.mark.django_db
class TestEvaluateInvestments:

    def test_activates_investments_at_quorum(self, investment, proposer, voter):
        for member in (proposer, voter):
            InvestmentVote.objects.create(investment=investment, voter=member, approve=True)
        out = StringIO()

        call_command('evaluate_investments', stdout=out)

        investment.refresh_from_db()
        assert investment.active is True
        assert 'activated 1' in out.getvalue()

    def test_leaves_short_investments_pending(self, investment, proposer, voter):
        InvestmentVote.objects.create(investment=investment, voter=proposer, approve=True)

        call_command('evaluate_investments', '--investment', str(investment.id), stdout=StringIO())

        investment.refresh_from_db()
        assert investment.active is False

    def test_unknown_investment(self, db):
        with pytest.raises(CommandError):
            call_command('evaluate_investments', '--investment', str(uuid4()), stdout=StringIO())


@pytest.mark.django_db
class TestCreateSampleData:

    def test_creates_demo_data(self):
        call_command('create_sample_data', stdout=StringIO())

        john = User.objects.get(username='johndoe')
        assert john.check_password('password123')
        assert get_member_balance(member_id=john.id) == Decimal('1125.50')
        assert MonthlyPerformance.objects.filter(year=2023).count() == 6
        assert Investment.objects.get(name='Real Estate Fund').active is False

    def test_rerun_with_clear(self):
        call_command('create_sample_data', stdout=StringIO())
        call_command('create_sample_data', '--clear', stdout=StringIO())

        assert User.objects.filter(username='johndoe').count() == 1
        assert Investment.objects.count() == 1

    def test_rerun_without_clear_skips_recorded_months(self):
        call_command('create_sample_data', stdout=StringIO())
        out = StringIO()

        call_command('create_sample_data', stdout=out)

        assert MonthlyPerformance.objects.filter(year=2023).count() == 6
        assert '2023-06 already recorded' in out.getvalue()
        assert GroupPerformance.objects.count() == 2
