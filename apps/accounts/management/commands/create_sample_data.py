"""
Management command to create sample data for trying out the API.

Usage:
    python manage.py create_sample_data

This creates:
- 4 members (admin, johndoe, janesmith, mikebrown)
- Contribution and dividend history for johndoe
- A group performance snapshot
- Monthly returns for January-June 2023
- A pending investment proposal
"""

from datetime import date, datetime
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from apps.accounts.models import User
from apps.analytics.exceptions import DuplicateMonthError
from apps.analytics.models import GroupPerformance, MonthlyPerformance
from apps.analytics.services import record_group_performance, add_monthly_performance
from apps.investments.models import Investment, InvestmentVote
from apps.investments.services import create_investment
from apps.ledger.models import Transaction, TransactionType
from apps.ledger.services import record_transaction


MONTHLY_RETURNS_2023 = [
    (1, '4.20'),
    (2, '3.80'),
    (3, '5.10'),
    (4, '6.20'),
    (5, '7.00'),
    (6, '8.40'),
]


class Command(BaseCommand):
    help = 'Create sample data for testing the API'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing data before creating new sample data',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing existing data...')
            self.clear_data()

        self.stdout.write('Creating sample data...')

        users = self.create_users()
        self.create_transactions(users['john'])
        self.create_performance()
        self.create_investments(users['admin'])

        self.stdout.write(self.style.SUCCESS('Sample data created successfully!'))
        self.stdout.write('')
        self.stdout.write('Test accounts:')
        self.stdout.write('  admin / admin123 (superuser)')
        self.stdout.write('  johndoe / password123')
        self.stdout.write('  janesmith / password123')
        self.stdout.write('  mikebrown / password123')

    def clear_data(self):
        """Clear all data from the database."""
        InvestmentVote.objects.all().delete()
        Investment.objects.all().delete()
        Transaction.objects.all().delete()
        MonthlyPerformance.objects.all().delete()
        GroupPerformance.objects.all().delete()
        User.objects.filter(is_superuser=False).delete()
        User.objects.filter(username='admin').delete()

    def _member(self, username, email, first_name, last_name, password, **extra):
        user, _ = User.objects.get_or_create(
            username=username,
            defaults={
                'email': email,
                'first_name': first_name,
                'last_name': last_name,
                **extra,
            }
        )
        user.set_password(password)
        user.save()
        return user

    def create_users(self):
        """Create test members."""
        self.stdout.write('  Creating members...')

        return {
            'admin': self._member(
                'admin', 'admin@example.com', 'Admin', 'User', 'admin123',
                is_staff=True, is_superuser=True,
            ),
            'john': self._member('johndoe', 'john.doe@example.com', 'John', 'Doe', 'password123'),
            'jane': self._member('janesmith', 'jane.smith@example.com', 'Jane', 'Smith', 'password123'),
            'mike': self._member('mikebrown', 'mike.brown@example.com', 'Mike', 'Brown', 'password123'),
        }

    def create_transactions(self, member):
        """Create John's account history."""
        self.stdout.write('  Creating transactions...')

        if Transaction.objects.filter(member=member).exists():
            return

        history = [
            ('500.00', TransactionType.CONTRIBUTION, datetime(2023, 6, 1), 'Bank Transfer', 'Monthly contribution'),
            ('125.50', TransactionType.DIVIDEND, datetime(2023, 5, 15), 'Direct Deposit', 'Quarterly dividend'),
            ('500.00', TransactionType.CONTRIBUTION, datetime(2023, 5, 1), 'Bank Transfer', 'Monthly contribution'),
        ]
        for amount, kind, when, method, note in history:
            record_transaction(
                member=member,
                amount=Decimal(amount),
                type=kind,
                note=note,
                payment_method=method,
                date=timezone.make_aware(when),
            )

    def create_performance(self):
        """Create the group snapshot and monthly returns."""
        self.stdout.write('  Creating group performance...')

        record_group_performance(
            total_members=48,
            total_assets=Decimal('245890.00'),
            active_investments=12,
            ytd_returns=Decimal('8.20'),
        )

        for month, value in MONTHLY_RETURNS_2023:
            try:
                add_monthly_performance(year=2023, month=month, return_percentage=Decimal(value))
            except DuplicateMonthError:
                self.stdout.write(f"    2023-{month:02d} already recorded, skipping")

    def create_investments(self, proposed_by):
        """Create a pending investment proposal."""
        self.stdout.write('  Creating investments...')

        if Investment.objects.filter(name='Real Estate Fund').exists():
            return

        create_investment(
            name='Real Estate Fund',
            description='Residential rental properties in the city centre',
            total_amount=Decimal('120000.00'),
            return_rate=Decimal('7.50'),
            start_date=date(2023, 1, 15),
            proposed_by=proposed_by,
        )
