"""
Management command to snapshot the group's headline figures.

Usage:
    python manage.py capture_group_performance --ytd-returns 8.2

Member count, total assets and active investments are read from live data;
year-to-date returns are reported by the treasurer and passed in.
"""

from decimal import Decimal, InvalidOperation

from django.core.management.base import BaseCommand, CommandError

from apps.analytics.services import capture_group_performance


class Command(BaseCommand):
    help = 'Record a group performance snapshot from live data'

    def add_arguments(self, parser):
        parser.add_argument(
            '--ytd-returns',
            dest='ytd_returns',
            required=True,
            help='Year-to-date return in percent, e.g. 8.2',
        )

    def handle(self, *args, **options):
        try:
            ytd_returns = Decimal(options['ytd_returns'])
        except InvalidOperation:
            raise CommandError(f"Invalid --ytd-returns value: {options['ytd_returns']}")

        snapshot = capture_group_performance(ytd_returns=ytd_returns)

        self.stdout.write(self.style.SUCCESS(
            f'Captured snapshot {snapshot.id}: {snapshot.total_members} members, '
            f'{snapshot.total_assets} total assets, '
            f'{snapshot.active_investments} active investments, '
            f'{snapshot.ytd_returns}% YTD'
        ))
