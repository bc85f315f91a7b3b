"""
Management command to re-run the activation check on pending investments.

Usage:
    python manage.py evaluate_investments
    python manage.py evaluate_investments --investment <uuid>

Vote submission triggers the check itself; this command is the retry path
when that trailing check failed.
"""

from django.core.management.base import BaseCommand, CommandError

from apps.investments.services import (
    list_investments,
    evaluate_activation,
    InvestmentNotFoundError,
    StorageError,
)


class Command(BaseCommand):
    help = 'Re-evaluate activation of pending investments'

    def add_arguments(self, parser):
        parser.add_argument(
            '--investment',
            dest='investment_id',
            help='Only evaluate the investment with this ID',
        )

    def handle(self, *args, **options):
        investment_id = options.get('investment_id')

        if investment_id:
            investment_ids = [investment_id]
        else:
            investment_ids = list(
                list_investments(active=False).values_list('id', flat=True)
            )

        activated = 0
        failed = 0
        for pk in investment_ids:
            try:
                if evaluate_activation(investment_id=pk):
                    activated += 1
                    self.stdout.write(f'  Activated {pk}')
            except InvestmentNotFoundError as e:
                raise CommandError(str(e))
            except StorageError as e:
                failed += 1
                self.stderr.write(f'  {e}')

        summary = f'Evaluated {len(investment_ids)} investment(s), activated {activated}'
        if failed:
            raise CommandError(f'{summary}, {failed} failed')
        self.stdout.write(self.style.SUCCESS(summary))
