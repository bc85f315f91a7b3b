"""
Analytics write services.

Records group performance snapshots and monthly returns.
"""

import logging
from decimal import Decimal

from django.db import transaction, IntegrityError
from django.db.models import Case, DecimalField, F, Sum, Value, When
from django.db.models.functions import Coalesce

from apps.accounts.services import count_eligible_members
from apps.investments.services import get_active_investments
from apps.ledger.models import Transaction, CREDIT_TYPES
from .exceptions import InvalidMonthError, DuplicateMonthError
from .models import GroupPerformance, MonthlyPerformance

logger = logging.getLogger(__name__)


@transaction.atomic
def record_group_performance(
    *,
    total_members: int,
    total_assets: Decimal,
    active_investments: int,
    ytd_returns: Decimal
) -> GroupPerformance:
    """Store a group performance snapshot with the given figures."""
    snapshot = GroupPerformance.objects.create(
        total_members=total_members,
        total_assets=total_assets,
        active_investments=active_investments,
        ytd_returns=ytd_returns,
    )
    logger.info("Recorded group performance snapshot %s", snapshot.id)
    return snapshot


def capture_group_performance(*, ytd_returns: Decimal) -> GroupPerformance:
    """
    Snapshot the group from live data.

    Members and active investments are counted, total assets is the sum
    of all member balances. Year-to-date returns come from outside the
    ledger and must be supplied.
    """
    money = DecimalField(max_digits=16, decimal_places=2)
    signed = Case(
        When(type__in=CREDIT_TYPES, then=F('amount')),
        default=-F('amount'),
        output_field=money,
    )
    total_assets = Transaction.objects.aggregate(
        total=Coalesce(Sum(signed, output_field=money), Value(Decimal('0.00')), output_field=money)
    )['total']

    return record_group_performance(
        total_members=count_eligible_members(),
        total_assets=total_assets,
        active_investments=get_active_investments().count(),
        ytd_returns=ytd_returns,
    )


def add_monthly_performance(*, year: int, month: int, return_percentage: Decimal) -> MonthlyPerformance:
    """
    Record the group return for a month.

    Raises:
        InvalidMonthError: If month is outside 1-12
        DuplicateMonthError: If the month is already recorded
    """
    if not 1 <= month <= 12:
        raise InvalidMonthError(f"Invalid month: {month}")

    try:
        with transaction.atomic():
            return MonthlyPerformance.objects.create(
                year=year,
                month=month,
                return_percentage=return_percentage,
            )
    except IntegrityError:
        raise DuplicateMonthError(f"Performance for {year}-{month:02d} already recorded")
