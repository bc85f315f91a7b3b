"""
Ledger services.

Records member transactions and derives balances from them. Balances are
never stored: they are always aggregated from the transaction history,
contributions and dividends counting as credits, withdrawals and fees
as debits.
"""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import Case, DecimalField, F, QuerySet, Sum, Value, When
from django.db.models.functions import Coalesce
from django.utils import timezone

from apps.accounts.models import User
from .exceptions import InvalidTransactionError, InvalidYearError, TransactionNotPermittedError
from .models import Transaction, TransactionType, CREDIT_TYPES

logger = logging.getLogger(__name__)

ZERO = Decimal('0.00')

_money = DecimalField(max_digits=14, decimal_places=2)


@transaction.atomic
def record_transaction(
    *,
    member: User,
    amount: Decimal,
    type: str = TransactionType.CONTRIBUTION,
    note: str = '',
    payment_method: str = '',
    date: Optional[datetime] = None,
    recorded_by: Optional[User] = None
) -> Transaction:
    """
    Record a transaction on a member's account.

    Args:
        member: Member the transaction belongs to
        amount: Positive amount
        type: One of TransactionType values (default contribution)
        note: Optional free text
        payment_method: Optional payment method (e.g. "Bank Transfer")
        date: When the transaction happened (default now)
        recorded_by: User entering the transaction; non-staff users may only
            record contributions. None for system entries (commands, admin).

    Returns:
        Created Transaction instance

    Raises:
        InvalidTransactionError: If amount is not positive or type is unknown
        TransactionNotPermittedError: If a non-staff user records anything but a contribution
    """
    if type not in TransactionType.values:
        raise InvalidTransactionError(f"Unknown transaction type: {type}")

    if (
        recorded_by is not None
        and type != TransactionType.CONTRIBUTION
        and not recorded_by.is_staff
    ):
        raise TransactionNotPermittedError(f"Only staff can record {type} transactions")

    if amount is None or Decimal(amount) <= 0:
        raise InvalidTransactionError("Amount must be greater than zero")

    record = Transaction.objects.create(
        member=member,
        amount=amount,
        type=type,
        note=note,
        payment_method=payment_method,
        date=date or timezone.now(),
    )

    logger.info("Recorded %s of %s for member %s", type, amount, member.pk)
    return record


def get_member_transactions(*, member_id: UUID, limit: Optional[int] = None) -> QuerySet[Transaction]:
    """Return a member's transactions, newest first."""
    queryset = Transaction.objects.filter(member_id=member_id).order_by('-date')
    if limit is not None:
        queryset = queryset[:limit]
    return queryset


def _sum(queryset, expression=F('amount')) -> Decimal:
    return queryset.aggregate(
        total=Coalesce(Sum(expression, output_field=_money), Value(ZERO), output_field=_money)
    )['total']


def get_member_balance(*, member_id: UUID) -> Decimal:
    """Credits minus debits over the member's whole history."""
    signed = Case(
        When(type__in=CREDIT_TYPES, then=F('amount')),
        default=-F('amount'),
        output_field=_money,
    )
    return _sum(Transaction.objects.filter(member_id=member_id), signed)


def get_member_total_contributions(*, member_id: UUID) -> Decimal:
    return _sum(Transaction.objects.filter(
        member_id=member_id,
        type=TransactionType.CONTRIBUTION,
    ))


def get_member_total_earnings(*, member_id: UUID) -> Decimal:
    """Total dividends paid out to the member."""
    return _sum(Transaction.objects.filter(
        member_id=member_id,
        type=TransactionType.DIVIDEND,
    ))


def get_contribution_history(*, member_id: UUID, year: Optional[int] = None) -> QuerySet[Transaction]:
    """
    Return a member's contributions, newest first.

    Args:
        member_id: Member's ID
        year: Restrict to contributions made in this calendar year

    Raises:
        InvalidYearError: If year is outside 1900-9999
    """
    queryset = Transaction.objects.filter(
        member_id=member_id,
        type=TransactionType.CONTRIBUTION,
    )

    if year is not None:
        if not 1900 <= year <= 9999:
            raise InvalidYearError(f"Invalid year: {year}")
        queryset = queryset.filter(date__year=year)

    return queryset.order_by('-date')
