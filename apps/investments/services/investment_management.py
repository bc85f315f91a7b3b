"""
Investment management service.

Handles investment proposal creation and lookup. Proposals always start
pending; only the activation service may activate them.
"""

import logging
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Optional
from uuid import UUID

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction, DatabaseError
from django.db.models import QuerySet

from apps.accounts.models import User
from apps.investments.models import Investment

from .exceptions import (
    InvestmentNotFoundError,
    InvalidInvestmentError,
    StorageError,
)

logger = logging.getLogger(__name__)

MAX_RETURN_RATE = Decimal('100')


def _to_decimal(value, field: str) -> Decimal:
    try:
        return Decimal(str(value))
    except (InvalidOperation, TypeError, ValueError):
        raise InvalidInvestmentError(f"{field} must be a number")


def create_investment(
    *,
    name: str,
    total_amount: Decimal,
    return_rate: Decimal,
    start_date: date,
    description: str = '',
    end_date: Optional[date] = None,
    proposed_by: Optional[User] = None
) -> Investment:
    """
    Propose a new investment.

    The investment is created pending regardless of what the caller wants;
    members activate it by voting.

    Args:
        name: Investment name
        total_amount: Amount to invest, must be positive
        return_rate: Expected return in percent, 0-100
        start_date: Start of the investment
        description: Optional description
        end_date: Optional end, not before start_date
        proposed_by: Member proposing the investment

    Returns:
        Created Investment instance

    Raises:
        InvalidInvestmentError: If a field is out of range
        StorageError: If the investment cannot be saved
    """
    total_amount = _to_decimal(total_amount, 'total_amount')
    return_rate = _to_decimal(return_rate, 'return_rate')

    if not name or not name.strip():
        raise InvalidInvestmentError("Name is required")

    if total_amount <= 0:
        raise InvalidInvestmentError("Total amount must be greater than zero")

    if not Decimal('0') <= return_rate <= MAX_RETURN_RATE:
        raise InvalidInvestmentError("Return rate must be between 0 and 100 percent")

    if end_date is not None and end_date < start_date:
        raise InvalidInvestmentError("End date cannot be before start date")

    try:
        with transaction.atomic():
            investment = Investment.objects.create(
                name=name.strip(),
                description=description,
                total_amount=total_amount,
                return_rate=return_rate,
                start_date=start_date,
                end_date=end_date,
                active=False,
                proposed_by=proposed_by,
            )
    except DatabaseError as e:
        raise StorageError("Could not save investment") from e

    logger.info(
        "Investment %s (%s) proposed by %s",
        investment.id,
        investment.name,
        proposed_by.pk if proposed_by else None,
    )
    return investment


def get_investment_by_id(*, investment_id: UUID) -> Investment:
    """
    Get an investment by ID.

    Raises:
        InvestmentNotFoundError: If investment doesn't exist
    """
    try:
        return (
            Investment.objects
            .select_related('proposed_by')
            .get(id=investment_id)
        )
    except (Investment.DoesNotExist, DjangoValidationError):
        raise InvestmentNotFoundError(f"Investment with ID {investment_id} not found")


def list_investments(*, active: Optional[bool] = None) -> QuerySet[Investment]:
    """Return all investments, optionally only pending or only active ones."""
    queryset = Investment.objects.select_related('proposed_by')
    if active is not None:
        queryset = queryset.filter(active=active)
    return queryset.order_by('-created_at')


def get_active_investments() -> QuerySet[Investment]:
    return list_investments(active=True)
