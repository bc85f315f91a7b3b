"""
Investment activation service.

An investment becomes active once the number of approving votes reaches
the quorum: ceil(threshold * eligible members), threshold being the
INVESTMENT_APPROVAL_THRESHOLD setting (0.8 by default). The quorum is
taken over the whole membership, so members who have not voted count
against activation.

Activation is a one-way flip of a boolean guarded by a conditional UPDATE,
so evaluating the same investment repeatedly, or from several requests
at once, activates it at most once.
"""

import logging
import math
from decimal import Decimal
from typing import Optional
from uuid import UUID

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.db import transaction, DatabaseError
from django.db.models import Count, Q
from django.utils import timezone

from apps.accounts.services import count_eligible_members
from apps.investments.models import Investment, InvestmentVote

from .exceptions import ActivationStorageError, StorageError
from .investment_management import get_investment_by_id

logger = logging.getLogger(__name__)

DEFAULT_APPROVAL_THRESHOLD = 0.8


def get_approval_threshold() -> Decimal:
    """Return the configured approval share as a Decimal in (0, 1]."""
    threshold = Decimal(str(getattr(settings, 'INVESTMENT_APPROVAL_THRESHOLD', DEFAULT_APPROVAL_THRESHOLD)))
    if not Decimal('0') < threshold <= Decimal('1'):
        raise ImproperlyConfigured(
            f"INVESTMENT_APPROVAL_THRESHOLD must be in (0, 1], got {threshold}"
        )
    return threshold


def required_approvals(eligible_count: int, threshold: Optional[Decimal] = None) -> int:
    """
    Number of yes votes needed to activate an investment.

    Never less than one, so an empty membership cannot activate anything.

    Examples:
        >>> required_approvals(10)
        8
        >>> required_approvals(3)
        3
    """
    if threshold is None:
        threshold = get_approval_threshold()
    return max(1, math.ceil(Decimal(str(threshold)) * eligible_count))


def _tally(investment_id: UUID) -> dict:
    return InvestmentVote.objects.filter(investment_id=investment_id).aggregate(
        yes=Count('id', filter=Q(approve=True)),
        no=Count('id', filter=Q(approve=False)),
    )


def evaluate_activation(*, investment_id: UUID) -> bool:
    """
    Activate the investment if it has reached the approval quorum.

    Safe to call any number of times: an investment that is already active
    or still short of quorum is left untouched.

    Args:
        investment_id: UUID of the investment

    Returns:
        True if this call moved the investment from pending to active

    Raises:
        InvestmentNotFoundError: If investment doesn't exist
        ActivationStorageError: If votes cannot be read or the flag cannot be written
    """
    try:
        investment = get_investment_by_id(investment_id=investment_id)
        if investment.active:
            return False

        with transaction.atomic():
            eligible = count_eligible_members()
            required = required_approvals(eligible)
            yes_votes = _tally(investment.id)['yes']

            if yes_votes < required:
                logger.debug(
                    "Investment %s pending: %d/%d approvals (%d eligible members)",
                    investment.id, yes_votes, required, eligible,
                )
                return False

            now = timezone.now()
            activated = (
                Investment.objects
                .filter(id=investment.id, active=False)
                .update(active=True, activated_at=now, updated_at=now)
            )
    except DatabaseError as e:
        raise ActivationStorageError(
            f"Could not evaluate activation of investment {investment_id}"
        ) from e

    if activated:
        logger.info(
            "Investment %s activated with %d/%d approvals (%d eligible members)",
            investment.id, yes_votes, required, eligible,
        )
    return bool(activated)


def get_vote_summary(*, investment_id: UUID) -> dict:
    """
    Current standing of an investment's vote.

    Returns:
        dict with eligible_members, required_approvals, yes_votes,
        no_votes, votes_cast and active

    Raises:
        InvestmentNotFoundError: If investment doesn't exist
        StorageError: If votes or the member count cannot be read
    """
    try:
        investment = get_investment_by_id(investment_id=investment_id)
        eligible = count_eligible_members()
        tally = _tally(investment.id)
    except DatabaseError as e:
        raise StorageError(f"Could not read vote summary of investment {investment_id}") from e

    return {
        'investment_id': investment.id,
        'eligible_members': eligible,
        'required_approvals': required_approvals(eligible),
        'yes_votes': tally['yes'],
        'no_votes': tally['no'],
        'votes_cast': tally['yes'] + tally['no'],
        'active': investment.active,
    }
