"""
Investment voting service.

A member has at most one vote per investment. Submitting again overwrites
the earlier decision instead of adding a second vote; the database
enforces this with a unique constraint on (investment, voter).

Vote submission is a two-step pipeline:
1. Upsert the vote in its own transaction
2. Once committed, run the activation check

The second step is best-effort. If it fails the vote still stands and the
check can be retried on its own (next vote, the evaluate endpoint or the
evaluate_investments management command).
"""

import logging
from typing import Optional, Tuple
from uuid import UUID

from django.db import transaction, IntegrityError, DatabaseError
from django.db.models import QuerySet

from apps.accounts.models import User
from apps.accounts.services import get_member, MemberNotFoundError
from apps.investments.models import Investment, InvestmentVote

from .activation import evaluate_activation
from .exceptions import (
    VoterNotFoundError,
    InvalidVoteError,
    VoteStorageError,
    ActivationStorageError,
)
from .investment_management import get_investment_by_id

logger = logging.getLogger(__name__)


def _get_voter(voter_id: UUID) -> User:
    try:
        return get_member(member_id=voter_id)
    except MemberNotFoundError:
        raise VoterNotFoundError(f"Member with ID {voter_id} not found or not eligible to vote")


def _overwrite(vote: InvestmentVote, approve: bool) -> InvestmentVote:
    vote.approve = approve
    vote.save(update_fields=['approve', 'updated_at'])
    return vote


@transaction.atomic
def _upsert_vote(
    *,
    investment: Investment,
    voter: User,
    approve: bool
) -> Tuple[InvestmentVote, bool]:
    """Create or overwrite the member's vote. Returns (vote, created)."""
    vote = (
        InvestmentVote.objects
        .select_for_update()
        .filter(investment=investment, voter=voter)
        .first()
    )
    if vote is not None:
        return _overwrite(vote, approve), False

    try:
        # Savepoint so a lost insert race leaves the outer transaction usable
        with transaction.atomic():
            vote = InvestmentVote.objects.create(
                investment=investment,
                voter=voter,
                approve=approve,
            )
        return vote, True
    except IntegrityError:
        # A concurrent first submission by the same member won the insert
        vote = (
            InvestmentVote.objects
            .select_for_update()
            .get(investment=investment, voter=voter)
        )
        return _overwrite(vote, approve), False


def cast_vote(*, investment_id: UUID, voter_id: UUID, approve: bool) -> Tuple[InvestmentVote, bool]:
    """
    Record a member's vote on an investment and re-check activation.

    Voting stays open after activation; a late vote is recorded but cannot
    deactivate the investment.

    Args:
        investment_id: UUID of the investment
        voter_id: UUID of the voting member
        approve: True to approve, False to reject

    Returns:
        (vote, created) where created is False if an earlier vote was overwritten

    Raises:
        InvalidVoteError: If approve is not a boolean
        InvestmentNotFoundError: If investment doesn't exist
        VoterNotFoundError: If voter doesn't exist or is not an active member
        VoteStorageError: If the vote cannot be committed (nothing is recorded)
    """
    if not isinstance(approve, bool):
        raise InvalidVoteError("Vote approval must be true or false")

    try:
        investment = get_investment_by_id(investment_id=investment_id)
        voter = _get_voter(voter_id)
        vote, created = _upsert_vote(investment=investment, voter=voter, approve=approve)
    except DatabaseError as e:
        raise VoteStorageError(f"Could not record vote on investment {investment_id}") from e

    logger.info(
        "%s vote %s by member %s on investment %s",
        'Recorded' if created else 'Updated',
        'yes' if approve else 'no',
        voter.id,
        investment.id,
    )

    try:
        evaluate_activation(investment_id=investment.id)
    except ActivationStorageError:
        logger.exception(
            "Vote %s recorded but activation check for investment %s failed",
            vote.id,
            investment.id,
        )

    return vote, created


def submit_vote(*, investment_id: UUID, voter_id: UUID, approve: bool) -> InvestmentVote:
    """
    Record a member's vote and return the persisted (created or updated) vote.

    See cast_vote for behavior and errors.
    """
    vote, _ = cast_vote(investment_id=investment_id, voter_id=voter_id, approve=approve)
    return vote


def get_votes(*, investment_id: UUID) -> QuerySet[InvestmentVote]:
    """
    Get all votes on an investment with voter details.

    Raises:
        InvestmentNotFoundError: If investment doesn't exist
    """
    investment = get_investment_by_id(investment_id=investment_id)

    return (
        InvestmentVote.objects
        .filter(investment=investment)
        .select_related('voter')
        .order_by('created_at')
    )


def get_vote_for_member(*, investment_id: UUID, voter_id: UUID) -> Optional[InvestmentVote]:
    """
    Get a member's vote on an investment.

    Returns:
        The vote, or None if the member has not voted yet

    Raises:
        InvestmentNotFoundError: If investment doesn't exist
    """
    investment = get_investment_by_id(investment_id=investment_id)

    return (
        InvestmentVote.objects
        .filter(investment=investment, voter_id=voter_id)
        .select_related('voter')
        .first()
    )
