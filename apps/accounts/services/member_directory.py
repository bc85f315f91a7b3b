"""
Member directory service.

The directory answers who the eligible members of the investment group are.
Only active accounts are eligible: they can vote and they count towards
the approval quorum of proposed investments.
"""

from uuid import UUID

from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db.models import QuerySet

from .exceptions import MemberNotFoundError

User = get_user_model()


def eligible_members() -> QuerySet:
    return User.objects.filter(is_active=True)


def count_eligible_members() -> int:
    """Return the number of members eligible to vote."""
    return eligible_members().count()


def list_members() -> QuerySet:
    """Return all eligible members ordered by name."""
    return eligible_members().order_by('first_name', 'last_name')


def get_member(*, member_id: UUID) -> User:
    """
    Get an eligible member by ID.

    Raises:
        MemberNotFoundError: If no active member has this ID
    """
    try:
        return eligible_members().get(id=member_id)
    except (User.DoesNotExist, DjangoValidationError):
        raise MemberNotFoundError(f"Member with ID {member_id} not found")
