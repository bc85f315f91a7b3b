"""
Analytics Module
=================

Read-only queries behind the member dashboard and the group performance
charts.

Classes:
    AnalyticsQueries: Static methods for dashboard and performance queries.

Example:
    Building the dashboard for the current member::

        from apps.analytics.analytics import AnalyticsQueries

        data = AnalyticsQueries.member_dashboard(request.user)
        print(f"Balance: {data['financials']['balance']}")

Note:
    This module doesn't modify any data. Snapshots are written by
    ``apps.analytics.services``.
"""

from apps.ledger.services import (
    get_member_balance,
    get_member_total_contributions,
    get_member_total_earnings,
    get_member_transactions,
)
from .exceptions import InvalidLimitError
from .models import GroupPerformance, MonthlyPerformance


RECENT_TRANSACTIONS = 5
DEFAULT_MONTHS = 6
MAX_MONTHS = 120


class AnalyticsQueries:
    """
    Queries for the dashboard and performance endpoints.

    Methods:
        latest_group_performance: Most recent group snapshot.
        monthly_performance: Most recent months of group returns.
        member_financials: Balance, contributions and earnings of a member.
        member_dashboard: Everything the dashboard page shows.
    """

    @staticmethod
    def latest_group_performance():
        """Return the most recent GroupPerformance snapshot, or None."""
        return GroupPerformance.objects.order_by('-date').first()

    @staticmethod
    def monthly_performance(limit=DEFAULT_MONTHS):
        """
        Return the most recent months, newest first.

        Months are ordered by calendar position (year, then month number),
        so December comes after November and not after August.

        Args:
            limit (int): Number of months to return, 1-120.

        Raises:
            InvalidLimitError: If limit is out of range.
        """
        if not isinstance(limit, int) or not 1 <= limit <= MAX_MONTHS:
            raise InvalidLimitError(f"Limit must be between 1 and {MAX_MONTHS}")

        return list(MonthlyPerformance.objects.order_by('-year', '-month')[:limit])

    @staticmethod
    def member_financials(member_id):
        """
        Aggregate a member's account figures.

        Returns:
            dict: balance, total_contributions and total_earnings (Decimal).
        """
        return {
            'balance': get_member_balance(member_id=member_id),
            'total_contributions': get_member_total_contributions(member_id=member_id),
            'total_earnings': get_member_total_earnings(member_id=member_id),
        }

    @staticmethod
    def member_dashboard(user):
        """
        Build the dashboard for a member.

        Returns:
            dict: A dictionary containing:
                - user: the member
                - financials: see member_financials
                - transactions: the 5 most recent transactions
                - group_performance: latest snapshot or None
                - monthly_performance: the last 6 months, newest first
        """
        return {
            'user': user,
            'financials': AnalyticsQueries.member_financials(user.id),
            'transactions': list(get_member_transactions(member_id=user.id, limit=RECENT_TRANSACTIONS)),
            'group_performance': AnalyticsQueries.latest_group_performance(),
            'monthly_performance': AnalyticsQueries.monthly_performance(DEFAULT_MONTHS),
        }
