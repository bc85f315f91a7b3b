"""
Serializers for analytics app.

Input Serializers:
    MonthlyPerformanceQuerySerializer - Validates the series limit

Response Serializers:
    GroupPerformanceSerializer - Group performance snapshot
    MonthlyPerformanceSerializer - One month of group returns
    DashboardResponseSerializer - Member dashboard
"""

from rest_framework import serializers

from apps.ledger.serializers import TransactionSerializer
from .models import GroupPerformance, MonthlyPerformance


# =============================================================================
# Input Serializers (Query Parameter Validation)
# =============================================================================

class MonthlyPerformanceQuerySerializer(serializers.Serializer):
    """Validate the ?limit= parameter of the monthly performance series."""

    limit = serializers.IntegerField(
        required=False,
        min_value=1,
        max_value=120,
        default=6,
        help_text='Number of months to return'
    )


# =============================================================================
# Response Serializers
# =============================================================================

class GroupPerformanceSerializer(serializers.ModelSerializer):

    class Meta:
        model = GroupPerformance
        fields = [
            'id',
            'total_members',
            'total_assets',
            'active_investments',
            'ytd_returns',
            'date',
        ]
        read_only_fields = fields


class MonthlyPerformanceSerializer(serializers.ModelSerializer):

    month_name = serializers.CharField(read_only=True)

    class Meta:
        model = MonthlyPerformance
        fields = ['id', 'year', 'month', 'month_name', 'return_percentage']
        read_only_fields = fields


class DashboardUserSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    first_name = serializers.CharField()
    last_name = serializers.CharField()
    last_login = serializers.DateTimeField(allow_null=True)


class FinancialsSerializer(serializers.Serializer):
    balance = serializers.DecimalField(max_digits=16, decimal_places=2)
    total_contributions = serializers.DecimalField(max_digits=16, decimal_places=2)
    total_earnings = serializers.DecimalField(max_digits=16, decimal_places=2)


class DashboardResponseSerializer(serializers.Serializer):
    """Member dashboard: account figures, recent activity and group results."""

    user = DashboardUserSerializer()
    financials = FinancialsSerializer()
    transactions = TransactionSerializer(many=True)
    group_performance = GroupPerformanceSerializer(allow_null=True)
    monthly_performance = MonthlyPerformanceSerializer(many=True)


class ErrorSerializer(serializers.Serializer):
    error = serializers.CharField()
