from decimal import Decimal

from rest_framework import serializers

from .models import Transaction, TransactionType


class TransactionSerializer(serializers.ModelSerializer):
    """Read serializer for member transactions."""

    member = serializers.UUIDField(source='member_id', read_only=True)

    class Meta:
        model = Transaction
        fields = ['id', 'member', 'amount', 'type', 'date', 'note', 'payment_method']
        read_only_fields = fields


class TransactionCreateSerializer(serializers.Serializer):
    """Input for recording a transaction on the current member's account."""

    amount = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        min_value=Decimal('0.01')
    )
    type = serializers.ChoiceField(
        choices=TransactionType.choices,
        default=TransactionType.CONTRIBUTION
    )
    note = serializers.CharField(required=False, allow_blank=True, default='')
    payment_method = serializers.CharField(
        required=False,
        allow_blank=True,
        max_length=100,
        default=''
    )


class ContributionHistoryQuerySerializer(serializers.Serializer):
    """Query parameters for contribution history."""

    year = serializers.IntegerField(required=False, min_value=1900, max_value=9999)


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()
