from decimal import Decimal

from rest_framework import serializers

from apps.accounts.serializers import UserMinimalSerializer
from .models import Investment, InvestmentVote


class InvestmentSerializer(serializers.ModelSerializer):
    """Main serializer for investments."""

    proposed_by = UserMinimalSerializer(read_only=True)
    status = serializers.CharField(read_only=True)

    class Meta:
        model = Investment
        fields = [
            'id',
            'name',
            'description',
            'total_amount',
            'return_rate',
            'start_date',
            'end_date',
            'active',
            'status',
            'activated_at',
            'proposed_by',
            'created_at',
        ]
        read_only_fields = fields


class InvestmentCreateSerializer(serializers.Serializer):
    """Input for proposing an investment. The active flag is not accepted."""

    name = serializers.CharField(max_length=200)
    description = serializers.CharField(required=False, allow_blank=True, default='')
    total_amount = serializers.DecimalField(
        max_digits=14,
        decimal_places=2,
        min_value=Decimal('0.01')
    )
    return_rate = serializers.DecimalField(
        max_digits=5,
        decimal_places=2,
        min_value=Decimal('0'),
        max_value=Decimal('100')
    )
    start_date = serializers.DateField()
    end_date = serializers.DateField(required=False, allow_null=True, default=None)

    def validate(self, attrs):
        end_date = attrs.get('end_date')
        if end_date is not None and end_date < attrs['start_date']:
            raise serializers.ValidationError({
                'end_date': 'End date cannot be before start date'
            })
        return attrs


class InvestmentListQuerySerializer(serializers.Serializer):
    """Query parameters for listing investments."""

    active = serializers.BooleanField(required=False, allow_null=True, default=None)


class VoteSerializer(serializers.ModelSerializer):
    """A vote with the voter's display info."""

    investment = serializers.UUIDField(source='investment_id', read_only=True)
    voter = UserMinimalSerializer(read_only=True)

    class Meta:
        model = InvestmentVote
        fields = ['id', 'investment', 'voter', 'approve', 'created_at', 'updated_at']
        read_only_fields = fields


class SubmitVoteSerializer(serializers.Serializer):
    """Vote payload. Only real booleans are accepted."""

    approve = serializers.JSONField()

    def validate_approve(self, value):
        if not isinstance(value, bool):
            raise serializers.ValidationError('Must be true or false.')
        return value


class VoteSummarySerializer(serializers.Serializer):
    investment_id = serializers.UUIDField()
    eligible_members = serializers.IntegerField()
    required_approvals = serializers.IntegerField()
    yes_votes = serializers.IntegerField()
    no_votes = serializers.IntegerField()
    votes_cast = serializers.IntegerField()
    active = serializers.BooleanField()


class ActivationResultSerializer(serializers.Serializer):
    activated = serializers.BooleanField()
    investment = InvestmentSerializer()
