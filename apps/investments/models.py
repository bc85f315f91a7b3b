# ==========================================
# apps/investments/models.py
# ==========================================

from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator
from decimal import Decimal
import uuid


class InvestmentStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    ACTIVE = 'active', 'Active'


class Investment(models.Model):
    """
    Group investment proposal.

    Created pending; activated once enough members approve it.
    Activation is one-way: nothing sets `active` back to False.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    total_amount = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    return_rate = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0')), MaxValueValidator(Decimal('100'))]
    )
    start_date = models.DateField()
    end_date = models.DateField(null=True, blank=True)

    active = models.BooleanField(default=False)
    activated_at = models.DateTimeField(null=True, blank=True)

    proposed_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='proposed_investments'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'investments'
        indexes = [
            models.Index(fields=['active', 'created_at'], name='investments_active_4d2e9b_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return self.name

    @property
    def status(self):
        return InvestmentStatus.ACTIVE if self.active else InvestmentStatus.PENDING


class InvestmentVote(models.Model):
    """A member's approval decision on an investment proposal."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    investment = models.ForeignKey(
        Investment,
        on_delete=models.CASCADE,
        related_name='votes'
    )
    voter = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='investment_votes'
    )
    approve = models.BooleanField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'investment_votes'
        constraints = [
            models.UniqueConstraint(
                fields=['investment', 'voter'],
                name='unique_vote_per_member',
            ),
        ]
        indexes = [
            models.Index(fields=['investment', 'approve'], name='investment__investm_7a1f0c_idx'),
        ]
        ordering = ['created_at']

    def __str__(self):
        decision = 'yes' if self.approve else 'no'
        return f"{self.voter.get_display_name()} voted {decision} on {self.investment.name}"
