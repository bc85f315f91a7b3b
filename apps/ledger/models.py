from django.db import models
from django.core.validators import MinValueValidator
from django.utils import timezone
from decimal import Decimal
import uuid


class TransactionType(models.TextChoices):
    CONTRIBUTION = 'contribution', 'Contribution'
    DIVIDEND = 'dividend', 'Dividend'
    WITHDRAWAL = 'withdrawal', 'Withdrawal'
    FEE = 'fee', 'Fee'


# Types that increase a member's balance; the rest decrease it
CREDIT_TYPES = (TransactionType.CONTRIBUTION, TransactionType.DIVIDEND)
DEBIT_TYPES = (TransactionType.WITHDRAWAL, TransactionType.FEE)


class Transaction(models.Model):
    """Money movement on a member's account."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    member = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='transactions'
    )
    amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    type = models.CharField(max_length=20, choices=TransactionType.choices)
    date = models.DateTimeField(default=timezone.now)
    note = models.TextField(blank=True)
    payment_method = models.CharField(max_length=100, blank=True)

    class Meta:
        db_table = 'transactions'
        indexes = [
            models.Index(fields=['member', 'date'], name='transaction_member__3e8d1a_idx'),
            models.Index(fields=['member', 'type'], name='transaction_member__9c4b7f_idx'),
        ]
        ordering = ['-date']

    def __str__(self):
        return f"{self.get_type_display()} {self.amount} ({self.member})"

    @property
    def signed_amount(self):
        """Amount as it affects the member's balance."""
        return self.amount if self.type in CREDIT_TYPES else -self.amount
