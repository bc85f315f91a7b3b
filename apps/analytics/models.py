from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator
from django.utils import timezone
import calendar
import uuid


class GroupPerformance(models.Model):
    """Point-in-time snapshot of the investment group's headline figures."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    total_members = models.PositiveIntegerField()
    total_assets = models.DecimalField(max_digits=16, decimal_places=2)
    active_investments = models.PositiveIntegerField()
    ytd_returns = models.DecimalField(max_digits=7, decimal_places=2)
    date = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'group_performance'
        indexes = [
            models.Index(fields=['date'], name='group_perfo_date_8b3c5e_idx'),
        ]
        ordering = ['-date']

    def __str__(self):
        return f"Group performance {self.date:%Y-%m-%d}"


class MonthlyPerformance(models.Model):
    """Group return for a calendar month, used for charts."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    year = models.PositiveIntegerField()
    month = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(12)]
    )
    return_percentage = models.DecimalField(max_digits=7, decimal_places=2)

    class Meta:
        db_table = 'monthly_performance'
        constraints = [
            models.UniqueConstraint(fields=['year', 'month'], name='unique_month_performance'),
        ]
        ordering = ['-year', '-month']

    def __str__(self):
        return f"{self.month_name} {self.year}: {self.return_percentage}%"

    @property
    def month_name(self):
        return calendar.month_abbr[self.month]
