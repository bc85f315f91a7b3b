# Generated manually for the ledger app

from decimal import Decimal
from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone
import uuid


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Transaction',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('amount', models.DecimalField(decimal_places=2, max_digits=12, validators=[MinValueValidator(Decimal('0.01'))])),
                ('type', models.CharField(choices=[('contribution', 'Contribution'), ('dividend', 'Dividend'), ('withdrawal', 'Withdrawal'), ('fee', 'Fee')], max_length=20)),
                ('date', models.DateTimeField(default=django.utils.timezone.now)),
                ('note', models.TextField(blank=True)),
                ('payment_method', models.CharField(blank=True, max_length=100)),
                ('member', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='transactions', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'transactions',
                'ordering': ['-date'],
                'indexes': [
                    models.Index(fields=['member', 'date'], name='transaction_member__3e8d1a_idx'),
                    models.Index(fields=['member', 'type'], name='transaction_member__9c4b7f_idx'),
                ],
            },
        ),
    ]
