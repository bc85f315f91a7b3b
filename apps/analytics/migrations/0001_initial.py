# Generated manually for the analytics app

from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import migrations, models
import django.utils.timezone
import uuid


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='GroupPerformance',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('total_members', models.PositiveIntegerField()),
                ('total_assets', models.DecimalField(decimal_places=2, max_digits=16)),
                ('active_investments', models.PositiveIntegerField()),
                ('ytd_returns', models.DecimalField(decimal_places=2, max_digits=7)),
                ('date', models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                'db_table': 'group_performance',
                'ordering': ['-date'],
                'indexes': [
                    models.Index(fields=['date'], name='group_perfo_date_8b3c5e_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='MonthlyPerformance',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('year', models.PositiveIntegerField()),
                ('month', models.PositiveSmallIntegerField(validators=[MinValueValidator(1), MaxValueValidator(12)])),
                ('return_percentage', models.DecimalField(decimal_places=2, max_digits=7)),
            ],
            options={
                'db_table': 'monthly_performance',
                'ordering': ['-year', '-month'],
                'constraints': [
                    models.UniqueConstraint(fields=('year', 'month'), name='unique_month_performance'),
                ],
            },
        ),
    ]
