# Generated manually for the investments app

from decimal import Decimal
from django.conf import settings
from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import migrations, models
import django.db.models.deletion
import uuid


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Investment',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=200)),
                ('description', models.TextField(blank=True)),
                ('total_amount', models.DecimalField(decimal_places=2, max_digits=14, validators=[MinValueValidator(Decimal('0.01'))])),
                ('return_rate', models.DecimalField(decimal_places=2, max_digits=5, validators=[MinValueValidator(Decimal('0')), MaxValueValidator(Decimal('100'))])),
                ('start_date', models.DateField()),
                ('end_date', models.DateField(blank=True, null=True)),
                ('active', models.BooleanField(default=False)),
                ('activated_at', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('proposed_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='proposed_investments', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'investments',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['active', 'created_at'], name='investments_active_4d2e9b_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='InvestmentVote',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('approve', models.BooleanField()),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('investment', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='votes', to='investments.investment')),
                ('voter', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='investment_votes', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'investment_votes',
                'ordering': ['created_at'],
                'indexes': [
                    models.Index(fields=['investment', 'approve'], name='investment__investm_7a1f0c_idx'),
                ],
                'constraints': [
                    models.UniqueConstraint(fields=('investment', 'voter'), name='unique_vote_per_member'),
                ],
            },
        ),
    ]
