# ==========================================
# apps/ledger/admin.py
# ==========================================

from django.contrib import admin
from apps.ledger.models import Transaction


@admin.register(Transaction)
class TransactionAdmin(admin.ModelAdmin):
    """Admin interface for member transactions."""

    list_display = ['member', 'type', 'amount', 'payment_method', 'date']
    list_filter = ['type', 'date']
    search_fields = ['member__username', 'member__email', 'note', 'payment_method']
    date_hierarchy = 'date'
    ordering = ['-date']
    raw_id_fields = ['member']
