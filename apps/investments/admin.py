# ==========================================
# apps/investments/admin.py
# ==========================================

from django.contrib import admin
from apps.investments.models import Investment, InvestmentVote
from apps.investments.services import evaluate_activation, StorageError


class InvestmentVoteInline(admin.TabularInline):
    """Inline admin for votes. Votes are cast through the API only."""
    model = InvestmentVote
    extra = 0
    fields = ['voter', 'approve', 'created_at', 'updated_at']
    readonly_fields = ['voter', 'approve', 'created_at', 'updated_at']
    can_delete = False

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Investment)
class InvestmentAdmin(admin.ModelAdmin):
    """Admin interface for investments."""

    list_display = [
        'name',
        'total_amount',
        'return_rate',
        'start_date',
        'active',
        'yes_votes',
        'proposed_by',
        'created_at',
    ]
    list_filter = ['active', 'start_date', 'created_at']
    search_fields = ['name', 'description', 'proposed_by__username']
    readonly_fields = ['active', 'activated_at', 'created_at', 'updated_at']
    inlines = [InvestmentVoteInline]
    date_hierarchy = 'created_at'
    ordering = ['-created_at']

    fieldsets = (
        ('Basic Information', {
            'fields': ('name', 'description', 'proposed_by')
        }),
        ('Terms', {
            'fields': ('total_amount', 'return_rate', 'start_date', 'end_date')
        }),
        ('Status', {
            'fields': ('active', 'activated_at')
        }),
        ('Metadata', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def yes_votes(self, obj):
        return obj.votes.filter(approve=True).count()
    yes_votes.short_description = 'Approvals'

    actions = ['re_evaluate_activation']

    @admin.action(description='Re-evaluate activation of selected investments')
    def re_evaluate_activation(self, request, queryset):
        activated = 0
        for investment in queryset.filter(active=False):
            try:
                if evaluate_activation(investment_id=investment.id):
                    activated += 1
            except StorageError as e:
                self.message_user(request, str(e), level='error')
        self.message_user(request, f"Activated {activated} investment(s)")


@admin.register(InvestmentVote)
class InvestmentVoteAdmin(admin.ModelAdmin):
    """Read-only view of member votes."""

    list_display = ['investment', 'voter', 'approve', 'created_at', 'updated_at']
    list_filter = ['approve', 'created_at']
    search_fields = ['investment__name', 'voter__username']
    readonly_fields = ['investment', 'voter', 'approve', 'created_at', 'updated_at']
