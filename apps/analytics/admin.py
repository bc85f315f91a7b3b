# ==========================================
# apps/analytics/admin.py
# ==========================================

from django.contrib import admin
from apps.analytics.models import GroupPerformance, MonthlyPerformance


@admin.register(GroupPerformance)
class GroupPerformanceAdmin(admin.ModelAdmin):
    list_display = ['date', 'total_members', 'total_assets', 'active_investments', 'ytd_returns']
    date_hierarchy = 'date'
    ordering = ['-date']


@admin.register(MonthlyPerformance)
class MonthlyPerformanceAdmin(admin.ModelAdmin):
    list_display = ['year', 'month', 'return_percentage']
    list_filter = ['year']
    ordering = ['-year', '-month']
