from django.urls import path
from . import views

app_name = 'analytics'

urlpatterns = [
    # Dashboard
    path('dashboard/', views.dashboard, name='dashboard'),

    # Group performance
    path('group-performance/', views.group_performance, name='group-performance'),
    path('monthly-performance/', views.monthly_performance, name='monthly-performance'),
]
