from django.urls import path

from apps.ledger.views import member_contributions
from . import views

app_name = 'members'

urlpatterns = [
    # GET /api/members/                          - List active members
    # GET /api/members/{id}/contributions/?year= - Member contribution history
    path('', views.members, name='member-list'),
    path('<uuid:member_id>/contributions/', member_contributions, name='member-contributions'),
]
