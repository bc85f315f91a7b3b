from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'investments'

# Registered at the empty prefix, so no API root view
router = SimpleRouter()
router.register(r'', views.InvestmentViewSet, basename='investment')

urlpatterns = [
    # Investment ViewSet routes
    # GET    /api/investments/                 - List investments (?active=true|false)
    # POST   /api/investments/                 - Propose investment
    # GET    /api/investments/{id}/            - Investment details

    # Voting actions
    # POST   /api/investments/{id}/vote/       - Submit or change own vote
    # GET    /api/investments/{id}/votes/      - All votes with voter names
    # GET    /api/investments/{id}/my-vote/    - Own vote or null
    # GET    /api/investments/{id}/summary/    - Approval standing
    # POST   /api/investments/{id}/evaluate/   - Re-run activation check (staff)

    path('', include(router.urls)),
]
