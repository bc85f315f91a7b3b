from django.urls import path
from . import views

app_name = 'ledger'

urlpatterns = [
    # GET  /api/transactions/ - List own transactions
    # POST /api/transactions/ - Record own transaction
    path('', views.transactions, name='transaction-list'),
]
