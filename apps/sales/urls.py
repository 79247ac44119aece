"""
URL configuration for sales app.
"""

from django.urls import path

from . import views

app_name = "sales"

urlpatterns = [
    path(
        "api/transactions/", views.transaction_list_create, name="transaction_list_create"
    ),
    path("api/transactions/preview/", views.transaction_preview, name="transaction_preview"),
    path(
        "api/transactions/<uuid:transaction_id>/",
        views.TransactionDetailView.as_view(),
        name="transaction_detail",
    ),
    path(
        "api/transactions/<uuid:transaction_id>/receipt/",
        views.transaction_receipt,
        name="transaction_receipt",
    ),
]
