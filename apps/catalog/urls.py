"""
URL configuration for catalog app.
"""

from django.urls import path

from . import views

app_name = "catalog"

urlpatterns = [
    path("api/products/", views.ProductListView.as_view(), name="product_list"),
    path("api/products/<int:id>/", views.ProductDetailView.as_view(), name="product_detail"),
]
