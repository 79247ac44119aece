"""
Read-only catalog API.

Product edits happen through the Django admin; the POS only reads.
"""

from django.conf import settings

from rest_framework import generics

from .serializers import ProductSerializer
from .services import ProductCatalog


class ProductListView(generics.ListAPIView):
    """
    API endpoint for listing products.

    Query parameters:
    - category: Optional category filter
    """

    serializer_class = ProductSerializer

    def get_queryset(self):
        category = self.request.query_params.get("category")
        return ProductCatalog(using=settings.POS_DATABASE_ALIAS).list_products(category=category)


class ProductDetailView(generics.RetrieveAPIView):
    """API endpoint for a single product."""

    serializer_class = ProductSerializer
    lookup_field = "id"

    def get_queryset(self):
        return ProductCatalog(using=settings.POS_DATABASE_ALIAS).list_products()
