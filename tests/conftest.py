"""
Pytest configuration and fixtures for the cafe POS backend.
"""

from decimal import Decimal

import pytest

from apps.catalog.models import Product
from apps.catalog.services import ProductCatalog
from apps.sales.services import TransactionProcessor, TransactionStore
from apps.sales.tax import TaxCalculator


@pytest.fixture
def api_client():
    """
    Fixture for Django REST framework API client.
    """
    from rest_framework.test import APIClient

    return APIClient()


@pytest.fixture
def authenticated_client(api_client, django_user_model):
    """
    Fixture for an API client with a logged-in session.
    """
    user = django_user_model.objects.create_user(
        username="cashier", email="cashier@example.com", password="testpass123"
    )
    api_client.force_login(user)
    return api_client, user


@pytest.fixture
def processor():
    """Transaction processor with an 11% tax rate on the default database."""
    return TransactionProcessor(
        catalog=ProductCatalog(),
        store=TransactionStore(),
        tax_calculator=TaxCalculator(Decimal("0.11"), decimal_places=2),
    )


@pytest.fixture
def kopi_susu(db):
    """Product priced 20000 with 5 units in stock."""
    return Product.objects.create(
        name="Kopi Susu", category="Coffee", price=Decimal("20000.00"), stock=5
    )


@pytest.fixture
def croissant(db):
    """Product priced 22000 with 10 units in stock."""
    return Product.objects.create(
        name="Butter Croissant", category="Pastry", price=Decimal("22000.00"), stock=10
    )


@pytest.fixture
def mineral_water(db):
    """Product with unlimited stock."""
    return Product.objects.create(
        name="Mineral Water", category="Drinks", price=Decimal("8000.00"), stock=None
    )
