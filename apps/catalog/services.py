"""
Catalog services used by checkout.

ProductCatalog is the read/decrement surface the sales app talks to. It is
bound to one database alias so it can take part in the caller's atomic block.
"""

import logging
from typing import Optional

from django.db.models import F, Q

from .models import Product

logger = logging.getLogger(__name__)


class ProductCatalog:
    """
    Product lookups and the guarded stock decrement.
    """

    def __init__(self, using: str = "default"):
        self.using = using

    def _products(self):
        return Product.objects.using(self.using)

    def get_product_by_id(self, product_id) -> Optional[Product]:
        """Return the product with the given id, or None."""
        try:
            return self._products().get(pk=product_id)
        except (Product.DoesNotExist, ValueError, TypeError):
            return None

    def list_products(self, category: Optional[str] = None):
        """Return all products, optionally restricted to one category."""
        queryset = self._products().all()
        if category:
            queryset = queryset.filter(category=category)
        return queryset

    def decrement_if_sufficient(self, product_id, amount: int) -> int:
        """
        Decrement stock by ``amount`` only if enough remains.

        Issues a single conditional UPDATE:
            stock = stock - amount WHERE id = ? AND (stock IS NULL OR stock >= amount)

        Unlimited (NULL) stock matches and stays NULL. Returns the number of
        rows affected; 0 means the product is gone or short on stock.
        """
        if amount <= 0:
            raise ValueError(f"Decrement amount must be positive, got {amount}")

        rows = (
            self._products()
            .filter(pk=product_id)
            .filter(Q(stock__isnull=True) | Q(stock__gte=amount))
            .update(stock=F("stock") - amount)
        )
        if not rows:
            logger.debug(f"Guarded decrement of {amount} missed product {product_id}")
        return rows
