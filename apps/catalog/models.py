"""
Catalog models for the cafe POS.

A product carries its current unit price and stock counter. Stock is either a
non-negative integer or NULL, which means the product is never sold out
(made-to-order drinks, for example).
"""

from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models


class Product(models.Model):
    """
    A sellable menu item.

    The stock counter is the only shared mutable state touched by checkout.
    It is decremented exclusively through ProductCatalog.decrement_if_sufficient,
    which never lets a numeric counter drop below zero.
    """

    name = models.CharField(
        max_length=255,
        help_text="Product name shown on the menu and printed on receipts",
    )

    category = models.CharField(
        max_length=100,
        db_index=True,
        help_text="Menu category (e.g., 'Coffee', 'Tea', 'Pastry', 'Food')",
    )

    description = models.TextField(
        blank=True,
        help_text="Optional menu description",
    )

    price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
        help_text="Current unit price",
    )

    stock = models.PositiveIntegerField(
        null=True,
        blank=True,
        default=0,
        help_text="Units in stock. Leave empty for unlimited stock.",
    )

    # Timestamps
    created_at = models.DateTimeField(
        auto_now_add=True,
        help_text="When the product was created",
    )

    updated_at = models.DateTimeField(
        auto_now=True,
        help_text="When the product was last updated",
    )

    class Meta:
        db_table = "products"
        ordering = ["category", "name"]
        verbose_name = "Product"
        verbose_name_plural = "Products"

    def __str__(self):
        return f"{self.name} ({self.category})"

    @property
    def has_unlimited_stock(self):
        """True when the product is never sold out."""
        return self.stock is None

    def has_stock_for(self, quantity):
        """Check whether the current stock covers the requested quantity."""
        return self.has_unlimited_stock or self.stock >= quantity
