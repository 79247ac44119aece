"""
Sales models for the cafe POS.

A Transaction is the durable record of one completed checkout. It is written
once, in the same atomic unit as the stock decrements, and never updated.
"""

import uuid
from decimal import Decimal

from django.core.serializers.json import DjangoJSONEncoder
from django.core.validators import MinValueValidator
from django.db import models


class Transaction(models.Model):
    """
    Completed checkout.

    Invariants for every row:
    - grand_total == subtotal + tax_amount
    - change_amount == amount_received - grand_total
    - amount_received >= grand_total

    Line items are an embedded snapshot (product id, name, quantity, unit
    price, line total). They are never re-derived from the catalog, so old
    receipts stay accurate after menu changes.
    """

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for the transaction",
    )

    created_at = models.DateTimeField(
        db_index=True,
        help_text="When the transaction was committed",
    )

    # Financial details
    subtotal = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
        help_text="Sum of line totals before tax",
    )

    tax_amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
        help_text="Tax on the subtotal",
    )

    grand_total = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
        help_text="Subtotal plus tax",
    )

    amount_received = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
        help_text="Cash tendered",
    )

    change_amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
        help_text="Amount received minus grand total",
    )

    items = models.JSONField(
        encoder=DjangoJSONEncoder,
        help_text="Snapshot of the sold line items",
    )

    class Meta:
        db_table = "transactions"
        ordering = ["-created_at"]
        verbose_name = "Transaction"
        verbose_name_plural = "Transactions"

    def __str__(self):
        return f"{self.id} - {self.grand_total}"

    def save(self, *args, **kwargs):
        """
        Insert only. Transactions are append-only once committed.
        """
        if not self._state.adding:
            raise ValueError("Committed transactions cannot be modified")
        kwargs["force_insert"] = True
        super().save(*args, **kwargs)

    @property
    def item_count(self):
        """Total units sold in this transaction."""
        return sum(item["quantity"] for item in self.items)
