"""
Stock validation for checkout carts.

Turns untrusted cart lines into validated line items with a price snapshot,
or a list of per-line rejection reasons. Read-only: the commit step re-checks
stock with a guarded decrement, so nothing here takes locks or writes.
"""

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, Iterable, List

from apps.catalog.services import ProductCatalog

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CartLine:
    """A caller-supplied cart line."""

    product_id: Any
    quantity: int


@dataclass(frozen=True)
class ValidatedLineItem:
    """A cart line that passed validation, with name and price snapshotted."""

    product_id: Any
    name: str
    quantity: int
    price: Decimal
    total: Decimal

    def as_record(self) -> Dict[str, Any]:
        """Serializable form stored on the transaction."""
        return {
            "product_id": self.product_id,
            "name": self.name,
            "quantity": self.quantity,
            "price": str(self.price),
            "total": str(self.total),
        }


@dataclass
class ValidationResult:
    """Outcome of validating a cart."""

    items: List[ValidatedLineItem] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @property
    def subtotal(self) -> Decimal:
        return sum((item.total for item in self.items), Decimal("0"))

    @property
    def is_valid(self) -> bool:
        # An empty cart is invalid even with no errors recorded
        return not self.errors and bool(self.items)


class StockValidator:
    """
    Checks existence, quantity and stock sufficiency for each cart line.
    """

    def __init__(self, catalog: ProductCatalog):
        self.catalog = catalog

    def validate(self, lines: Iterable[CartLine]) -> ValidationResult:
        """
        Validate cart lines against the current catalog state.

        Lines that fail are skipped and reported; the rest are returned as
        validated items in cart order.
        """
        result = ValidationResult()
        # Units already claimed by earlier lines for the same product
        claimed: Dict[Any, int] = {}

        for line in lines:
            product = self.catalog.get_product_by_id(line.product_id)

            if product is None:
                result.errors.append(f"Product with ID {line.product_id} not found")
                continue

            if line.quantity <= 0:
                result.errors.append(f"Invalid quantity for {product.name}: {line.quantity}")
                continue

            already_claimed = claimed.get(product.pk, 0)
            if not product.has_stock_for(already_claimed + line.quantity):
                result.errors.append(
                    f"Insufficient stock for {product.name}: "
                    f"requested {line.quantity}, available {product.stock - already_claimed}"
                )
                continue

            claimed[product.pk] = already_claimed + line.quantity

            price = product.price
            result.items.append(
                ValidatedLineItem(
                    product_id=product.pk,
                    name=product.name,
                    quantity=line.quantity,
                    price=price,
                    total=price * line.quantity,
                )
            )

        if result.errors:
            logger.debug(f"Cart validation rejected {len(result.errors)} line(s)")

        return result
