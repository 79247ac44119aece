"""
Checkout error taxonomy.

Every failure leaving TransactionProcessor is one of these. Each class
carries the HTTP status and machine-readable code the API responds with.
"""

from decimal import Decimal
from typing import List, Optional


class TransactionError(Exception):
    """Base class for checkout failures."""

    status_code = 400
    code = "transaction_error"


class CartValidationError(TransactionError):
    """Raised when one or more cart lines fail stock validation."""

    code = "validation_error"

    def __init__(self, errors: List[str], message: Optional[str] = None):
        self.errors = list(errors)
        super().__init__(message or "; ".join(self.errors) or "Cart has no valid items")


class StockRaceError(CartValidationError):
    """
    Raised when stock fell below a validated quantity before the commit.

    The cart was valid when checked; another checkout won the stock. The
    caller should resubmit.
    """

    status_code = 409
    code = "stock_race"


class InsufficientPaymentError(TransactionError):
    """Raised when the cash received does not cover the grand total."""

    code = "insufficient_payment"

    def __init__(self, amount_received: Decimal, grand_total: Decimal):
        self.amount_received = amount_received
        self.grand_total = grand_total
        super().__init__(
            f"Insufficient payment: received {amount_received}, required {grand_total}"
        )


class PersistenceError(TransactionError):
    """
    Raised when the atomic commit fails for infrastructure reasons.

    Nothing was recorded and no stock was decremented; retrying is safe.
    """

    status_code = 500
    code = "persistence_error"
