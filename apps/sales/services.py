"""
Checkout transaction processing.

TransactionProcessor is the only code path that creates a Transaction or
touches product stock. It runs in three stages:

1. Validate the cart against the catalog (read-only, fails fast with a
   readable error).
2. Compute subtotal, tax, grand total and change, and reject short payments.
3. In one atomic block, insert the transaction record and apply a guarded
   decrement per product. Any decrement that misses rolls the whole block
   back, so a record never exists without its stock decrements or the
   reverse.
"""

import logging
import uuid
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Iterable, List, Optional

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import DatabaseError, transaction
from django.utils import timezone

from apps.catalog.services import ProductCatalog

from .exceptions import (
    CartValidationError,
    InsufficientPaymentError,
    PersistenceError,
    StockRaceError,
)
from .models import Transaction
from .tax import TaxCalculator
from .validation import CartLine, StockValidator, ValidationResult

logger = logging.getLogger(__name__)


class TransactionStore:
    """
    Append-only persistence for committed transactions.
    """

    def __init__(self, using: str = "default"):
        self.using = using

    def insert(self, record: Transaction) -> Transaction:
        """Insert a new transaction row. Must run inside the caller's atomic block."""
        record.save(using=self.using)
        return record

    def get(self, transaction_id) -> Optional[Transaction]:
        """Return the transaction with the given id, or None."""
        try:
            return Transaction.objects.using(self.using).get(pk=transaction_id)
        except (Transaction.DoesNotExist, ValidationError, ValueError):
            return None

    def all(self):
        """All transactions, newest first."""
        return Transaction.objects.using(self.using).order_by("-created_at")


@dataclass
class CheckoutQuote:
    """
    Totals for a cart without committing anything.

    change_amount may be negative here; process_transaction never lets a
    negative change reach the database.
    """

    validation: ValidationResult
    subtotal: Decimal
    tax_amount: Decimal
    grand_total: Decimal
    amount_received: Decimal
    change_amount: Decimal

    @property
    def is_payable(self) -> bool:
        return self.validation.is_valid and self.amount_received >= self.grand_total


class TransactionProcessor:
    """
    Orchestrates validation, totals and the atomic commit for a checkout.
    """

    def __init__(
        self,
        catalog: ProductCatalog,
        store: TransactionStore,
        tax_calculator: TaxCalculator,
        using: str = "default",
    ):
        self.catalog = catalog
        self.store = store
        self.tax_calculator = tax_calculator
        self.validator = StockValidator(catalog)
        self.using = using

    @classmethod
    def from_settings(cls) -> "TransactionProcessor":
        """Build a processor from the POS_* settings."""
        using = settings.POS_DATABASE_ALIAS
        return cls(
            catalog=ProductCatalog(using=using),
            store=TransactionStore(using=using),
            tax_calculator=TaxCalculator(
                settings.POS_TAX_RATE,
                decimal_places=settings.POS_CURRENCY_DECIMAL_PLACES,
            ),
            using=using,
        )

    def validate(self, lines: Iterable[CartLine]) -> ValidationResult:
        """Run stock validation only."""
        return self.validator.validate(lines)

    def quote(self, lines: Iterable[CartLine], amount_received=Decimal("0")) -> CheckoutQuote:
        """
        Validate a cart and compute its totals without writing anything.
        """
        validation = self.validator.validate(lines)
        return self._quote(validation, amount_received)

    def _quote(self, validation: ValidationResult, amount_received) -> CheckoutQuote:
        amount_received = Decimal(str(amount_received))
        if not amount_received.is_finite():
            raise InvalidOperation(f"Non-finite amount: {amount_received}")
        subtotal = validation.subtotal
        tax_amount = self.tax_calculator.tax(subtotal)
        grand_total = self.tax_calculator.round(subtotal + tax_amount)
        change_amount = self.tax_calculator.change(grand_total, amount_received)
        return CheckoutQuote(
            validation=validation,
            subtotal=subtotal,
            tax_amount=tax_amount,
            grand_total=grand_total,
            amount_received=amount_received,
            change_amount=change_amount,
        )

    def process_transaction(self, lines: Iterable[CartLine], amount_received) -> Transaction:
        """
        Check out a cart paid in cash.

        Returns the committed Transaction.

        Raises:
            CartValidationError: a line references a missing product, has a
                non-positive quantity or exceeds stock.
            InsufficientPaymentError: amount_received is below the grand total.
            StockRaceError: stock was taken by a concurrent checkout between
                validation and commit.
            PersistenceError: the commit failed; nothing was recorded.
        """
        lines = list(lines)

        try:
            validation = self.validator.validate(lines)
        except DatabaseError as e:
            logger.error(f"Checkout aborted: catalog read failed: {e}", exc_info=True)
            raise PersistenceError("Failed to read the catalog; nothing was saved") from e

        if not validation.is_valid:
            logger.warning(f"Checkout rejected: {'; '.join(validation.errors) or 'empty cart'}")
            raise CartValidationError(validation.errors)

        try:
            quote = self._quote(validation, amount_received)
        except InvalidOperation as e:
            raise PersistenceError(f"Invalid monetary amount: {amount_received}") from e

        if quote.amount_received < quote.grand_total:
            logger.warning(
                f"Checkout rejected: received {quote.amount_received}, "
                f"required {quote.grand_total}"
            )
            raise InsufficientPaymentError(quote.amount_received, quote.grand_total)

        self._check_precision(quote)

        record = Transaction(
            id=uuid.uuid4(),
            created_at=timezone.now(),
            subtotal=quote.subtotal,
            tax_amount=quote.tax_amount,
            grand_total=quote.grand_total,
            amount_received=quote.amount_received,
            change_amount=quote.change_amount,
            items=[item.as_record() for item in validation.items],
        )

        try:
            with transaction.atomic(using=self.using):
                self.store.insert(record)
                self._decrement_stock(validation)
        except StockRaceError as e:
            logger.warning(f"Checkout lost a stock race and was rolled back: {e}")
            raise
        except (DatabaseError, InvalidOperation) as e:
            logger.error(f"Checkout commit failed and was rolled back: {e}", exc_info=True)
            raise PersistenceError("Failed to record transaction; nothing was saved") from e

        logger.info(
            f"Transaction {record.id} committed: {len(validation.items)} line(s), "
            f"grand total {record.grand_total}"
        )
        return record

    def _decrement_stock(self, validation: ValidationResult):
        """
        Apply one guarded decrement per product.

        Quantities for repeated products are merged, and products are
        updated in id order so concurrent checkouts lock rows in the same
        order.
        """
        demand = {}
        names = {}
        for item in validation.items:
            demand[item.product_id] = demand.get(item.product_id, 0) + item.quantity
            names[item.product_id] = item.name

        for product_id in sorted(demand):
            quantity = demand[product_id]
            if self.catalog.decrement_if_sufficient(product_id, quantity):
                continue

            product = self.catalog.get_product_by_id(product_id)
            available = product.stock if product is not None else 0
            raise StockRaceError(
                [
                    f"Insufficient stock for {names[product_id]}: "
                    f"requested {quantity}, available {available}"
                ],
                message=(
                    f"Stock for {names[product_id]} changed during checkout: "
                    f"requested {quantity}, available {available}. Please resubmit."
                ),
            )

    def _check_precision(self, quote: CheckoutQuote):
        """
        Refuse amounts that would be truncated by the currency precision.
        """
        amounts: List[Decimal] = [
            quote.subtotal,
            quote.tax_amount,
            quote.grand_total,
            quote.amount_received,
            quote.change_amount,
        ]
        for item in quote.validation.items:
            amounts.extend([item.price, item.total])

        for amount in amounts:
            if not self.tax_calculator.fits_precision(amount):
                logger.error(f"Refusing to store {amount}: exceeds currency precision")
                raise PersistenceError(
                    f"Amount {amount} exceeds currency precision of "
                    f"{self.tax_calculator.decimal_places} decimal places"
                )
