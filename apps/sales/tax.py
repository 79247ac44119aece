"""
Tax and change arithmetic.

All amounts are Decimals rounded half-up to the currency's minor unit.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation


class TaxCalculator:
    """
    Computes tax on a subtotal and change on a payment.

    The rate is fixed at construction so a running process cannot see it
    change between transactions.
    """

    def __init__(self, rate, decimal_places: int = 2):
        self.rate = Decimal(str(rate))
        self.decimal_places = decimal_places
        self.quantum = Decimal(1).scaleb(-decimal_places)

    def round(self, amount) -> Decimal:
        """Round half-up to the smallest currency unit."""
        return Decimal(amount).quantize(self.quantum, rounding=ROUND_HALF_UP)

    def tax(self, subtotal: Decimal) -> Decimal:
        """Tax owed on ``subtotal``."""
        return self.round(subtotal * self.rate)

    def change(self, grand_total: Decimal, amount_received: Decimal) -> Decimal:
        """
        Change owed for a payment.

        Negative when the payment is short; only previews may show that.
        """
        return self.round(amount_received - grand_total)

    def fits_precision(self, amount: Decimal) -> bool:
        """True when ``amount`` has no digits below the smallest currency unit."""
        try:
            return amount == amount.quantize(self.quantum)
        except InvalidOperation:
            return False
