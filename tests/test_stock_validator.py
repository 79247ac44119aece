"""
Tests for cart stock validation.
"""

from decimal import Decimal

import pytest

from apps.catalog.services import ProductCatalog
from apps.sales.validation import CartLine, StockValidator, ValidatedLineItem


@pytest.fixture
def validator():
    return StockValidator(ProductCatalog())


@pytest.mark.django_db
class TestStockValidator:
    """Test StockValidator rejection reasons and price snapshots."""

    def test_valid_cart(self, validator, kopi_susu, croissant):
        result = validator.validate(
            [CartLine(kopi_susu.id, 2), CartLine(croissant.id, 1)]
        )

        assert result.is_valid
        assert result.errors == []
        assert result.items == [
            ValidatedLineItem(
                product_id=kopi_susu.id,
                name="Kopi Susu",
                quantity=2,
                price=Decimal("20000.00"),
                total=Decimal("40000.00"),
            ),
            ValidatedLineItem(
                product_id=croissant.id,
                name="Butter Croissant",
                quantity=1,
                price=Decimal("22000.00"),
                total=Decimal("22000.00"),
            ),
        ]
        assert result.subtotal == Decimal("62000.00")

    def test_missing_product(self, validator):
        result = validator.validate([CartLine(999, 1)])

        assert not result.is_valid
        assert result.errors == ["Product with ID 999 not found"]
        assert result.items == []

    def test_non_positive_quantity(self, validator, kopi_susu):
        result = validator.validate([CartLine(kopi_susu.id, 0), CartLine(kopi_susu.id, -2)])

        assert not result.is_valid
        assert result.errors == [
            "Invalid quantity for Kopi Susu: 0",
            "Invalid quantity for Kopi Susu: -2",
        ]

    def test_insufficient_stock(self, validator, kopi_susu):
        result = validator.validate([CartLine(kopi_susu.id, 10)])

        assert not result.is_valid
        assert result.errors == ["Insufficient stock for Kopi Susu: requested 10, available 5"]

    def test_one_bad_line_invalidates_cart(self, validator, kopi_susu, croissant):
        result = validator.validate([CartLine(kopi_susu.id, 10), CartLine(croissant.id, 1)])

        assert not result.is_valid
        assert len(result.errors) == 1
        # The good line is still reported as validated
        assert [item.product_id for item in result.items] == [croissant.id]

    def test_repeated_product_lines_share_stock(self, validator, kopi_susu):
        result = validator.validate([CartLine(kopi_susu.id, 3), CartLine(kopi_susu.id, 3)])

        assert not result.is_valid
        assert result.errors == ["Insufficient stock for Kopi Susu: requested 3, available 2"]

    def test_unlimited_stock_never_blocks(self, validator, mineral_water):
        result = validator.validate([CartLine(mineral_water.id, 10_000)])

        assert result.is_valid
        assert result.subtotal == Decimal("80000000.00")

    def test_empty_cart_is_invalid(self, validator):
        result = validator.validate([])

        assert not result.is_valid
        assert result.errors == []

    def test_validation_is_idempotent(self, validator, kopi_susu, croissant):
        lines = [CartLine(kopi_susu.id, 2), CartLine(croissant.id, 20), CartLine(404, 1)]

        first = validator.validate(lines)
        second = validator.validate(lines)

        assert first == second
        kopi_susu.refresh_from_db()
        croissant.refresh_from_db()
        assert kopi_susu.stock == 5
        assert croissant.stock == 10

    def test_price_snapshot_is_immutable(self, validator, kopi_susu):
        result = validator.validate([CartLine(kopi_susu.id, 1)])

        with pytest.raises(AttributeError):
            result.items[0].price = Decimal("1.00")

    def test_as_record(self, validator, kopi_susu):
        result = validator.validate([CartLine(kopi_susu.id, 2)])

        assert result.items[0].as_record() == {
            "product_id": kopi_susu.id,
            "name": "Kopi Susu",
            "quantity": 2,
            "price": "20000.00",
            "total": "40000.00",
        }
