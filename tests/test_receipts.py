"""
Tests for PDF receipt generation.
"""

from decimal import Decimal

from django.test import override_settings

import pytest

from apps.sales.receipt_service import ReceiptGenerator, ReceiptService
from apps.sales.validation import CartLine


@pytest.fixture
def committed(processor, kopi_susu, croissant):
    return processor.process_transaction(
        [CartLine(kopi_susu.id, 2), CartLine(croissant.id, 1)], Decimal("100000")
    )


@pytest.mark.django_db
class TestReceiptGenerator:
    """Test the ReceiptGenerator class."""

    def test_generate_pdf_receipt_standard(self, committed):
        pdf_bytes = ReceiptGenerator(committed).generate_pdf_receipt("standard")

        assert isinstance(pdf_bytes, bytes)
        assert pdf_bytes.startswith(b"%PDF")

    def test_generate_pdf_receipt_thermal(self, committed):
        pdf_bytes = ReceiptGenerator(committed).generate_pdf_receipt("thermal")

        assert pdf_bytes.startswith(b"%PDF")

    def test_unknown_format(self, committed):
        with pytest.raises(ValueError):
            ReceiptGenerator(committed).generate_pdf_receipt("html")

    def test_money_format(self, committed):
        generator = ReceiptGenerator(committed)

        assert generator.money(Decimal("44400")) == "44,400.00"
        assert generator.money("-12.5") == "-12.50"

    @override_settings(POS_CURRENCY_DECIMAL_PLACES=0)
    def test_money_format_without_minor_unit(self, committed):
        assert ReceiptGenerator(committed).money(Decimal("44400.00")) == "44,400"

    @override_settings(
        POS_STORE_NAME="Cafe <Test> & Co", POS_STORE_ADDRESS="Jl. Merdeka 1\nJakarta"
    )
    def test_markup_in_store_details(self, committed):
        pdf_bytes = ReceiptService.generate_receipt(committed, format_type="standard")

        assert pdf_bytes.startswith(b"%PDF")
