"""
Tests for the checkout HTTP API.
"""

import json
import uuid
from decimal import Decimal

from django.urls import reverse

import pytest

from apps.sales.models import Transaction
from apps.sales.validation import CartLine


def post_json(client, url, payload):
    return client.post(url, json.dumps(payload), content_type="application/json")


@pytest.mark.django_db
class TestCreateTransaction:
    """Test POST /api/transactions/."""

    @property
    def url(self):
        return reverse("sales:transaction_list_create")

    def test_checkout(self, authenticated_client, kopi_susu):
        client, _ = authenticated_client

        response = post_json(
            client,
            self.url,
            {"items": [{"productId": kopi_susu.id, "quantity": 2}], "amountReceived": 50000},
        )

        assert response.status_code == 201
        data = response.json()
        assert uuid.UUID(data["id"])
        assert data["createdAt"]
        assert data["subtotal"] == "40000.00"
        assert data["taxAmount"] == "4400.00"
        assert data["grandTotal"] == "44400.00"
        assert data["amountReceived"] == "50000.00"
        assert data["changeAmount"] == "5600.00"
        assert data["items"] == [
            {
                "productId": kopi_susu.id,
                "name": "Kopi Susu",
                "quantity": 2,
                "price": "20000.00",
                "total": "40000.00",
            }
        ]
        kopi_susu.refresh_from_db()
        assert kopi_susu.stock == 3

    def test_insufficient_stock(self, authenticated_client, kopi_susu):
        client, _ = authenticated_client

        response = post_json(
            client,
            self.url,
            {"items": [{"productId": kopi_susu.id, "quantity": 10}], "amountReceived": "500000"},
        )

        assert response.status_code == 400
        data = response.json()
        assert data["code"] == "validation_error"
        assert data["errors"] == ["Insufficient stock for Kopi Susu: requested 10, available 5"]
        assert Transaction.objects.count() == 0

    def test_unknown_product(self, authenticated_client):
        client, _ = authenticated_client

        response = post_json(
            client,
            self.url,
            {"items": [{"productId": 4242, "quantity": 1}], "amountReceived": "10000"},
        )

        assert response.status_code == 400
        assert response.json()["errors"] == ["Product with ID 4242 not found"]

    def test_insufficient_payment(self, authenticated_client, kopi_susu):
        client, _ = authenticated_client

        response = post_json(
            client,
            self.url,
            {"items": [{"productId": kopi_susu.id, "quantity": 1}], "amountReceived": "10000"},
        )

        assert response.status_code == 400
        data = response.json()
        assert data["code"] == "insufficient_payment"
        assert "errors" not in data
        kopi_susu.refresh_from_db()
        assert kopi_susu.stock == 5

    @pytest.mark.parametrize(
        "payload",
        [
            {"items": [], "amountReceived": "10000"},
            {"amountReceived": "10000"},
            {"items": [{"productId": 1, "quantity": 0}], "amountReceived": "10000"},
            {"items": [{"productId": 1, "quantity": 1}], "amountReceived": "-5"},
            {"items": [{"productId": 1, "quantity": 1}]},
        ],
    )
    def test_malformed_request(self, authenticated_client, payload):
        client, _ = authenticated_client

        response = post_json(client, self.url, payload)

        assert response.status_code == 400
        assert Transaction.objects.count() == 0

    def test_requires_authentication(self, api_client, kopi_susu):
        response = post_json(
            api_client,
            self.url,
            {"items": [{"productId": kopi_susu.id, "quantity": 1}], "amountReceived": "30000"},
        )

        assert response.status_code == 403
        assert Transaction.objects.count() == 0


@pytest.mark.django_db
class TestReadTransactions:
    """Test transaction history endpoints."""

    def test_list_newest_first(self, authenticated_client, processor, mineral_water):
        client, _ = authenticated_client
        first = processor.process_transaction([CartLine(mineral_water.id, 1)], Decimal("10000"))
        second = processor.process_transaction([CartLine(mineral_water.id, 2)], Decimal("20000"))

        response = client.get(reverse("sales:transaction_list_create"))

        assert response.status_code == 200
        assert [row["id"] for row in response.json()] == [str(second.id), str(first.id)]

    def test_detail(self, authenticated_client, processor, kopi_susu):
        client, _ = authenticated_client
        record = processor.process_transaction([CartLine(kopi_susu.id, 1)], Decimal("30000"))

        response = client.get(reverse("sales:transaction_detail", args=[record.id]))

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == str(record.id)
        assert data["grandTotal"] == "22200.00"
        assert data["changeAmount"] == "7800.00"
        assert data["items"][0]["name"] == "Kopi Susu"

    def test_detail_not_found(self, authenticated_client):
        client, _ = authenticated_client

        response = client.get(reverse("sales:transaction_detail", args=[uuid.uuid4()]))

        assert response.status_code == 404
        assert response.json() == {"detail": "Transaction not found."}


@pytest.mark.django_db
class TestTransactionPreview:
    """Test POST /api/transactions/preview/."""

    @property
    def url(self):
        return reverse("sales:transaction_preview")

    def test_preview_valid_cart(self, authenticated_client, kopi_susu):
        client, _ = authenticated_client

        response = post_json(
            client, self.url, {"items": [{"productId": kopi_susu.id, "quantity": 1}]}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["valid"] is True
        assert data["payable"] is False
        assert data["errors"] == []
        assert data["subtotal"] == "20000.00"
        assert data["taxAmount"] == "2200.00"
        assert data["grandTotal"] == "22200.00"
        assert data["amountReceived"] == "0.00"
        assert data["changeAmount"] == "-22200.00"
        assert data["items"][0]["productId"] == kopi_susu.id

    def test_preview_reports_errors(self, authenticated_client, kopi_susu):
        client, _ = authenticated_client

        response = post_json(
            client,
            self.url,
            {"items": [{"productId": kopi_susu.id, "quantity": 6}], "amountReceived": "200000"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["valid"] is False
        assert data["payable"] is False
        assert data["errors"] == ["Insufficient stock for Kopi Susu: requested 6, available 5"]

    def test_preview_never_writes(self, authenticated_client, kopi_susu):
        client, _ = authenticated_client

        post_json(
            client,
            self.url,
            {"items": [{"productId": kopi_susu.id, "quantity": 2}], "amountReceived": "50000"},
        )

        kopi_susu.refresh_from_db()
        assert kopi_susu.stock == 5
        assert Transaction.objects.count() == 0


@pytest.mark.django_db
class TestTransactionReceipt:
    """Test PDF receipt download."""

    def test_standard_receipt(self, authenticated_client, processor, kopi_susu):
        client, _ = authenticated_client
        record = processor.process_transaction([CartLine(kopi_susu.id, 1)], Decimal("30000"))

        response = client.get(reverse("sales:transaction_receipt", args=[record.id]))

        assert response.status_code == 200
        assert response["Content-Type"] == "application/pdf"
        assert response.content.startswith(b"%PDF")

    def test_thermal_receipt(self, authenticated_client, processor, kopi_susu):
        client, _ = authenticated_client
        record = processor.process_transaction([CartLine(kopi_susu.id, 1)], Decimal("30000"))

        response = client.get(
            reverse("sales:transaction_receipt", args=[record.id]), {"format": "thermal"}
        )

        assert response.status_code == 200
        assert "thermal" in response["Content-Disposition"]

    def test_unknown_format(self, authenticated_client, processor, kopi_susu):
        client, _ = authenticated_client
        record = processor.process_transaction([CartLine(kopi_susu.id, 1)], Decimal("30000"))

        response = client.get(
            reverse("sales:transaction_receipt", args=[record.id]), {"format": "html"}
        )

        assert response.status_code == 400

    def test_receipt_not_found(self, authenticated_client):
        client, _ = authenticated_client

        response = client.get(reverse("sales:transaction_receipt", args=[uuid.uuid4()]))

        assert response.status_code == 404

    def test_receipt_requires_authentication(self, api_client):
        response = api_client.get(reverse("sales:transaction_receipt", args=[uuid.uuid4()]))

        assert response.status_code == 403
