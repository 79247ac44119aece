"""
Serializers for sales app.

Wire format is camelCase to match the POS frontend:

    request  {"items": [{"productId": 1, "quantity": 2}], "amountReceived": "50000"}
    response {"id", "createdAt", "subtotal", "taxAmount", "grandTotal",
              "amountReceived", "changeAmount", "items": [...]}
"""

from decimal import Decimal

from rest_framework import serializers

from .models import Transaction
from .validation import CartLine


class CartLineSerializer(serializers.Serializer):
    """Serializer for one cart line in a checkout request."""

    productId = serializers.IntegerField(min_value=1)
    quantity = serializers.IntegerField(min_value=1)


class CheckoutSerializer(serializers.Serializer):
    """
    Serializer for a checkout request.

    Only validates request shape; stock and payment checks belong to the
    TransactionProcessor.
    """

    items = CartLineSerializer(many=True)
    amountReceived = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=Decimal("0.00")
    )

    def validate_items(self, value):
        """Validate that at least one item is provided."""
        if not value:
            raise serializers.ValidationError("At least one item is required.")
        return value

    def cart_lines(self):
        return [
            CartLine(product_id=item["productId"], quantity=item["quantity"])
            for item in self.validated_data["items"]
        ]


class CheckoutPreviewSerializer(CheckoutSerializer):
    """Checkout request where the payment may still be unknown."""

    amountReceived = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=Decimal("0.00"), default=Decimal("0.00")
    )


class TransactionItemSerializer(serializers.Serializer):
    """Serializer for a line item snapshot stored on a transaction."""

    productId = serializers.IntegerField(source="product_id")
    name = serializers.CharField()
    quantity = serializers.IntegerField()
    price = serializers.DecimalField(max_digits=12, decimal_places=2)
    total = serializers.DecimalField(max_digits=12, decimal_places=2)


class TransactionSerializer(serializers.ModelSerializer):
    """Serializer for transaction details."""

    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    taxAmount = serializers.DecimalField(
        source="tax_amount", max_digits=12, decimal_places=2, read_only=True
    )
    grandTotal = serializers.DecimalField(
        source="grand_total", max_digits=12, decimal_places=2, read_only=True
    )
    amountReceived = serializers.DecimalField(
        source="amount_received", max_digits=12, decimal_places=2, read_only=True
    )
    changeAmount = serializers.DecimalField(
        source="change_amount", max_digits=12, decimal_places=2, read_only=True
    )
    items = TransactionItemSerializer(many=True, read_only=True)

    class Meta:
        model = Transaction
        fields = [
            "id",
            "createdAt",
            "subtotal",
            "taxAmount",
            "grandTotal",
            "amountReceived",
            "changeAmount",
            "items",
        ]


class CheckoutQuoteSerializer(serializers.Serializer):
    """Serializer for a checkout preview (CheckoutQuote)."""

    valid = serializers.BooleanField(source="validation.is_valid")
    payable = serializers.BooleanField(source="is_payable")
    errors = serializers.ListField(source="validation.errors", child=serializers.CharField())
    items = serializers.SerializerMethodField()
    subtotal = serializers.DecimalField(max_digits=12, decimal_places=2)
    taxAmount = serializers.DecimalField(source="tax_amount", max_digits=12, decimal_places=2)
    grandTotal = serializers.DecimalField(source="grand_total", max_digits=12, decimal_places=2)
    amountReceived = serializers.DecimalField(
        source="amount_received", max_digits=12, decimal_places=2
    )
    changeAmount = serializers.DecimalField(
        source="change_amount", max_digits=12, decimal_places=2
    )

    def get_items(self, obj):
        """Validated line items in wire format."""
        return TransactionItemSerializer(
            [item.as_record() for item in obj.validation.items], many=True
        ).data
