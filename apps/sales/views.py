"""
Views for the checkout API.

- Checkout (create transaction) and read-only transaction history
- Checkout preview for the cart screen
- PDF receipts for committed transactions
"""

import logging

from django.conf import settings
from django.http import HttpResponse, JsonResponse
from django.views.decorators.http import require_GET

from rest_framework import generics, permissions, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import NotFound
from rest_framework.response import Response

from .exceptions import CartValidationError, TransactionError
from .receipt_service import ReceiptService
from .serializers import (
    CheckoutPreviewSerializer,
    CheckoutQuoteSerializer,
    CheckoutSerializer,
    TransactionSerializer,
)
from .services import TransactionProcessor, TransactionStore

logger = logging.getLogger(__name__)


def error_payload(exc: TransactionError) -> dict:
    """Response body for a checkout failure."""
    payload = {"detail": str(exc), "code": exc.code}
    if isinstance(exc, CartValidationError):
        payload["errors"] = exc.errors
    return payload


@api_view(["GET", "POST"])
@permission_classes([permissions.IsAuthenticated])
def transaction_list_create(request):
    """
    List transactions (GET) or check out a cart (POST).

    Request body for POST:
    {
        "items": [{"productId": 1, "quantity": 2}],
        "amountReceived": "50000.00"
    }

    Responds 201 with the committed transaction. Checkout failures respond
    with {"detail", "code"} and the status of the error class; validation
    failures also carry the per-line "errors" list.
    """
    processor = TransactionProcessor.from_settings()

    if request.method == "GET":
        records = processor.store.all()
        return Response(TransactionSerializer(records, many=True).data)

    serializer = CheckoutSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    try:
        record = processor.process_transaction(
            serializer.cart_lines(), serializer.validated_data["amountReceived"]
        )
    except TransactionError as e:
        return Response(error_payload(e), status=e.status_code)
    except Exception as e:
        logger.error(f"Checkout failed unexpectedly: {str(e)}", exc_info=True)
        return Response(
            {"detail": "Failed to process transaction", "code": "internal_error"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return Response(TransactionSerializer(record).data, status=status.HTTP_201_CREATED)


class TransactionDetailView(generics.RetrieveAPIView):
    """
    API endpoint for retrieving a single transaction.
    """

    serializer_class = TransactionSerializer
    permission_classes = [permissions.IsAuthenticated]

    def get_object(self):
        record = TransactionStore(using=settings.POS_DATABASE_ALIAS).get(
            self.kwargs["transaction_id"]
        )
        if record is None:
            raise NotFound("Transaction not found.")
        return record


@api_view(["POST"])
@permission_classes([permissions.IsAuthenticated])
def transaction_preview(request):
    """
    Validate a cart and compute its totals without committing.

    Request body is the checkout body; amountReceived is optional. Always
    responds 200 when the request is well formed; "valid" and "errors"
    describe the cart and "changeAmount" may be negative.
    """
    serializer = CheckoutPreviewSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    quote = TransactionProcessor.from_settings().quote(
        serializer.cart_lines(), serializer.validated_data["amountReceived"]
    )
    return Response(CheckoutQuoteSerializer(quote).data)


@require_GET
def transaction_receipt(request, transaction_id):
    """
    Generate a PDF receipt for a committed transaction.

    Query parameters:
    - format: 'standard' (A4, default) or 'thermal' (80mm)
    """
    if not request.user.is_authenticated:
        return JsonResponse(
            {"detail": "Authentication credentials were not provided."}, status=403
        )

    format_type = request.GET.get("format", "standard")
    if format_type not in ReceiptService.FORMATS:
        return JsonResponse(
            {"detail": f"Unsupported receipt format: {format_type}"}, status=400
        )

    processor = TransactionProcessor.from_settings()
    record = processor.store.get(transaction_id)
    if record is None:
        return JsonResponse({"detail": "Transaction not found."}, status=404)

    pdf_bytes = ReceiptService.generate_receipt(record, format_type=format_type)

    response = HttpResponse(pdf_bytes, content_type="application/pdf")
    filename = f"receipt_{record.id}_{format_type}.pdf"
    response["Content-Disposition"] = f'inline; filename="{filename}"'

    return response
