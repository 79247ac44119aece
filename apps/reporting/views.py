"""
Views for sales reports.
"""

import logging

from django.conf import settings
from django.utils.dateparse import parse_date

from rest_framework import permissions, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from apps.sales.serializers import TransactionSerializer

from .serializers import DailySalesSerializer, SalesRangeSerializer
from .services import SalesReportGenerator

logger = logging.getLogger(__name__)


def _report_generator():
    return SalesReportGenerator(using=settings.POS_DATABASE_ALIAS)


@api_view(["GET"])
@permission_classes([permissions.IsAuthenticated])
def report_summary(request):
    """Today's sales summary."""
    return Response(DailySalesSerializer(_report_generator().get_today_sales()).data)


@api_view(["GET"])
@permission_classes([permissions.IsAuthenticated])
def report_today(request):
    """
    Today's sales summary together with today's transactions.
    """
    generator = _report_generator()
    return Response(
        {
            "summary": DailySalesSerializer(generator.get_today_sales()).data,
            "transactions": TransactionSerializer(
                generator.get_today_transactions(), many=True
            ).data,
        }
    )


@api_view(["GET"])
@permission_classes([permissions.IsAuthenticated])
def report_range(request):
    """
    Per-day sales between two dates.

    Query parameters:
    - startDate: First day, YYYY-MM-DD (required)
    - endDate: Last day, YYYY-MM-DD, inclusive (required)
    """
    start_raw = request.query_params.get("startDate")
    end_raw = request.query_params.get("endDate")

    if not start_raw or not end_raw:
        return Response(
            {"detail": "startDate and endDate are required"},
            status=status.HTTP_400_BAD_REQUEST,
        )

    try:
        start_date = parse_date(start_raw)
        end_date = parse_date(end_raw)
    except ValueError:
        # Well formed but not a real calendar date, e.g. 2024-02-30
        start_date = end_date = None

    if start_date is None or end_date is None:
        return Response(
            {"detail": "Invalid date format. Use YYYY-MM-DD"},
            status=status.HTTP_400_BAD_REQUEST,
        )

    try:
        report = _report_generator().get_sales_by_date_range(start_date, end_date)
    except ValueError as e:
        return Response({"detail": str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(SalesRangeSerializer(report).data)
