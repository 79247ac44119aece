"""
Serializers for sales reports.
"""

from rest_framework import serializers


class SalesTotalsSerializer(serializers.Serializer):
    """Aggregate totals over a set of transactions."""

    totalTransactions = serializers.IntegerField(source="total_transactions")
    totalSubtotal = serializers.DecimalField(
        source="total_subtotal", max_digits=14, decimal_places=2
    )
    totalTax = serializers.DecimalField(source="total_tax", max_digits=14, decimal_places=2)
    totalGrandTotal = serializers.DecimalField(
        source="total_grand_total", max_digits=14, decimal_places=2
    )


class DailySalesSerializer(SalesTotalsSerializer):
    """Totals for a single day."""

    date = serializers.DateField()


class SalesRangeSerializer(serializers.Serializer):
    """Day-grouped sales over a date range."""

    startDate = serializers.DateField(source="start_date")
    endDate = serializers.DateField(source="end_date")
    dailyReports = DailySalesSerializer(source="daily_reports", many=True)
    totals = SalesTotalsSerializer()
