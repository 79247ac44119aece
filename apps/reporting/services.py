"""
Sales reporting over committed transactions.

Read-only: reports aggregate the Transaction table and never touch the
checkout path. Days are calendar days in the active time zone.
"""

import logging
from datetime import date
from decimal import Decimal

from django.db.models import Count, DecimalField, Sum, Value
from django.db.models.functions import Coalesce, TruncDate
from django.utils import timezone

from apps.sales.models import Transaction

logger = logging.getLogger(__name__)


def _money_sum(field_name):
    return Coalesce(
        Sum(field_name),
        Value(Decimal("0.00")),
        output_field=DecimalField(max_digits=12, decimal_places=2),
    )


SUMMARY_AGGREGATES = {
    "total_transactions": Count("id"),
    "total_subtotal": _money_sum("subtotal"),
    "total_tax": _money_sum("tax_amount"),
    "total_grand_total": _money_sum("grand_total"),
}


class SalesReportGenerator:
    """Generate sales summaries from the transaction log."""

    def __init__(self, using: str = "default"):
        self.using = using

    def _transactions(self):
        return Transaction.objects.using(self.using)

    def get_today_transactions(self):
        """Today's transactions, newest first."""
        return self._transactions().filter(created_at__date=timezone.localdate()).order_by(
            "-created_at"
        )

    def get_today_sales(self) -> dict:
        """
        Summary of today's sales.

        Returns:
            dict: date, total_transactions, total_subtotal, total_tax,
            total_grand_total. Totals are zero when nothing was sold.
        """
        today = timezone.localdate()
        summary = self._transactions().filter(created_at__date=today).aggregate(
            **SUMMARY_AGGREGATES
        )
        return {"date": today, **summary}

    def get_sales_by_date_range(self, start_date: date, end_date: date) -> dict:
        """
        Per-day sales between two dates, both inclusive.

        Args:
            start_date: First day of the range
            end_date: Last day of the range

        Returns:
            dict: daily_reports (one row per day with sales, newest day
            first) and totals over the whole range

        Raises:
            ValueError: start_date is after end_date
        """
        if start_date > end_date:
            raise ValueError("startDate must not be after endDate")

        queryset = self._transactions().filter(
            created_at__date__gte=start_date, created_at__date__lte=end_date
        )

        daily_reports = list(
            queryset.annotate(date=TruncDate("created_at"))
            .values("date")
            .annotate(**SUMMARY_AGGREGATES)
            .order_by("-date")
        )
        totals = queryset.aggregate(**SUMMARY_AGGREGATES)

        logger.debug(
            f"Sales report {start_date}..{end_date}: {len(daily_reports)} day(s), "
            f"{totals['total_transactions']} transaction(s)"
        )

        return {
            "start_date": start_date,
            "end_date": end_date,
            "daily_reports": daily_reports,
            "totals": totals,
        }
