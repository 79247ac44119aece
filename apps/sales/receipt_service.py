"""
Receipt generation for committed transactions.

Renders the line-item snapshot and totals stored on a Transaction as a PDF,
either on A4 paper or on 80mm thermal roll paper.
"""

import io
from decimal import Decimal

from django.conf import settings
from django.utils import timezone
from django.utils.html import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import inch, mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle
from reportlab.platypus.flowables import HRFlowable

from .models import Transaction


class ReceiptGenerator:
    """
    Receipt generator for cafe transactions.

    Supports two layouts:
    - Standard receipt format (A4)
    - Thermal printer format (80mm width)
    """

    # Receipt dimensions
    THERMAL_WIDTH = 80 * mm  # 80mm thermal paper

    # Margins
    THERMAL_MARGIN = 5 * mm
    STANDARD_MARGIN = 20 * mm

    def __init__(self, record: Transaction):
        """Initialize receipt generator with transaction data."""
        self.record = record
        self.decimal_places = settings.POS_CURRENCY_DECIMAL_PLACES
        self.styles = getSampleStyleSheet()

        self._create_custom_styles()

    def _create_custom_styles(self):
        """Create paragraph styles for both layouts."""
        self.shop_name_style = ParagraphStyle(
            "ShopName",
            parent=self.styles["Heading1"],
            fontSize=18,
            spaceAfter=6,
            alignment=1,  # Center alignment
            fontName="Helvetica-Bold",
        )
        self.thermal_shop_style = ParagraphStyle(
            "ThermalShop",
            parent=self.shop_name_style,
            fontSize=12,
            spaceAfter=4,
        )

        self.body_style = ParagraphStyle(
            "ReceiptBody",
            parent=self.styles["Normal"],
            fontSize=10,
            spaceAfter=6,
            textColor=colors.black,
        )
        self.thermal_body_style = ParagraphStyle(
            "ThermalBody",
            parent=self.body_style,
            fontSize=8,
            spaceAfter=3,
        )

        self.total_style = ParagraphStyle(
            "ReceiptTotal",
            parent=self.body_style,
            fontSize=12,
            alignment=2,  # Right alignment
            fontName="Helvetica-Bold",
        )
        self.thermal_total_style = ParagraphStyle(
            "ThermalTotal",
            parent=self.total_style,
            fontSize=10,
            spaceAfter=4,
        )

    def money(self, amount) -> str:
        """Format an amount with thousands separators at currency precision."""
        return f"{Decimal(str(amount)):,.{self.decimal_places}f}"

    def generate_pdf_receipt(self, format_type: str = "standard") -> bytes:
        """
        Generate PDF receipt.

        Args:
            format_type: 'standard' for A4, 'thermal' for 80mm thermal paper

        Returns:
            PDF bytes
        """
        if format_type not in ReceiptService.FORMATS:
            raise ValueError(f"Unsupported receipt format: {format_type}")

        thermal = format_type == "thermal"
        buffer = io.BytesIO()

        if thermal:
            # Long enough for a typical cafe order
            height = 4 * inch + len(self.record.items) * 6 * mm
            doc = SimpleDocTemplate(
                buffer,
                pagesize=(self.THERMAL_WIDTH, height),
                rightMargin=self.THERMAL_MARGIN,
                leftMargin=self.THERMAL_MARGIN,
                topMargin=self.THERMAL_MARGIN,
                bottomMargin=self.THERMAL_MARGIN,
            )
        else:
            doc = SimpleDocTemplate(
                buffer,
                pagesize=A4,
                rightMargin=self.STANDARD_MARGIN,
                leftMargin=self.STANDARD_MARGIN,
                topMargin=self.STANDARD_MARGIN,
                bottomMargin=self.STANDARD_MARGIN,
            )

        story = []
        story.extend(self._build_shop_header(thermal))
        story.extend(self._build_transaction_info(thermal))
        story.extend(self._build_items_table(thermal))
        story.extend(self._build_totals_section(thermal))
        story.extend(self._build_receipt_footer(thermal))

        doc.build(story)
        pdf_bytes = buffer.getvalue()
        buffer.close()

        return pdf_bytes

    def _divider(self, thermal: bool):
        gap = 8 if thermal else 12
        return [
            Spacer(1, gap),
            HRFlowable(width="100%", thickness=1, color=colors.black),
            Spacer(1, gap),
        ]

    def _build_shop_header(self, thermal: bool = False):
        """Build store name and address header."""
        elements = []

        style = self.thermal_shop_style if thermal else self.shop_name_style
        elements.append(Paragraph(escape(settings.POS_STORE_NAME), style))

        body_style = self.thermal_body_style if thermal else self.body_style
        address = getattr(settings, "POS_STORE_ADDRESS", "")
        for line in filter(None, address.splitlines()):
            elements.append(Paragraph(f"<para align='center'>{escape(line)}</para>", body_style))

        elements.extend(self._divider(thermal))
        return elements

    def _build_transaction_info(self, thermal: bool = False):
        """Build transaction id and timestamp section."""
        body_style = self.thermal_body_style if thermal else self.body_style
        created_at = timezone.localtime(self.record.created_at)

        elements = [
            Paragraph(f"Receipt #: {self.record.id}", body_style),
            Paragraph(f"Date: {created_at.strftime('%Y-%m-%d %H:%M:%S')}", body_style),
        ]
        elements.extend(self._divider(thermal))
        return elements

    def _build_items_table(self, thermal: bool = False):
        """Build line items table from the stored snapshot."""
        if thermal:
            col_widths = [30 * mm, 8 * mm, 16 * mm, 16 * mm]
            font_size = 7
        else:
            col_widths = [80 * mm, 20 * mm, 35 * mm, 35 * mm]
            font_size = 9

        data = [["Item", "Qty", "Price", "Total"]]
        for item in self.record.items:
            name = item["name"]
            if thermal and len(name) > 18:
                name = name[:18] + "..."
            data.append(
                [
                    name,
                    str(item["quantity"]),
                    self.money(item["price"]),
                    self.money(item["total"]),
                ]
            )

        table = Table(data, colWidths=col_widths)
        table.setStyle(
            TableStyle(
                [
                    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, 0), font_size + 1),
                    ("FONTNAME", (0, 1), (-1, -1), "Helvetica"),
                    ("FONTSIZE", (0, 1), (-1, -1), font_size),
                    ("ALIGN", (1, 0), (-1, -1), "RIGHT"),
                    ("LINEBELOW", (0, 0), (-1, 0), 1, colors.black),
                    ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
                ]
            )
        )

        return [table, Spacer(1, 8 if thermal else 12)]

    def _build_totals_section(self, thermal: bool = False):
        """Build subtotal, tax, total, cash and change."""
        elements = []
        body_style = self.thermal_body_style if thermal else self.body_style
        total_style = self.thermal_total_style if thermal else self.total_style

        for label, amount in [
            ("Subtotal", self.record.subtotal),
            ("Tax", self.record.tax_amount),
        ]:
            elements.append(
                Paragraph(f"<para align='right'>{label}: {self.money(amount)}</para>", body_style)
            )

        elements.append(HRFlowable(width="100%", thickness=2, color=colors.black))
        elements.append(
            Paragraph(
                f"<para align='right'><b>TOTAL: {self.money(self.record.grand_total)}</b></para>",
                total_style,
            )
        )

        for label, amount in [
            ("Cash", self.record.amount_received),
            ("Change", self.record.change_amount),
        ]:
            elements.append(
                Paragraph(f"<para align='right'>{label}: {self.money(amount)}</para>", body_style)
            )

        return elements

    def _build_receipt_footer(self, thermal: bool = False):
        """Build receipt footer."""
        body_style = self.thermal_body_style if thermal else self.body_style

        elements = self._divider(thermal)
        elements.append(
            Paragraph("<para align='center'>Thank you for your visit!</para>", body_style)
        )
        return elements


class ReceiptService:
    """
    Service class for receipt operations.
    """

    FORMATS = ("standard", "thermal")

    @staticmethod
    def generate_receipt(record: Transaction, format_type: str = "standard") -> bytes:
        """
        Generate a PDF receipt for a transaction.

        Args:
            record: Committed Transaction
            format_type: 'standard' or 'thermal'

        Returns:
            PDF bytes

        Raises:
            ValueError: format_type is not supported
        """
        return ReceiptGenerator(record).generate_pdf_receipt(format_type)
