"""
Django admin configuration for sales models.
"""

from django.contrib import admin

from .models import Transaction


@admin.register(Transaction)
class TransactionAdmin(admin.ModelAdmin):
    """
    Read-only admin for transactions.

    Transactions are only created through checkout and never edited.
    """

    list_display = ["id", "created_at", "item_count", "grand_total", "amount_received"]
    list_filter = ["created_at"]
    search_fields = ["id"]
    date_hierarchy = "created_at"
    readonly_fields = [
        "id",
        "created_at",
        "subtotal",
        "tax_amount",
        "grand_total",
        "amount_received",
        "change_amount",
        "items",
    ]
    fieldsets = [
        (
            "Basic Information",
            {
                "fields": ["id", "created_at", "items"],
            },
        ),
        (
            "Financial Details",
            {
                "fields": [
                    "subtotal",
                    "tax_amount",
                    "grand_total",
                    "amount_received",
                    "change_amount",
                ],
            },
        ),
    ]

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
