"""
Django admin configuration for catalog models.
"""

from django.contrib import admin

from .models import Product


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    """Admin interface for Product model."""

    list_display = ["name", "category", "price", "stock", "updated_at"]
    list_filter = ["category"]
    search_fields = ["name", "description"]
    readonly_fields = ["id", "created_at", "updated_at"]
    fieldsets = [
        (
            "Basic Information",
            {
                "fields": ["id", "name", "category", "description"],
            },
        ),
        (
            "Pricing and Stock",
            {
                "fields": ["price", "stock"],
            },
        ),
        (
            "Timestamps",
            {
                "fields": ["created_at", "updated_at"],
            },
        ),
    ]
