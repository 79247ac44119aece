"""
Management command to load the sample cafe menu.

Usage:
    python manage.py seed_products
    python manage.py seed_products --reset
"""

from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.catalog.models import Product

SAMPLE_PRODUCTS = [
    ("Kopi Susu Riyadh", "Coffee", "20000", 100, "Iced palm-sugar milk coffee, extra creamy."),
    ("Sea Salt Oat Latte", "Coffee", "35000", 50, "Oat milk espresso with a touch of sea salt."),
    ("Dirty Chai Latte", "Coffee", "32000", 30, "Espresso latte with warm chai spices."),
    ("Americano On The Rocks", "Coffee", "18000", 100, "Double shot espresso served cold."),
    ("Caramel Macchiato", "Coffee", "30000", 45, "Vanilla milk, espresso and caramel drizzle."),
    ("Manual Brew V60", "Coffee", "25000", 60, "Hand-poured V60 of the seasonal bean."),
    ("Espresso Tonic", "Coffee", "26000", 35, "Espresso, tonic water and a lemon slice."),
    ("Artisan Matcha Latte", "Tea", "32000", 40, "Premium Japanese matcha with creamy milk."),
    ("Earl Grey Milk Tea", "Tea", "25000", 50, "Bergamot black tea with soft milk."),
    ("Hojicha Latte", "Tea", "30000", 30, "Roasted Japanese green tea latte."),
    ("Lychee Tea Rose", "Tea", "24000", 45, "Iced lychee tea with a hint of rose."),
    ("Butterfly Pea Lemonade", "Tea", "22000", 40, "Blue pea flower lemonade."),
    ("Cromboloni Pistachio", "Pastry", "35000", 20, "Round pastry filled with pistachio cream."),
    ("Classic Butter Croissant", "Pastry", "22000", 30, "Flaky all-butter croissant."),
    ("Almond Croissant", "Pastry", "28000", 15, "Croissant with almond paste and flakes."),
    ("Pain Au Chocolat", "Pastry", "26000", 20, "Laminated pastry with dark chocolate."),
    ("Sea Salt Brownie", "Pastry", "20000", 25, "Dense chocolate brownie with sea salt."),
    ("Cinnamon Roll", "Pastry", "25000", 18, "Cinnamon roll with cream cheese frosting."),
    ("Nasi Goreng Riyadh", "Food", "35000", 50, "House fried rice with egg and chicken satay."),
    ("Beef Teriyaki Bowl", "Food", "42000", 25, "Teriyaki beef over steamed rice."),
    ("Spaghetti Carbonara", "Food", "35000", 20, "Creamy carbonara with smoked beef."),
    ("Truffle Fries", "Food", "28000", 40, "Fries with truffle oil and grated cheese."),
    ("Mineral Water", "Drinks", "8000", None, "Bottled mineral water."),
]


class Command(BaseCommand):
    """Management command to seed the product catalog."""

    help = "Load the sample cafe menu into the product catalog"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument(
            "--reset",
            action="store_true",
            help="Delete all existing products before seeding",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        """Execute the command."""
        if options["reset"]:
            deleted, _ = Product.objects.all().delete()
            self.stdout.write(self.style.WARNING(f"Deleted {deleted} existing products"))

        created = 0
        for name, category, price, stock, description in SAMPLE_PRODUCTS:
            _, was_created = Product.objects.get_or_create(
                name=name,
                defaults={
                    "category": category,
                    "price": Decimal(price),
                    "stock": stock,
                    "description": description,
                },
            )
            created += int(was_created)

        self.stdout.write(
            self.style.SUCCESS(
                f"Seeded {created} products ({len(SAMPLE_PRODUCTS) - created} already present)"
            )
        )
