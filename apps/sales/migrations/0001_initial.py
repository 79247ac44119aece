import uuid
from decimal import Decimal

import django.core.serializers.json
import django.core.validators
from django.db import migrations, models


def money_field(help_text):
    return models.DecimalField(
        decimal_places=2,
        help_text=help_text,
        max_digits=12,
        validators=[django.core.validators.MinValueValidator(Decimal("0.00"))],
    )


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Transaction",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        help_text="Unique identifier for the transaction",
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                (
                    "created_at",
                    models.DateTimeField(
                        db_index=True, help_text="When the transaction was committed"
                    ),
                ),
                ("subtotal", money_field("Sum of line totals before tax")),
                ("tax_amount", money_field("Tax on the subtotal")),
                ("grand_total", money_field("Subtotal plus tax")),
                ("amount_received", money_field("Cash tendered")),
                ("change_amount", money_field("Amount received minus grand total")),
                (
                    "items",
                    models.JSONField(
                        encoder=django.core.serializers.json.DjangoJSONEncoder,
                        help_text="Snapshot of the sold line items",
                    ),
                ),
            ],
            options={
                "verbose_name": "Transaction",
                "verbose_name_plural": "Transactions",
                "db_table": "transactions",
                "ordering": ["-created_at"],
            },
        ),
    ]
