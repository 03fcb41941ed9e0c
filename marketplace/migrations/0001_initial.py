# Generated manually for marketplace app

import uuid

import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


ORDER_STATUS_CHOICES = [
    ("Pending", "Pending"),
    ("Confirmed", "Confirmed"),
    ("Shipped", "Shipped"),
    ("Delivered", "Delivered"),
    ("Cancelled", "Cancelled"),
    ("Refunded", "Refunded"),
]


def uuid_pk():
    return ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False))


def fk(to, related_name, on_delete=django.db.models.deletion.CASCADE, **kwargs):
    return models.ForeignKey(on_delete=on_delete, related_name=related_name, to=to, **kwargs)


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("authentication", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Product",
            fields=[
                uuid_pk(),
                ("name", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True, default="", max_length=2000)),
                ("category", models.CharField(blank=True, db_index=True, max_length=100, null=True)),
                ("image", models.CharField(blank=True, max_length=500, null=True)),
                (
                    "price",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=18,
                        validators=[django.core.validators.MinValueValidator(0)],
                    ),
                ),
                (
                    "stock_quantity",
                    models.IntegerField(default=0, validators=[django.core.validators.MinValueValidator(0)]),
                ),
                ("is_active", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("seller_profile", fk("authentication.sellerprofile", "products")),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["is_active", "-created_at"], name="product_active_created_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="RFQ",
            fields=[
                uuid_pk(),
                ("title", models.CharField(max_length=200)),
                ("description", models.TextField()),
                (
                    "status",
                    models.CharField(
                        choices=[("Open", "Open"), ("Responded", "Responded"), ("Closed", "Closed")],
                        db_index=True,
                        default="Open",
                        max_length=20,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("closed_at", models.DateTimeField(blank=True, null=True)),
                ("buyer_profile", fk("authentication.buyerprofile", "rfqs")),
            ],
            options={
                "verbose_name": "RFQ",
                "verbose_name_plural": "RFQs",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="RFQItem",
            fields=[
                uuid_pk(),
                ("product_name", models.CharField(max_length=200)),
                ("description", models.TextField(blank=True, default="")),
                (
                    "quantity",
                    models.PositiveIntegerField(validators=[django.core.validators.MinValueValidator(1)]),
                ),
                ("unit", models.CharField(blank=True, default="", max_length=50)),
                ("rfq", fk("marketplace.rfq", "items")),
            ],
        ),
        migrations.CreateModel(
            name="RFQRecipient",
            fields=[
                uuid_pk(),
                ("rfq", fk("marketplace.rfq", "recipients")),
                ("seller_profile", fk("authentication.sellerprofile", "rfq_recipients")),
            ],
            options={
                "unique_together": {("rfq", "seller_profile")},
            },
        ),
        migrations.CreateModel(
            name="Quote",
            fields=[
                uuid_pk(),
                ("price", models.DecimalField(decimal_places=2, max_digits=18)),
                ("delivery_time", models.CharField(blank=True, default="", max_length=100)),
                ("description", models.TextField(blank=True, default="")),
                ("valid_until", models.DateTimeField(blank=True, null=True)),
                ("conditions", models.TextField(blank=True, default="")),
                ("notes", models.TextField(blank=True, null=True)),
                (
                    "status",
                    models.CharField(
                        choices=[("Pending", "Pending"), ("Accepted", "Accepted"), ("Rejected", "Rejected")],
                        default="Pending",
                        max_length=20,
                    ),
                ),
                ("clarification_question", models.TextField(blank=True, null=True)),
                ("clarification_requested_at", models.DateTimeField(blank=True, null=True)),
                ("clarification_response", models.TextField(blank=True, null=True)),
                ("clarification_responded_at", models.DateTimeField(blank=True, null=True)),
                ("submitted_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("rfq", fk("marketplace.rfq", "quotes")),
                ("seller_profile", fk("authentication.sellerprofile", "quotes")),
            ],
            options={
                "ordering": ["-submitted_at"],
            },
        ),
        migrations.CreateModel(
            name="Order",
            fields=[
                uuid_pk(),
                (
                    "status",
                    models.CharField(choices=ORDER_STATUS_CHOICES, db_index=True, default="Pending", max_length=20),
                ),
                ("total_amount", models.DecimalField(decimal_places=2, max_digits=18)),
                ("currency", models.CharField(default="USD", max_length=3)),
                ("shipping_cost", models.DecimalField(decimal_places=2, default=0, max_digits=18)),
                ("total_cost", models.DecimalField(decimal_places=2, default=0, max_digits=18)),
                ("shipped_with", models.CharField(blank=True, default="", max_length=100)),
                ("tracking_number", models.CharField(blank=True, default="", max_length=100)),
                ("special_instructions", models.TextField(blank=True, default="")),
                ("message", models.TextField(blank=True, default="")),
                ("notes", models.TextField(blank=True, default="")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("shipped_at", models.DateTimeField(blank=True, null=True)),
                ("delivered_at", models.DateTimeField(blank=True, null=True)),
                ("buyer", fk(settings.AUTH_USER_MODEL, "orders")),
                ("seller_profile", fk("authentication.sellerprofile", "received_orders")),
            ],
            options={
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="OrderItem",
            fields=[
                uuid_pk(),
                ("product_name", models.CharField(max_length=255)),
                ("product_image", models.CharField(blank=True, max_length=500, null=True)),
                ("quantity", models.PositiveIntegerField(default=1)),
                ("unit_price", models.DecimalField(decimal_places=2, max_digits=18)),
                ("total_price", models.DecimalField(decimal_places=2, max_digits=18)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("order", fk("marketplace.order", "items")),
                (
                    "product",
                    fk("marketplace.product", "order_items", on_delete=django.db.models.deletion.SET_NULL, null=True),
                ),
            ],
        ),
        migrations.CreateModel(
            name="OrderStatusHistory",
            fields=[
                uuid_pk(),
                ("status", models.CharField(choices=ORDER_STATUS_CHOICES, max_length=20)),
                ("notes", models.TextField(blank=True, default="")),
                ("changed_at", models.DateTimeField(auto_now_add=True)),
                (
                    "changed_by",
                    fk(
                        settings.AUTH_USER_MODEL,
                        "+",
                        on_delete=django.db.models.deletion.SET_NULL,
                        blank=True,
                        null=True,
                    ),
                ),
                ("order", fk("marketplace.order", "status_history")),
            ],
            options={
                "verbose_name_plural": "Order status history",
                "ordering": ["changed_at"],
            },
        ),
        migrations.CreateModel(
            name="Review",
            fields=[
                uuid_pk(),
                (
                    "rating",
                    models.PositiveSmallIntegerField(
                        validators=[
                            django.core.validators.MinValueValidator(1),
                            django.core.validators.MaxValueValidator(5),
                        ]
                    ),
                ),
                ("comment", models.TextField(blank=True, default="", max_length=1000)),
                ("is_reported", models.BooleanField(default=False)),
                ("reported_reason", models.TextField(blank=True, null=True)),
                ("is_approved", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("buyer_profile", fk("authentication.buyerprofile", "reviews_given")),
                ("seller_profile", fk("authentication.sellerprofile", "reviews_received")),
                (
                    "product",
                    fk(
                        "marketplace.product",
                        "reviews",
                        on_delete=django.db.models.deletion.SET_NULL,
                        blank=True,
                        null=True,
                    ),
                ),
            ],
            options={
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="ReviewReply",
            fields=[
                uuid_pk(),
                ("reply_content", models.TextField(max_length=1000)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("review", fk("marketplace.review", "replies")),
                ("seller_profile", fk("authentication.sellerprofile", "review_replies")),
            ],
            options={
                "ordering": ["created_at"],
            },
        ),
        migrations.CreateModel(
            name="ContractTemplate",
            fields=[
                uuid_pk(),
                ("name", models.CharField(max_length=255)),
                ("title", models.CharField(max_length=255)),
                ("content", models.TextField()),
                ("template_type", models.CharField(max_length=50)),
                ("custom_fields", models.JSONField(blank=True, null=True)),
                ("is_active", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("created_by", fk("authentication.sellerprofile", "contract_templates")),
            ],
            options={
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="ContractInstance",
            fields=[
                uuid_pk(),
                ("contract_number", models.CharField(max_length=50, unique=True)),
                ("content", models.TextField()),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("draft", "Draft"),
                            ("pending", "Pending"),
                            ("signed", "Signed"),
                            ("expired", "Expired"),
                            ("terminated", "Terminated"),
                        ],
                        default="draft",
                        max_length=20,
                    ),
                ),
                ("signed_at", models.DateTimeField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "template",
                    fk("marketplace.contracttemplate", "contracts", on_delete=django.db.models.deletion.PROTECT),
                ),
                ("buyer_profile", fk("authentication.buyerprofile", "contracts")),
                ("seller_profile", fk("authentication.sellerprofile", "contracts")),
                (
                    "rfq",
                    fk(
                        "marketplace.rfq",
                        "contracts",
                        on_delete=django.db.models.deletion.SET_NULL,
                        blank=True,
                        null=True,
                    ),
                ),
                (
                    "quote",
                    fk(
                        "marketplace.quote",
                        "contracts",
                        on_delete=django.db.models.deletion.SET_NULL,
                        blank=True,
                        null=True,
                    ),
                ),
            ],
            options={
                "ordering": ["-created_at"],
            },
        ),
    ]
