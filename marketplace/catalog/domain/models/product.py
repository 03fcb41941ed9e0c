import uuid
from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models

from authentication.models import SellerProfile

from .category import ProductCategory


class Product(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    seller_profile = models.ForeignKey(SellerProfile, on_delete=models.CASCADE, related_name="products")

    name = models.CharField(max_length=255)
    description = models.TextField(max_length=2000, blank=True, default="")
    category = models.CharField(max_length=100, blank=True, null=True, db_index=True)
    product_category = models.ForeignKey(
        ProductCategory, on_delete=models.SET_NULL, null=True, blank=True, related_name="products"
    )
    image = models.CharField(max_length=500, blank=True, null=True)

    # Reference price shown in the catalog; quotes and orders may differ
    price = models.DecimalField(
        max_digits=18, decimal_places=2, default=Decimal("0.00"), validators=[MinValueValidator(0)]
    )
    stock_quantity = models.IntegerField(default=0, validators=[MinValueValidator(0)])

    # Deleting a product only deactivates it, orders keep pointing at it
    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        app_label = "marketplace"
        indexes = [
            models.Index(fields=["is_active", "-created_at"], name="product_active_created_idx"),
        ]

    def __str__(self):
        return self.name

    @property
    def is_in_stock(self):
        return self.stock_quantity > 0
