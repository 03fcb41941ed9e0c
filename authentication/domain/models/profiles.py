import uuid

from django.conf import settings
from django.db import models


class BuyerProfile(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="buyer_profile")

    name = models.CharField(max_length=255)
    company_name = models.CharField(max_length=255, blank=True, null=True)
    country = models.CharField(max_length=100, blank=True, null=True)
    phone = models.CharField(max_length=20, blank=True, null=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = "authentication"
        verbose_name = "Buyer Profile"
        verbose_name_plural = "Buyer Profiles"

    def __str__(self):
        return f"{self.name} ({self.user.email})"


class SellerProfile(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="seller_profile")

    # Company information
    company_name = models.CharField(max_length=255)
    legal_representative = models.CharField(max_length=255, blank=True, default="")
    tax_id = models.CharField(max_length=50, blank=True, default="")
    industry = models.CharField(max_length=100, blank=True, null=True)
    country = models.CharField(max_length=100, blank=True, default="")
    description = models.TextField(max_length=1000, blank=True, null=True)

    # Verification
    is_verified = models.BooleanField(default=False)
    is_premium = models.BooleanField(default=False)
    has_verified_badge = models.BooleanField(default=False)

    # Denormalized rating, recomputed whenever a review changes
    average_rating = models.DecimalField(max_digits=3, decimal_places=2, null=True, blank=True)
    number_of_ratings = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = "authentication"
        verbose_name = "Seller Profile"
        verbose_name_plural = "Seller Profiles"
        ordering = ["company_name"]

    def __str__(self):
        return self.company_name
