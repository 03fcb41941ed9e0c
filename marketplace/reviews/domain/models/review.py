import uuid

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from authentication.models import BuyerProfile, SellerProfile
from marketplace.catalog.domain.models.product import Product


class Review(models.Model):
    """A buyer's rating of a seller, optionally about one of its products."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    buyer_profile = models.ForeignKey(BuyerProfile, on_delete=models.CASCADE, related_name="reviews_given")
    seller_profile = models.ForeignKey(SellerProfile, on_delete=models.CASCADE, related_name="reviews_received")
    product = models.ForeignKey(Product, on_delete=models.SET_NULL, null=True, blank=True, related_name="reviews")

    rating = models.PositiveSmallIntegerField(validators=[MinValueValidator(1), MaxValueValidator(5)])
    comment = models.TextField(max_length=1000, blank=True, default="")

    # Moderation
    is_reported = models.BooleanField(default=False)
    reported_reason = models.TextField(blank=True, null=True)
    is_approved = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        app_label = "marketplace"

    def __str__(self):
        return f"{self.rating}/5 for {self.seller_profile_id}"


class ReviewReply(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    review = models.ForeignKey(Review, on_delete=models.CASCADE, related_name="replies")
    seller_profile = models.ForeignKey(SellerProfile, on_delete=models.CASCADE, related_name="review_replies")
    reply_content = models.TextField(max_length=1000)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["created_at"]
        app_label = "marketplace"
