import uuid

from django.db import models

from authentication.models import BuyerProfile, SellerProfile


class Payment(models.Model):
    """
    A payment recorded against one seller's order.

    Rows are created by the checkout flow; this project only reports on them.
    """

    STATUS_PENDING = "Pending"
    STATUS_COMPLETED = "Completed"
    STATUS_FAILED = "Failed"
    STATUS_REFUNDED = "Refunded"

    STATUS_CHOICES = [
        (STATUS_PENDING, "Pending"),
        (STATUS_COMPLETED, "Completed"),
        (STATUS_FAILED, "Failed"),
        (STATUS_REFUNDED, "Refunded"),
    ]

    AUTO_DESCRIPTION_PREFIX = "Auto-created payment record for order"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    amount = models.DecimalField(max_digits=18, decimal_places=2)
    currency = models.CharField(max_length=3, default="USD")
    payment_provider = models.CharField(max_length=50, blank=True, default="")
    provider_transaction_id = models.CharField(max_length=255, blank=True, default="", db_index=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_PENDING, db_index=True)
    payment_method = models.CharField(max_length=50, blank=True, default="")
    description = models.TextField(blank=True, default="")

    # Relations
    order = models.ForeignKey("marketplace.Order", on_delete=models.CASCADE, related_name="payments")
    seller_profile = models.ForeignKey(SellerProfile, on_delete=models.CASCADE, related_name="payments")
    buyer_profile = models.ForeignKey(
        BuyerProfile, on_delete=models.SET_NULL, null=True, blank=True, related_name="payments"
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    completed_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        ordering = ["-created_at"]
        app_label = "payment_system"
        indexes = [
            models.Index(fields=["status", "created_at"], name="payment_status_created_idx"),
        ]

    def __str__(self):
        return f"Payment {str(self.id)[:8]} {self.amount} {self.currency} ({self.status})"
