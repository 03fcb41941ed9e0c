import uuid

from django.core.validators import MinValueValidator
from django.db import models

from authentication.models import BuyerProfile, SellerProfile


class RFQ(models.Model):
    """Request for quotation raised by a buyer."""

    STATUS_OPEN = "Open"
    STATUS_RESPONDED = "Responded"
    STATUS_CLOSED = "Closed"

    STATUS_CHOICES = [
        (STATUS_OPEN, "Open"),
        (STATUS_RESPONDED, "Responded"),
        (STATUS_CLOSED, "Closed"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    buyer_profile = models.ForeignKey(BuyerProfile, on_delete=models.CASCADE, related_name="rfqs")

    title = models.CharField(max_length=200)
    description = models.TextField()
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_OPEN, db_index=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    closed_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        ordering = ["-created_at"]
        app_label = "marketplace"
        verbose_name = "RFQ"
        verbose_name_plural = "RFQs"

    def __str__(self):
        return self.title

    @property
    def is_closed(self):
        return self.status == self.STATUS_CLOSED


class RFQItem(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    rfq = models.ForeignKey(RFQ, on_delete=models.CASCADE, related_name="items")

    product_name = models.CharField(max_length=200)
    description = models.TextField(blank=True, default="")
    quantity = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    unit = models.CharField(max_length=50, blank=True, default="")

    class Meta:
        app_label = "marketplace"

    def __str__(self):
        return f"{self.quantity} {self.unit} {self.product_name}".strip()


class RFQRecipient(models.Model):
    """Seller invited to quote on an RFQ. An RFQ without recipients is open to every seller."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    rfq = models.ForeignKey(RFQ, on_delete=models.CASCADE, related_name="recipients")
    seller_profile = models.ForeignKey(SellerProfile, on_delete=models.CASCADE, related_name="rfq_recipients")

    class Meta:
        app_label = "marketplace"
        unique_together = ("rfq", "seller_profile")
