import uuid

from django.db import models

from authentication.models import SellerProfile

from .rfq import RFQ


class Quote(models.Model):
    STATUS_PENDING = "Pending"
    STATUS_ACCEPTED = "Accepted"
    STATUS_REJECTED = "Rejected"

    STATUS_CHOICES = [
        (STATUS_PENDING, "Pending"),
        (STATUS_ACCEPTED, "Accepted"),
        (STATUS_REJECTED, "Rejected"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    rfq = models.ForeignKey(RFQ, on_delete=models.CASCADE, related_name="quotes")
    seller_profile = models.ForeignKey(SellerProfile, on_delete=models.CASCADE, related_name="quotes")

    price = models.DecimalField(max_digits=18, decimal_places=2)
    delivery_time = models.CharField(max_length=100, blank=True, default="")
    description = models.TextField(blank=True, default="")
    valid_until = models.DateTimeField(null=True, blank=True)
    conditions = models.TextField(blank=True, default="")
    notes = models.TextField(blank=True, null=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_PENDING)

    # Clarification round-trip between the RFQ owner and the quoting seller
    clarification_question = models.TextField(blank=True, null=True)
    clarification_requested_at = models.DateTimeField(null=True, blank=True)
    clarification_response = models.TextField(blank=True, null=True)
    clarification_responded_at = models.DateTimeField(null=True, blank=True)

    submitted_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-submitted_at"]
        app_label = "marketplace"

    def __str__(self):
        return f"Quote {str(self.id)[:8]} on {self.rfq_id}"

    @property
    def has_pending_clarification(self):
        return bool(self.clarification_question) and not self.clarification_response
