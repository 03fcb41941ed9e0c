import uuid

from django.conf import settings
from django.db import models

from .profiles import SellerProfile


class Certification(models.Model):
    STATUS_PENDING = "Pending"
    STATUS_APPROVED = "Approved"
    STATUS_REJECTED = "Rejected"

    STATUS_CHOICES = [
        (STATUS_PENDING, "Pending"),
        (STATUS_APPROVED, "Approved"),
        (STATUS_REJECTED, "Rejected"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    seller_profile = models.ForeignKey(SellerProfile, on_delete=models.CASCADE, related_name="certifications")

    name = models.CharField(max_length=255)
    document_path = models.CharField(max_length=500)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_PENDING)
    admin_notes = models.TextField(max_length=1000, blank=True, null=True)

    submitted_at = models.DateTimeField(auto_now_add=True)
    reviewed_at = models.DateTimeField(null=True, blank=True)
    reviewed_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="reviewed_certifications",
    )

    class Meta:
        app_label = "authentication"
        ordering = ["-submitted_at"]

    def __str__(self):
        return f"{self.name} ({self.status})"
