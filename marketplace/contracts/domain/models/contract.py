import uuid

from django.db import models

from authentication.models import BuyerProfile, SellerProfile
from marketplace.sourcing.domain.models import RFQ, Quote


class ContractTemplate(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    created_by = models.ForeignKey(SellerProfile, on_delete=models.CASCADE, related_name="contract_templates")

    name = models.CharField(max_length=255)
    title = models.CharField(max_length=255)
    # Body text with {{placeholder}} fields filled in when a contract is generated
    content = models.TextField()
    template_type = models.CharField(max_length=50)
    custom_fields = models.JSONField(null=True, blank=True)
    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        app_label = "marketplace"

    def __str__(self):
        return self.name


class ContractInstance(models.Model):
    STATUS_CHOICES = [
        ("draft", "Draft"),
        ("pending", "Pending"),
        ("signed", "Signed"),
        ("expired", "Expired"),
        ("terminated", "Terminated"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    template = models.ForeignKey(ContractTemplate, on_delete=models.PROTECT, related_name="contracts")
    buyer_profile = models.ForeignKey(BuyerProfile, on_delete=models.CASCADE, related_name="contracts")
    seller_profile = models.ForeignKey(SellerProfile, on_delete=models.CASCADE, related_name="contracts")
    rfq = models.ForeignKey(RFQ, on_delete=models.SET_NULL, null=True, blank=True, related_name="contracts")
    quote = models.ForeignKey(Quote, on_delete=models.SET_NULL, null=True, blank=True, related_name="contracts")

    contract_number = models.CharField(max_length=50, unique=True)
    content = models.TextField()
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default="draft")
    signed_at = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        app_label = "marketplace"

    def __str__(self):
        return self.contract_number
