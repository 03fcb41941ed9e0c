import re
import uuid

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models


class ProductCategory(models.Model):
    """Catalog category; a category with a parent is a subcategory."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100, unique=True)
    description = models.CharField(max_length=500, blank=True, default="")
    parent = models.ForeignKey(
        "self", on_delete=models.PROTECT, null=True, blank=True, related_name="subcategories"
    )
    display_order = models.IntegerField(default=0)
    is_active = models.BooleanField(default=True)

    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True, related_name="+"
    )
    updated_by = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True, related_name="+"
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["display_order", "name"]
        app_label = "marketplace"
        verbose_name_plural = "Product categories"

    def __str__(self):
        return self.name

    def ancestor_ids(self):
        """Ids of every category above this one, nearest first."""
        ids = []
        parent_id = self.parent_id
        while parent_id is not None and parent_id not in ids:
            ids.append(parent_id)
            parent_id = ProductCategory.objects.filter(id=parent_id).values_list("parent_id", flat=True).first()
        return ids


class CategoryConfiguration(models.Model):
    """Verified-badge rules for sellers of one category."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    category = models.OneToOneField(ProductCategory, on_delete=models.CASCADE, related_name="configuration")

    # Certification names separated by commas or semicolons
    required_certifications = models.TextField(blank=True, default="")
    additional_fields = models.JSONField(default=dict, blank=True)

    allows_verified_badge = models.BooleanField(default=False)
    min_certifications_for_badge = models.PositiveIntegerField(default=0, validators=[MinValueValidator(0)])

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = "marketplace"

    def __str__(self):
        return f"Configuration for {self.category_id}"

    @property
    def required_certification_names(self):
        return [name.strip() for name in re.split(r"[,;]", self.required_certifications or "") if name.strip()]
