import uuid

from django.contrib.auth.models import AbstractUser
from django.db import models

from utils.rbac import ROLE_ADMIN, ROLE_BUYER, ROLE_SELLER


class CustomUser(AbstractUser):
    ROLE_CHOICES = [
        (ROLE_BUYER, "Buyer"),
        (ROLE_SELLER, "Seller"),
        (ROLE_ADMIN, "Admin"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    email = models.EmailField(unique=True)
    date_joined = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    role = models.CharField(max_length=20, choices=ROLE_CHOICES, default=ROLE_BUYER)

    # Account lock, managed by admins
    is_locked = models.BooleanField(default=False)
    lock_reason = models.CharField(max_length=500, blank=True, null=True)
    lock_date = models.DateTimeField(blank=True, null=True)

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = ["username"]

    class Meta:
        app_label = "authentication"
        ordering = ["-date_joined"]

    def is_admin(self):
        """Check if user is an admin"""
        return self.role == ROLE_ADMIN or self.is_superuser

    def is_seller(self):
        return self.role == ROLE_SELLER

    def is_buyer(self):
        return self.role == ROLE_BUYER

    def __str__(self):
        return self.email
