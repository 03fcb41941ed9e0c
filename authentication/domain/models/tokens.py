import secrets
import uuid
from datetime import timedelta

from django.conf import settings
from django.db import models
from django.utils import timezone


def generate_reset_token() -> str:
    return secrets.token_urlsafe(48)


class PasswordResetToken(models.Model):
    """Single-use password reset token emailed to the user."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="password_reset_tokens")
    token = models.CharField(max_length=128, unique=True, default=generate_reset_token)
    created_at = models.DateTimeField(auto_now_add=True)
    expires_at = models.DateTimeField()
    is_used = models.BooleanField(default=False)

    class Meta:
        app_label = "authentication"
        ordering = ["-created_at"]

    def save(self, *args, **kwargs):
        if not self.expires_at:
            hours = settings.B2B_MARKETPLACE.get("PASSWORD_RESET_TOKEN_HOURS", 1)
            self.expires_at = timezone.now() + timedelta(hours=hours)
        super().save(*args, **kwargs)

    def is_valid(self):
        return not self.is_used and timezone.now() < self.expires_at

    def __str__(self):
        return f"Password reset for {self.user.email}"
