"""
Django Email Service
====================

EmailServiceInterface backed by Django's mail framework, so SMTP, SES or any
other EMAIL_BACKEND configured in settings can be used unchanged.
"""

import logging

from django.conf import settings
from django.core.mail import EmailMultiAlternatives

from utils.logging_utils import mask_value

from .interface import EmailException, EmailMessage, EmailServiceInterface


logger = logging.getLogger(__name__)


class DjangoEmailService(EmailServiceInterface):
    def __init__(self):
        self.default_from = getattr(settings, "DEFAULT_FROM_EMAIL", "no-reply@example.com")

    def send(self, message: EmailMessage) -> bool:
        email = EmailMultiAlternatives(
            subject=message.subject,
            body=message.body,
            from_email=message.from_email or self.default_from,
            to=message.to,
        )
        if message.html_body:
            email.attach_alternative(message.html_body, "text/html")

        try:
            sent = email.send(fail_silently=False)
        except Exception as e:
            logger.error(f"Failed to send email to {[mask_value(r) for r in message.to]}: {e}")
            raise EmailException(str(e)) from e

        logger.info(f"Email '{message.subject}' sent to {[mask_value(r) for r in message.to]}")
        return sent > 0
