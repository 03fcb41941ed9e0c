"""
Email Service Factory
======================

Creates the email service selected by ``settings.EMAIL_SERVICE_BACKEND``.
"""

import logging
from typing import Literal

from django.conf import settings

from .django_service import DjangoEmailService
from .interface import EmailServiceInterface
from .mock_service import MockEmailService


logger = logging.getLogger(__name__)

EmailBackend = Literal["django", "mock"]


class EmailFactory:
    """
    Factory for creating email service instances.

    Usage:
        # In settings.py
        EMAIL_SERVICE_BACKEND = 'django'  # or 'mock' for testing

        email_service = EmailFactory.create()
    """

    @staticmethod
    def create(backend: EmailBackend | None = None) -> EmailServiceInterface:
        backend_type = backend or getattr(settings, "EMAIL_SERVICE_BACKEND", "django")

        logger.info(f"Creating email service backend: {backend_type}")

        if backend_type == "django":
            return DjangoEmailService()
        elif backend_type == "mock":
            return MockEmailService()
        else:
            raise ValueError(f"Invalid email backend: {backend_type}. Must be 'django' or 'mock'")
