"""
Email Service Abstraction Layer
================================

Provides a unified interface for outgoing email across different backends.
"""

from .django_service import DjangoEmailService
from .factory import EmailFactory
from .interface import EmailException, EmailMessage, EmailServiceInterface
from .mock_service import MockEmailService

__all__ = [
    "EmailServiceInterface",
    "EmailMessage",
    "EmailException",
    "DjangoEmailService",
    "MockEmailService",
    "EmailFactory",
]
