"""
Email Service Interface
========================

Abstract base class defining the contract for email operations.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class EmailMessage:
    """
    Represents an email message.

    Attributes:
        subject: Email subject line
        body: Email body (plain text)
        to: List of recipient email addresses
        from_email: Sender email address (optional, uses default if None)
        html_body: HTML version of email body (optional)
    """

    subject: str
    body: str
    to: List[str] = field(default_factory=list)
    from_email: Optional[str] = None
    html_body: Optional[str] = None


class EmailException(Exception):
    """Raised when an email backend fails to hand the message over."""


class EmailServiceInterface(ABC):
    """
    Abstract interface for email operations.

    Concrete implementations:
        - DjangoEmailService: delivery through Django's configured EMAIL_BACKEND
        - MockEmailService: keeps messages in memory for tests and development
    """

    @abstractmethod
    def send(self, message: EmailMessage) -> bool:
        """
        Send a single email message.

        Returns:
            True if the backend accepted the message

        Raises:
            EmailException: If sending fails critically
        """
