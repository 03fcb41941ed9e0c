"""
Mock Email Service
==================

Stores messages in memory instead of sending them.
"""

import logging
from typing import List

from utils.logging_utils import mask_value

from .interface import EmailMessage, EmailServiceInterface

logger = logging.getLogger(__name__)


class MockEmailService(EmailServiceInterface):
    def __init__(self):
        self.sent_messages: List[EmailMessage] = []

    def send(self, message: EmailMessage) -> bool:
        logger.info(f"[MOCK EMAIL] To: {[mask_value(r) for r in message.to]}, Subject: {message.subject}")
        self.sent_messages.append(message)
        return True

    def clear(self):
        self.sent_messages.clear()
