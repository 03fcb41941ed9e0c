"""
Email Infrastructure Tests
===========================

Unit tests for email service abstraction layer.
"""

from unittest.mock import patch

from django.core import mail
from django.test import TestCase, override_settings

from infrastructure.email import (
    DjangoEmailService,
    EmailException,
    EmailFactory,
    EmailMessage,
    EmailServiceInterface,
    MockEmailService,
)
from utils.logging_utils import mask_value


class EmailInterfaceTest(TestCase):
    def test_interface_is_abstract(self):
        with self.assertRaises(TypeError):
            EmailServiceInterface()


class MockEmailServiceTest(TestCase):
    def setUp(self):
        self.email_service = MockEmailService()

    def test_send_keeps_message(self):
        message = EmailMessage(subject="Reset", body="Token abc", to=["buyer@example.com"])

        self.assertTrue(self.email_service.send(message))
        self.assertEqual(self.email_service.sent_messages, [message])

    def test_clear(self):
        self.email_service.send(EmailMessage(subject="a", body="b", to=["x@example.com"]))
        self.email_service.clear()
        self.assertEqual(self.email_service.sent_messages, [])


@override_settings(EMAIL_BACKEND="django.core.mail.backends.locmem.EmailBackend", DEFAULT_FROM_EMAIL="hi@b2b.test")
class DjangoEmailServiceTest(TestCase):
    def test_send_uses_django_mail(self):
        message = EmailMessage(
            subject="Welcome", body="Plain", to=["seller@example.com"], html_body="<p>Plain</p>"
        )
        self.assertTrue(DjangoEmailService().send(message))

        (sent,) = mail.outbox
        self.assertEqual(sent.subject, "Welcome")
        self.assertEqual(sent.from_email, "hi@b2b.test")
        self.assertEqual(sent.alternatives[0][1], "text/html")

    def test_backend_failure_raises_email_exception(self):
        message = EmailMessage(subject="Welcome", body="Plain", to=["seller@example.com"])
        with patch("infrastructure.email.django_service.EmailMultiAlternatives.send", side_effect=OSError("down")):
            with self.assertRaises(EmailException):
                DjangoEmailService().send(message)


class EmailFactoryTest(TestCase):
    def test_create_mock(self):
        self.assertIsInstance(EmailFactory.create("mock"), MockEmailService)

    @override_settings(EMAIL_SERVICE_BACKEND="django")
    def test_create_from_settings(self):
        self.assertIsInstance(EmailFactory.create(), DjangoEmailService)

    def test_unknown_backend(self):
        with self.assertRaises(ValueError):
            EmailFactory.create("carrier-pigeon")


class MaskValueTest(TestCase):
    def test_masks_email_and_token(self):
        self.assertEqual(mask_value("joana@acme.pt"), "jo***@acme.pt")
        self.assertEqual(mask_value("abcdefghijklmnop"), "abcd...mnop")
        self.assertEqual(mask_value("short"), "***")
        self.assertIsNone(mask_value(None))
