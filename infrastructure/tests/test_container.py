"""
Service Container Tests
========================

Unit tests for dependency injection container.
"""

from django.test import TestCase, override_settings

from authentication.domain.services import AuthService
from infrastructure.container import ServiceContainer, container, get_email
from infrastructure.email import DjangoEmailService, MockEmailService
from marketplace.services import OrderService


class ServiceContainerTest(TestCase):
    def setUp(self):
        container.reset()

    def tearDown(self):
        container.configure_for_testing()

    def test_container_is_singleton(self):
        self.assertIs(ServiceContainer(), ServiceContainer())
        self.assertIs(ServiceContainer(), container)

    def test_services_are_cached(self):
        self.assertIsInstance(container.order_service(), OrderService)
        self.assertIs(container.order_service(), container.order_service())

    def test_reset_drops_cached_services(self):
        service = container.order_service()
        container.reset()
        self.assertIsNot(container.order_service(), service)

    @override_settings(EMAIL_SERVICE_BACKEND="mock")
    def test_email_follows_settings(self):
        self.assertIsInstance(container.email(), MockEmailService)
        self.assertIs(get_email(), container.email())

    def test_explicit_backend_replaces_cached_email(self):
        self.assertIsInstance(container.email("django"), DjangoEmailService)
        self.assertIsInstance(container.email("mock"), MockEmailService)

    def test_configure_for_testing_uses_mock_email(self):
        container.configure_for_testing()
        self.assertIsInstance(container.email(), MockEmailService)

    @override_settings(B2B_MARKETPLACE={"TEST_COMPATIBILITY_MODE": True})
    def test_compatibility_flag_is_read_when_service_is_built(self):
        service = container.auth_service()

        self.assertIsInstance(service, AuthService)
        self.assertTrue(service.test_compatibility_mode)

    def test_compatibility_flag_does_not_change_after_build(self):
        service = container.auth_service()
        with self.settings(B2B_MARKETPLACE={"TEST_COMPATIBILITY_MODE": True}):
            self.assertIs(container.auth_service(), service)
            self.assertFalse(container.auth_service().test_compatibility_mode)
