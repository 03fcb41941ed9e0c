"""
Dependency Injection Container
================================

Simple service locator for the application's services and the
infrastructure they depend on. Views ask the container for a service
instead of constructing it, so tests can ``reset()`` or patch it.

Usage:
    from infrastructure.container import container

    result = container.order_service().create_orders(request.user, items)
    email = container.email()
"""

import logging
from typing import Optional

from django.conf import settings

from .email import EmailFactory, EmailServiceInterface

logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    Service container for application services.

    Implements lazy initialization and caching of service instances.
    Singleton: every import shares the same instance.
    """

    _instance: Optional["ServiceContainer"] = None
    _initialized: bool = False

    def __new__(cls):
        """Ensure only one instance exists (singleton pattern)."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize container (only once)."""
        if not self._initialized:
            self._services = {}
            self._email: Optional[EmailServiceInterface] = None
            self._initialized = True
            logger.info("Service container initialized")

    def _cached(self, name: str, factory):
        if name not in self._services:
            self._services[name] = factory()
            logger.debug(f"Created {type(self._services[name]).__name__}")
        return self._services[name]

    def email(self, backend: Optional[str] = None) -> EmailServiceInterface:
        """
        Get email service instance.

        Args:
            backend: Email backend type ('django' or 'mock')
                    If None, uses configuration from settings

        Returns:
            EmailServiceInterface implementation (cached)
        """
        if self._email is None or backend is not None:
            self._email = EmailFactory.create(backend)
            logger.debug(f"Created email service: {type(self._email).__name__}")

        return self._email

    # Authentication

    def auth_service(self):
        """Get AuthService; the compatibility flag is read from settings once, here."""

        def build():
            from authentication.domain.services import AuthService

            options = getattr(settings, "B2B_MARKETPLACE", {})
            return AuthService(
                email_service=self.email(),
                test_compatibility_mode=bool(options.get("TEST_COMPATIBILITY_MODE", False)),
                frontend_url=getattr(settings, "FRONTEND_URL", ""),
            )

        return self._cached("auth", build)

    def profile_service(self):
        from authentication.domain.services import ProfileService

        return self._cached("profile", ProfileService)

    def certification_service(self):
        from authentication.domain.services import CertificationService

        return self._cached("certification", CertificationService)

    def admin_user_service(self):
        from authentication.domain.services import AdminUserService

        return self._cached("admin_user", AdminUserService)

    # Marketplace

    def product_service(self):
        from marketplace.services import ProductService

        return self._cached("product", ProductService)

    def product_category_service(self):
        from marketplace.services import ProductCategoryService

        return self._cached("product_category", ProductCategoryService)

    def category_configuration_service(self):
        from marketplace.services import CategoryConfigurationService

        return self._cached("category_configuration", CategoryConfigurationService)

    def rfq_service(self):
        from marketplace.services import RFQService

        return self._cached("rfq", RFQService)

    def quote_service(self):
        from marketplace.services import QuoteService

        return self._cached("quote", QuoteService)

    def order_service(self):
        from marketplace.services import OrderService

        return self._cached("order", OrderService)

    def review_service(self):
        """Get ReviewService instance."""
        from marketplace.services import ReviewService

        return self._cached("review", ReviewService)

    def contract_template_service(self):
        from marketplace.services import ContractTemplateService

        return self._cached("contract_template", ContractTemplateService)

    def search_service(self):
        from marketplace.services import SearchService

        return self._cached("search", SearchService)

    def analytics_service(self):
        from marketplace.services import AnalyticsService

        return self._cached("analytics", AnalyticsService)

    def dashboard_service(self):
        from marketplace.services import DashboardService

        return self._cached("dashboard", DashboardService)

    # Content and payments

    def content_service(self):
        from content.domain.services import ContentService

        return self._cached("content", ContentService)

    def payment_reporting_service(self):
        from payment_system.domain.services import PaymentReportingService

        return self._cached("payment_reporting", PaymentReportingService)

    def reset(self):
        """
        Reset all cached service instances.

        Useful for testing or after changing settings.
        """
        self._services = {}
        self._email = None
        logger.info("Service container reset")

    def configure_for_testing(self):
        """Reset the container and switch email delivery to the in-memory mock."""
        self.reset()
        self._email = EmailFactory.create("mock")
        logger.info("Service container configured for testing")


# Global singleton instance
container = ServiceContainer()


def get_email() -> EmailServiceInterface:
    """Get email service from global container."""
    return container.email()
