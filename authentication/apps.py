import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class AuthenticationConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "authentication"

    def ready(self):
        """
        Initialize OpenTelemetry tracing for the API process.
        """
        from django.conf import settings

        from infrastructure.observability.tracing import setup_tracing

        setup_tracing(
            service_name=getattr(settings, "OTEL_SERVICE_NAME", "b2b-marketplace-api"),
            enable=getattr(settings, "OTEL_ENABLED", False),
        )
