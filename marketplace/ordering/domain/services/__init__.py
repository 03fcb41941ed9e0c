from .analytics_service import AnalyticsService
from .order_service import OrderService

__all__ = ["OrderService", "AnalyticsService"]
