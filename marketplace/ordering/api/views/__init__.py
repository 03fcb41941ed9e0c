from .analytics_views import BusinessPurchasesView, SupplierPerformanceView
from .dashboard_views import AdminDashboardView
from .order_views import AdminOrderViewSet, OrderViewSet

__all__ = [
    "OrderViewSet",
    "AdminOrderViewSet",
    "AdminDashboardView",
    "BusinessPurchasesView",
    "SupplierPerformanceView",
]
