from .admin_payment_views import AdminPaymentViewSet


__all__ = ["AdminPaymentViewSet"]
