from .order_serializers import (
    OrderConfirmSerializer,
    OrderCreateSerializer,
    OrderDetailSerializer,
    OrderItemSerializer,
    OrderLineSerializer,
    OrderSerializer,
    OrderStatusHistorySerializer,
    OrderStatusUpdateSerializer,
)

__all__ = [
    "OrderSerializer",
    "OrderDetailSerializer",
    "OrderItemSerializer",
    "OrderStatusHistorySerializer",
    "OrderLineSerializer",
    "OrderCreateSerializer",
    "OrderStatusUpdateSerializer",
    "OrderConfirmSerializer",
]
