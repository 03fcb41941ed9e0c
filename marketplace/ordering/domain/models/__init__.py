from .order import Order, OrderItem, OrderStatusHistory

__all__ = ["Order", "OrderItem", "OrderStatusHistory"]
