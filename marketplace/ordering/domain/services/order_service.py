"""
OrderService - Order Lifecycle Management

Handles order placement, seller confirmation, status transitions and
tracking. A checkout containing products from several sellers produces one
order per seller.
"""

from collections import OrderedDict
from decimal import Decimal
from typing import Any, Dict, List

from django.db import transaction
from django.db.models import F
from django.utils import timezone

from infrastructure.observability.metrics import order_status_changes_total, orders_placed_total
from infrastructure.observability.tracing import tracer
from marketplace.catalog.domain.models import Product
from marketplace.ordering.domain.models import Order, OrderItem, OrderStatusHistory
from utils.pagination import Page, PageRequest, paginate
from utils.rbac import is_admin
from utils.service_base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok


ORDER_STATUSES = {choice[0].lower(): choice[0] for choice in Order.STATUS_CHOICES}


def normalize_order_status(value) -> str | None:
    if not isinstance(value, str):
        return None
    return ORDER_STATUSES.get(value.strip().lower())


class OrderService(BaseService):
    """
    Service for managing order lifecycle.
    """

    def _base_queryset(self):
        return Order.objects.select_related("buyer", "seller_profile").prefetch_related("items", "status_history")

    @BaseService.log_performance
    def create_orders(self, user, items: List[Dict[str, Any]], special_instructions: str = "", currency: str = "USD"):
        """
        Place orders for a list of ``{product_id, quantity}`` lines.

        Lines are grouped by the product's seller, snapshotted and deducted
        from stock inside a single transaction.

        Returns:
            ServiceResult with ``{"orders": [...], "grand_total": Decimal}``
        """
        if not items:
            return service_err(ErrorCodes.VALIDATION_ERROR, "At least one item is required")

        with tracer.start_as_current_span("order_create_transaction") as span:
            span.set_attribute("user.id", str(user.id))
            span.set_attribute("order.lines", len(items))

            try:
                with transaction.atomic():
                    # Step 1: Lock and validate products
                    with tracer.start_as_current_span("validate_products"):
                        product_ids = [line["product_id"] for line in items]
                        products = {p.id: p for p in Product.objects.select_for_update().filter(id__in=product_ids)}

                        requested: Dict[Any, int] = {}
                        for line in items:
                            product = products.get(line["product_id"])
                            if product is None:
                                raise _OrderAbort(
                                    ErrorCodes.PRODUCT_NOT_FOUND, f"Product {line['product_id']} not found"
                                )
                            if not product.is_active:
                                raise _OrderAbort(
                                    ErrorCodes.PRODUCT_INACTIVE, f"Product {product.name} is not available"
                                )
                            requested[product.id] = requested.get(product.id, 0) + line["quantity"]
                            if requested[product.id] > product.stock_quantity:
                                raise _OrderAbort(
                                    ErrorCodes.INSUFFICIENT_STOCK,
                                    f"Insufficient stock for {product.name}. Available: {product.stock_quantity}",
                                )

                    # Step 2: Group lines per seller
                    groups: "OrderedDict[Any, list]" = OrderedDict()
                    for line in items:
                        product = products[line["product_id"]]
                        groups.setdefault(product.seller_profile_id, []).append((product, line["quantity"]))

                    # Step 3: Create orders, snapshot items, deduct stock
                    with tracer.start_as_current_span("create_orders"):
                        orders = []
                        for seller_profile_id, lines in groups.items():
                            total = sum((product.price * qty for product, qty in lines), Decimal("0"))
                            order = Order.objects.create(
                                buyer=user,
                                seller_profile_id=seller_profile_id,
                                total_amount=total,
                                total_cost=total,
                                currency=currency or "USD",
                                special_instructions=special_instructions or "",
                            )
                            OrderItem.objects.bulk_create(
                                [
                                    OrderItem(
                                        order=order,
                                        product=product,
                                        product_name=product.name,
                                        product_image=product.image,
                                        quantity=qty,
                                        unit_price=product.price,
                                        total_price=product.price * qty,
                                    )
                                    for product, qty in lines
                                ]
                            )
                            for product, qty in lines:
                                Product.objects.filter(id=product.id).update(stock_quantity=F("stock_quantity") - qty)
                            OrderStatusHistory.objects.create(
                                order=order, status=Order.STATUS_PENDING, notes="Order placed", changed_by=user
                            )
                            orders.append(order)
            except _OrderAbort as abort:
                span.set_attribute("order.failed", abort.code)
                return service_err(abort.code, abort.detail)

            orders_placed_total.inc(len(orders))
            span.set_attribute("order.count", len(orders))
            self.logger.info("User %s placed %s order(s)", user.id, len(orders))

            grand_total = sum((order.total_amount for order in orders), Decimal("0"))
            fresh = list(self._base_queryset().filter(id__in=[o.id for o in orders]).order_by("created_at"))
            return service_ok({"orders": fresh, "grand_total": grand_total})

    def list_buyer_orders(self, user, page_request: PageRequest) -> ServiceResult[Page]:
        return service_ok(paginate(self._base_queryset().filter(buyer=user), page_request))

    def list_seller_orders(self, user, page_request: PageRequest) -> ServiceResult[Page]:
        return service_ok(paginate(self._base_queryset().filter(seller_profile__user=user), page_request))

    def list_all_orders(self, page_request: PageRequest, status: str = None) -> ServiceResult[Page]:
        queryset = self._base_queryset()
        if status:
            canonical = normalize_order_status(status)
            if canonical is None:
                return service_err(ErrorCodes.VALIDATION_ERROR, f"Invalid order status: {status}")
            queryset = queryset.filter(status=canonical)
        return service_ok(paginate(queryset, page_request))

    def get_order(self, order_id, user) -> ServiceResult[Order]:
        """Readable by the buyer, the receiving seller or an admin."""
        order = self._base_queryset().filter(id=order_id).first()
        if order is None:
            return service_err(ErrorCodes.ORDER_NOT_FOUND, "Order not found")
        if order.buyer_id != user.id and order.seller_profile.user_id != user.id and not is_admin(user):
            return service_err(ErrorCodes.NOT_ORDER_OWNER, "You do not have access to this order")
        return service_ok(order)

    def _seller_order(self, order_id, user) -> ServiceResult[Order]:
        order = Order.objects.select_for_update().select_related("seller_profile").filter(id=order_id).first()
        if order is None:
            return service_err(ErrorCodes.ORDER_NOT_FOUND, "Order not found")
        if order.seller_profile.user_id != user.id:
            return service_err(ErrorCodes.NOT_ORDER_OWNER, "Only the seller of this order can update it")
        return service_ok(order)

    @BaseService.log_performance
    def update_status(self, order_id, user, status: str, notes: str = "") -> ServiceResult[Order]:
        canonical = normalize_order_status(status)
        if canonical is None:
            return service_err(
                ErrorCodes.VALIDATION_ERROR,
                "Invalid status. Must be one of: " + ", ".join(choice[0] for choice in Order.STATUS_CHOICES),
            )

        with transaction.atomic():
            result = self._seller_order(order_id, user)
            if not result.ok:
                return result
            order = result.value

            now = timezone.now()
            order.status = canonical
            if canonical == Order.STATUS_SHIPPED:
                order.shipped_at = now
            elif canonical == Order.STATUS_DELIVERED:
                order.delivered_at = now
            order.save()
            OrderStatusHistory.objects.create(order=order, status=canonical, notes=notes or "", changed_by=user)

        order_status_changes_total.labels(status=canonical).inc()
        return self.get_order(order.id, user)

    @BaseService.log_performance
    def confirm_order(self, order_id, user, data: Dict[str, Any]) -> ServiceResult[Order]:
        """
        Seller confirms a pending order with shipping details.

        ``total_cost`` defaults to ``total_amount + shipping_cost``.
        """
        with transaction.atomic():
            result = self._seller_order(order_id, user)
            if not result.ok:
                return result
            order = result.value

            if order.status != Order.STATUS_PENDING:
                return service_err(ErrorCodes.INVALID_ORDER_STATE, "Only pending orders can be confirmed")

            shipping_cost = data.get("shipping_cost")
            order.shipping_cost = shipping_cost if shipping_cost is not None else order.shipping_cost
            total_cost = data.get("total_cost")
            order.total_cost = total_cost if total_cost is not None else order.total_amount + order.shipping_cost
            order.message = data.get("message") or ""
            order.shipped_with = data.get("shipped_with") or ""
            order.tracking_number = data.get("tracking_number") or ""
            order.status = Order.STATUS_CONFIRMED
            order.save()

            OrderStatusHistory.objects.create(
                order=order, status=Order.STATUS_CONFIRMED, notes=order.message, changed_by=user
            )

        order_status_changes_total.labels(status=Order.STATUS_CONFIRMED).inc()
        return self.get_order(order.id, user)

    def tracking(self, order_id, user) -> ServiceResult[Dict]:
        result = self.get_order(order_id, user)
        if not result.ok:
            return result
        order = result.value
        return service_ok(
            {
                "order": order,
                "history": list(order.status_history.all()),
            }
        )


class _OrderAbort(Exception):
    """Raised inside the checkout transaction to roll it back with an error result."""

    def __init__(self, code: str, detail: str):
        super().__init__(detail)
        self.code = code
        self.detail = detail
