from drf_spectacular.utils import OpenApiExample, OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import permissions, status, viewsets
from rest_framework.decorators import action

from authentication.permissions import IsAdmin, IsBuyer, IsSeller
from infrastructure.container import container
from marketplace.ordering.api.serializers import (
    OrderConfirmSerializer,
    OrderCreateSerializer,
    OrderDetailSerializer,
    OrderSerializer,
    OrderStatusHistorySerializer,
    OrderStatusUpdateSerializer,
)
from utils.pagination import page_request_from_query
from utils.responses import invalid_id_response, parse_uuid, result_error_response, success_response
from utils.schema import ErrorResponseSerializer, PagedResponseSerializer, SuccessResponseSerializer
from utils.service_base import ErrorCodes


ORDER_ERRORS = {
    ErrorCodes.ORDER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCodes.NOT_ORDER_OWNER: status.HTTP_403_FORBIDDEN,
    ErrorCodes.INVALID_ORDER_STATE: status.HTTP_400_BAD_REQUEST,
    ErrorCodes.PRODUCT_NOT_FOUND: status.HTTP_400_BAD_REQUEST,
    ErrorCodes.PRODUCT_INACTIVE: status.HTTP_400_BAD_REQUEST,
    ErrorCodes.INSUFFICIENT_STOCK: status.HTTP_400_BAD_REQUEST,
    ErrorCodes.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
}

PAGE_PARAMETERS = [
    OpenApiParameter(name="page", type=int, description="Page number (default: 1)"),
    OpenApiParameter(name="pageSize", type=int, description="Items per page (default: 10, max: 50)"),
]

ORDER_DETAIL_RESPONSES = {
    200: OpenApiResponse(response=SuccessResponseSerializer, description="Order"),
    400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid order ID or request"),
    403: OpenApiResponse(response=ErrorResponseSerializer, description="No access to this order"),
    404: OpenApiResponse(response=ErrorResponseSerializer, description="Order not found"),
}


def paged_orders_response(page):
    return success_response(page.to_dict(OrderSerializer(page.items, many=True).data), "Orders retrieved successfully")


class OrderViewSet(viewsets.ViewSet):
    """
    Order placement and fulfilment.

    Buyers place orders (one per seller), sellers confirm and ship them.
    """

    def get_permissions(self):
        if self.action == "create":
            return [IsBuyer()]
        if self.action in ("received", "set_status", "confirm"):
            return [IsSeller()]
        return [permissions.IsAuthenticated()]

    def get_service(self):
        return container.order_service()

    def _order_response(self, result, message):
        if not result.ok:
            return result_error_response(result, ORDER_ERRORS)
        return success_response(OrderDetailSerializer(result.value).data, message)

    @extend_schema(
        operation_id="orders_create",
        summary="Place orders (buyer)",
        description="Lines are grouped by seller; one order is created per seller in a single transaction.",
        request=OrderCreateSerializer,
        responses={
            201: OpenApiResponse(response=SuccessResponseSerializer, description="Orders created"),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Unknown product or insufficient stock"),
            403: OpenApiResponse(response=ErrorResponseSerializer, description="Not a buyer"),
        },
        examples=[
            OpenApiExample(
                "Two lines",
                value={
                    "items": [
                        {"productId": "3fa85f64-5717-4562-b3fc-2c963f66afa6", "quantity": 2},
                        {"productId": "9b2c1d4e-8f7a-4b6c-9d0e-1f2a3b4c5d6e", "quantity": 1},
                    ],
                    "specialInstructions": "Deliver to loading dock B",
                },
                request_only=True,
            )
        ],
        tags=["Orders"],
    )
    def create(self, request):
        serializer = OrderCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        result = self.get_service().create_orders(
            request.user,
            data["items"],
            special_instructions=data.get("special_instructions", ""),
            currency=data.get("currency"),
        )
        if not result.ok:
            return result_error_response(result, ORDER_ERRORS)

        orders = result.value["orders"]
        return success_response(
            {
                "orders": OrderSerializer(orders, many=True).data,
                "orderCount": len(orders),
                "grandTotal": str(result.value["grand_total"]),
            },
            "Order placed successfully",
            status.HTTP_201_CREATED,
        )

    @extend_schema(
        operation_id="orders_list",
        summary="The caller's orders as buyer",
        parameters=PAGE_PARAMETERS,
        responses={200: OpenApiResponse(response=PagedResponseSerializer, description="Orders")},
        tags=["Orders"],
    )
    def list(self, request):
        page = self.get_service().list_buyer_orders(request.user, page_request_from_query(request.query_params)).value
        return paged_orders_response(page)

    @extend_schema(
        operation_id="orders_received",
        summary="Orders received by the caller (seller)",
        parameters=PAGE_PARAMETERS,
        responses={200: OpenApiResponse(response=PagedResponseSerializer, description="Orders")},
        tags=["Orders"],
    )
    @action(detail=False, methods=["get"])
    def received(self, request):
        page = self.get_service().list_seller_orders(request.user, page_request_from_query(request.query_params)).value
        return paged_orders_response(page)

    @extend_schema(
        operation_id="orders_retrieve",
        summary="Order detail (buyer, seller or admin)",
        responses=ORDER_DETAIL_RESPONSES,
        tags=["Orders"],
    )
    def retrieve(self, request, pk=None):
        order_id = parse_uuid(pk)
        if order_id is None:
            return invalid_id_response("order")
        result = self.get_service().get_order(order_id, request.user)
        return self._order_response(result, "Order retrieved successfully")

    @extend_schema(
        operation_id="orders_set_status",
        summary="Change the status of a received order (seller)",
        request=OrderStatusUpdateSerializer,
        responses=ORDER_DETAIL_RESPONSES,
        tags=["Orders"],
    )
    @action(detail=True, methods=["put"], url_path="status", url_name="status")
    def set_status(self, request, pk=None):
        order_id = parse_uuid(pk)
        if order_id is None:
            return invalid_id_response("order")

        serializer = OrderStatusUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        result = self.get_service().update_status(order_id, request.user, data["status"], notes=data.get("notes"))
        return self._order_response(result, "Order status updated successfully")

    @extend_schema(
        operation_id="orders_confirm",
        summary="Confirm a pending order with shipping details (seller)",
        request=OrderConfirmSerializer,
        responses=ORDER_DETAIL_RESPONSES,
        tags=["Orders"],
    )
    @action(detail=True, methods=["post"])
    def confirm(self, request, pk=None):
        order_id = parse_uuid(pk)
        if order_id is None:
            return invalid_id_response("order")

        serializer = OrderConfirmSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = self.get_service().confirm_order(order_id, request.user, serializer.validated_data)
        return self._order_response(result, "Order confirmed successfully")

    @extend_schema(
        operation_id="orders_tracking",
        summary="Shipping status and history of an order",
        responses=ORDER_DETAIL_RESPONSES,
        tags=["Orders"],
    )
    @action(detail=True, methods=["get"])
    def tracking(self, request, pk=None):
        order_id = parse_uuid(pk)
        if order_id is None:
            return invalid_id_response("order")

        result = self.get_service().tracking(order_id, request.user)
        if not result.ok:
            return result_error_response(result, ORDER_ERRORS)

        order = result.value["order"]
        serialized = OrderSerializer(order).data
        return success_response(
            {
                "orderId": str(order.id),
                "status": order.status,
                "shippedWith": order.shipped_with,
                "trackingNumber": order.tracking_number,
                "shippedAt": serialized["shippedAt"],
                "deliveredAt": serialized["deliveredAt"],
                "history": OrderStatusHistorySerializer(result.value["history"], many=True).data,
            },
            "Tracking information retrieved successfully",
        )


class AdminOrderViewSet(viewsets.ViewSet):
    """All marketplace orders, for administrators."""

    permission_classes = [IsAdmin]

    @extend_schema(
        operation_id="admin_orders_list",
        summary="List all orders (admin)",
        parameters=[
            OpenApiParameter(name="status", type=str, description="Filter by order status"),
            OpenApiParameter(name="page", type=int, description="Page number (default: 1)"),
            OpenApiParameter(name="pageSize", type=int, description="Items per page (default: 50, max: 100)"),
        ],
        responses={
            200: OpenApiResponse(response=PagedResponseSerializer, description="Orders"),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid status"),
        },
        tags=["Admin"],
    )
    def list(self, request):
        page_request = page_request_from_query(request.query_params, default_size=50, max_size=100)
        result = container.order_service().list_all_orders(page_request, status=request.query_params.get("status"))
        if not result.ok:
            return result_error_response(result, ORDER_ERRORS)
        page = result.value
        return paged_orders_response(page)
