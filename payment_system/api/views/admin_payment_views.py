import logging

from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action

from authentication.permissions import IsAdmin
from infrastructure.container import container
from payment_system.api.serializers import PaymentSerializer, PaymentStatisticsSerializer
from utils.pagination import page_request_from_query
from utils.responses import invalid_id_response, parse_uuid, result_error_response, success_response
from utils.schema import ErrorResponseSerializer, PagedResponseSerializer, SuccessResponseSerializer
from utils.service_base import ErrorCodes


logger = logging.getLogger(__name__)

PAYMENT_ERRORS = {ErrorCodes.PAYMENT_NOT_FOUND: status.HTTP_404_NOT_FOUND}


@extend_schema(tags=["Admin - Payments"])
class AdminPaymentViewSet(viewsets.ViewSet):
    """
    Admin payment reporting.

    All joins with orders and profiles happen in PaymentReportingService.
    """

    permission_classes = [IsAdmin]

    def get_service(self):
        return container.payment_reporting_service()

    @extend_schema(
        operation_id="admin_payments_list",
        summary="All payments, newest first",
        parameters=[
            OpenApiParameter(name="page", type=int, description="Page number (default: 1)"),
            OpenApiParameter(name="pageSize", type=int, description="Items per page (default: 20, max: 100)"),
        ],
        responses={200: OpenApiResponse(response=PagedResponseSerializer, description="Payments")},
    )
    def list(self, request):
        page_request = page_request_from_query(request.query_params, default_size=20, max_size=100)
        page = self.get_service().list_payments(page_request).value
        return success_response(
            page.to_dict(PaymentSerializer(page.items, many=True).data), "Payments retrieved successfully"
        )

    @extend_schema(
        operation_id="admin_payments_retrieve",
        summary="Payment detail",
        responses={
            200: OpenApiResponse(response=SuccessResponseSerializer, description="Payment"),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid payment ID"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Payment not found"),
        },
    )
    def retrieve(self, request, pk=None):
        payment_id = parse_uuid(pk)
        if payment_id is None:
            return invalid_id_response("payment")

        result = self.get_service().get_payment(payment_id)
        if not result.ok:
            return result_error_response(result, PAYMENT_ERRORS)
        return success_response(PaymentSerializer(result.value).data, "Payment retrieved successfully")

    @extend_schema(
        operation_id="admin_payments_by_order",
        summary="Payments attached to an order",
        responses={
            200: OpenApiResponse(response=SuccessResponseSerializer, description="Payments"),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid order ID"),
        },
    )
    @action(detail=False, methods=["get"], url_path=r"order/(?P<order_id>[^/.]+)", url_name="by-order")
    def by_order(self, request, order_id=None):
        order_uuid = parse_uuid(order_id)
        if order_uuid is None:
            return invalid_id_response("order")

        result = self.get_service().payments_for_order(order_uuid)
        return success_response(PaymentSerializer(result.value, many=True).data, "Payments retrieved successfully")

    @extend_schema(
        operation_id="admin_payments_statistics",
        summary="Payment totals by status",
        responses={200: OpenApiResponse(response=PaymentStatisticsSerializer, description="Statistics")},
    )
    @action(detail=False, methods=["get"])
    def statistics(self, request):
        result = self.get_service().statistics()
        return success_response(
            PaymentStatisticsSerializer(result.value).data, "Payment statistics retrieved successfully"
        )

    @extend_schema(
        operation_id="admin_payments_backfill_descriptions",
        summary="Rewrite empty or auto-generated payment descriptions",
        request=None,
        responses={200: OpenApiResponse(response=SuccessResponseSerializer, description="Number of rows updated")},
    )
    @action(detail=False, methods=["post"], url_path="backfill-descriptions", url_name="backfill-descriptions")
    def backfill_descriptions(self, request):
        result = self.get_service().backfill_descriptions()
        logger.info("Admin %s backfilled %d payment descriptions", request.user.id, result.value["updated"])
        return success_response(result.value, "Payment descriptions updated successfully")
