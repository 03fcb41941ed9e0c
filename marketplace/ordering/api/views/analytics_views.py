from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework.permissions import IsAuthenticated
from rest_framework.views import APIView

from infrastructure.container import container
from utils.responses import result_error_response, success_response
from utils.schema import ErrorResponseSerializer, SuccessResponseSerializer


class BusinessPurchasesView(APIView):
    """
    Purchase analytics for the authenticated buyer.
    Cancelled and refunded orders are excluded.
    """

    permission_classes = [IsAuthenticated]

    @extend_schema(
        operation_id="analytics_business_purchases",
        summary="Purchase totals, top suppliers and monthly trend",
        parameters=[
            OpenApiParameter(name="startDate", type=str, description="Inclusive start date (YYYY-MM-DD)"),
            OpenApiParameter(name="endDate", type=str, description="Inclusive end date (YYYY-MM-DD)"),
        ],
        responses={
            200: OpenApiResponse(response=SuccessResponseSerializer, description="Analytics"),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid date"),
        },
        tags=["Analytics"],
    )
    def get(self, request):
        result = container.analytics_service().business_purchases(
            request.user,
            start_date=request.query_params.get("startDate") or None,
            end_date=request.query_params.get("endDate") or None,
        )
        if not result.ok:
            return result_error_response(result, {})
        return success_response(result.value, "Business purchase analytics retrieved successfully")


class SupplierPerformanceView(APIView):
    """Delivery and rating figures for every seller the caller bought from."""

    permission_classes = [IsAuthenticated]

    @extend_schema(
        operation_id="analytics_supplier_performance",
        summary="Supplier performance report",
        parameters=[
            OpenApiParameter(name="period", type=str, description="month, quarter (default), year or all"),
        ],
        responses={
            200: OpenApiResponse(response=SuccessResponseSerializer, description="Supplier performance"),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid period"),
        },
        tags=["Analytics"],
    )
    def get(self, request):
        result = container.analytics_service().supplier_performance(
            request.user, period=request.query_params.get("period")
        )
        if not result.ok:
            return result_error_response(result, {})
        return success_response(result.value, "Supplier performance report retrieved successfully")
