from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import permissions, status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from authentication.permissions import IsBuyer, IsSeller
from infrastructure.container import container
from marketplace.sourcing.api.serializers import (
    QuoteSerializer,
    QuoteWriteSerializer,
    RFQCreateSerializer,
    RFQSerializer,
    RFQStatusSerializer,
)
from marketplace.sourcing.domain.models import RFQ
from utils.pagination import page_request_from_query
from utils.responses import error_response, parse_uuid, result_error_response, success_response
from utils.schema import ErrorResponseSerializer, PagedResponseSerializer, SuccessResponseSerializer
from utils.service_base import ErrorCodes


RFQ_ERRORS = {
    ErrorCodes.RFQ_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCodes.NOT_RFQ_OWNER: status.HTTP_403_FORBIDDEN,
    ErrorCodes.RFQ_CLOSED: status.HTTP_400_BAD_REQUEST,
    ErrorCodes.NOT_RFQ_RECIPIENT: status.HTTP_403_FORBIDDEN,
    ErrorCodes.BUYER_PROFILE_NOT_FOUND: status.HTTP_400_BAD_REQUEST,
    ErrorCodes.SELLER_PROFILE_NOT_FOUND: status.HTTP_400_BAD_REQUEST,
    ErrorCodes.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
}

PAGE_PARAMETERS = [
    OpenApiParameter(name="page", type=int, description="Page number (default: 1)"),
    OpenApiParameter(name="pageSize", type=int, description="Items per page (default: 10, max: 50)"),
]


def rfq_not_found() -> Response:
    return error_response("RFQ not found", status.HTTP_404_NOT_FOUND)


class PublicRFQViewSet(viewsets.ViewSet):
    """Anonymous RFQ browsing."""

    permission_classes = [permissions.AllowAny]

    def get_service(self):
        return container.rfq_service()

    @extend_schema(
        operation_id="rfqs_list",
        summary="List RFQs",
        parameters=[
            OpenApiParameter(name="status", type=str, description="Open, Responded or Closed"),
            *PAGE_PARAMETERS,
        ],
        responses={
            200: OpenApiResponse(response=PagedResponseSerializer, description="RFQs"),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid status"),
        },
        tags=["RFQ"],
    )
    def list(self, request):
        result = self.get_service().list_rfqs(
            page_request_from_query(request.query_params), status=request.query_params.get("status")
        )
        if not result.ok:
            return result_error_response(result, RFQ_ERRORS)
        page = result.value
        return success_response(page.to_dict(RFQSerializer(page.items, many=True).data), "RFQs retrieved successfully")

    @extend_schema(
        operation_id="rfqs_retrieve",
        summary="RFQ detail",
        responses={
            200: OpenApiResponse(response=SuccessResponseSerializer, description="RFQ"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="RFQ not found"),
        },
        tags=["RFQ"],
    )
    def retrieve(self, request, pk=None):
        rfq_id = parse_uuid(pk)
        if rfq_id is None:
            return rfq_not_found()

        result = self.get_service().get_rfq(rfq_id)
        if not result.ok:
            return result_error_response(result, RFQ_ERRORS)
        return success_response(RFQSerializer(result.value).data, "RFQ retrieved successfully")


class RFQViewSet(PublicRFQViewSet):
    """
    RFQ management.

    Buyers create and manage their own RFQs; sellers see the RFQs addressed
    to them and answer with quotes.
    """

    def get_permissions(self):
        if self.action in ("list", "retrieve"):
            return [permissions.AllowAny()]
        if self.action == "seller":
            return [IsSeller()]
        if self.action == "quotes":
            return [IsSeller()] if self.request.method == "POST" else [permissions.IsAuthenticated()]
        return [IsBuyer()]

    @extend_schema(
        operation_id="rfq_create",
        summary="Create an RFQ (buyer)",
        request=RFQCreateSerializer,
        responses={
            201: OpenApiResponse(response=SuccessResponseSerializer, description="RFQ created"),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Validation error"),
            403: OpenApiResponse(response=ErrorResponseSerializer, description="Not a buyer"),
        },
        tags=["RFQ"],
    )
    def create(self, request):
        serializer = RFQCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = self.get_service().create_rfq(request.user, serializer.validated_data)
        if not result.ok:
            return result_error_response(result, RFQ_ERRORS)
        return success_response(RFQSerializer(result.value).data, "RFQ created successfully", status.HTTP_201_CREATED)

    @extend_schema(
        operation_id="rfq_buyer",
        summary="The caller's RFQs (buyer)",
        parameters=PAGE_PARAMETERS,
        responses={200: OpenApiResponse(response=PagedResponseSerializer, description="RFQs")},
        tags=["RFQ"],
    )
    @action(detail=False, methods=["get"])
    def buyer(self, request):
        page = self.get_service().list_buyer_rfqs(request.user, page_request_from_query(request.query_params)).value
        return success_response(page.to_dict(RFQSerializer(page.items, many=True).data), "RFQs retrieved successfully")

    @extend_schema(
        operation_id="rfq_seller",
        summary="RFQs addressed to the caller or open to all sellers",
        parameters=PAGE_PARAMETERS,
        responses={200: OpenApiResponse(response=PagedResponseSerializer, description="RFQs")},
        tags=["RFQ"],
    )
    @action(detail=False, methods=["get"])
    def seller(self, request):
        page = self.get_service().list_seller_rfqs(request.user, page_request_from_query(request.query_params)).value
        return success_response(page.to_dict(RFQSerializer(page.items, many=True).data), "RFQs retrieved successfully")

    @extend_schema(
        operation_id="rfq_set_status",
        summary="Change the status of one of the caller's RFQs",
        request=RFQStatusSerializer,
        responses={
            200: OpenApiResponse(response=SuccessResponseSerializer, description="Status updated"),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid status"),
            403: OpenApiResponse(response=ErrorResponseSerializer, description="Not the owner"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="RFQ not found"),
        },
        tags=["RFQ"],
    )
    @action(detail=True, methods=["put"], url_path="status", url_name="status")
    def set_status(self, request, pk=None):
        rfq_id = parse_uuid(pk)
        if rfq_id is None:
            return rfq_not_found()

        serializer = RFQStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = self.get_service().update_status(rfq_id, request.user, serializer.validated_data["status"])
        if not result.ok:
            return result_error_response(result, RFQ_ERRORS)

        rfq = result.value
        message = "RFQ closed successfully" if rfq.status == RFQ.STATUS_CLOSED else "RFQ status updated successfully"
        return success_response(RFQSerializer(rfq).data, message)

    @extend_schema(
        operation_id="rfq_close",
        summary="Close one of the caller's RFQs",
        request=None,
        responses={
            200: OpenApiResponse(response=SuccessResponseSerializer, description="RFQ closed"),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Already closed"),
            403: OpenApiResponse(response=ErrorResponseSerializer, description="Not the owner"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="RFQ not found"),
        },
        tags=["RFQ"],
    )
    @action(detail=True, methods=["put"])
    def close(self, request, pk=None):
        rfq_id = parse_uuid(pk)
        if rfq_id is None:
            return rfq_not_found()

        result = self.get_service().close_rfq(rfq_id, request.user)
        if not result.ok:
            return result_error_response(result, RFQ_ERRORS)
        return success_response(RFQSerializer(result.value).data, "RFQ closed successfully")

    @extend_schema(
        operation_id="rfq_delete",
        summary="Delete one of the caller's RFQs",
        responses={
            204: OpenApiResponse(description="RFQ deleted"),
            403: OpenApiResponse(response=ErrorResponseSerializer, description="Not the owner"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="RFQ not found"),
        },
        tags=["RFQ"],
    )
    def destroy(self, request, pk=None):
        rfq_id = parse_uuid(pk)
        if rfq_id is None:
            return rfq_not_found()

        result = self.get_service().delete_rfq(rfq_id, request.user)
        if not result.ok:
            return result_error_response(result, RFQ_ERRORS)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(
        methods=["GET"],
        operation_id="rfq_quotes_list",
        summary="Quotes on an RFQ",
        description="The RFQ owner and admins see every quote; a seller sees only their own.",
        responses={
            200: OpenApiResponse(response=SuccessResponseSerializer, description="Quotes"),
            403: OpenApiResponse(response=ErrorResponseSerializer, description="No access"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="RFQ not found"),
        },
        tags=["Quotes"],
    )
    @extend_schema(
        methods=["POST"],
        operation_id="rfq_quotes_submit",
        summary="Submit a quote for an RFQ (seller)",
        request=QuoteWriteSerializer,
        responses={
            201: OpenApiResponse(response=SuccessResponseSerializer, description="Quote submitted"),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="RFQ closed or invalid price"),
            403: OpenApiResponse(response=ErrorResponseSerializer, description="Seller is not a recipient"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="RFQ not found"),
        },
        tags=["Quotes"],
    )
    @action(detail=True, methods=["get", "post"])
    def quotes(self, request, pk=None):
        rfq_id = parse_uuid(pk)
        if rfq_id is None:
            return rfq_not_found()

        if request.method == "POST":
            serializer = QuoteWriteSerializer(data=request.data)
            serializer.is_valid(raise_exception=True)
            result = container.quote_service().submit_quote(request.user, rfq_id, serializer.validated_data)
            if not result.ok:
                return result_error_response(result, RFQ_ERRORS)
            return success_response(
                QuoteSerializer(result.value).data, "Quote submitted successfully", status.HTTP_201_CREATED
            )

        result = self.get_service().list_quotes_for_rfq(rfq_id, request.user)
        if not result.ok:
            return result_error_response(result, RFQ_ERRORS)
        return success_response(QuoteSerializer(result.value, many=True).data, "Quotes retrieved successfully")
