from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action

from authentication.permissions import IsBuyer, IsSeller
from infrastructure.container import container
from marketplace.sourcing.api.serializers import (
    ClarificationRequestSerializer,
    ClarificationResponseSerializer,
    QuoteSerializer,
    QuoteStatusSerializer,
    QuoteSubmitSerializer,
    QuoteWriteSerializer,
)
from utils.pagination import page_request_from_query
from utils.responses import invalid_id_response, parse_uuid, result_error_response, success_response
from utils.schema import ErrorResponseSerializer, PagedResponseSerializer, SuccessResponseSerializer
from utils.service_base import ErrorCodes


QUOTE_ERRORS = {
    ErrorCodes.QUOTE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCodes.RFQ_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCodes.NOT_QUOTE_OWNER: status.HTTP_403_FORBIDDEN,
    ErrorCodes.NOT_RFQ_OWNER: status.HTTP_403_FORBIDDEN,
    ErrorCodes.NOT_RFQ_RECIPIENT: status.HTTP_403_FORBIDDEN,
    ErrorCodes.RFQ_CLOSED: status.HTTP_400_BAD_REQUEST,
    ErrorCodes.INVALID_QUOTE_STATE: status.HTTP_400_BAD_REQUEST,
    ErrorCodes.SELLER_PROFILE_NOT_FOUND: status.HTTP_400_BAD_REQUEST,
    ErrorCodes.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
}

QUOTE_DETAIL_RESPONSES = {
    200: OpenApiResponse(response=SuccessResponseSerializer, description="Quote"),
    400: OpenApiResponse(response=ErrorResponseSerializer, description="Validation error or invalid state"),
    403: OpenApiResponse(response=ErrorResponseSerializer, description="Not allowed for this quote"),
    404: OpenApiResponse(response=ErrorResponseSerializer, description="Quote not found"),
}


class QuoteViewSet(viewsets.ViewSet):
    """Seller quotes and the buyer's decisions on them."""

    def get_permissions(self):
        if self.action in ("set_status", "clarification"):
            return [IsBuyer()]
        return [IsSeller()]

    def get_service(self):
        return container.quote_service()

    def _quote_response(self, result, message):
        if not result.ok:
            return result_error_response(result, QUOTE_ERRORS)
        return success_response(QuoteSerializer(result.value).data, message)

    @extend_schema(
        operation_id="quotes_submit",
        summary="Submit a quote (seller)",
        request=QuoteSubmitSerializer,
        responses={**QUOTE_DETAIL_RESPONSES, 201: QUOTE_DETAIL_RESPONSES[200]},
        tags=["Quotes"],
    )
    @action(detail=False, methods=["post"])
    def submit(self, request):
        serializer = QuoteSubmitSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)

        result = self.get_service().submit_quote(request.user, data.pop("rfq_id"), data)
        if not result.ok:
            return result_error_response(result, QUOTE_ERRORS)
        return success_response(
            QuoteSerializer(result.value).data, "Quote submitted successfully", status.HTTP_201_CREATED
        )

    @extend_schema(
        operation_id="quotes_mine",
        summary="The caller's quotes (seller)",
        parameters=[
            OpenApiParameter(name="page", type=int, description="Page number (default: 1)"),
            OpenApiParameter(name="pageSize", type=int, description="Items per page (default: 10, max: 50)"),
        ],
        responses={200: OpenApiResponse(response=PagedResponseSerializer, description="Quotes")},
        tags=["Quotes"],
    )
    @action(detail=False, methods=["get"], url_path="my-quotes", url_name="my-quotes")
    def my_quotes(self, request):
        page = self.get_service().my_quotes(request.user, page_request_from_query(request.query_params)).value
        return success_response(
            page.to_dict(QuoteSerializer(page.items, many=True).data), "Quotes retrieved successfully"
        )

    @extend_schema(
        operation_id="quotes_update",
        summary="Edit a pending quote (owning seller)",
        request=QuoteWriteSerializer,
        responses=QUOTE_DETAIL_RESPONSES,
        tags=["Quotes"],
    )
    def update(self, request, pk=None):
        quote_id = parse_uuid(pk)
        if quote_id is None:
            return invalid_id_response("quote")

        serializer = QuoteWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        result = self.get_service().update_quote(quote_id, request.user, serializer.validated_data)
        return self._quote_response(result, "Quote updated successfully")

    @extend_schema(
        operation_id="quotes_set_status",
        summary="Accept or reject a quote (RFQ owner)",
        request=QuoteStatusSerializer,
        responses=QUOTE_DETAIL_RESPONSES,
        tags=["Quotes"],
    )
    @action(detail=True, methods=["put"], url_path="status", url_name="status")
    def set_status(self, request, pk=None):
        quote_id = parse_uuid(pk)
        if quote_id is None:
            return invalid_id_response("quote")

        serializer = QuoteStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = self.get_service().set_status(quote_id, request.user, serializer.validated_data["status"])
        return self._quote_response(result, "Quote status updated successfully")

    @extend_schema(
        operation_id="quotes_clarification",
        summary="Ask the quoting seller a question (RFQ owner)",
        request=ClarificationRequestSerializer,
        responses=QUOTE_DETAIL_RESPONSES,
        tags=["Quotes"],
    )
    @action(detail=True, methods=["post"])
    def clarification(self, request, pk=None):
        quote_id = parse_uuid(pk)
        if quote_id is None:
            return invalid_id_response("quote")

        serializer = ClarificationRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = self.get_service().request_clarification(quote_id, request.user, serializer.validated_data["question"])
        return self._quote_response(result, "Clarification requested successfully")

    @extend_schema(
        operation_id="quotes_clarification_response",
        summary="Answer a clarification request (owning seller)",
        request=ClarificationResponseSerializer,
        responses=QUOTE_DETAIL_RESPONSES,
        tags=["Quotes"],
    )
    @action(
        detail=True,
        methods=["post"],
        url_path="clarification/response",
        url_name="clarification-response",
    )
    def clarification_response(self, request, pk=None):
        quote_id = parse_uuid(pk)
        if quote_id is None:
            return invalid_id_response("quote")

        serializer = ClarificationResponseSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = self.get_service().respond_clarification(quote_id, request.user, serializer.validated_data["response"])
        return self._quote_response(result, "Clarification response submitted successfully")
