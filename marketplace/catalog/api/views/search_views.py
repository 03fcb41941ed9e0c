from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import permissions, viewsets
from rest_framework.decorators import action

from infrastructure.container import container
from utils.pagination import page_request_from_query
from utils.responses import parse_uuid, result_error_response, success_response
from utils.schema import ErrorResponseSerializer, PagedResponseSerializer


PAGE_PARAMETERS = [
    OpenApiParameter(name="page", type=int, description="Page number (default: 1)"),
    OpenApiParameter(name="pageSize", type=int, description="Items per page (default: 10, max: 50)"),
]


class SearchViewSet(viewsets.ViewSet):
    """
    Public search across sellers, products and RFQs.

    Every result carries a ``type`` tag (``seller``, ``product`` or ``rfq``).
    """

    permission_classes = [permissions.AllowAny]

    def get_service(self):
        return container.search_service()

    def _respond(self, result, message):
        if not result.ok:
            return result_error_response(result, {})
        return success_response(result.value.to_dict(), message)

    @extend_schema(
        operation_id="search",
        summary="Search all entity types",
        parameters=[
            OpenApiParameter(name="query", type=str, description="Search text"),
            OpenApiParameter(name="type", type=str, description="sellers, products or rfqs"),
            *PAGE_PARAMETERS,
        ],
        responses={
            200: OpenApiResponse(response=PagedResponseSerializer, description="Search results"),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="No query/type or invalid type"),
        },
        tags=["Search"],
    )
    def list(self, request):
        params = request.query_params
        result = self.get_service().search(
            page_request_from_query(params), query=params.get("query"), search_type=params.get("type")
        )
        return self._respond(result, "Search results retrieved successfully")

    @extend_schema(
        operation_id="search_sellers",
        summary="Search verified sellers",
        parameters=[
            OpenApiParameter(name="query", type=str, description="Search text"),
            OpenApiParameter(name="industry", type=str, description="Industry filter"),
            *PAGE_PARAMETERS,
        ],
        responses={200: OpenApiResponse(response=PagedResponseSerializer, description="Sellers")},
        tags=["Search"],
    )
    @action(detail=False, methods=["get"])
    def sellers(self, request):
        params = request.query_params
        result = self.get_service().search_sellers(
            page_request_from_query(params), query=params.get("query"), industry=params.get("industry")
        )
        return self._respond(result, "Sellers retrieved successfully")

    @extend_schema(
        operation_id="search_products",
        summary="Search active products",
        parameters=[
            OpenApiParameter(name="query", type=str, description="Search text"),
            OpenApiParameter(name="sellerId", type=str, description="Seller profile ID; ignored when not a GUID"),
            *PAGE_PARAMETERS,
        ],
        responses={200: OpenApiResponse(response=PagedResponseSerializer, description="Products")},
        tags=["Search"],
    )
    @action(detail=False, methods=["get"])
    def products(self, request):
        params = request.query_params
        result = self.get_service().search_products(
            page_request_from_query(params),
            query=params.get("query"),
            seller_profile_id=parse_uuid(params.get("sellerId")),
        )
        return self._respond(result, "Products retrieved successfully")

    @extend_schema(
        operation_id="search_rfqs",
        summary="Search RFQs that are not closed",
        parameters=[OpenApiParameter(name="query", type=str, description="Search text"), *PAGE_PARAMETERS],
        responses={200: OpenApiResponse(response=PagedResponseSerializer, description="RFQs")},
        tags=["Search"],
    )
    @action(detail=False, methods=["get"])
    def rfqs(self, request):
        params = request.query_params
        result = self.get_service().search_rfqs(page_request_from_query(params), query=params.get("query"))
        return self._respond(result, "RFQs retrieved successfully")
