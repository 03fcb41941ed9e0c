from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import permissions, status
from rest_framework.views import APIView

from content.api.serializers import ContentCategorySerializer, ContentItemSerializer, ContentTagSerializer
from infrastructure.container import container
from utils.pagination import page_request_from_query
from utils.responses import result_error_response, success_response
from utils.schema import ErrorResponseSerializer, PagedResponseSerializer, SuccessResponseSerializer
from utils.service_base import ErrorCodes


NOT_FOUND = {ErrorCodes.CONTENT_NOT_FOUND: status.HTTP_404_NOT_FOUND}

PAGE_PARAMETERS = [
    OpenApiParameter(name="page", type=int, description="Page number (default: 1)"),
    OpenApiParameter(name="pageSize", type=int, description="Items per page (default: 10, max: 50)"),
]


def paged_items_response(result, message):
    if not result.ok:
        return result_error_response(result, NOT_FOUND)
    page = result.value
    return success_response(page.to_dict(ContentItemSerializer(page.items, many=True).data), message)


class PublicContentView(APIView):
    """Published content for the public site."""

    permission_classes = [permissions.AllowAny]

    def get_service(self):
        return container.content_service()


class PublishedContentListView(PublicContentView):
    @extend_schema(
        operation_id="content_list",
        summary="Published content items",
        parameters=[
            OpenApiParameter(name="category", type=str, description="Category slug"),
            OpenApiParameter(name="type", type=str, description="page, blog, news or announcement"),
            *PAGE_PARAMETERS,
        ],
        responses={200: OpenApiResponse(response=PagedResponseSerializer, description="Content items")},
        tags=["Content"],
    )
    def get(self, request):
        params = request.query_params
        result = self.get_service().list_published(
            page_request_from_query(params), category_slug=params.get("category"), content_type=params.get("type")
        )
        return paged_items_response(result, "Content retrieved successfully")


class PublicCategoryListView(PublicContentView):
    @extend_schema(
        operation_id="content_categories",
        summary="Active content categories",
        responses={200: OpenApiResponse(response=SuccessResponseSerializer, description="Categories")},
        tags=["Content"],
    )
    def get(self, request):
        result = self.get_service().list_categories(active_only=True)
        return success_response(
            ContentCategorySerializer(result.value, many=True).data, "Content categories retrieved successfully"
        )


class PublicTagListView(PublicContentView):
    @extend_schema(
        operation_id="content_tags",
        summary="Active content tags",
        responses={200: OpenApiResponse(response=SuccessResponseSerializer, description="Tags")},
        tags=["Content"],
    )
    def get(self, request):
        result = self.get_service().list_tags(active_only=True)
        return success_response(
            ContentTagSerializer(result.value, many=True).data, "Content tags retrieved successfully"
        )


class PublicCategoryContentView(PublicContentView):
    @extend_schema(
        operation_id="content_by_category",
        summary="Published items in a category",
        parameters=PAGE_PARAMETERS,
        responses={
            200: OpenApiResponse(response=PagedResponseSerializer, description="Content items"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Category not found"),
        },
        tags=["Content"],
    )
    def get(self, request, slug):
        result = self.get_service().list_published_in_category(slug, page_request_from_query(request.query_params))
        return paged_items_response(result, "Content retrieved successfully")


class PublicContentDetailView(PublicContentView):
    @extend_schema(
        operation_id="content_detail",
        summary="A published item by slug",
        responses={
            200: OpenApiResponse(response=SuccessResponseSerializer, description="Content item"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Not found or not published"),
        },
        tags=["Content"],
    )
    def get(self, request, slug):
        result = self.get_service().get_published_by_slug(slug)
        if not result.ok:
            return result_error_response(result, NOT_FOUND)
        return success_response(ContentItemSerializer(result.value).data, "Content retrieved successfully")
