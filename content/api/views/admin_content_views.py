from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from authentication.permissions import IsAdmin
from content.api.serializers import (
    ContentCategorySerializer,
    ContentCategoryWriteSerializer,
    ContentItemCreateSerializer,
    ContentItemSerializer,
    ContentItemUpdateSerializer,
    ContentTagSerializer,
    ContentTagWriteSerializer,
)
from infrastructure.container import container
from utils.pagination import page_request_from_query
from utils.responses import invalid_id_response, parse_uuid, result_error_response, success_response
from utils.schema import ErrorResponseSerializer, PagedResponseSerializer, SuccessResponseSerializer
from utils.service_base import ErrorCodes


CONTENT_ERRORS = {
    ErrorCodes.CONTENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCodes.SLUG_CONFLICT: status.HTTP_409_CONFLICT,
}

CONTENT_RESPONSES = {
    200: OpenApiResponse(response=SuccessResponseSerializer, description="Content resource"),
    400: OpenApiResponse(response=ErrorResponseSerializer, description="Validation error or invalid ID"),
    404: OpenApiResponse(response=ErrorResponseSerializer, description="Not found"),
    409: OpenApiResponse(response=ErrorResponseSerializer, description="Slug already in use"),
}


class ContentAdminViewSet(viewsets.ViewSet):
    """
    Shared CRUD plumbing for the admin content resources.

    Subclasses name the resource, its serializers and the service methods
    that load, create, update and delete it.
    """

    permission_classes = [IsAdmin]
    resource = "content"
    label = "Content"
    read_serializer = None
    write_serializer = None
    service_methods = {}

    def get_service(self):
        return container.content_service()

    def _call(self, operation, *args):
        return getattr(self.get_service(), self.service_methods[operation])(*args)

    def _write_args(self, request, data):
        return (data,)

    def _respond(self, result, message, status_code=status.HTTP_200_OK):
        if not result.ok:
            return result_error_response(result, CONTENT_ERRORS)
        return success_response(self.read_serializer(result.value).data, message, status_code)

    def list(self, request):
        result = self._call("list")
        return success_response(
            self.read_serializer(result.value, many=True).data, f"{self.label} list retrieved successfully"
        )

    def retrieve(self, request, pk=None):
        object_id = parse_uuid(pk)
        if object_id is None:
            return invalid_id_response(self.resource)
        return self._respond(self._call("get", object_id), f"{self.label} retrieved successfully")

    def create(self, request):
        serializer = self.write_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = self._call("create", *self._write_args(request, serializer.validated_data))
        return self._respond(result, f"{self.label} created successfully", status.HTTP_201_CREATED)

    def update(self, request, pk=None):
        object_id = parse_uuid(pk)
        if object_id is None:
            return invalid_id_response(self.resource)

        serializer = self.write_serializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        result = self._call("update", object_id, serializer.validated_data)
        return self._respond(result, f"{self.label} updated successfully")

    def destroy(self, request, pk=None):
        object_id = parse_uuid(pk)
        if object_id is None:
            return invalid_id_response(self.resource)

        result = self._call("delete", object_id)
        if not result.ok:
            return result_error_response(result, CONTENT_ERRORS)
        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(tags=["Admin - Content"], responses=CONTENT_RESPONSES)
class ContentCategoryAdminViewSet(ContentAdminViewSet):
    resource = "category"
    label = "Content category"
    read_serializer = ContentCategorySerializer
    write_serializer = ContentCategoryWriteSerializer
    service_methods = {
        "list": "list_categories",
        "get": "get_category",
        "create": "create_category",
        "update": "update_category",
        "delete": "delete_category",
    }

    def _write_args(self, request, data):
        return (request.user, data)


@extend_schema(tags=["Admin - Content"], responses=CONTENT_RESPONSES)
class ContentTagAdminViewSet(ContentAdminViewSet):
    resource = "tag"
    label = "Content tag"
    read_serializer = ContentTagSerializer
    write_serializer = ContentTagWriteSerializer
    service_methods = {
        "list": "list_tags",
        "get": "get_tag",
        "create": "create_tag",
        "update": "update_tag",
        "delete": "delete_tag",
    }


class ContentItemAdminViewSet(ContentAdminViewSet):
    """Content items, including publishing and tag assignment."""

    resource = "content item"
    label = "Content item"
    read_serializer = ContentItemSerializer
    write_serializer = ContentItemCreateSerializer
    service_methods = {
        "get": "get_item",
        "create": "create_item",
        "delete": "delete_item",
    }

    def _write_args(self, request, data):
        return (request.user, data)

    @extend_schema(
        operation_id="admin_content_items_list",
        summary="All content items",
        parameters=[
            OpenApiParameter(name="categoryId", type=str, description="Category ID filter"),
            OpenApiParameter(name="type", type=str, description="page, blog, news or announcement"),
            OpenApiParameter(name="isPublished", type=bool, description="Publication filter"),
            OpenApiParameter(name="page", type=int, description="Page number (default: 1)"),
            OpenApiParameter(name="pageSize", type=int, description="Items per page (default: 10, max: 50)"),
        ],
        responses={200: OpenApiResponse(response=PagedResponseSerializer, description="Content items")},
        tags=["Admin - Content"],
    )
    def list(self, request):
        params = request.query_params
        published = params.get("isPublished")
        result = self.get_service().list_items(
            page_request_from_query(params),
            category_id=parse_uuid(params.get("categoryId")),
            content_type=params.get("type"),
            is_published=None if published is None else published.lower() == "true",
        )
        page = result.value
        return success_response(
            page.to_dict(ContentItemSerializer(page.items, many=True).data), "Content items retrieved successfully"
        )

    @extend_schema(
        operation_id="admin_content_items_update",
        summary="Edit a content item",
        request=ContentItemUpdateSerializer,
        responses=CONTENT_RESPONSES,
        tags=["Admin - Content"],
    )
    def update(self, request, pk=None):
        item_id = parse_uuid(pk)
        if item_id is None:
            return invalid_id_response(self.resource)

        serializer = ContentItemUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = self.get_service().update_item(item_id, request.user, serializer.validated_data)
        return self._respond(result, "Content item updated successfully")

    def _set_published(self, request, pk, published, message):
        item_id = parse_uuid(pk)
        if item_id is None:
            return invalid_id_response(self.resource)
        return self._respond(self.get_service().set_published(item_id, request.user, published), message)

    @extend_schema(
        operation_id="admin_content_items_publish",
        summary="Publish a content item",
        request=None,
        responses=CONTENT_RESPONSES,
        tags=["Admin - Content"],
    )
    @action(detail=True, methods=["post"])
    def publish(self, request, pk=None):
        return self._set_published(request, pk, True, "Content item published successfully")

    @extend_schema(
        operation_id="admin_content_items_unpublish",
        summary="Withdraw a content item",
        request=None,
        responses=CONTENT_RESPONSES,
        tags=["Admin - Content"],
    )
    @action(detail=True, methods=["post"])
    def unpublish(self, request, pk=None):
        return self._set_published(request, pk, False, "Content item unpublished successfully")

    @extend_schema(
        operation_id="admin_content_items_tag",
        summary="Attach or detach a tag",
        request=None,
        responses=CONTENT_RESPONSES,
        tags=["Admin - Content"],
    )
    @action(detail=True, methods=["post", "delete"], url_path=r"tags/(?P<tag_id>[^/.]+)", url_name="tag")
    def tag(self, request, pk=None, tag_id=None):
        item_id = parse_uuid(pk)
        if item_id is None:
            return invalid_id_response(self.resource)
        tag_uuid = parse_uuid(tag_id)
        if tag_uuid is None:
            return invalid_id_response("tag")

        service = self.get_service()
        if request.method == "DELETE":
            return self._respond(service.remove_tag(item_id, tag_uuid), "Tag removed successfully")
        return self._respond(service.add_tag(item_id, tag_uuid), "Tag added successfully")
