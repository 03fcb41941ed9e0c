from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import permissions, status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from authentication.permissions import IsAdmin, IsSeller
from infrastructure.container import container
from marketplace.catalog.api.serializers import (
    CategoryConfigurationCreateSerializer,
    CategoryConfigurationSerializer,
    CategoryConfigurationWriteSerializer,
    ProductCategorySerializer,
    ProductCategoryWriteSerializer,
)
from utils.responses import invalid_id_response, parse_uuid, result_error_response, success_response
from utils.schema import ErrorResponseSerializer, SuccessResponseSerializer
from utils.service_base import ErrorCodes


CATEGORY_ERRORS = {
    ErrorCodes.CATEGORY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCodes.CATEGORY_CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCodes.CATEGORY_CONFIGURATION_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCodes.CATEGORY_CONFIGURATION_EXISTS: status.HTTP_409_CONFLICT,
    ErrorCodes.SELLER_PROFILE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
}

CATEGORY_RESPONSES = {
    200: OpenApiResponse(response=SuccessResponseSerializer, description="Category resource"),
    400: OpenApiResponse(response=ErrorResponseSerializer, description="Validation error or invalid ID"),
    404: OpenApiResponse(response=ErrorResponseSerializer, description="Category not found"),
    409: OpenApiResponse(response=ErrorResponseSerializer, description="Duplicate name or configuration"),
}


def _category_response(result, message, status_code=status.HTTP_200_OK):
    if not result.ok:
        return result_error_response(result, CATEGORY_ERRORS)
    return success_response(ProductCategorySerializer(result.value).data, message, status_code)


def _configuration_response(result, message, status_code=status.HTTP_200_OK):
    if not result.ok:
        return result_error_response(result, CATEGORY_ERRORS)
    return success_response(CategoryConfigurationSerializer(result.value).data, message, status_code)


def _category_list(categories, message):
    return success_response(ProductCategorySerializer(categories, many=True).data, message)


@extend_schema(tags=["Categories"], responses=CATEGORY_RESPONSES)
class CategoryViewSet(viewsets.ViewSet):
    """Public category browsing plus the seller badge check."""

    def get_permissions(self):
        if self.action == "badge":
            return [IsSeller()]
        return [permissions.AllowAny()]

    def get_service(self):
        return container.product_category_service()

    @extend_schema(operation_id="categories_list", summary="Active categories")
    def list(self, request):
        return _category_list(
            self.get_service().list_categories(active_only=True).value, "Categories retrieved successfully"
        )

    @extend_schema(operation_id="categories_retrieve", summary="Active category by ID")
    def retrieve(self, request, pk=None):
        category_id = parse_uuid(pk)
        if category_id is None:
            return invalid_id_response("category")
        result = self.get_service().get_category(category_id, active_only=True)
        return _category_response(result, "Category retrieved successfully")

    @extend_schema(
        operation_id="categories_badge",
        summary="Recompute the caller's verified badge for a category",
        request=None,
    )
    @action(detail=True, methods=["post"])
    def badge(self, request, pk=None):
        category_id = parse_uuid(pk)
        if category_id is None:
            return invalid_id_response("category")

        result = container.category_configuration_service().update_seller_badge(request.user, category_id)
        if not result.ok:
            return result_error_response(result, CATEGORY_ERRORS)
        data = result.value
        return success_response(
            {
                "sellerId": str(data["seller_profile"].id),
                "categoryId": str(data["category_id"]),
                "hasVerifiedBadge": data["has_verified_badge"],
            },
            "Seller badge updated successfully",
        )


@extend_schema(tags=["Admin - Categories"], responses=CATEGORY_RESPONSES)
class AdminCategoryViewSet(viewsets.ViewSet):
    """
    Category management.

    Writes and configuration are admin-only; the read-only tree views
    are open to any signed-in user.
    """

    def get_permissions(self):
        if self.action in ("retrieve", "active", "root", "subcategories"):
            return [permissions.IsAuthenticated()]
        return [IsAdmin()]

    def get_service(self):
        return container.product_category_service()

    def get_configuration_service(self):
        return container.category_configuration_service()

    @extend_schema(operation_id="admin_categories_list", summary="All categories, including inactive ones")
    def list(self, request):
        return _category_list(self.get_service().list_categories().value, "Categories retrieved successfully")

    @extend_schema(operation_id="admin_categories_active", summary="Active categories")
    @action(detail=False, methods=["get"])
    def active(self, request):
        return _category_list(
            self.get_service().list_categories(active_only=True).value, "Active categories retrieved successfully"
        )

    @extend_schema(operation_id="admin_categories_root", summary="Active top-level categories")
    @action(detail=False, methods=["get"])
    def root(self, request):
        return _category_list(
            self.get_service().list_root_categories().value, "Root categories retrieved successfully"
        )

    @extend_schema(operation_id="admin_categories_retrieve", summary="Category by ID")
    def retrieve(self, request, pk=None):
        category_id = parse_uuid(pk)
        if category_id is None:
            return invalid_id_response("category")
        return _category_response(self.get_service().get_category(category_id), "Category retrieved successfully")

    @extend_schema(operation_id="admin_categories_subcategories", summary="Active subcategories of a category")
    @action(detail=True, methods=["get"])
    def subcategories(self, request, pk=None):
        parent_id = parse_uuid(pk)
        if parent_id is None:
            return invalid_id_response("category")
        result = self.get_service().list_subcategories(parent_id)
        if not result.ok:
            return result_error_response(result, CATEGORY_ERRORS)
        return _category_list(result.value, "Subcategories retrieved successfully")

    @extend_schema(
        operation_id="admin_categories_create", summary="Create a category", request=ProductCategoryWriteSerializer
    )
    def create(self, request):
        serializer = ProductCategoryWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = self.get_service().create_category(request.user, serializer.validated_data)
        return _category_response(result, "Category created successfully", status.HTTP_201_CREATED)

    @extend_schema(
        operation_id="admin_categories_update", summary="Edit a category", request=ProductCategoryWriteSerializer
    )
    def update(self, request, pk=None):
        category_id = parse_uuid(pk)
        if category_id is None:
            return invalid_id_response("category")

        serializer = ProductCategoryWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        result = self.get_service().update_category(category_id, request.user, serializer.validated_data)
        return _category_response(result, "Category updated successfully")

    @extend_schema(operation_id="admin_categories_destroy", summary="Delete an unused category")
    def destroy(self, request, pk=None):
        category_id = parse_uuid(pk)
        if category_id is None:
            return invalid_id_response("category")

        result = self.get_service().delete_category(category_id)
        if not result.ok:
            return result_error_response(result, CATEGORY_ERRORS)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(
        operation_id="admin_categories_configuration_create",
        summary="Create the badge configuration of a category",
        request=CategoryConfigurationCreateSerializer,
    )
    @action(detail=False, methods=["post"], url_path="configuration", url_name="create-configuration")
    def create_configuration(self, request):
        serializer = CategoryConfigurationCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)
        category_id = data.pop("category_id")
        result = self.get_configuration_service().create_configuration(category_id, data)
        return _configuration_response(result, "Category configuration created successfully", status.HTTP_201_CREATED)

    @extend_schema(
        operation_id="admin_categories_configuration",
        summary="Read, edit or remove the badge configuration of a category",
        request=CategoryConfigurationWriteSerializer,
    )
    @action(detail=True, methods=["get", "put", "delete"])
    def configuration(self, request, pk=None):
        category_id = parse_uuid(pk)
        if category_id is None:
            return invalid_id_response("category")

        service = self.get_configuration_service()
        if request.method == "GET":
            return _configuration_response(
                service.get_configuration(category_id), "Category configuration retrieved successfully"
            )
        if request.method == "DELETE":
            result = service.delete_configuration(category_id)
            if not result.ok:
                return result_error_response(result, CATEGORY_ERRORS)
            return Response(status=status.HTTP_204_NO_CONTENT)

        serializer = CategoryConfigurationWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        result = service.update_configuration(category_id, serializer.validated_data)
        return _configuration_response(result, "Category configuration updated successfully")
