from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import permissions, status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from authentication.permissions import IsSeller
from infrastructure.container import container
from marketplace.catalog.api.serializers import (
    InventoryUpdateSerializer,
    ProductSerializer,
    ProductWriteSerializer,
)
from utils.pagination import page_request_from_query
from utils.responses import parse_uuid, result_error_response, success_response, utc_timestamp
from utils.schema import ErrorResponseSerializer, PagedResponseSerializer, SuccessResponseSerializer
from utils.service_base import ErrorCodes


PRODUCT_ERRORS = {
    ErrorCodes.PRODUCT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCodes.NOT_PRODUCT_OWNER: status.HTTP_403_FORBIDDEN,
    ErrorCodes.SELLER_PROFILE_NOT_FOUND: status.HTTP_400_BAD_REQUEST,
    ErrorCodes.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
}


def product_not_found() -> Response:
    """Product lookups answer malformed and unknown ids alike."""
    return Response(
        {"success": False, "message": "Product not found", "timestamp": utc_timestamp()},
        status=status.HTTP_404_NOT_FOUND,
    )


class ProductViewSet(viewsets.ViewSet):
    """
    Product catalog.

    Browsing is public; sellers manage their own products.
    """

    def get_permissions(self):
        if self.action in ("list", "latest", "retrieve"):
            return [permissions.AllowAny()]
        return [IsSeller()]

    def get_service(self):
        return container.product_service()

    def _error(self, result):
        if result.error == ErrorCodes.PRODUCT_NOT_FOUND:
            return product_not_found()
        return result_error_response(result, PRODUCT_ERRORS)

    @extend_schema(
        operation_id="products_list",
        summary="List active products",
        parameters=[
            OpenApiParameter(name="category", type=str, description="Exact category (case-insensitive)"),
            OpenApiParameter(
                name="categoryId", type=str, description="Category ID incl. its subcategories; ignored when not a GUID"
            ),
            OpenApiParameter(name="sellerId", type=str, description="Seller profile ID; ignored when not a GUID"),
            OpenApiParameter(name="minPrice", type=float, description="Minimum price"),
            OpenApiParameter(name="maxPrice", type=float, description="Maximum price"),
            OpenApiParameter(name="search", type=str, description="Search in name and description"),
        ],
        responses={
            200: OpenApiResponse(response=SuccessResponseSerializer, description="Products with applied filters"),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid filter value"),
        },
        tags=["Products"],
    )
    def list(self, request):
        result = self.get_service().list_products(request.query_params)
        if not result.ok:
            return self._error(result)

        data = result.value
        return success_response(
            {
                "products": ProductSerializer(data["products"], many=True).data,
                "totalCount": data["total_count"],
                "filters": data["filters"],
            },
            "Products retrieved successfully",
        )

    @extend_schema(
        operation_id="products_latest",
        summary="Newest active products",
        parameters=[
            OpenApiParameter(name="page", type=int, description="Page number (default: 1)"),
            OpenApiParameter(name="pageSize", type=int, description="Items per page (default: 10, max: 50)"),
        ],
        responses={200: OpenApiResponse(response=PagedResponseSerializer, description="Products")},
        tags=["Products"],
    )
    @action(detail=False, methods=["get"])
    def latest(self, request):
        page = self.get_service().latest_products(page_request_from_query(request.query_params)).value
        return success_response(
            page.to_dict(ProductSerializer(page.items, many=True).data), "Latest products retrieved successfully"
        )

    @extend_schema(
        operation_id="products_retrieve",
        summary="Product detail",
        responses={
            200: OpenApiResponse(response=SuccessResponseSerializer, description="Product"),
            404: OpenApiResponse(description="Product not found or inactive"),
        },
        tags=["Products"],
    )
    def retrieve(self, request, pk=None):
        product_id = parse_uuid(pk)
        if product_id is None:
            return product_not_found()

        result = self.get_service().get_product(product_id)
        if not result.ok:
            return self._error(result)
        return success_response(ProductSerializer(result.value).data, "Product retrieved successfully")

    @extend_schema(
        operation_id="products_create",
        summary="Create a product (seller)",
        request=ProductWriteSerializer,
        responses={
            201: OpenApiResponse(response=SuccessResponseSerializer, description="Product created"),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Validation error or no seller profile"),
            403: OpenApiResponse(response=ErrorResponseSerializer, description="Not a seller"),
        },
        tags=["Products"],
    )
    def create(self, request):
        serializer = ProductWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = self.get_service().create_product(request.user, serializer.validated_data)
        if not result.ok:
            return self._error(result)
        return success_response(
            ProductSerializer(result.value).data, "Product created successfully", status.HTTP_201_CREATED
        )

    @extend_schema(
        operation_id="products_update",
        summary="Update one of the caller's products",
        request=ProductWriteSerializer,
        responses={
            200: OpenApiResponse(response=SuccessResponseSerializer, description="Product updated"),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Validation error"),
            403: OpenApiResponse(response=ErrorResponseSerializer, description="Not the owner"),
            404: OpenApiResponse(description="Product not found"),
        },
        tags=["Products"],
    )
    def update(self, request, pk=None):
        product_id = parse_uuid(pk)
        if product_id is None:
            return product_not_found()

        serializer = ProductWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        result = self.get_service().update_product(product_id, request.user, serializer.validated_data)
        if not result.ok:
            return self._error(result)
        return success_response(ProductSerializer(result.value).data, "Product updated successfully")

    @extend_schema(
        operation_id="products_delete",
        summary="Deactivate one of the caller's products",
        responses={
            204: OpenApiResponse(description="Product deactivated"),
            403: OpenApiResponse(response=ErrorResponseSerializer, description="Not the owner"),
            404: OpenApiResponse(description="Product not found"),
        },
        tags=["Products"],
    )
    def destroy(self, request, pk=None):
        product_id = parse_uuid(pk)
        if product_id is None:
            return product_not_found()

        result = self.get_service().delete_product(product_id, request.user)
        if not result.ok:
            return self._error(result)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(
        operation_id="products_inventory",
        summary="Set the stock level of a product",
        request=InventoryUpdateSerializer,
        responses={
            200: OpenApiResponse(response=SuccessResponseSerializer, description="Inventory updated"),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid quantity"),
            403: OpenApiResponse(response=ErrorResponseSerializer, description="Not the owner"),
            404: OpenApiResponse(description="Product not found"),
        },
        tags=["Products"],
    )
    @action(detail=True, methods=["put"])
    def inventory(self, request, pk=None):
        product_id = parse_uuid(pk)
        if product_id is None:
            return product_not_found()

        serializer = InventoryUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        quantity = serializer.validated_data["quantity"]

        result = self.get_service().update_inventory(product_id, request.user, quantity)
        if not result.ok:
            return self._error(result)

        data = ProductSerializer(result.value).data
        data["quantity"] = result.value.stock_quantity
        data["inventory"] = {"quantity": result.value.stock_quantity}
        return success_response(data, "Inventory updated successfully")
