"""
ProductService - Product CRUD & Inventory

Handles product browsing, seller-owned CRUD and stock updates.
Deleting a product deactivates it so existing orders keep their reference.
"""

from typing import Any, Dict

from django.db import transaction

from authentication.models import SellerProfile
from infrastructure.observability.tracing import tracer
from marketplace.catalog.domain.models import Product, ProductCategory
from marketplace.filters import ProductFilter
from utils.pagination import Page, PageRequest, paginate
from utils.service_base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok


PRODUCT_FIELDS = ("name", "description", "price", "category", "image", "stock_quantity")
FILTER_PARAMS = ("category", "categoryId", "sellerId", "minPrice", "maxPrice", "search")


class ProductService(BaseService):
    """
    Service for managing the product catalog.

    Responsibilities:
    - List active products with filtering
    - Get product details (active products only)
    - Create, update and deactivate products (owning seller only)
    - Set stock quantity

    All operations validate ownership and return ServiceResult.
    """

    @BaseService.log_performance
    def list_products(self, query_params) -> ServiceResult[Dict[str, Any]]:
        """
        List active products narrowed by ``ProductFilter``.

        Returns:
            ServiceResult with ``products``, ``total_count`` and the applied ``filters``
        """
        with tracer.start_as_current_span("catalog_list_products") as span:
            queryset = Product.objects.filter(is_active=True).select_related("seller_profile")
            filterset = ProductFilter(query_params, queryset=queryset)
            if not filterset.is_valid():
                field, messages = next(iter(filterset.errors.items()))
                return service_err(ErrorCodes.VALIDATION_ERROR, f"{field}: {messages[0]}")

            products = list(filterset.qs.order_by("-created_at"))
            applied = {key: query_params.get(key) for key in FILTER_PARAMS if query_params.get(key)}
            span.set_attribute("filters.count", len(applied))
            span.set_attribute("results.count", len(products))

            return service_ok({"products": products, "total_count": len(products), "filters": applied})

    def latest_products(self, page_request: PageRequest) -> ServiceResult[Page]:
        queryset = Product.objects.filter(is_active=True).order_by("-created_at")
        return service_ok(paginate(queryset, page_request))

    def get_product(self, product_id) -> ServiceResult[Product]:
        product = Product.objects.filter(id=product_id, is_active=True).first()
        if product is None:
            return service_err(ErrorCodes.PRODUCT_NOT_FOUND, "Product not found")
        return service_ok(product)

    def _owned_product(self, product_id, user) -> ServiceResult[Product]:
        product = Product.objects.select_related("seller_profile").filter(id=product_id).first()
        if product is None:
            return service_err(ErrorCodes.PRODUCT_NOT_FOUND, "Product not found")
        if product.seller_profile.user_id != user.id:
            return service_err(ErrorCodes.NOT_PRODUCT_OWNER, "You can only manage your own products")
        return service_ok(product)

    def _resolve_category(self, product: Product, data: Dict[str, Any]) -> ServiceResult[Product]:
        if "product_category_id" not in data:
            return service_ok(product)
        category_id = data["product_category_id"]
        if category_id is None:
            product.product_category = None
            return service_ok(product)

        category = ProductCategory.objects.filter(id=category_id, is_active=True).first()
        if category is None:
            return service_err(ErrorCodes.CATEGORY_NOT_FOUND, "Category not found")
        product.product_category = category
        if not data.get("category"):
            product.category = category.name
        return service_ok(product)

    @BaseService.log_performance
    def create_product(self, user, data: Dict[str, Any]) -> ServiceResult[Product]:
        seller_profile = SellerProfile.objects.filter(user=user).first()
        if seller_profile is None:
            return service_err(ErrorCodes.SELLER_PROFILE_NOT_FOUND, "Seller profile not found")

        product = Product(seller_profile=seller_profile)
        for field in PRODUCT_FIELDS:
            if field in data and data[field] is not None:
                setattr(product, field, data[field])
        result = self._resolve_category(product, data)
        if not result.ok:
            return result
        product.save()

        self.logger.info("Product %s created by seller %s", product.id, seller_profile.id)
        return service_ok(product)

    @BaseService.log_performance
    def update_product(self, product_id, user, data: Dict[str, Any]) -> ServiceResult[Product]:
        """Partial update; only keys present in ``data`` are changed."""
        result = self._owned_product(product_id, user)
        if not result.ok:
            return result
        product = result.value

        for field in PRODUCT_FIELDS + ("is_active",):
            if field in data and data[field] is not None:
                setattr(product, field, data[field])
        result = self._resolve_category(product, data)
        if not result.ok:
            return result
        product.save()
        return service_ok(product)

    @BaseService.log_performance
    def delete_product(self, product_id, user) -> ServiceResult[None]:
        result = self._owned_product(product_id, user)
        if not result.ok:
            return result
        product = result.value
        product.is_active = False
        product.save(update_fields=["is_active", "updated_at"])
        return service_ok()

    @BaseService.log_performance
    def update_inventory(self, product_id, user, quantity: int) -> ServiceResult[Product]:
        if quantity is None or quantity < 0:
            return service_err(ErrorCodes.VALIDATION_ERROR, "Quantity must be zero or greater")

        with transaction.atomic():
            result = self._owned_product(product_id, user)
            if not result.ok:
                return result
            product = Product.objects.select_for_update().get(id=result.value.id)
            product.stock_quantity = quantity
            product.save(update_fields=["stock_quantity", "updated_at"])

        return service_ok(product)
