"""
Product categories and their verified-badge configuration.

Categories form a tree through ``parent``. Names are unique across the
whole tree. A category configuration decides whether sellers holding the
right approved certifications get the verified badge for that category.
"""

from typing import Any, Dict

from django.db import IntegrityError, transaction

from authentication.domain.models import Certification, SellerProfile
from marketplace.catalog.domain.models import CategoryConfiguration, ProductCategory
from utils.service_base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok


CATEGORY_FIELDS = ("name", "description", "display_order", "is_active")
CONFIGURATION_FIELDS = (
    "required_certifications",
    "additional_fields",
    "allows_verified_badge",
    "min_certifications_for_badge",
)


class ProductCategoryService(BaseService):
    def _categories(self):
        return ProductCategory.objects.select_related("parent")

    def list_categories(self, active_only: bool = False) -> ServiceResult[list]:
        queryset = self._categories()
        if active_only:
            queryset = queryset.filter(is_active=True)
        return service_ok(list(queryset))

    def list_root_categories(self) -> ServiceResult[list]:
        return service_ok(list(self._categories().filter(parent__isnull=True, is_active=True)))

    def list_subcategories(self, parent_id) -> ServiceResult[list]:
        if not ProductCategory.objects.filter(id=parent_id).exists():
            return service_err(ErrorCodes.CATEGORY_NOT_FOUND, "Category not found")
        return service_ok(list(self._categories().filter(parent_id=parent_id, is_active=True)))

    def get_category(self, category_id, active_only: bool = False) -> ServiceResult[ProductCategory]:
        queryset = self._categories().filter(id=category_id)
        if active_only:
            queryset = queryset.filter(is_active=True)
        category = queryset.first()
        if category is None:
            return service_err(ErrorCodes.CATEGORY_NOT_FOUND, "Category not found")
        return service_ok(category)

    def _resolve_parent(self, category: ProductCategory, data: Dict[str, Any]) -> ServiceResult:
        if "parent_id" not in data:
            return service_ok(category)
        parent_id = data["parent_id"]
        if parent_id is None:
            category.parent = None
            return service_ok(category)

        parent = ProductCategory.objects.filter(id=parent_id).first()
        if parent is None:
            return service_err(ErrorCodes.CATEGORY_NOT_FOUND, "Parent category not found")
        if parent.id == category.id or category.id in parent.ancestor_ids():
            return service_err(ErrorCodes.VALIDATION_ERROR, "A category cannot be nested under itself")
        category.parent = parent
        return service_ok(category)

    def _save(self, category: ProductCategory) -> ServiceResult[ProductCategory]:
        conflict = f"A category named '{category.name}' already exists"
        if ProductCategory.objects.filter(name__iexact=category.name).exclude(pk=category.pk).exists():
            return service_err(ErrorCodes.CATEGORY_CONFLICT, conflict)
        try:
            with transaction.atomic():
                category.save()
        except IntegrityError:
            return service_err(ErrorCodes.CATEGORY_CONFLICT, conflict)
        return service_ok(category)

    @BaseService.log_performance
    def create_category(self, user, data: Dict[str, Any]) -> ServiceResult[ProductCategory]:
        category = ProductCategory(created_by=user, updated_by=user)
        for field in CATEGORY_FIELDS:
            if field in data:
                setattr(category, field, data[field])
        result = self._resolve_parent(category, data)
        if not result.ok:
            return result

        result = self._save(category)
        if result.ok:
            self.logger.info("Category %s created by %s", category.id, user.id)
        return result

    @BaseService.log_performance
    def update_category(self, category_id, user, data: Dict[str, Any]) -> ServiceResult[ProductCategory]:
        result = self.get_category(category_id)
        if not result.ok:
            return result
        category = result.value

        for field in CATEGORY_FIELDS:
            if field in data:
                setattr(category, field, data[field])
        result = self._resolve_parent(category, data)
        if not result.ok:
            return result
        category.updated_by = user
        return self._save(category)

    @BaseService.log_performance
    def delete_category(self, category_id) -> ServiceResult[None]:
        result = self.get_category(category_id)
        if not result.ok:
            return result
        category = result.value

        if category.subcategories.exists():
            return service_err(ErrorCodes.CATEGORY_IN_USE, "Cannot delete a category that has subcategories")
        if category.products.exists():
            return service_err(ErrorCodes.CATEGORY_IN_USE, "Cannot delete a category that still has products")
        category.delete()
        return service_ok()


class CategoryConfigurationService(BaseService):
    """
    Badge rules per category.

    A seller qualifies for a category's verified badge when the category
    allows badges, the seller holds at least the minimum number of approved
    certifications, and every required certification name matches one of
    them (case-insensitive).
    """

    def get_configuration(self, category_id) -> ServiceResult[CategoryConfiguration]:
        configuration = CategoryConfiguration.objects.filter(category_id=category_id).first()
        if configuration is None:
            return service_err(ErrorCodes.CATEGORY_CONFIGURATION_NOT_FOUND, "Category configuration not found")
        return service_ok(configuration)

    @BaseService.log_performance
    def create_configuration(self, category_id, data: Dict[str, Any]) -> ServiceResult[CategoryConfiguration]:
        if not ProductCategory.objects.filter(id=category_id).exists():
            return service_err(ErrorCodes.CATEGORY_NOT_FOUND, "Category not found")
        if CategoryConfiguration.objects.filter(category_id=category_id).exists():
            return service_err(
                ErrorCodes.CATEGORY_CONFIGURATION_EXISTS, "Configuration already exists for this category"
            )

        configuration = CategoryConfiguration(category_id=category_id)
        for field in CONFIGURATION_FIELDS:
            if field in data and data[field] is not None:
                setattr(configuration, field, data[field])
        try:
            with transaction.atomic():
                configuration.save()
        except IntegrityError:
            return service_err(
                ErrorCodes.CATEGORY_CONFIGURATION_EXISTS, "Configuration already exists for this category"
            )
        return service_ok(configuration)

    @BaseService.log_performance
    def update_configuration(self, category_id, data: Dict[str, Any]) -> ServiceResult[CategoryConfiguration]:
        result = self.get_configuration(category_id)
        if not result.ok:
            return result
        configuration = result.value
        for field in CONFIGURATION_FIELDS:
            if field in data and data[field] is not None:
                setattr(configuration, field, data[field])
        configuration.save()
        return service_ok(configuration)

    @BaseService.log_performance
    def delete_configuration(self, category_id) -> ServiceResult[None]:
        result = self.get_configuration(category_id)
        if not result.ok:
            return result
        result.value.delete()
        return service_ok()

    def can_seller_receive_badge(self, seller_profile: SellerProfile, category_id) -> bool:
        configuration = CategoryConfiguration.objects.filter(category_id=category_id).first()
        if configuration is None or not configuration.allows_verified_badge:
            return False

        approved = [
            name.lower()
            for name in seller_profile.certifications.filter(status=Certification.STATUS_APPROVED).values_list(
                "name", flat=True
            )
        ]
        if len(approved) < configuration.min_certifications_for_badge:
            return False
        return all(required.lower() in approved for required in configuration.required_certification_names)

    @BaseService.log_performance
    def update_seller_badge(self, user, category_id) -> ServiceResult[Dict[str, Any]]:
        """Recompute the seller's verified badge against one category's rules."""
        seller_profile = SellerProfile.objects.filter(user=user).first()
        if seller_profile is None:
            return service_err(ErrorCodes.SELLER_PROFILE_NOT_FOUND, "Seller profile not found")
        if not ProductCategory.objects.filter(id=category_id, is_active=True).exists():
            return service_err(ErrorCodes.CATEGORY_NOT_FOUND, "Category not found")

        eligible = self.can_seller_receive_badge(seller_profile, category_id)
        if seller_profile.has_verified_badge != eligible:
            seller_profile.has_verified_badge = eligible
            seller_profile.save(update_fields=["has_verified_badge", "updated_at"])

        self.logger.info("Seller %s badge for category %s: %s", seller_profile.id, category_id, eligible)
        return service_ok(
            {"seller_profile": seller_profile, "category_id": category_id, "has_verified_badge": eligible}
        )
