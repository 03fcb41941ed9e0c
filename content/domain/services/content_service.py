"""
ContentService - Editorial content

Admins manage categories, tags and items; the public site reads only items
that are both published and active.
"""

from typing import Any, Dict, Optional

from django.db import IntegrityError, transaction
from django.utils import timezone
from django.utils.text import slugify

from content.domain.models import ContentCategory, ContentItem, ContentTag
from utils.pagination import Page, PageRequest, paginate
from utils.service_base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok


CATEGORY_FIELDS = ("name", "slug", "description", "display_order", "is_active")
TAG_FIELDS = ("name", "slug", "description", "is_active")
ITEM_FIELDS = (
    "title",
    "slug",
    "content",
    "excerpt",
    "meta_title",
    "meta_description",
    "content_type",
    "is_active",
)


class ContentService(BaseService):
    """
    Service for content management.

    Slugs are unique per model and default to the slugified name or title.
    """

    # Shared helpers

    def _save(self, instance, model, source_field: str, slug: Optional[str]) -> ServiceResult:
        """Assign a slug (explicit or derived) and save, reporting conflicts."""
        slug = slugify(slug or getattr(instance, source_field) or "")
        if not slug:
            return service_err(ErrorCodes.VALIDATION_ERROR, "A slug could not be derived; provide one explicitly")
        if model.objects.filter(slug=slug).exclude(pk=instance.pk).exists():
            return service_err(ErrorCodes.SLUG_CONFLICT, f"Slug '{slug}' is already in use")

        instance.slug = slug
        try:
            with transaction.atomic():
                instance.save()
        except IntegrityError:
            return service_err(ErrorCodes.SLUG_CONFLICT, f"Slug '{slug}' is already in use")
        return service_ok(instance)

    @staticmethod
    def _apply(instance, data: Dict[str, Any], fields) -> None:
        for field in fields:
            if field != "slug" and field in data:
                setattr(instance, field, data[field])

    # Categories

    def list_categories(self, active_only: bool = False):
        queryset = ContentCategory.objects.all()
        if active_only:
            queryset = queryset.filter(is_active=True)
        return service_ok(list(queryset))

    def get_category(self, category_id) -> ServiceResult[ContentCategory]:
        category = ContentCategory.objects.filter(id=category_id).first()
        if category is None:
            return service_err(ErrorCodes.CONTENT_NOT_FOUND, "Content category not found")
        return service_ok(category)

    @BaseService.log_performance
    def create_category(self, user, data: Dict[str, Any]) -> ServiceResult[ContentCategory]:
        category = ContentCategory(created_by=user)
        self._apply(category, data, CATEGORY_FIELDS)
        return self._save(category, ContentCategory, "name", data.get("slug"))

    @BaseService.log_performance
    def update_category(self, category_id, data: Dict[str, Any]) -> ServiceResult[ContentCategory]:
        result = self.get_category(category_id)
        if not result.ok:
            return result
        category = result.value
        self._apply(category, data, CATEGORY_FIELDS)
        return self._save(category, ContentCategory, "name", data.get("slug") or category.slug)

    @BaseService.log_performance
    def delete_category(self, category_id) -> ServiceResult[None]:
        result = self.get_category(category_id)
        if not result.ok:
            return result
        category = result.value
        if category.items.exists():
            return service_err(ErrorCodes.VALIDATION_ERROR, "Cannot delete a category that still has content items")
        category.delete()
        return service_ok()

    # Tags

    def list_tags(self, active_only: bool = False):
        queryset = ContentTag.objects.all()
        if active_only:
            queryset = queryset.filter(is_active=True)
        return service_ok(list(queryset))

    def get_tag(self, tag_id) -> ServiceResult[ContentTag]:
        tag = ContentTag.objects.filter(id=tag_id).first()
        if tag is None:
            return service_err(ErrorCodes.CONTENT_NOT_FOUND, "Content tag not found")
        return service_ok(tag)

    @BaseService.log_performance
    def create_tag(self, data: Dict[str, Any]) -> ServiceResult[ContentTag]:
        tag = ContentTag()
        self._apply(tag, data, TAG_FIELDS)
        return self._save(tag, ContentTag, "name", data.get("slug"))

    @BaseService.log_performance
    def update_tag(self, tag_id, data: Dict[str, Any]) -> ServiceResult[ContentTag]:
        result = self.get_tag(tag_id)
        if not result.ok:
            return result
        tag = result.value
        self._apply(tag, data, TAG_FIELDS)
        return self._save(tag, ContentTag, "name", data.get("slug") or tag.slug)

    @BaseService.log_performance
    def delete_tag(self, tag_id) -> ServiceResult[None]:
        result = self.get_tag(tag_id)
        if not result.ok:
            return result
        result.value.delete()
        return service_ok()

    # Items (admin)

    def _items(self):
        return ContentItem.objects.select_related("category").prefetch_related("tags")

    def list_items(
        self, page_request: PageRequest, category_id=None, content_type: str = None, is_published: bool = None
    ) -> ServiceResult[Page]:
        queryset = self._items()
        if category_id:
            queryset = queryset.filter(category_id=category_id)
        if content_type:
            queryset = queryset.filter(content_type=content_type)
        if is_published is not None:
            queryset = queryset.filter(is_published=is_published)
        return service_ok(paginate(queryset.order_by("-created_at"), page_request))

    def get_item(self, item_id) -> ServiceResult[ContentItem]:
        item = self._items().filter(id=item_id).first()
        if item is None:
            return service_err(ErrorCodes.CONTENT_NOT_FOUND, "Content item not found")
        return service_ok(item)

    def _resolve_category(self, item, data) -> ServiceResult:
        if "category_id" not in data:
            return service_ok(item)
        if data["category_id"] is None:
            item.category = None
            return service_ok(item)
        result = self.get_category(data["category_id"])
        if not result.ok:
            return result
        item.category = result.value
        return service_ok(item)

    @BaseService.log_performance
    def create_item(self, user, data: Dict[str, Any]) -> ServiceResult[ContentItem]:
        item = ContentItem(created_by=user, updated_by=user)
        self._apply(item, data, ITEM_FIELDS)
        result = self._resolve_category(item, data)
        if not result.ok:
            return result

        if data.get("is_published"):
            item.is_published = True
            item.published_at = timezone.now()

        result = self._save(item, ContentItem, "title", data.get("slug"))
        if not result.ok:
            return result
        if data.get("tag_ids"):
            item.tags.set(ContentTag.objects.filter(id__in=data["tag_ids"]))
        return self.get_item(item.id)

    @BaseService.log_performance
    def update_item(self, item_id, user, data: Dict[str, Any]) -> ServiceResult[ContentItem]:
        result = self.get_item(item_id)
        if not result.ok:
            return result
        item = result.value

        self._apply(item, data, ITEM_FIELDS)
        result = self._resolve_category(item, data)
        if not result.ok:
            return result
        item.updated_by = user

        result = self._save(item, ContentItem, "title", data.get("slug") or item.slug)
        if not result.ok:
            return result
        if "tag_ids" in data:
            item.tags.set(ContentTag.objects.filter(id__in=data["tag_ids"] or []))
        return self.get_item(item.id)

    @BaseService.log_performance
    def delete_item(self, item_id) -> ServiceResult[None]:
        result = self.get_item(item_id)
        if not result.ok:
            return result
        result.value.delete()
        return service_ok()

    @BaseService.log_performance
    def set_published(self, item_id, user, published: bool) -> ServiceResult[ContentItem]:
        result = self.get_item(item_id)
        if not result.ok:
            return result
        item = result.value

        item.is_published = published
        if published:
            item.published_at = timezone.now()
        item.updated_by = user
        item.save(update_fields=["is_published", "published_at", "updated_by", "updated_at"])
        return service_ok(item)

    def add_tag(self, item_id, tag_id) -> ServiceResult[ContentItem]:
        item_result = self.get_item(item_id)
        if not item_result.ok:
            return item_result
        tag_result = self.get_tag(tag_id)
        if not tag_result.ok:
            return tag_result
        item_result.value.tags.add(tag_result.value)
        return self.get_item(item_id)

    def remove_tag(self, item_id, tag_id) -> ServiceResult[ContentItem]:
        item_result = self.get_item(item_id)
        if not item_result.ok:
            return item_result
        tag_result = self.get_tag(tag_id)
        if not tag_result.ok:
            return tag_result
        item_result.value.tags.remove(tag_result.value)
        return self.get_item(item_id)

    # Public

    def _public_items(self):
        return self._items().filter(is_published=True, is_active=True)

    def list_published(
        self, page_request: PageRequest, category_slug: str = None, content_type: str = None
    ) -> ServiceResult[Page]:
        queryset = self._public_items()
        if category_slug:
            queryset = queryset.filter(category__slug=category_slug)
        if content_type:
            queryset = queryset.filter(content_type=content_type)
        return service_ok(paginate(queryset, page_request))

    def list_published_in_category(self, slug: str, page_request: PageRequest) -> ServiceResult[Page]:
        category = ContentCategory.objects.filter(slug=slug, is_active=True).first()
        if category is None:
            return service_err(ErrorCodes.CONTENT_NOT_FOUND, "Content category not found")
        return service_ok(paginate(self._public_items().filter(category=category), page_request))

    def get_published_by_slug(self, slug: str) -> ServiceResult[ContentItem]:
        item = self._public_items().filter(slug=slug).first()
        if item is None:
            return service_err(ErrorCodes.CONTENT_NOT_FOUND, "Content not found")
        return service_ok(item)
