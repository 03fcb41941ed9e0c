import pytest

from content.domain.models import ContentItem
from content.domain.services import ContentService
from marketplace.tests.factories import (
    AdminFactory,
    ContentCategoryFactory,
    ContentItemFactory,
    ContentTagFactory,
)
from utils.pagination import PageRequest
from utils.service_base import ErrorCodes


pytestmark = [pytest.mark.unit, pytest.mark.django_db]

FIRST_PAGE = PageRequest(page=1, page_size=10)


@pytest.fixture
def service():
    return ContentService()


def test_category_slug_is_derived_from_name(service):
    result = service.create_category(AdminFactory(), {"name": "Buying Guides"})

    assert result.ok
    assert result.value.slug == "buying-guides"


def test_duplicate_slug_is_a_conflict(service):
    ContentCategoryFactory(name="Buying Guides", slug="buying-guides")
    result = service.create_category(AdminFactory(), {"name": "Buying guides"})

    assert not result.ok
    assert result.error == ErrorCodes.SLUG_CONFLICT


def test_explicit_slug_is_normalized(service):
    result = service.create_tag({"name": "Steel", "slug": "Raw Steel"})
    assert result.value.slug == "raw-steel"


def test_category_with_items_cannot_be_deleted(service):
    item = ContentItemFactory()
    result = service.delete_category(item.category_id)

    assert not result.ok
    assert result.error == ErrorCodes.VALIDATION_ERROR


def test_create_published_item_stamps_publication(service):
    tag = ContentTagFactory()
    result = service.create_item(
        AdminFactory(),
        {"title": "Incoterms explained", "content": "FOB, CIF and friends", "is_published": True, "tag_ids": [tag.id]},
    )

    assert result.ok
    item = result.value
    assert item.slug == "incoterms-explained"
    assert item.published_at is not None
    assert list(item.tags.all()) == [tag]


def test_create_item_with_unknown_category(service):
    result = service.create_item(
        AdminFactory(), {"title": "Orphan", "content": "text", "category_id": ContentTagFactory().id}
    )
    assert result.error == ErrorCodes.CONTENT_NOT_FOUND


def test_unpublish_hides_item_from_public_listing(service):
    admin = AdminFactory()
    item = ContentItemFactory()
    service.set_published(item.id, admin, False)

    page = service.list_published(FIRST_PAGE).value
    assert page.total_items == 0
    assert service.get_published_by_slug(item.slug).error == ErrorCodes.CONTENT_NOT_FOUND


def test_public_listing_filters_by_category_and_type(service):
    news = ContentItemFactory(content_type=ContentItem.TYPE_NEWS)
    ContentItemFactory()
    ContentItemFactory(is_active=False)

    assert service.list_published(FIRST_PAGE).value.total_items == 2
    assert service.list_published(FIRST_PAGE, content_type="news").value.items == [news]
    by_category = service.list_published(FIRST_PAGE, category_slug=news.category.slug).value
    assert by_category.items == [news]


def test_category_listing_requires_active_category(service):
    item = ContentItemFactory()
    item.category.is_active = False
    item.category.save()

    result = service.list_published_in_category(item.category.slug, FIRST_PAGE)
    assert result.error == ErrorCodes.CONTENT_NOT_FOUND


def test_add_and_remove_tag(service):
    item = ContentItemFactory()
    tag = ContentTagFactory()

    assert list(service.add_tag(item.id, tag.id).value.tags.all()) == [tag]
    assert list(service.remove_tag(item.id, tag.id).value.tags.all()) == []
