import uuid

from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from content.domain.models import ContentCategory, ContentItem
from marketplace.tests.factories import (
    AdminFactory,
    BuyerFactory,
    ContentCategoryFactory,
    ContentItemFactory,
    ContentTagFactory,
)


class AdminContentViewTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.admin = AdminFactory()
        self.client.force_authenticate(user=self.admin)

    def test_create_category(self):
        response = self.client.post(
            reverse("admin_content:category-list"), {"name": "Buying Guides", "displayOrder": 2}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["data"]["slug"], "buying-guides")
        self.assertEqual(ContentCategory.objects.get().created_by, self.admin)

    def test_create_category_requires_name(self):
        response = self.client.post(reverse("admin_content:category-list"), {}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "Name is required")

    def test_slug_conflict(self):
        ContentCategoryFactory(name="News", slug="news")
        response = self.client.post(reverse("admin_content:category-list"), {"name": "News"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)

    def test_update_and_delete_tag(self):
        tag = ContentTagFactory()
        url = reverse("admin_content:tag-detail", kwargs={"pk": str(tag.id)})

        response = self.client.put(url, {"description": "Steel sourcing"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["data"]["description"], "Steel sourcing")

        self.assertEqual(self.client.delete(url).status_code, status.HTTP_204_NO_CONTENT)
        self.assertEqual(self.client.get(url).status_code, status.HTTP_404_NOT_FOUND)

    def test_create_item_with_category_and_tags(self):
        category = ContentCategoryFactory()
        tag = ContentTagFactory()
        payload = {
            "title": "Writing a good RFQ",
            "content": "Be specific about quantities.",
            "type": "blog",
            "categoryId": str(category.id),
            "tagIds": [str(tag.id)],
        }
        response = self.client.post(reverse("admin_content:item-list"), payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        data = response.data["data"]
        self.assertEqual(data["slug"], "writing-a-good-rfq")
        self.assertEqual(data["category"]["id"], str(category.id))
        self.assertEqual([t["id"] for t in data["tags"]], [str(tag.id)])
        self.assertFalse(data["isPublished"])

    def test_create_item_requires_content(self):
        response = self.client.post(reverse("admin_content:item-list"), {"title": "Empty"}, format="json")
        self.assertEqual(response.data["error"], "Content is required")

    def test_list_items_filters_by_publication(self):
        published = ContentItemFactory()
        ContentItemFactory(is_published=False, published_at=None)

        response = self.client.get(reverse("admin_content:item-list"), {"isPublished": "true"})
        self.assertEqual([item["id"] for item in response.data["data"]["items"]], [str(published.id)])

    def test_publish_and_unpublish(self):
        item = ContentItemFactory(is_published=False, published_at=None)

        response = self.client.post(reverse("admin_content:item-publish", kwargs={"pk": str(item.id)}))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data["data"]["isPublished"])
        self.assertIsNotNone(response.data["data"]["publishedAt"])

        self.client.post(reverse("admin_content:item-unpublish", kwargs={"pk": str(item.id)}))
        item.refresh_from_db()
        self.assertFalse(item.is_published)

    def test_tag_assignment(self):
        item = ContentItemFactory()
        tag = ContentTagFactory()
        url = reverse("admin_content:item-tag", kwargs={"pk": str(item.id), "tag_id": str(tag.id)})

        response = self.client.post(url)
        self.assertEqual(response.data["message"], "Tag added successfully")
        self.assertEqual(item.tags.count(), 1)

        self.client.delete(url)
        self.assertEqual(item.tags.count(), 0)

    def test_unknown_item_returns_404(self):
        url = reverse("admin_content:item-detail", kwargs={"pk": str(uuid.uuid4())})
        response = self.client.get(url)
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["error"], "Content item not found")

    def test_non_admin_is_forbidden(self):
        self.client.force_authenticate(user=BuyerFactory())
        response = self.client.get(reverse("admin_content:category-list"))
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)


class PublicContentViewTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.category = ContentCategoryFactory(name="Guides", slug="guides")
        self.item = ContentItemFactory(category=self.category, slug="writing-an-rfq")
        self.draft = ContentItemFactory(category=self.category, is_published=False, published_at=None)

    def test_list_shows_published_only(self):
        response = self.client.get(reverse("content:list"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([item["id"] for item in response.data["data"]["items"]], [str(self.item.id)])

    def test_list_filters_by_type(self):
        response = self.client.get(reverse("content:list"), {"type": ContentItem.TYPE_NEWS})
        self.assertEqual(response.data["data"]["items"], [])

    def test_categories_and_tags_show_active_only(self):
        ContentCategoryFactory(is_active=False)
        ContentTagFactory(name="steel", slug="steel")
        ContentTagFactory(is_active=False)

        categories = self.client.get(reverse("content:categories")).data["data"]
        self.assertEqual([c["slug"] for c in categories], ["guides"])
        tags = self.client.get(reverse("content:tags")).data["data"]
        self.assertEqual([t["slug"] for t in tags], ["steel"])

    def test_category_content(self):
        response = self.client.get(reverse("content:category", kwargs={"slug": "guides"}))
        self.assertEqual(response.data["data"]["pagination"]["totalItems"], 1)

    def test_unknown_category_returns_404(self):
        response = self.client.get(reverse("content:category", kwargs={"slug": "missing"}))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_detail_by_slug(self):
        response = self.client.get(reverse("content:detail", kwargs={"slug": "writing-an-rfq"}))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["data"]["id"], str(self.item.id))

    def test_draft_is_not_public(self):
        response = self.client.get(reverse("content:detail", kwargs={"slug": self.draft.slug}))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["error"], "Content not found")
