from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from marketplace.models import RFQ
from marketplace.tests.factories import ProductFactory, RFQFactory, SellerProfileFactory


class SearchViewIntegrationTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.seller = SellerProfileFactory(company_name="Acme Steel", industry="Metals")
        SellerProfileFactory(company_name="Unverified Steel", is_verified=False)
        self.product = ProductFactory(seller_profile=self.seller, name="Steel beam")
        self.rfq = RFQFactory(title="Steel beams for warehouse")
        RFQFactory(title="Steel sheets closed", status=RFQ.STATUS_CLOSED)

        self.search_url = reverse("marketplace:search-list")

    def test_search_requires_query_or_type(self):
        response = self.client.get(self.search_url)
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "A search query or type is required")

    def test_search_rejects_unknown_type(self):
        response = self.client.get(self.search_url, {"type": "invoices"})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "Invalid search type. Must be one of: sellers, products, rfqs")

    def test_search_all_types_tags_each_result(self):
        response = self.client.get(self.search_url, {"query": "steel"})
        self.assertEqual(response.status_code, status.HTTP_200_OK)

        items = response.data["data"]["items"]
        self.assertEqual([item["type"] for item in items], ["seller", "product", "rfq"])
        self.assertEqual(items[0]["companyName"], "Acme Steel")
        self.assertEqual(items[1]["id"], str(self.product.id))
        self.assertEqual(items[2]["id"], str(self.rfq.id))

    def test_search_by_type_only(self):
        response = self.client.get(self.search_url, {"type": "products"})
        items = response.data["data"]["items"]
        self.assertEqual(len(items), 1)
        self.assertEqual(items[0]["type"], "product")

    def test_search_pagination(self):
        response = self.client.get(self.search_url, {"query": "steel", "pageSize": 2, "page": 2})
        data = response.data["data"]
        self.assertEqual(len(data["items"]), 1)
        self.assertEqual(data["pagination"]["totalItems"], 3)
        self.assertTrue(data["pagination"]["hasPreviousPage"])
        self.assertFalse(data["pagination"]["hasNextPage"])

    def test_search_sellers_filters_by_industry(self):
        SellerProfileFactory(company_name="Acme Plastics", industry="Plastics")
        response = self.client.get(reverse("marketplace:search-sellers"), {"industry": "metals"})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        names = [item["companyName"] for item in response.data["data"]["items"]]
        self.assertEqual(names, ["Acme Steel"])

    def test_search_products_by_seller(self):
        ProductFactory(name="Steel pipe")
        response = self.client.get(reverse("marketplace:search-products"), {"sellerId": str(self.seller.id)})
        ids = [item["id"] for item in response.data["data"]["items"]]
        self.assertEqual(ids, [str(self.product.id)])

    def test_search_rfqs_excludes_closed(self):
        response = self.client.get(reverse("marketplace:search-rfqs"), {"query": "steel"})
        ids = [item["id"] for item in response.data["data"]["items"]]
        self.assertEqual(ids, [str(self.rfq.id)])
