from datetime import timedelta
from decimal import Decimal

from django.test import TestCase
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APIClient

from marketplace.models import Order
from marketplace.tests.factories import (
    AdminFactory,
    BuyerFactory,
    OrderFactory,
    ProductFactory,
    RFQFactory,
    SellerProfileFactory,
)


class BusinessPurchasesViewTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.buyer = BuyerFactory()
        self.client.force_authenticate(user=self.buyer)
        self.supplier_a = SellerProfileFactory(company_name="Alpha Lda")
        self.supplier_b = SellerProfileFactory(company_name="Beta SA")

        OrderFactory(buyer=self.buyer, seller_profile=self.supplier_a, total_amount=Decimal("100.00"))
        OrderFactory(buyer=self.buyer, seller_profile=self.supplier_a, total_amount=Decimal("50.00"))
        OrderFactory(buyer=self.buyer, seller_profile=self.supplier_b, total_amount=Decimal("30.00"))
        OrderFactory(
            buyer=self.buyer,
            seller_profile=self.supplier_b,
            total_amount=Decimal("999.00"),
            status=Order.STATUS_CANCELLED,
        )
        OrderFactory(total_amount=Decimal("500.00"))

        self.url = reverse("marketplace:business-purchases")

    def test_totals_exclude_cancelled_and_foreign_orders(self):
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, status.HTTP_200_OK)

        data = response.data["data"]
        self.assertEqual(data["totalOrders"], 3)
        self.assertEqual(data["totalSpent"], Decimal("180.00"))
        self.assertEqual(data["averageOrderValue"], Decimal("60.00"))
        self.assertEqual(data["period"], {"startDate": None, "endDate": None})

    def test_top_suppliers_are_ranked_by_spend(self):
        suppliers = self.client.get(self.url).data["data"]["topSuppliers"]
        self.assertEqual([s["supplierName"] for s in suppliers], ["Alpha Lda", "Beta SA"])
        self.assertEqual(suppliers[0]["orderCount"], 2)
        self.assertEqual(suppliers[0]["totalAmount"], Decimal("150.00"))

    def test_monthly_trend_groups_by_month(self):
        trend = self.client.get(self.url).data["data"]["monthlyTrend"]
        self.assertEqual(len(trend), 1)
        self.assertEqual(trend[0]["month"], timezone.now().strftime("%Y-%m"))
        self.assertEqual(trend[0]["orders"], 3)

    def test_date_range_filters_orders(self):
        old = OrderFactory(buyer=self.buyer, total_amount=Decimal("10.00"))
        Order.objects.filter(id=old.id).update(created_at=timezone.now() - timedelta(days=400))

        start = (timezone.now() - timedelta(days=1)).date().isoformat()
        response = self.client.get(self.url, {"startDate": start})
        self.assertEqual(response.data["data"]["totalOrders"], 3)

        end = (timezone.now() - timedelta(days=300)).date().isoformat()
        response = self.client.get(self.url, {"endDate": end})
        self.assertEqual(response.data["data"]["totalOrders"], 1)

    def test_invalid_date_is_rejected(self):
        response = self.client.get(self.url, {"startDate": "yesterday"})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "Invalid date format. Use YYYY-MM-DD")

    def test_requires_authentication(self):
        self.client.force_authenticate(user=None)
        self.assertEqual(self.client.get(self.url).status_code, status.HTTP_401_UNAUTHORIZED)


class SupplierPerformanceViewTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.buyer = BuyerFactory()
        self.client.force_authenticate(user=self.buyer)
        self.supplier = SellerProfileFactory(average_rating=Decimal("4.50"))

        OrderFactory(buyer=self.buyer, seller_profile=self.supplier, status=Order.STATUS_DELIVERED)
        OrderFactory(buyer=self.buyer, seller_profile=self.supplier, status=Order.STATUS_SHIPPED)
        self.url = reverse("marketplace:supplier-performance")

    def test_delivery_rate_and_rating(self):
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, status.HTTP_200_OK)

        data = response.data["data"]
        self.assertEqual(data["period"], "quarter")
        supplier = data["suppliers"][0]
        self.assertEqual(supplier["totalOrders"], 2)
        self.assertEqual(supplier["deliveredOrders"], 1)
        self.assertEqual(supplier["onTimeDeliveryRate"], 50.0)
        self.assertEqual(supplier["averageRating"], 4.5)
        self.assertEqual(data["summary"]["totalSuppliers"], 1)

    def test_period_all_includes_old_orders(self):
        old = OrderFactory(buyer=self.buyer, status=Order.STATUS_DELIVERED)
        Order.objects.filter(id=old.id).update(created_at=timezone.now() - timedelta(days=800))

        self.assertEqual(len(self.client.get(self.url, {"period": "year"}).data["data"]["suppliers"]), 1)
        self.assertEqual(len(self.client.get(self.url, {"period": "all"}).data["data"]["suppliers"]), 2)

    def test_unknown_period_is_rejected(self):
        response = self.client.get(self.url, {"period": "decade"})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_no_orders_gives_empty_summary(self):
        self.client.force_authenticate(user=BuyerFactory())
        data = self.client.get(self.url).data["data"]
        self.assertEqual(data["suppliers"], [])
        self.assertEqual(data["summary"], {"totalSuppliers": 0, "averageDeliveryRate": 0.0, "averageRating": 0.0})


class AdminDashboardViewTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.admin = AdminFactory()
        self.url = reverse("admin_marketplace:dashboard")

    def test_overview_counts(self):
        ProductFactory()
        ProductFactory(is_active=False)
        RFQFactory()
        OrderFactory(total_amount=Decimal("40.00"))
        OrderFactory(total_amount=Decimal("60.00"), status=Order.STATUS_REFUNDED)

        self.client.force_authenticate(user=self.admin)
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, status.HTTP_200_OK)

        data = response.data["data"]
        self.assertEqual(data["products"], {"total": 2, "active": 1})
        self.assertEqual(data["rfqs"], {"total": 1, "open": 1})
        self.assertEqual(data["orders"]["total"], 2)
        self.assertEqual(data["orders"]["byStatus"]["Refunded"], 1)
        self.assertEqual(data["revenue"], Decimal("40.00"))
        self.assertEqual(data["users"]["byRole"]["Admin"], 1)
        self.assertEqual(data["users"]["total"], sum(data["users"]["byRole"].values()))

    def test_seller_is_forbidden(self):
        self.client.force_authenticate(user=SellerProfileFactory().user)
        self.assertEqual(self.client.get(self.url).status_code, status.HTTP_403_FORBIDDEN)
