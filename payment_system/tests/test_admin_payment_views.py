import uuid
from decimal import Decimal

from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from marketplace.tests.factories import (
    AdminFactory,
    BuyerProfileFactory,
    OrderFactory,
    OrderItemFactory,
    PaymentFactory,
    SellerProfileFactory,
)
from payment_system.models import Payment


class AdminPaymentViewTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.client.force_authenticate(user=AdminFactory())

        buyer_profile = BuyerProfileFactory(name="Joana Silva")
        seller_profile = SellerProfileFactory(company_name="Acme Metals Lda")
        self.order = OrderFactory(buyer=buyer_profile.user, seller_profile=seller_profile)
        self.payment = PaymentFactory(order=self.order, buyer_profile=buyer_profile, amount=Decimal("100.00"))

    def test_list_payments_with_names(self):
        response = self.client.get(reverse("admin_payments:payment-list"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["data"]["pagination"]["pageSize"], 20)
        (row,) = response.data["data"]["items"]
        self.assertEqual(row["sellerName"], "Acme Metals Lda")
        self.assertEqual(row["buyerName"], "Joana Silva")
        self.assertEqual(row["amount"], "100.00")

    def test_retrieve_payment(self):
        response = self.client.get(reverse("admin_payments:payment-detail", kwargs={"pk": str(self.payment.id)}))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["data"]["orderId"], str(self.order.id))

    def test_retrieve_unknown_payment(self):
        response = self.client.get(reverse("admin_payments:payment-detail", kwargs={"pk": str(uuid.uuid4())}))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["error"], "Payment not found")

    def test_retrieve_with_malformed_id(self):
        response = self.client.get(reverse("admin_payments:payment-detail", kwargs={"pk": "pay_1"}))
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "Invalid payment ID format")

    def test_payments_by_order(self):
        PaymentFactory()
        url = reverse("admin_payments:payment-by-order", kwargs={"order_id": str(self.order.id)})
        response = self.client.get(url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([row["id"] for row in response.data["data"]], [str(self.payment.id)])

    def test_payments_by_malformed_order_id(self):
        url = reverse("admin_payments:payment-by-order", kwargs={"order_id": "nope"})
        self.assertEqual(self.client.get(url).status_code, status.HTTP_400_BAD_REQUEST)

    def test_statistics(self):
        PaymentFactory(order=self.order, amount=Decimal("25.00"), status=Payment.STATUS_FAILED)
        response = self.client.get(reverse("admin_payments:payment-statistics"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        data = response.data["data"]
        self.assertEqual(data["totalPayments"], 2)
        self.assertEqual(data["totalAmount"], "125.00")
        self.assertEqual(data["failedCount"], 1)

    def test_backfill_descriptions(self):
        OrderItemFactory(order=self.order, product_name="M8 bolt", quantity=200)
        response = self.client.post(reverse("admin_payments:payment-backfill-descriptions"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["data"], {"updated": 1})
        self.payment.refresh_from_db()
        self.assertEqual(self.payment.description, "200 M8 bolt")

    def test_non_admin_is_forbidden(self):
        self.client.force_authenticate(user=self.order.buyer)
        response = self.client.get(reverse("admin_payments:payment-list"))
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
