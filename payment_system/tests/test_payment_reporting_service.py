from decimal import Decimal

from django.test import TestCase

from marketplace.tests.factories import (
    BuyerProfileFactory,
    OrderFactory,
    OrderItemFactory,
    PaymentFactory,
    SellerProfileFactory,
)
from payment_system.domain.services.payment_reporting_service import (
    PaymentReportingService,
    describe_order_items,
)
from payment_system.models import Payment
from utils.pagination import PageRequest
from utils.service_base import ErrorCodes


class PaymentReportingServiceTest(TestCase):
    def setUp(self):
        self.service = PaymentReportingService()
        self.buyer_profile = BuyerProfileFactory(name="Joana Silva")
        self.seller_profile = SellerProfileFactory(company_name="Acme Metals Lda")
        self.order = OrderFactory(
            buyer=self.buyer_profile.user, seller_profile=self.seller_profile, total_amount=Decimal("250.00")
        )

    def test_names_come_from_profiles(self):
        payment = PaymentFactory(order=self.order, buyer_profile=self.buyer_profile)

        result = self.service.get_payment(payment.id)
        self.assertTrue(result.ok)
        self.assertEqual(result.value.seller_name, "Acme Metals Lda")
        self.assertEqual(result.value.buyer_name, "Joana Silva")

    def test_buyer_name_falls_back_to_order_buyer(self):
        payment = PaymentFactory(order=self.order, buyer_profile=None)
        self.assertEqual(self.service.get_payment(payment.id).value.buyer_name, "Joana Silva")

    def test_buyer_name_is_empty_without_any_profile(self):
        payment = PaymentFactory(buyer_profile=None)
        self.assertEqual(self.service.get_payment(payment.id).value.buyer_name, "")

    def test_unknown_payment(self):
        PaymentFactory(order=self.order)
        result = self.service.get_payment(self.order.id)
        self.assertEqual(result.error, ErrorCodes.PAYMENT_NOT_FOUND)

    def test_list_payments_is_paged(self):
        for _ in range(3):
            PaymentFactory(order=self.order)

        page = self.service.list_payments(PageRequest(page=2, page_size=2)).value
        self.assertEqual(page.total_items, 3)
        self.assertEqual(len(page.items), 1)
        self.assertTrue(hasattr(page.items[0], "seller_name"))

    def test_payments_for_order(self):
        mine = PaymentFactory(order=self.order)
        PaymentFactory()

        payments = self.service.payments_for_order(self.order.id).value
        self.assertEqual([p.id for p in payments], [mine.id])

    def test_statistics(self):
        PaymentFactory(order=self.order, amount=Decimal("100.00"))
        PaymentFactory(order=self.order, amount=Decimal("40.00"), status=Payment.STATUS_PENDING)
        PaymentFactory(order=self.order, amount=Decimal("10.00"), status=Payment.STATUS_FAILED)

        stats = self.service.statistics().value
        self.assertEqual(stats["totalPayments"], 3)
        self.assertEqual(stats["totalAmount"], Decimal("150.00"))
        self.assertEqual(stats["completedCount"], 1)
        self.assertEqual(stats["pendingCount"], 1)
        self.assertEqual(stats["failedCount"], 1)

    def test_statistics_without_payments(self):
        self.assertEqual(self.service.statistics().value["totalAmount"], Decimal("0.00"))

    def test_backfill_rewrites_generated_descriptions_only(self):
        OrderItemFactory(order=self.order, product_name="M8 bolt", quantity=200)
        OrderItemFactory(order=self.order, product_name="M8 nut", quantity=150)
        generated = PaymentFactory(
            order=self.order, description=f"{Payment.AUTO_DESCRIPTION_PREFIX} {self.order.id}"
        )
        blank = PaymentFactory(order=self.order, description="")
        manual = PaymentFactory(order=self.order, description="Deposit for March batch")
        no_items = PaymentFactory(description="")

        result = self.service.backfill_descriptions()
        self.assertEqual(result.value, {"updated": 2})

        generated.refresh_from_db()
        blank.refresh_from_db()
        manual.refresh_from_db()
        no_items.refresh_from_db()
        self.assertIn(generated.description, ("200 M8 bolt & 150 M8 nut", "150 M8 nut & 200 M8 bolt"))
        self.assertEqual(blank.description, generated.description)
        self.assertEqual(manual.description, "Deposit for March batch")
        self.assertEqual(no_items.description, "")


class DescribeOrderItemsTest(TestCase):
    def test_joins_quantity_and_name(self):
        order = OrderFactory()
        OrderItemFactory(order=order, product_name="Hydraulic pump", quantity=1)
        self.assertEqual(describe_order_items(order.items.all()), "1 Hydraulic pump")
