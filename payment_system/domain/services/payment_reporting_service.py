"""
PaymentReportingService - Admin payment reporting

Every join between payments, orders and profiles that the admin payment
endpoints need lives here, so the views only shape responses.
"""

from decimal import Decimal
from typing import Any, Dict, List

from django.db import transaction
from django.db.models import Count, Q, Sum

from payment_system.domain.models import Payment
from utils.pagination import Page, PageRequest, paginate
from utils.service_base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok


def describe_order_items(items) -> str:
    """``"{qty} {productName}"`` for each line, joined by `` & ``."""
    return " & ".join(f"{item.quantity} {item.product_name}" for item in items)


class PaymentReportingService(BaseService):
    """Read-side reporting over recorded payments."""

    def _base_queryset(self):
        return Payment.objects.select_related(
            "seller_profile",
            "buyer_profile",
            "order",
            "order__buyer__buyer_profile",
        )

    @staticmethod
    def buyer_name(payment: Payment) -> str:
        """The payment's buyer profile name, falling back to the order buyer's profile."""
        if payment.buyer_profile_id:
            return payment.buyer_profile.name
        buyer = payment.order.buyer if payment.order_id else None
        profile = getattr(buyer, "buyer_profile", None) if buyer is not None else None
        return profile.name if profile is not None else ""

    def with_names(self, payment: Payment) -> Payment:
        """Attach ``seller_name`` and ``buyer_name`` for the reporting serializer."""
        payment.seller_name = payment.seller_profile.company_name
        payment.buyer_name = self.buyer_name(payment)
        return payment

    @BaseService.log_performance
    def list_payments(self, page_request: PageRequest) -> ServiceResult[Page]:
        page = paginate(self._base_queryset().order_by("-created_at"), page_request)
        page.items = [self.with_names(payment) for payment in page.items]
        return service_ok(page)

    def get_payment(self, payment_id) -> ServiceResult[Payment]:
        payment = self._base_queryset().filter(id=payment_id).first()
        if payment is None:
            return service_err(ErrorCodes.PAYMENT_NOT_FOUND, "Payment not found")
        return service_ok(self.with_names(payment))

    def payments_for_order(self, order_id) -> ServiceResult[List[Payment]]:
        payments = self._base_queryset().filter(order_id=order_id).order_by("-created_at")
        return service_ok([self.with_names(payment) for payment in payments])

    def statistics(self) -> ServiceResult[Dict[str, Any]]:
        totals = Payment.objects.aggregate(
            total_payments=Count("id"),
            total_amount=Sum("amount"),
            completed=Count("id", filter=Q(status=Payment.STATUS_COMPLETED)),
            pending=Count("id", filter=Q(status=Payment.STATUS_PENDING)),
            failed=Count("id", filter=Q(status=Payment.STATUS_FAILED)),
        )
        return service_ok(
            {
                "totalPayments": totals["total_payments"],
                "totalAmount": totals["total_amount"] or Decimal("0.00"),
                "completedCount": totals["completed"],
                "pendingCount": totals["pending"],
                "failedCount": totals["failed"],
            }
        )

    @BaseService.log_performance
    def backfill_descriptions(self) -> ServiceResult[Dict[str, int]]:
        """Replace empty or auto-generated descriptions with a summary of the order lines."""
        candidates = (
            Payment.objects.filter(
                Q(description="") | Q(description__startswith=Payment.AUTO_DESCRIPTION_PREFIX)
            )
            .select_related("order")
            .prefetch_related("order__items")
        )

        updated = 0
        with transaction.atomic():
            for payment in candidates:
                items = list(payment.order.items.all())
                if not items:
                    continue
                payment.description = describe_order_items(items)
                payment.save(update_fields=["description", "updated_at"])
                updated += 1

        self.logger.info("Backfilled %d payment descriptions", updated)
        return service_ok({"updated": updated})
