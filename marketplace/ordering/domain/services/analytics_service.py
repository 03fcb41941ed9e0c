"""
AnalyticsService - Buyer purchase analytics

Aggregates the caller's own orders. Cancelled and refunded orders never count
towards spend.
"""

from datetime import datetime, time, timedelta
from decimal import Decimal
from typing import Dict, Optional

from django.db.models import Avg, Count, Q, Sum
from django.db.models.functions import TruncMonth
from django.utils import timezone
from django.utils.dateparse import parse_date

from authentication.models import SellerProfile
from marketplace.ordering.domain.models import Order
from utils.service_base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok


EXCLUDED_STATUSES = (Order.STATUS_CANCELLED, Order.STATUS_REFUNDED)
PERIOD_DAYS = {"month": 30, "quarter": 90, "year": 365}
TOP_SUPPLIERS = 5


def _money(value) -> Decimal:
    return (value or Decimal("0")).quantize(Decimal("0.01"))


class AnalyticsService(BaseService):
    def _orders(self, user):
        return Order.objects.filter(buyer=user).exclude(status__in=EXCLUDED_STATUSES)

    @staticmethod
    def _parse_bound(value: Optional[str], end_of_day: bool = False):
        """Parse ``YYYY-MM-DD`` (or full ISO datetime) into an aware datetime; raises ValueError."""
        parsed = parse_date(value[:10]) if len(value) >= 10 else None
        if parsed is None:
            raise ValueError(value)
        moment = datetime.combine(parsed, time.max if end_of_day else time.min)
        return timezone.make_aware(moment, timezone.get_current_timezone())

    @BaseService.log_performance
    def business_purchases(self, user, start_date: str = None, end_date: str = None) -> ServiceResult[Dict]:
        orders = self._orders(user)
        try:
            if start_date:
                orders = orders.filter(created_at__gte=self._parse_bound(start_date))
            if end_date:
                orders = orders.filter(created_at__lte=self._parse_bound(end_date, end_of_day=True))
        except ValueError:
            return service_err(ErrorCodes.VALIDATION_ERROR, "Invalid date format. Use YYYY-MM-DD")

        totals = orders.aggregate(count=Count("id"), spent=Sum("total_amount"), avg=Avg("total_amount"))

        suppliers = (
            orders.values("seller_profile_id", "seller_profile__company_name")
            .annotate(order_count=Count("id"), total_amount=Sum("total_amount"))
            .order_by("-total_amount")[:TOP_SUPPLIERS]
        )
        monthly = (
            orders.annotate(month=TruncMonth("created_at"))
            .values("month")
            .annotate(orders=Count("id"), amount=Sum("total_amount"))
            .order_by("month")
        )

        return service_ok(
            {
                "totalOrders": totals["count"],
                "totalSpent": _money(totals["spent"]),
                "averageOrderValue": _money(totals["avg"]),
                "topSuppliers": [
                    {
                        "supplierId": str(row["seller_profile_id"]),
                        "supplierName": row["seller_profile__company_name"],
                        "orderCount": row["order_count"],
                        "totalAmount": _money(row["total_amount"]),
                    }
                    for row in suppliers
                ],
                "monthlyTrend": [
                    {"month": row["month"].strftime("%Y-%m"), "orders": row["orders"], "amount": _money(row["amount"])}
                    for row in monthly
                ],
                "period": {"startDate": start_date, "endDate": end_date},
            }
        )

    @BaseService.log_performance
    def supplier_performance(self, user, period: str = None) -> ServiceResult[Dict]:
        period = (period or "quarter").lower()
        if period != "all" and period not in PERIOD_DAYS:
            return service_err(ErrorCodes.VALIDATION_ERROR, "Period must be one of: month, quarter, year, all")

        orders = self._orders(user)
        if period in PERIOD_DAYS:
            orders = orders.filter(created_at__gte=timezone.now() - timedelta(days=PERIOD_DAYS[period]))

        rows = (
            orders.values("seller_profile_id")
            .annotate(
                total_orders=Count("id"),
                delivered=Count("id", filter=Q(status=Order.STATUS_DELIVERED)),
                total_value=Sum("total_amount"),
            )
            .order_by("-total_value")
        )
        sellers = SellerProfile.objects.in_bulk([row["seller_profile_id"] for row in rows])

        suppliers = []
        for row in rows:
            seller = sellers.get(row["seller_profile_id"])
            rate = round(row["delivered"] * 100.0 / row["total_orders"], 2) if row["total_orders"] else 0.0
            suppliers.append(
                {
                    "supplierId": str(row["seller_profile_id"]),
                    "supplierName": seller.company_name if seller else "",
                    "totalOrders": row["total_orders"],
                    "deliveredOrders": row["delivered"],
                    "onTimeDeliveryRate": rate,
                    "averageRating": float(seller.average_rating) if seller and seller.average_rating else 0.0,
                    "totalValue": _money(row["total_value"]),
                }
            )

        count = len(suppliers)
        return service_ok(
            {
                "period": period,
                "generatedAt": timezone.now(),
                "suppliers": suppliers,
                "summary": {
                    "totalSuppliers": count,
                    "averageDeliveryRate": round(sum(s["onTimeDeliveryRate"] for s in suppliers) / count, 2)
                    if count
                    else 0.0,
                    "averageRating": round(sum(s["averageRating"] for s in suppliers) / count, 2) if count else 0.0,
                },
            }
        )
